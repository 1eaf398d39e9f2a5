import logging

from core.profile import QuizProfile
from matching.aggregate import score_percentages
from matching.engine import match_user_to_career
from models.career_profile import CareerRecord
from models.ranked_match import RankedMatch, RankingResult

logger = logging.getLogger(__name__)


def rank(profile: QuizProfile, catalog, top_n: int | None = None) -> list[RankedMatch]:
    """
    Score every career in the catalog and return the best `top_n`
    (all of them when `top_n` is None).

    The sort is stable, so careers with equal scores keep catalog order. An
    empty profile scores 0 everywhere and therefore comes back in catalog order.
    """
    catalog: list[CareerRecord] = list(catalog)
    if not catalog:
        return []

    percentages = score_percentages(profile)

    matches = [
        RankedMatch.from_career(career, match_user_to_career(profile, career, percentages)["total"])
        for career in catalog
    ]
    matches.sort(key=lambda match: match.match_percentage, reverse=True)

    if top_n is not None:
        matches = matches[:max(0, top_n)]

    logger.debug("Ranked %d careers, returning %d", len(catalog), len(matches))
    return matches


def build_ranking(profile: QuizProfile, catalog, top_n: int | None = None) -> RankingResult:
    insufficient = profile.is_empty()
    if insufficient:
        logger.info("Profile has no answers; ranking reflects catalog order only")

    return RankingResult(matches=rank(profile, catalog, top_n), insufficient_data=insufficient)
