import logging
from collections import defaultdict

from data.overlap_clusters import OVERLAP_CLUSTERS
from differentiation.overlap_detector import find_question, titles_match
from models.ranked_match import RankedMatch

logger = logging.getLogger(__name__)

# Deltas are match-percentage points; this is the most a career can gain in one pass
MAX_BOOST = 15.0

# Option deltas at or above this earn the career an explanation
EXPLANATION_THRESHOLD = 20


def _chosen_option(question, option_index):
    if isinstance(option_index, bool) or not isinstance(option_index, int):
        return None
    if not 0 <= option_index < len(question.options):
        return None
    return question.options[option_index]


def collect_adjustments(responses: dict, clusters=OVERLAP_CLUSTERS):
    """
    Sum the chosen options' deltas per title.

    Returns (adjustments, explanations) where explanations maps a title to the
    sentences earned by strong deltas. Unknown questions and out-of-range
    option indices are skipped.
    """
    adjustments: dict[str, int] = defaultdict(int)
    explanations: dict[str, list[str]] = {}

    for question_id, option_index in (responses or {}).items():
        question = find_question(question_id, clusters)
        if question is None:
            logger.debug("Ignoring answer to unknown overlap question %r", question_id)
            continue

        option = _chosen_option(question, option_index)
        if option is None:
            logger.debug("Ignoring option %r for overlap question %s", option_index, question_id)
            continue

        for title, delta in option.deltas.items():
            adjustments[title] += delta
            if delta >= EXPLANATION_THRESHOLD:
                explanations.setdefault(title, []).append(
                    f"You prefer {option.text.lower()}, which aligns well with {title}."
                )

    return dict(adjustments), explanations


def career_boost(career_title: str, adjustments: dict[str, int]) -> float:
    boost = sum(
        delta
        for title, delta in adjustments.items()
        if titles_match(career_title, title)
    )
    return min(float(boost), MAX_BOOST)


def process_overlap_responses(
    responses: dict,
    matches: list[RankedMatch],
    clusters=OVERLAP_CLUSTERS,
) -> tuple[list[RankedMatch], dict[str, str]]:
    """
    Apply disambiguation answers to a ranked list.

    Each career gains at most MAX_BOOST points and never passes 100. The list
    is re-sorted (stable) afterwards. Returns (refined_matches, explanations).
    """
    adjustments, sentences = collect_adjustments(responses, clusters)

    refined = []
    for match in matches:
        boost = career_boost(match.title, adjustments)
        if boost:
            match = match.with_percentage(round(min(match.match_percentage + boost, 100.0), 1))
        refined.append(match)

    refined.sort(key=lambda match: match.match_percentage, reverse=True)

    explanations = {title: " ".join(parts) for title, parts in sentences.items()}
    return refined, explanations
