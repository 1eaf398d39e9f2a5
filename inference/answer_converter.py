import logging
import re
from typing import Dict, List, Optional

from core.career_components import WorkStyle, CognitiveStrength, SocialApproach, Motivation
from core.mini_games import MINI_GAME_METRICS
from core.profile import InterestEntry, QuizProfile
from data.interests import INTEREST_OPTIONS, INTEREST_RANK_PERCENTAGES, MAX_INTEREST_SELECTIONS
from ingestion.utils import clamp_percentage
from questionnaires.questions import BOOLEAN_QUESTION_MAP, INTEREST_SECTOR, QUESTIONS_BY_ID

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def _sector(raw_responses: dict, name: str) -> dict:
    answers = raw_responses.get(name)
    return answers if isinstance(answers, dict) else {}


def _count_labels(tally, answers: dict, sector: str) -> int:
    ignored = 0
    for qid, answer in answers.items():
        question = QUESTIONS_BY_ID.get(qid)
        # the label must be one this question actually offers
        if question is None or question.sector != sector or answer not in question.options:
            ignored += 1
            continue
        if not tally.record(answer):
            ignored += 1
    return ignored


def _count_booleans(tally: SocialApproach, answers: dict) -> int:
    ignored = 0
    for qid, answer in answers.items():
        pairs = BOOLEAN_QUESTION_MAP.get(qid)
        # bool only; 0/1 integers are not yes/no answers
        if pairs is None or not isinstance(answer, bool):
            ignored += 1
            continue
        for yes_label, no_label in pairs:
            tally.record(yes_label if answer else no_label)
    return ignored


def parse_interest_ids(value) -> List[int]:
    """
    Accepts the comma-separated id string the quiz stores (e.g. "13,3,21"),
    a list of ids, or a sector-5 answer dict wrapping either.
    Unknown and repeated ids are dropped; at most MAX_INTEREST_SELECTIONS are kept.
    """
    if isinstance(value, dict):
        value = next(iter(value.values()), None)

    if isinstance(value, str):
        candidates = value.split(",")
    elif isinstance(value, (list, tuple)):
        candidates = list(value)
    else:
        return []

    ids: List[int] = []
    for candidate in candidates:
        try:
            interest_id = int(str(candidate).strip())
        except ValueError:
            continue
        if interest_id in INTEREST_OPTIONS and interest_id not in ids:
            ids.append(interest_id)
        if len(ids) == MAX_INTEREST_SELECTIONS:
            break
    return ids


def build_interests(interest_ids: List[int]) -> List[InterestEntry]:
    return [
        InterestEntry(
            interest_id=interest_id,
            interest=INTEREST_OPTIONS[interest_id],
            percentage=float(INTEREST_RANK_PERCENTAGES[position]),
        )
        for position, interest_id in enumerate(interest_ids[:MAX_INTEREST_SELECTIONS])
    ]


def normalise_metric_name(name: str) -> str:
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def clean_mini_game_metrics(metrics: Optional[dict]) -> Dict[str, float]:
    if not isinstance(metrics, dict):
        return {}

    cleaned = {}
    for name, value in metrics.items():
        key = normalise_metric_name(str(name))
        if key not in MINI_GAME_METRICS:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        cleaned[key] = clamp_percentage(value)
    return cleaned


def aggregate(raw_responses, mini_game_metrics=None, interest_ids=None) -> QuizProfile:
    """
    Fold raw quiz answers into per-category tallies.

    raw_responses: {"sector1": {question_id: label}, ..., "sector5": "13,3"}.
    Any sector may be missing. Unknown labels and question ids are skipped.
    Mini-game metrics may come as an argument or under "miniGameMetrics";
    interests as an argument or under "sector5".
    """
    if not isinstance(raw_responses, dict):
        logger.warning("Ignoring non-mapping quiz responses of type %s", type(raw_responses).__name__)
        raw_responses = {}

    work_style = WorkStyle()
    cognitive = CognitiveStrength()
    social = SocialApproach()
    motivation = Motivation()

    ignored = 0
    ignored += _count_labels(work_style, _sector(raw_responses, "sector1"), "sector1")
    ignored += _count_labels(cognitive, _sector(raw_responses, "sector2"), "sector2")
    ignored += _count_booleans(social, _sector(raw_responses, "sector3"))
    ignored += _count_labels(motivation, _sector(raw_responses, "sector4"), "sector4")

    if interest_ids is None:
        interest_ids = raw_responses.get(INTEREST_SECTOR)
    interests = build_interests(parse_interest_ids(interest_ids))

    if mini_game_metrics is None:
        mini_game_metrics = raw_responses.get("miniGameMetrics") or raw_responses.get("mini_game_metrics")

    profile = QuizProfile(
        work_style=work_style,
        cognitive_strength=cognitive,
        social_approach=social,
        motivation=motivation,
        interests=interests,
        mini_game_metrics=clean_mini_game_metrics(mini_game_metrics),
    )

    logger.debug(
        "Aggregated responses: %d work style, %d cognitive, %d social, %d motivation answers, "
        "%d interests, %d ignored",
        work_style.total, cognitive.total, social.total, motivation.total, len(interests), ignored,
    )
    return profile
