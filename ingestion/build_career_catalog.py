import json
import logging
from functools import lru_cache
from pathlib import Path

import config
from core.career_components import WorkStyle, CognitiveStrength, SocialApproach, Motivation
from core.mini_games import MINI_GAME_METRICS
from data.interests import INTEREST_OPTIONS
from matching.aggregate import CATEGORY_WEIGHTS
from models.career_profile import CareerRecord, ScoringProfile

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("id", "title", "description", "skills", "salary", "outlook", "category", "scoring")

# scoring key -> allowed values
SCORING_VOCABULARIES = {
    "related_interests": frozenset(INTEREST_OPTIONS),
    "work_styles": frozenset(WorkStyle.LABELS),
    "cognitive_strengths": frozenset(CognitiveStrength.LABELS),
    "social_traits": frozenset(SocialApproach.LABELS),
    "motivations": frozenset(Motivation.LABELS),
    "mini_game_metrics": frozenset(MINI_GAME_METRICS),
}


class CatalogError(ValueError):
    """The career catalog file is missing, malformed, or uses unknown labels."""


def _labels(raw_scoring: dict, key: str, career_id: str) -> tuple:
    values = raw_scoring.get(key, [])
    if not isinstance(values, list):
        raise CatalogError(f"{career_id}: scoring.{key} must be a list")

    unknown = [value for value in values if value not in SCORING_VOCABULARIES[key]]
    if unknown:
        raise CatalogError(f"{career_id}: unknown scoring.{key} values {unknown}")
    return tuple(values)


def _emphasis(raw_scoring: dict, career_id: str) -> dict[str, float]:
    emphasis = raw_scoring.get("emphasis", {})
    if not isinstance(emphasis, dict):
        raise CatalogError(f"{career_id}: scoring.emphasis must be an object")

    unknown = [category for category in emphasis if category not in CATEGORY_WEIGHTS]
    if unknown:
        raise CatalogError(f"{career_id}: unknown emphasis categories {unknown}")

    try:
        return {category: float(factor) for category, factor in emphasis.items()}
    except (TypeError, ValueError) as e:
        raise CatalogError(f"{career_id}: emphasis factors must be numbers") from e


def build_career(raw: dict) -> CareerRecord:
    if not isinstance(raw, dict):
        raise CatalogError(f"Career entries must be objects, got {type(raw).__name__}")

    missing = [name for name in REQUIRED_FIELDS if name not in raw]
    if missing:
        raise CatalogError(f"{raw.get('id', '<no id>')}: missing fields {missing}")

    career_id = str(raw["id"])
    raw_scoring = raw["scoring"]
    if not isinstance(raw_scoring, dict):
        raise CatalogError(f"{career_id}: scoring must be an object")

    scoring = ScoringProfile(
        **{key: _labels(raw_scoring, key, career_id) for key in SCORING_VOCABULARIES},
        is_trade=bool(raw_scoring.get("is_trade", False)),
        emphasis=_emphasis(raw_scoring, career_id),
    )

    return CareerRecord(
        id=career_id,
        title=str(raw["title"]),
        description=str(raw["description"]),
        skills=tuple(raw["skills"]),
        salary=str(raw["salary"]),
        outlook=str(raw["outlook"]),
        category=str(raw["category"]),
        scoring_profile=scoring,
    )


def build_catalog(entries) -> tuple[CareerRecord, ...]:
    if not isinstance(entries, list):
        raise CatalogError("Career catalog must be a list of careers")

    careers = tuple(build_career(entry) for entry in entries)

    seen = set()
    for career in careers:
        if career.id in seen:
            raise CatalogError(f"Duplicate career id: {career.id}")
        seen.add(career.id)

    return careers


@lru_cache(maxsize=None)
def _load(path: str) -> tuple[CareerRecord, ...]:
    try:
        with open(path, encoding="utf-8") as f:
            entries = json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Career catalog not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Career catalog is not valid JSON: {path}") from e

    careers = build_catalog(entries)
    logger.info("Loaded %d careers from %s", len(careers), path)
    return careers


def load_career_catalog(path: str | Path | None = None) -> tuple[CareerRecord, ...]:
    """
    Load the static career catalog once per process.
    Defaults to config.CAREER_CATALOG_PATH.
    """
    return _load(str(path or config.CAREER_CATALOG_PATH))
