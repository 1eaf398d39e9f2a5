"""
Category scoring.

Turns a QuizProfile into one 0-100 percentage per category and combines them
with CATEGORY_WEIGHTS into a total.
"""
from dataclasses import asdict, dataclass

from core.profile import QuizProfile
from data.interests import MAX_INTEREST_TOTAL, TRADE_INTEREST_IDS
from ingestion.utils import clamp_percentage
from questionnaires.questions import max_tally

# Percentage points each category can contribute to a match; sums to 100.
CATEGORY_WEIGHTS = {
    "interest": 20,
    "work_style": 15,
    "cognitive": 15,
    "social": 10,
    "motivation": 20,
    "mini_game": 10,
    "trade_career": 10,
}

# Profile tally behind each tally-based category
TALLY_CATEGORIES = {
    "work_style": "work_style",
    "cognitive": "cognitive_strength",
    "social": "social_approach",
    "motivation": "motivation",
}

MAX_TALLIES = {category: max_tally(source) for category, source in TALLY_CATEGORIES.items()}


@dataclass(frozen=True)
class CategoryPercentages:
    interest: float = 0.0
    work_style: float = 0.0
    cognitive: float = 0.0
    social: float = 0.0
    motivation: float = 0.0
    mini_game: float = 0.0
    trade_career: float = 0.0
    total: float = 0.0

    def category(self, name: str) -> float:
        return getattr(self, name)

    def to_dict(self):
        return asdict(self)


def weighted_total(percentages: dict[str, float], weights: dict[str, float] = CATEGORY_WEIGHTS) -> float:
    total = sum(percentages.get(category, 0.0) * weight for category, weight in weights.items()) / 100
    return clamp_percentage(total)


def _tally_percentage(total: int, maximum: int) -> float:
    if maximum <= 0:
        return 0.0
    return clamp_percentage(total / maximum * 100)


def interest_percentage(profile: QuizProfile) -> float:
    selected = sum(entry.percentage for entry in profile.interests)
    return clamp_percentage(selected / MAX_INTEREST_TOTAL * 100)


def mini_game_percentage(profile: QuizProfile) -> float:
    values = list(profile.mini_game_metrics.values())
    if not values:
        return 0.0
    return clamp_percentage(sum(values) / len(values))


def trade_career_percentage(profile: QuizProfile) -> float:
    """Share of the user's interest weight that sits on trade areas."""
    weights = profile.interest_weights()
    selected = sum(weights.values())
    if selected <= 0:
        return 0.0
    trade = sum(pct for interest_id, pct in weights.items() if interest_id in TRADE_INTEREST_IDS)
    return clamp_percentage(trade / selected * 100)


def score_percentages(profile: QuizProfile) -> CategoryPercentages:
    tallies = profile.tallies
    scores = {
        category: _tally_percentage(tallies[source].total, MAX_TALLIES[category])
        for category, source in TALLY_CATEGORIES.items()
    }
    scores["interest"] = interest_percentage(profile)
    scores["mini_game"] = mini_game_percentage(profile)
    scores["trade_career"] = trade_career_percentage(profile)

    return CategoryPercentages(total=weighted_total(scores), **scores)
