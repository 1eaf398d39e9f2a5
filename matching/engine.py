from core.profile import QuizProfile
from ingestion.utils import clamp_percentage
from matching.aggregate import CATEGORY_WEIGHTS, CategoryPercentages, score_percentages
from matching.cognitive import match_cognitive
from matching.interests import match_interests
from matching.mini_games import match_mini_games
from matching.motivation import match_motivation
from matching.social import match_social
from matching.work_styles import match_work_styles
from models.career_profile import CareerRecord

"""
Matching orchestration layer.

This module coordinates the category matchers.
It does not contain scoring logic itself.
"""


def effective_weights(emphasis: dict[str, float] | None = None) -> dict[str, float]:
    """
    Base category weights scaled by a career's emphasis and renormalised so
    they still sum to 100. Categories missing from `emphasis` keep a factor of 1.
    """
    emphasis = emphasis or {}
    scaled = {
        category: weight * max(0.0, float(emphasis.get(category, 1.0)))
        for category, weight in CATEGORY_WEIGHTS.items()
    }

    total = sum(scaled.values())
    if total <= 0:
        return dict(CATEGORY_WEIGHTS)

    return {category: weight * 100 / total for category, weight in scaled.items()}


def category_affinities(profile: QuizProfile, career: CareerRecord) -> dict[str, float]:
    scoring = career.scoring_profile

    return {
        "interest": match_interests(profile, scoring.related_interests),
        "work_style": match_work_styles(profile.work_style, scoring.work_styles),
        "cognitive": match_cognitive(profile.cognitive_strength, scoring.cognitive_strengths),
        "social": match_social(profile.social_approach, scoring.social_traits),
        "motivation": match_motivation(profile.motivation, scoring.motivations),
        "mini_game": match_mini_games(profile.mini_game_metrics, scoring.mini_game_metrics),
        "trade_career": 1.0 if scoring.is_trade else 0.0,
    }


def match_user_to_career(
    profile: QuizProfile,
    career: CareerRecord,
    percentages: CategoryPercentages | None = None,
) -> dict[str, float]:
    """
    Entry point for matching.
    Returns category affinities plus the overall match under "total".

    `percentages` can be passed in when ranking a whole catalog so the
    profile is only scored once.
    """

    if percentages is None:
        percentages = score_percentages(profile)

    component_scores = category_affinities(profile, career)
    weights = effective_weights(career.scoring_profile.emphasis)

    total = sum(
        percentages.category(category) * affinity * weights[category]
        for category, affinity in component_scores.items()
    ) / 100

    component_scores["total"] = round(clamp_percentage(total), 1)
    return component_scores
