import pytest

from core import mini_games
from core.mini_games import (
    BrainDominance,
    CognitiveStyle,
    GameResult,
    build_cognitive_profile,
    completion_stats,
    normalise_trait_scores,
    profile_metrics,
    sentence_quest_metrics,
)

COLOR_DASH = {
    "visual_processing_speed": 80,
    "decision_speed": 60,
    "distraction_resistance": 60,
    "response_consistency": 70,
}
MATRIX = {"spatial_reasoning_score": 90, "pattern_completion_accuracy": 85, "working_memory_capacity": 70}
VERBO = {"verbal_processing_speed": 40, "vocabulary_range": 50}


def three_games():
    return [
        GameResult("color-dash", timestamp=10.0, difficulty=1, metrics=COLOR_DASH),
        GameResult("multisensory-matrix", timestamp=11.0, difficulty=1, metrics=MATRIX),
        GameResult("verbo-flash", timestamp=12.0, difficulty=2, metrics=VERBO),
    ]


def test_sentence_quest_metrics():
    answers = [
        {"type": "fill-blank", "is_correct": True},
        {"type": "fill-blank", "is_correct": False},
        {"type": "context-match", "is_correct": True},
        {"type": "context-match", "is_correct": True},
    ]

    metrics = sentence_quest_metrics(answers, total_time=42.0, score=300, difficulty=2)

    assert metrics["accuracy"] == 75.0
    assert metrics["contextual_comprehension"] == 100.0
    assert metrics["language_application"] == pytest.approx(25.0)
    assert metrics["sentence_formulation"] == pytest.approx(30.0)
    assert metrics["grammar_consistency"] == pytest.approx(15.0)
    assert metrics["synonym_recognition"] == pytest.approx(80.0)
    assert metrics["level"] == 2


def test_sentence_quest_without_answers():
    metrics = sentence_quest_metrics([], total_time=0.0, score=0, difficulty=1)

    assert metrics["accuracy"] == 0.0
    assert metrics["language_application"] == 0.0


def test_trait_scores_rescale_to_100():
    assert normalise_trait_scores({"openness": {"a": 5, "b": 3}, "grit": {}}) == {"openness": 80, "grit": 50}
    assert normalise_trait_scores({"focus": {"a": 10}}, scale_max=5) == {"focus": 100}


def test_profile_needs_three_distinct_games():
    games = three_games()[:2] + [GameResult("color-dash", timestamp=20.0, difficulty=1, metrics=COLOR_DASH)]

    assert build_cognitive_profile(games) is None


def test_cognitive_profile_from_latest_results():
    stale = GameResult("color-dash", timestamp=1.0, difficulty=1, metrics={"visual_processing_speed": 5})
    profile = build_cognitive_profile([stale] + three_games())

    assert profile.scores["visual_processing"] == 80
    assert profile.scores["processing_speed"] == pytest.approx(60.0)
    assert profile.scores["memory_capacity"] == pytest.approx(60.0)
    assert profile.brain_dominance is BrainDominance.RIGHT
    assert profile.cognitive_style is CognitiveStyle.CREATIVE
    assert profile.strengths == ["Spatial Reasoning", "Pattern Recognition", "Visual Processing"]


def test_close_hemispheres_are_balanced():
    games = three_games()
    games[2] = GameResult("verbo-flash", timestamp=12.0, difficulty=2,
                          metrics={"verbal_processing_speed": 100, "vocabulary_range": 50})
    games[0] = GameResult("color-dash", timestamp=10.0, difficulty=1,
                          metrics={**COLOR_DASH, "decision_speed": 85, "distraction_resistance": 75})

    profile = build_cognitive_profile(games)

    # left = (100 + 85 + 75) / 3, right = (80 + 90 + 85) / 3
    assert profile.brain_dominance is BrainDominance.BALANCED


def test_completion_stats_count_distinct_finished_games():
    results = three_games()[:2] + [
        GameResult("color-dash", timestamp=30.0, difficulty=2, metrics={}),
        GameResult("verbo-flash", timestamp=31.0, difficulty=1, metrics={}, completed=False),
        GameResult("space-invaders", timestamp=32.0, difficulty=1, metrics={}),
    ]

    assert completion_stats(results) == {"completed": 2, "total": 4, "percent": 50.0}


def test_completion_percent_is_rounded_to_one_decimal(monkeypatch):
    monkeypatch.setattr(mini_games, "GAME_IDS", ("color-dash", "sentence-quest", "verbo-flash"))
    results = [GameResult("color-dash", timestamp=1.0, difficulty=1, metrics={})]

    assert completion_stats(results) == {"completed": 1, "total": 3, "percent": 33.3}


def test_profile_metrics_feed_the_aggregator():
    metrics = profile_metrics(build_cognitive_profile(three_games()))

    assert metrics["spatial_reasoning"] == 90.0
    assert "motor_control" not in metrics
    assert profile_metrics(None) == {}
