"""
Mini-game metric calculators.

Each game reports raw counts and timings; these helpers turn them into 0-100
scores and, once enough games have been played, into a cognitive profile the
matcher can use as a bonus signal.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum

from ingestion.utils import clamp_percentage

logger = logging.getLogger(__name__)

GAME_IDS = ("color-dash", "sentence-quest", "multisensory-matrix", "verbo-flash")

MIN_GAMES_FOR_PROFILE = 3

BALANCED_DOMINANCE_MARGIN = 10

# Metric names the aggregator accepts (0-100 scale)
MINI_GAME_METRICS = (
    "visual_processing",
    "auditory_processing",
    "motor_control",
    "verbal_processing",
    "spatial_reasoning",
    "attention_control",
    "decision_making",
    "pattern_recognition",
    "memory_capacity",
    "processing_speed",
    "response_consistency",
)


class BrainDominance(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    BALANCED = "balanced"


class CognitiveStyle(str, Enum):
    ANALYTICAL = "analytical"
    CREATIVE = "creative"
    PRACTICAL = "practical"
    CONCEPTUAL = "conceptual"
    SEQUENTIAL = "sequential"


@dataclass(frozen=True)
class GameResult:
    game_id: str
    timestamp: float
    difficulty: int
    metrics: dict
    completed: bool = True


@dataclass
class CognitiveProfile:
    brain_dominance: BrainDominance
    cognitive_style: CognitiveStyle
    strengths: list[str] = field(default_factory=list)
    scores: dict[str, float] = field(default_factory=dict)

    def to_dict(self):
        return {
            "brain_dominance": self.brain_dominance.value,
            "cognitive_style": self.cognitive_style.value,
            "strengths": list(self.strengths),
            **self.scores,
        }


def _rate(answers: list[dict], question_type: str) -> float:
    typed = [a for a in answers if a.get("type") == question_type]
    if not typed:
        return 0.0
    return sum(1 for a in typed if a.get("is_correct")) / len(typed)


def sentence_quest_metrics(answers: list[dict], total_time: float, score: int, difficulty: int) -> dict:
    """
    Language metrics for Sentence Quest.

    `answers` holds one dict per question with keys `type` (fill-blank,
    sentence-correction, word-order, context-match) and `is_correct`.
    """
    correct = sum(1 for a in answers if a.get("is_correct"))
    accuracy = (correct / len(answers)) * 100 if answers else 0.0

    fill_blank = _rate(answers, "fill-blank")
    correction = _rate(answers, "sentence-correction")
    order = _rate(answers, "word-order")
    context = _rate(answers, "context-match")

    return {
        "total_time": total_time,
        "completion_time": total_time,
        "score": score,
        "accuracy": accuracy,
        "level": difficulty,
        "contextual_comprehension": min(100.0, context * 100 + order * 40),
        "language_application": min(100.0, fill_blank * 50 + correction * 50),
        "sentence_formulation": min(100.0, order * 100 + context * 30),
        "grammar_consistency": min(100.0, correction * 100 + fill_blank * 30),
        "synonym_recognition": min(100.0, fill_blank * 100 + context * 30),
    }


def normalise_trait_scores(trait_scores: dict[str, dict[str, float]], scale_max: float = 5) -> dict[str, int]:
    """Average each trait's sub-ratings and rescale to 0-100. Traits with no ratings sit at 50."""
    processed = {}
    for trait, sub_traits in trait_scores.items():
        values = list(sub_traits.values())
        if values:
            avg = sum(values) / len(values)
            processed[trait] = min(100, round((avg / scale_max) * 100))
        else:
            processed[trait] = 50
    return processed


def _latest_by_game(results: list[GameResult]) -> dict[str, GameResult]:
    latest: dict[str, GameResult] = {}
    for result in results:
        existing = latest.get(result.game_id)
        if existing is None or existing.timestamp < result.timestamp:
            latest[result.game_id] = result
    return latest


def build_cognitive_profile(results: list[GameResult]) -> CognitiveProfile | None:
    """
    Combine the latest result of each game into a cognitive profile.
    Returns None until at least three different games have been played.
    """
    latest = _latest_by_game(results)
    if len(latest) < MIN_GAMES_FOR_PROFILE:
        logger.debug("Only %d distinct games played, skipping cognitive profile", len(latest))
        return None

    samples: dict[str, list[float]] = {name: [] for name in MINI_GAME_METRICS}

    color_dash = latest.get("color-dash")
    if color_dash and "visual_processing_speed" in color_dash.metrics:
        m = color_dash.metrics
        samples["visual_processing"].append(m["visual_processing_speed"])
        samples["processing_speed"].append(m["visual_processing_speed"])
        samples["decision_making"].append(m.get("decision_speed", 0))
        samples["attention_control"].append(m.get("distraction_resistance", 0))
        samples["response_consistency"].append(m.get("response_consistency", 0))

    matrix = latest.get("multisensory-matrix")
    if matrix and "spatial_reasoning_score" in matrix.metrics:
        m = matrix.metrics
        samples["spatial_reasoning"].append(m["spatial_reasoning_score"])
        samples["pattern_recognition"].append(m.get("pattern_completion_accuracy", 0))
        samples["memory_capacity"].append(m.get("working_memory_capacity", 0))

    verbo = latest.get("verbo-flash")
    if verbo and "verbal_processing_speed" in verbo.metrics:
        m = verbo.metrics
        samples["verbal_processing"].append(m["verbal_processing_speed"])
        samples["processing_speed"].append(m["verbal_processing_speed"])
        samples["memory_capacity"].append(m.get("vocabulary_range", 0))

    sentence = latest.get("sentence-quest")
    if sentence and "language_application" in sentence.metrics:
        m = sentence.metrics
        samples["verbal_processing"].append(m["language_application"])
        samples["attention_control"].append(m.get("grammar_consistency", 0))

    scores = {
        name: (sum(values) / len(values) if values else 0.0)
        for name, values in samples.items()
    }

    left = (scores["verbal_processing"] + scores["decision_making"] + scores["attention_control"]) / 3
    right = (scores["visual_processing"] + scores["spatial_reasoning"] + scores["pattern_recognition"]) / 3
    if abs(left - right) < BALANCED_DOMINANCE_MARGIN:
        dominance = BrainDominance.BALANCED
    elif left > right:
        dominance = BrainDominance.LEFT
    else:
        dominance = BrainDominance.RIGHT

    styles = [
        (CognitiveStyle.ANALYTICAL, (scores["decision_making"] + scores["attention_control"]) / 2),
        (CognitiveStyle.CREATIVE, (scores["pattern_recognition"] + scores["visual_processing"]) / 2),
        (CognitiveStyle.PRACTICAL, (scores["motor_control"] + scores["response_consistency"]) / 2),
        (CognitiveStyle.CONCEPTUAL, (scores["verbal_processing"] + scores["spatial_reasoning"]) / 2),
        (CognitiveStyle.SEQUENTIAL, (scores["memory_capacity"] + scores["processing_speed"]) / 2),
    ]
    # First style wins ties
    style = max(styles, key=lambda item: item[1])[0]

    strength_candidates = [name for name in MINI_GAME_METRICS if name != "response_consistency"]
    strengths = sorted(strength_candidates, key=lambda name: scores[name], reverse=True)[:3]

    return CognitiveProfile(
        brain_dominance=dominance,
        cognitive_style=style,
        strengths=[name.replace("_", " ").title() for name in strengths],
        scores=scores,
    )


def completion_stats(results: list[GameResult]) -> dict:
    completed = {result.game_id for result in results if result.completed and result.game_id in GAME_IDS}
    total = len(GAME_IDS)
    return {
        "completed": len(completed),
        "total": total,
        "percent": round(len(completed) / total * 100, 1),
    }


def profile_metrics(profile: CognitiveProfile | None) -> dict[str, float]:
    """Cognitive profile scores in the shape the response aggregator expects."""
    if profile is None:
        return {}
    return {
        name: clamp_percentage(value)
        for name, value in profile.scores.items()
        if name in MINI_GAME_METRICS and value > 0
    }
