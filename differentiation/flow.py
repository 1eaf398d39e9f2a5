"""
Overlap differentiation flow.

    NO_OVERLAP
    OVERLAP_DETECTED -> QUIZ_PRESENTED -> REFINED
    OVERLAP_DETECTED -> REFINED            (skip)
    QUIZ_PRESENTED   -> REFINED            (submit or skip)

Skipping leaves the ranking untouched, which is also what a ranking without
overlap gets, so callers can treat both the same way.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum

from data.overlap_clusters import OVERLAP_CLUSTERS
from differentiation.overlap_detector import detect_overlaps, get_overlap_questions
from differentiation.refinement import process_overlap_responses
from models.overlap_cluster import OverlapQuestion
from models.ranked_match import RankedMatch

logger = logging.getLogger(__name__)


class DifferentiationState(str, Enum):
    NO_OVERLAP = "no_overlap"
    OVERLAP_DETECTED = "overlap_detected"
    QUIZ_PRESENTED = "quiz_presented"
    REFINED = "refined"


_TRANSITIONS = {
    DifferentiationState.NO_OVERLAP: set(),
    DifferentiationState.OVERLAP_DETECTED: {DifferentiationState.QUIZ_PRESENTED, DifferentiationState.REFINED},
    DifferentiationState.QUIZ_PRESENTED: {DifferentiationState.REFINED},
    DifferentiationState.REFINED: set(),
}


class InvalidTransitionError(RuntimeError):
    pass


@dataclass
class DisambiguationResult:
    refined_matches: list[RankedMatch]
    explanations: dict[str, str] = field(default_factory=dict)


@dataclass
class OverlapOutcome:
    has_overlap: bool
    original_matches: list[RankedMatch]
    # None until the user answers or skips the follow-up quiz
    refined_matches: list[RankedMatch] | None
    overlap_categories: list[str] = field(default_factory=list)
    questions: list[OverlapQuestion] = field(default_factory=list)
    explanations: dict[str, str] = field(default_factory=dict)


class OverlapDifferentiation:
    """Drives one pass of the follow-up quiz for a ranked list."""

    def __init__(self, matches, clusters=OVERLAP_CLUSTERS):
        self.original_matches: list[RankedMatch] = list(matches)
        self.clusters = clusters
        self.categories = detect_overlaps(self.original_matches, clusters)
        self.questions = get_overlap_questions(self.categories, clusters)
        self.state = (
            DifferentiationState.OVERLAP_DETECTED if self.categories else DifferentiationState.NO_OVERLAP
        )
        self._result: DisambiguationResult | None = None

    def _move(self, target: DifferentiationState):
        if target not in _TRANSITIONS[self.state]:
            raise InvalidTransitionError(f"Cannot go from {self.state.value} to {target.value}")
        logger.debug("Overlap differentiation %s -> %s", self.state.value, target.value)
        self.state = target

    def present_quiz(self) -> list[OverlapQuestion]:
        self._move(DifferentiationState.QUIZ_PRESENTED)
        return list(self.questions)

    def submit(self, responses: dict) -> DisambiguationResult:
        if self.state is not DifferentiationState.QUIZ_PRESENTED:
            raise InvalidTransitionError(f"Cannot submit answers while {self.state.value}")
        self._move(DifferentiationState.REFINED)
        refined, explanations = process_overlap_responses(responses, self.original_matches, self.clusters)
        self._result = DisambiguationResult(refined_matches=refined, explanations=explanations)
        return self._result

    def skip(self) -> DisambiguationResult:
        self._move(DifferentiationState.REFINED)
        self._result = DisambiguationResult(refined_matches=list(self.original_matches))
        return self._result

    def result(self) -> DisambiguationResult:
        if self.state is DifferentiationState.NO_OVERLAP:
            return DisambiguationResult(refined_matches=list(self.original_matches))
        if self._result is None:
            raise InvalidTransitionError(f"No result while {self.state.value}")
        return self._result


def run_overlap_differentiation(matches, clusters=OVERLAP_CLUSTERS) -> OverlapOutcome:
    """
    First step of the flow: report whether the ranking needs the follow-up
    quiz and, if so, which questions to ask.
    """
    flow = OverlapDifferentiation(matches, clusters)

    if flow.state is DifferentiationState.NO_OVERLAP:
        return OverlapOutcome(
            has_overlap=False,
            original_matches=flow.original_matches,
            refined_matches=list(flow.original_matches),
        )

    return OverlapOutcome(
        has_overlap=True,
        original_matches=flow.original_matches,
        refined_matches=None,
        overlap_categories=list(flow.categories),
        questions=list(flow.questions),
    )
