from core.profile import QuizProfile
from data.interests import INTEREST_OPTIONS
from matching.affinity import overlap_share


def match_interests(profile: QuizProfile, related_interests) -> float:
    """
    Interest fit.

    Rule:
    - Earlier picks weigh more (selection-order percentages)
    - Career-side interest ids define what matters
    - Unselected interests count as 0
    """

    weights = {interest_id: 0.0 for interest_id in INTEREST_OPTIONS}
    weights.update(profile.interest_weights())

    return overlap_share(weights, related_interests)
