from core.career_components import CognitiveStrength
from matching.affinity import overlap_share


def match_cognitive(user_strengths: CognitiveStrength, career_strengths) -> float:
    """
    Learning fit.

    Rule:
    - Career-side strengths define what matters
    - Missing user strength counts as 0
    """

    return overlap_share(user_strengths.scores, career_strengths)
