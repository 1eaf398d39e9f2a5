from core.career_components import Motivation
from matching.affinity import overlap_share


def match_motivation(user_motivation: Motivation, career_motivations) -> float:
    """
    Reward alignment.

    Rules:
    - Career-side motivations define what matters
    - User drives the career does not reward are ignored (not penalized)
    """

    return overlap_share(user_motivation.scores, career_motivations)
