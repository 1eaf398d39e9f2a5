from core.career_components import SocialApproach
from matching.affinity import overlap_share


def match_social(user_social: SocialApproach, career_traits) -> float:
    # Yes/no answers feed both poles of a pair, so opposite traits compete
    return overlap_share(user_social.scores, career_traits)
