from core.career_components import WorkStyle
from matching.affinity import overlap_share


def match_work_styles(user_ws: WorkStyle, career_styles) -> float:
    """
    Environment fit.

    Every team_* answer already sits in the `team` umbrella, so a career only
    needs to declare `team` to pick them all up.
    """

    return overlap_share(user_ws.scores, career_styles)
