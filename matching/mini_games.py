def match_mini_games(user_metrics: dict[str, float], career_metrics) -> float:
    """
    Capacity fit from mini-game play.

    Rule:
    - Mean of the metrics the career declares, on a 0-1 scale
    - Metrics the user never produced count as 0
    """

    declared = list(dict.fromkeys(career_metrics))
    if not declared:
        return 0.0

    return sum(user_metrics.get(name, 0.0) for name in declared) / len(declared) / 100
