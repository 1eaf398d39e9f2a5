from ingestion.utils import clamp


def overlap_share(user_scores: dict, declared) -> float:
    """
    How much of the user's strongest signal a career's declared labels cover.

    Rule:
    - Declared labels outside the user's vocabulary are ignored
    - The best case is the user's own top-k labels, k = declared labels kept
    - No answers, or nothing declared, scores 0
    """

    kept = [label for label in dict.fromkeys(declared) if label in user_scores]
    if not kept or sum(user_scores.values()) <= 0:
        return 0.0

    covered = sum(user_scores[label] for label in kept)
    best = sum(sorted(user_scores.values(), reverse=True)[:len(kept)])

    return clamp(covered / best)
