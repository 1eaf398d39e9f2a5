import argparse

import config
from differentiation.flow import run_overlap_differentiation
from fixtures.archetype_profiles import ARCHETYPES
from inference.answer_converter import aggregate
from ingestion.build_career_catalog import load_career_catalog
from matching.aggregate import score_percentages
from matching.engine import match_user_to_career
from matching.ranking import build_ranking


def rank_profiles(raw_responses, top_n=None, catalog=None):
    """Rank the catalog for one set of raw answers. Returns (profile, percentages, ranking)."""
    catalog = catalog if catalog is not None else load_career_catalog()

    profile = aggregate(raw_responses)
    percentages = score_percentages(profile)
    return profile, percentages, build_ranking(profile, catalog, top_n)


def print_ranking(name, raw_responses, top_n, catalog):
    profile, percentages, ranking = rank_profiles(raw_responses, top_n, catalog)
    by_id = {career.id: career for career in catalog}

    print(f"\n===== {name.upper()} =====\n")
    print(
        "  categories: "
        + ", ".join(f"{category} {value:.1f}" for category, value in percentages.to_dict().items())
    )

    if ranking.insufficient_data:
        print("  (no answers, catalog order shown)")

    for rank, match in enumerate(ranking.matches, start=1):
        scores = match_user_to_career(profile, by_id[match.career_id], percentages)
        print(f"{rank:3d}. {match.title:<32s} | MATCH: {match.match_percentage:5.1f}%")
        print(
            "     "
            + "  ".join(f"{category}: {scores[category]:.2f}" for category in scores if category != "total")
        )

    outcome = run_overlap_differentiation(ranking.matches)
    if outcome.has_overlap:
        print(f"\n  overlap: {', '.join(outcome.overlap_categories)} ({len(outcome.questions)} follow-up questions)")


def main():
    parser = argparse.ArgumentParser(description="Print career rankings for the archetype fixtures")
    parser.add_argument("archetypes", nargs="*", help=f"any of: {', '.join(ARCHETYPES)} (default: all)")
    parser.add_argument("--top", type=int, default=config.DEFAULT_TOP_N)
    args = parser.parse_args()

    unknown = [name for name in args.archetypes if name not in ARCHETYPES]
    if unknown:
        parser.error(f"unknown archetypes: {', '.join(unknown)}")

    config.configure_logging()
    catalog = load_career_catalog()

    for name in args.archetypes or ARCHETYPES:
        print_ranking(name, ARCHETYPES[name], args.top, catalog)


if __name__ == "__main__":
    main()
