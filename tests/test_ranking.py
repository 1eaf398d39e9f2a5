import pytest

from fixtures.archetype_profiles import ARCHETYPES
from inference.answer_converter import aggregate
from matching.affinity import overlap_share
from matching.aggregate import CATEGORY_WEIGHTS, score_percentages
from matching.engine import effective_weights, match_user_to_career
from matching.mini_games import match_mini_games
from matching.ranking import build_ranking, rank


# ---------------------------------------------------------------------------
# Affinity helpers
# ---------------------------------------------------------------------------

def test_overlap_share_against_users_best_labels():
    scores = {"hands-on": 3, "team": 2, "structured": 0}

    assert overlap_share(scores, ["hands-on"]) == 1.0
    assert overlap_share(scores, ["team"]) == pytest.approx(2 / 3)
    assert overlap_share(scores, ["hands-on", "structured"]) == pytest.approx(3 / 5)
    assert overlap_share(scores, ["hands-on", "team", "structured"]) == 1.0


def test_overlap_share_without_signal_is_zero():
    assert overlap_share({"a": 0, "b": 0}, ["a"]) == 0.0
    assert overlap_share({"a": 2}, []) == 0.0
    assert overlap_share({"a": 2}, ["unknown"]) == 0.0


def test_mini_game_affinity_is_mean_of_declared_metrics():
    metrics = {"memory_capacity": 80.0, "motor_control": 40.0}

    assert match_mini_games(metrics, ["memory_capacity", "motor_control"]) == pytest.approx(0.6)
    assert match_mini_games(metrics, ["memory_capacity", "spatial_reasoning"]) == pytest.approx(0.4)
    assert match_mini_games(metrics, []) == 0.0


# ---------------------------------------------------------------------------
# Weights
# ---------------------------------------------------------------------------

def test_effective_weights_without_emphasis_are_base_weights():
    assert effective_weights({}) == pytest.approx(CATEGORY_WEIGHTS)


def test_emphasis_is_renormalised_to_100():
    weights = effective_weights({"interest": 2.0, "trade_career": 0.0})

    assert sum(weights.values()) == pytest.approx(100.0)
    assert weights["interest"] == pytest.approx(40 * 100 / 110)
    assert weights["trade_career"] == 0.0


def test_emphasis_that_zeroes_everything_falls_back_to_base():
    assert effective_weights({name: 0 for name in CATEGORY_WEIGHTS}) == CATEGORY_WEIGHTS


# ---------------------------------------------------------------------------
# Single career
# ---------------------------------------------------------------------------

def test_trade_flag_only_helps_trade_careers(career_factory):
    profile = aggregate({"sector5": "3,4"})
    trade = career_factory("t", "Tradesperson", is_trade=True)
    office = career_factory("o", "Office Worker")

    assert match_user_to_career(profile, trade)["trade_career"] == 1.0
    assert match_user_to_career(profile, office)["trade_career"] == 0.0
    assert match_user_to_career(profile, trade)["total"] > match_user_to_career(profile, office)["total"]


def test_match_is_rounded_and_in_range(trades_profile, catalog):
    percentages = score_percentages(trades_profile)

    for career in catalog:
        total = match_user_to_career(trades_profile, career, percentages)["total"]
        assert 0.0 <= total <= 100.0
        assert total == round(total, 1)


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

def test_empty_catalog_ranks_nothing(trades_profile):
    assert rank(trades_profile, []) == []


def test_ranking_is_deterministic(catalog):
    first = rank(aggregate(ARCHETYPES["tech"]), catalog)
    second = rank(aggregate(ARCHETYPES["tech"]), catalog)

    assert first == second


def test_ranking_is_sorted_and_limited(tech_profile, catalog):
    matches = rank(tech_profile, catalog, top_n=7)
    percentages = [match.match_percentage for match in matches]

    assert len(matches) == 7
    assert percentages == sorted(percentages, reverse=True)


def test_equal_scores_keep_catalog_order(career_factory, trades_profile):
    careers = [
        career_factory("first", "First Twin", work_styles=["hands-on"]),
        career_factory("second", "Second Twin", work_styles=["hands-on"]),
        career_factory("third", "Third Twin", work_styles=["hands-on"]),
    ]

    matches = rank(trades_profile, careers)

    assert len({match.match_percentage for match in matches}) == 1
    assert [match.career_id for match in matches] == ["first", "second", "third"]


def test_trades_archetype_ranks_electrician_first(trades_profile, catalog):
    top = rank(trades_profile, catalog, top_n=5)

    assert top[0].title == "Electrician"
    assert top[0].category == "Trades"


def test_empty_profile_flags_insufficient_data(catalog):
    result = build_ranking(aggregate({}), catalog, top_n=5)

    assert result.insufficient_data is True
    assert [match.career_id for match in result.matches] == [career.id for career in catalog[:5]]
    assert all(match.match_percentage == 0.0 for match in result.matches)


def test_answered_profile_is_not_flagged(trades_profile, catalog):
    assert build_ranking(trades_profile, catalog).insufficient_data is False


def test_ranked_match_serialises_display_fields(trades_profile, catalog):
    match = rank(trades_profile, catalog, top_n=1)[0]

    assert match.to_dict() == {
        "id": "electrician",
        "title": "Electrician",
        "description": catalog[0].description,
        "skills": list(catalog[0].skills),
        "salary": catalog[0].salary,
        "outlook": catalog[0].outlook,
        "category": "Trades",
        "match": match.match_percentage,
    }
