"""Response aggregation: raw quiz answers -> QuizProfile."""
import pytest

from core.career_components import WorkStyle
from inference.answer_converter import (
    aggregate,
    build_interests,
    clean_mini_game_metrics,
    normalise_metric_name,
    parse_interest_ids,
)
from matching.aggregate import score_percentages


# ---------------------------------------------------------------------------
# Missing and malformed input
# ---------------------------------------------------------------------------

def test_missing_sectors_give_zero_tallies():
    profile = aggregate({})

    assert profile.is_empty()
    for tally in profile.tallies.values():
        assert tally.total == 0


@pytest.mark.parametrize("raw", [None, "sector1", 42, ["hands-on"]])
def test_non_mapping_input_gives_empty_profile(raw):
    assert aggregate(raw).is_empty()


def test_unknown_labels_and_non_mapping_sectors_are_ignored():
    profile = aggregate({
        "sector1": {"s1_q1": "hands-on", "s1_q2": "daydreaming", "s1_q3": 7},
        "sector2": "skills",
        "sector4": {"s4_q1": "fame"},
    })

    assert profile.work_style.scores["hands-on"] == 1
    assert profile.work_style.total == 1
    assert profile.cognitive_strength.total == 0
    assert profile.motivation.total == 0


# ---------------------------------------------------------------------------
# Umbrella labels
# ---------------------------------------------------------------------------

def test_team_answers_feed_umbrella_and_keep_sub_labels():
    profile = aggregate({
        "sector1": {
            "s1_q2": "team_collaborative",
            "s1_q3": "team_network",
            "s1_q10": "team_synergy",
            "s1_q5": "independent",
        }
    })

    assert profile.work_style.scores["team"] == 3
    assert profile.work_style.sub_labels == {
        "team_collaborative": 1, "team_network": 1, "team_synergy": 1,
    }
    assert profile.work_style.scores["independent"] == 1
    assert profile.to_dict()["team_value_types"] == {
        "team_collaborative": 1, "team_network": 1, "team_synergy": 1,
    }


def test_bare_team_label_counts_without_sub_label():
    tally = WorkStyle()
    tally.record("team")

    assert tally.scores["team"] == 1
    assert tally.sub_labels == {}


def test_bare_team_answer_is_not_an_option():
    profile = aggregate({"sector1": {"s1_q2": "team"}})

    assert profile.work_style.total == 0


# ---------------------------------------------------------------------------
# Question ids and options
# ---------------------------------------------------------------------------

def test_unknown_question_ids_are_ignored():
    profile = aggregate({
        "sector1": {f"bogus{i}": "hands-on" for i in range(20)},
        "sector2": {"s2_q99": "skills", "s1_q1": "skills"},
        "sector4": {"s4_q42": "security", "": "salary"},
    })

    assert profile.work_style.total == 0
    assert profile.cognitive_strength.total == 0
    assert profile.motivation.total == 0
    assert profile.is_empty()


def test_labels_must_be_offered_by_their_question():
    profile = aggregate({
        "sector1": {"s1_q1": "team_synergy", "s1_q2": "hands-on", "s1_q10": "team_synergy"},
        "sector4": {"s4_q1": "salary", "s4_q10": "salary"},
    })

    # only s1_q10 and s4_q10 offer the chosen labels
    assert profile.work_style.scores["team"] == 1
    assert profile.work_style.scores["hands-on"] == 0
    assert profile.work_style.sub_labels == {"team_synergy": 1}
    assert profile.motivation.scores["salary"] == 1
    assert profile.motivation.total == 1


def test_question_ids_are_bound_to_their_sector():
    profile = aggregate({"sector4": {"s1_q5": "independent"}, "sector1": {"s4_q4": "independent"}})

    assert profile.work_style.total == 0
    assert profile.motivation.total == 0


def test_bogus_question_ids_cannot_inflate_work_style_percentage():
    flooded = aggregate({"sector1": {f"bogus{i}": "hands-on" for i in range(20)}})

    assert score_percentages(flooded).work_style == 0.0


# ---------------------------------------------------------------------------
# Sector 3 yes/no questions
# ---------------------------------------------------------------------------

def test_boolean_questions_feed_each_trait_pair():
    profile = aggregate({"sector3": {"s3_q6": True, "s3_q12": True, "s3_q2": False}})
    social = profile.social_approach.scores

    # s3_q6 feeds extroversion and leadership; s3_q2 is reverse-keyed
    assert social["extrovert"] == 2
    assert social["leader"] == 1
    assert social["cautious"] == 1
    assert social["introvert"] == 0


def test_non_boolean_answers_are_ignored_in_sector3():
    profile = aggregate({"sector3": {"s3_q1": 1, "s3_q4": "yes", "s3_q99": True}})

    assert profile.social_approach.total == 0


# ---------------------------------------------------------------------------
# Interests
# ---------------------------------------------------------------------------

def test_interest_ids_keep_selection_order_and_limit():
    assert parse_interest_ids("13, 3, 99, 13, x, 4, 5, 6, 7") == [13, 3, 4, 5, 6]
    assert parse_interest_ids([21, "2"]) == [21, 2]
    assert parse_interest_ids({"s5_q1": "8,9"}) == [8, 9]
    assert parse_interest_ids(None) == []


def test_interest_percentages_follow_selection_order():
    entries = build_interests([13, 3, 21])

    assert [(e.interest_id, e.percentage) for e in entries] == [(13, 100.0), (3, 90.0), (21, 80.0)]
    assert entries[0].interest == "Software Development"


def test_interest_argument_overrides_sector5():
    profile = aggregate({"sector5": "3,4"}, interest_ids="13")

    assert [entry.interest_id for entry in profile.interests] == [13]


# ---------------------------------------------------------------------------
# Mini-game metrics
# ---------------------------------------------------------------------------

def test_metric_names_are_normalised_to_snake_case():
    assert normalise_metric_name("patternRecognition") == "pattern_recognition"
    assert normalise_metric_name("memory_capacity") == "memory_capacity"


def test_mini_game_metrics_are_filtered_and_clamped():
    cleaned = clean_mini_game_metrics({
        "patternRecognition": 150,
        "motorControl": "fast",
        "luck": 80,
        "attention_control": -5,
        "decisionMaking": True,
    })

    assert cleaned == {"pattern_recognition": 100.0, "attention_control": 0.0}


def test_mini_game_metrics_read_from_raw_responses():
    profile = aggregate({"miniGameMetrics": {"spatialReasoning": 64}})

    assert profile.mini_game_metrics == {"spatial_reasoning": 64.0}
    assert not profile.is_empty()


def test_tally_rejects_labels_outside_vocabulary():
    assert WorkStyle({"hands-on": 2}).total == 2
    with pytest.raises(ValueError):
        WorkStyle({"napping": 1})
