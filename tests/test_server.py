import pytest
from fastapi.testclient import TestClient

import config
from fixtures.archetype_profiles import TRADES
from server import app

BUSINESS_MATCHES = [
    {"id": "marketing_manager", "title": "Marketing Manager", "match": 81.0},
    {"id": "sales_manager", "title": "Sales Manager", "match": 79.5},
    {"id": "entrepreneur", "title": "Entrepreneur", "match": 77.0},
    {"id": "software_developer", "title": "Software Developer", "match": 70.0},
    {"id": "teacher", "title": "Teacher", "match": 65.0},
]


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_careers_lists_catalog(client, catalog):
    response = client.get("/careers")

    assert response.status_code == 200
    body = response.json()
    assert len(body) == len(catalog)
    assert body[0]["title"] == catalog[0].title
    assert body[0]["match"] == 0.0


def test_guest_assessment_ranks_careers(client):
    response = client.post("/guest/assessment", json={"responses": TRADES})

    assert response.status_code == 200
    body = response.json()
    assert len(body["matches"]) == config.DEFAULT_TOP_N
    assert body["matches"][0]["title"] == "Electrician"
    assert body["insufficient_data"] is False
    assert body["percentages"]["work_style"] == 100.0
    assert body["profile"]["interests"][0]["interest_id"] == 3


def test_guest_assessment_accepts_separate_interests_and_metrics(client):
    response = client.post("/guest/assessment", json={
        "responses": {"sector1": {"s1_q1": "analytical"}},
        "interests": [13, 16],
        "mini_game_metrics": {"patternRecognition": 90},
        "top_n": 3,
    })

    body = response.json()
    assert response.status_code == 200
    assert len(body["matches"]) == 3
    assert body["profile"]["mini_game_metrics"] == {"pattern_recognition": 90.0}
    assert [i["interest_id"] for i in body["profile"]["interests"]] == [13, 16]


def test_empty_assessment_is_flagged(client):
    body = client.post("/guest/assessment", json={}).json()

    assert body["insufficient_data"] is True
    assert body["has_overlap"] is False
    assert all(match["match"] == 0.0 for match in body["matches"])


@pytest.mark.parametrize("top_n", [0, -1, config.MAX_TOP_N + 1])
def test_out_of_range_top_n_is_rejected(client, top_n):
    response = client.post("/guest/assessment", json={"responses": TRADES, "top_n": top_n})

    assert response.status_code == 400


def test_malformed_body_is_rejected(client):
    response = client.post("/guest/assessment", json={"responses": ["sector1"]})

    assert response.status_code == 422


def test_refine_applies_answers(client):
    response = client.post("/overlap/refine", json={
        "matches": BUSINESS_MATCHES,
        "responses": {"biz-management-1": 2},
    })

    body = response.json()
    assert response.status_code == 200
    assert body["refined_matches"][0]["title"] == "Sales Manager"
    assert body["refined_matches"][0]["match"] == 94.5
    assert "Sales Manager" in body["explanations"]


def test_skip_returns_matches_unchanged(client):
    body = client.post("/overlap/skip", json={"matches": BUSINESS_MATCHES}).json()

    assert [(m["title"], m["match"]) for m in body["refined_matches"]] == [
        (m["title"], m["match"]) for m in BUSINESS_MATCHES
    ]
    assert body["explanations"] == {}


def test_refine_without_overlap_passes_through(client):
    matches = [{"title": "Electrician", "match": 80.0}, {"title": "Teacher", "match": 60.0}]

    body = client.post("/overlap/refine", json={"matches": matches, "responses": {"education-1": 0}}).json()

    assert [m["match"] for m in body["refined_matches"]] == [80.0, 60.0]
    assert body["explanations"] == {}


def test_mini_game_profile(client):
    results = [
        {"game_id": "color-dash", "timestamp": 1, "metrics": {"visual_processing_speed": 80}},
        {"game_id": "multisensory-matrix", "timestamp": 2, "metrics": {"spatial_reasoning_score": 90}},
        {"game_id": "verbo-flash", "timestamp": 3, "metrics": {"verbal_processing_speed": 40}},
    ]

    body = client.post("/mini-games/profile", json={"results": results}).json()

    assert body["profile"]["brain_dominance"] == "right"
    assert body["metrics"]["spatial_reasoning"] == 90.0
    assert body["completion"] == {"completed": 3, "total": 4, "percent": 75.0}


def test_mini_game_profile_needs_three_games(client):
    results = [{"game_id": "color-dash", "timestamp": 1, "metrics": {}}]

    body = client.post("/mini-games/profile", json={"results": results}).json()

    assert body["profile"] is None
    assert body["metrics"] == {}
