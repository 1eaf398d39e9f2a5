import pytest

from fixtures.archetype_profiles import ARCHETYPES
from inference.answer_converter import aggregate
from ingestion.build_career_catalog import build_career, load_career_catalog


def career_entry(career_id, title, **scoring):
    return {
        "id": career_id,
        "title": title,
        "description": f"{title} description",
        "skills": ["Skill"],
        "salary": "$1",
        "outlook": "+1%",
        "category": "Test",
        "scoring": scoring,
    }


def make_career(career_id, title, **scoring):
    return build_career(career_entry(career_id, title, **scoring))


@pytest.fixture(scope="session")
def catalog():
    return load_career_catalog()


@pytest.fixture
def trades_profile():
    return aggregate(ARCHETYPES["trades"])


@pytest.fixture
def tech_profile():
    return aggregate(ARCHETYPES["tech"])


@pytest.fixture
def career_factory():
    return make_career
