"""
Shared fixtures for the langmatch tests.
"""

from typing import Dict

import pytest

from langmatch.models import ProficiencyLevel, UserProfile

from .builders import make_user


@pytest.fixture
def english_speaker() -> UserProfile:
    """Native English, learning French, 28."""
    return make_user("en1", native="EN", learning=[("FR", ProficiencyLevel.INTERMEDIATE)], age=28)


@pytest.fixture
def french_speaker() -> UserProfile:
    """Native French, learning English, 30."""
    return make_user("fr1", native="FR", learning=[("EN", ProficiencyLevel.INTERMEDIATE)], age=30)


@pytest.fixture
def sample_profiles_dict() -> Dict:
    return {
        "users": [
            {
                "user_id": "u1",
                "native_language": "en",
                "learning_languages": [{"language": "fr", "proficiency": "beginner"}],
                "age": 28,
                "location": "Boston, United States",
                "country_code": "us",
                "coordinates": {"latitude": 42.36, "longitude": -71.06},
                "is_online": True,
                "preferences": {
                    "gender": "male",
                    "location_preference": "regional_100km",
                    "relationship_intents": ["friendship"],
                    "preferred_countries": ["fr"],
                    "regional_language_preferences": {"fr": ["fr", "ca"]},
                },
            },
            {
                "user_id": "u2",
                "native_language": "FR",
                "learning_languages": [{"language": "EN"}],
            },
        ]
    }
