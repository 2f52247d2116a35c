"""
Tests for the weighted compatibility scorer.
"""

import pytest

from langmatch import config
from langmatch.matching import FACTORS, can_match, compute_score_components, score
from langmatch.matching import scoring as scoring_module
from langmatch.matching.scoring import (
    age_points,
    distance_points,
    gender_points,
    intent_points,
    language_points,
    proficiency_points,
    regional_points,
    travel_points,
)
from langmatch.models import (
    Gender,
    GenderPreference,
    LocationPreference,
    ProficiencyLevel,
    RelationshipIntent,
    TravelDestination,
)

from .builders import BOSTON, GRENOBLE, LYON, PARIS, VILLEURBANNE, make_user

B = ProficiencyLevel.BEGINNER
I = ProficiencyLevel.INTERMEDIATE
A = ProficiencyLevel.ADVANCED
N = ProficiencyLevel.NATIVE


# ------------------------------
# Scenarios
# ------------------------------

def test_perfect_exchange_scenario(english_speaker, french_speaker):
    assert can_match(english_speaker, french_speaker)
    total, reasons = score(english_speaker, french_speaker)
    # 40 language + 10 age (diff 2) + 10 dating
    assert total >= 60
    assert reasons[0] == config.REASON_PERFECT_EXCHANGE
    assert config.REASON_SIMILAR_AGE in reasons
    assert config.REASON_INTENT["open_to_dating"] in reasons


def test_secondary_match_scores_25():
    a = make_user("a", native="EN", learning=[("ES", B)], allow_non_native_matches=True,
                  min_proficiency_level=B, max_proficiency_level=A)
    b = make_user("b", native="DE", learning=[("ES", I)])
    assert language_points(a, b) == (25, [config.REASON_SAME_LANGUAGE])


def test_primary_match_gives_exactly_40(english_speaker, french_speaker):
    assert language_points(english_speaker, french_speaker)[0] == config.LANGUAGE_PRIMARY_POINTS == 40


def test_no_language_match_scores_zero():
    a = make_user("a", native="EN", learning=[("ES", B)])
    b = make_user("b", native="DE", learning=[("IT", B)])
    assert language_points(a, b) == (0, [])


# ------------------------------
# Proficiency
# ------------------------------

@pytest.mark.parametrize(
    "level_b,expected,similar",
    [(B, 15, True), (I, 10, True), (A, 5, False), (N, 0, False)],
)
def test_proficiency_bands(level_b, expected, similar):
    a = make_user("a", learning=[("ES", B)])
    b = make_user("b", native="DE", learning=[("ES", level_b)])
    points, reasons = proficiency_points(a, b)
    assert points == expected
    assert (reasons == [config.REASON_SIMILAR_PROFICIENCY]) is similar


def test_proficiency_is_monotonic_in_gap():
    a = make_user("a", learning=[("ES", B)])
    previous = None
    for level in (B, I, A, N):
        points, _ = proficiency_points(a, make_user("b", native="DE", learning=[("ES", level)]))
        if previous is not None:
            assert points <= previous
        previous = points


def test_proficiency_takes_best_common_language():
    a = make_user("a", learning=[("ES", B), ("IT", A)])
    b = make_user("b", native="DE", learning=[("ES", N), ("IT", A)])
    assert proficiency_points(a, b) == (15, [config.REASON_SIMILAR_PROFICIENCY])


def test_proficiency_without_common_language(english_speaker, french_speaker):
    assert proficiency_points(english_speaker, french_speaker) == (0, [])


# ------------------------------
# Age
# ------------------------------

@pytest.mark.parametrize(
    "age_b,expected,reason",
    [
        (31, 10, config.REASON_SIMILAR_AGE),
        (33, 8, None),
        (38, 5, config.REASON_CLOSE_AGE),
        (43, 2, None),
        (50, 0, None),
    ],
)
def test_age_bands(age_b, expected, reason):
    a = make_user("a", age=28)
    b = make_user("b", native="FR", learning=[("EN", I)], age=age_b)
    points, reasons = age_points(a, b)
    assert points == expected
    assert reasons == ([reason] if reason else [])


def test_age_unknown_is_neutral():
    a = make_user("a", age=None)
    b = make_user("b", native="FR", age=30)
    assert age_points(a, b) == (config.NEUTRAL_AGE_POINTS, [])


def test_age_outside_range_scores_zero():
    a = make_user("a", age=28, max_age=29)
    b = make_user("b", native="FR", age=30)
    assert age_points(a, b) == (0, [])


# ------------------------------
# Distance
# ------------------------------

def test_distance_both_anywhere_is_neutral_even_when_close():
    a = make_user("a", coordinates=LYON)
    b = make_user("b", native="FR", coordinates=VILLEURBANNE)
    assert distance_points(a, b) == (config.NEUTRAL_DISTANCE_POINTS, [])


@pytest.mark.parametrize(
    "other,expected,reason",
    [
        (VILLEURBANNE, 10, config.REASON_LOCAL),
        (GRENOBLE, 8, config.REASON_NEARBY),
        (PARIS, 5, None),
        (BOSTON, 2, None),
    ],
)
def test_distance_bands(other, expected, reason):
    a = make_user("a", coordinates=LYON, location_preference=LocationPreference.MAX_DISTANCE)
    b = make_user("b", native="FR", coordinates=other)
    points, reasons = distance_points(a, b)
    assert points == expected
    assert reasons == ([reason] if reason else [])


def test_distance_without_coordinates_is_neutral():
    a = make_user("a", coordinates=LYON, location_preference=LocationPreference.MAX_DISTANCE)
    b = make_user("b", native="FR")
    assert distance_points(a, b) == (config.NEUTRAL_DISTANCE_POINTS, [])


# ------------------------------
# Intent / gender
# ------------------------------

def test_intent_highest_priority_wins():
    both = frozenset({RelationshipIntent.FRIENDSHIP, RelationshipIntent.LANGUAGE_PRACTICE_ONLY})
    a = make_user("a", relationship_intents=both | {RelationshipIntent.OPEN_TO_DATING})
    b = make_user("b", native="FR", relationship_intents=both)
    assert intent_points(a, b) == (8, [config.REASON_INTENT["friendship"]])


def test_intent_practice_only():
    practice = frozenset({RelationshipIntent.LANGUAGE_PRACTICE_ONLY})
    a = make_user("a", relationship_intents=practice)
    b = make_user("b", native="FR", relationship_intents=practice)
    assert intent_points(a, b) == (5, [config.REASON_INTENT["language_practice_only"]])


def test_gender_points():
    a = make_user("a", gender=Gender.FEMALE, gender_preference=GenderPreference.SAME_ONLY)
    assert gender_points(a, make_user("b", native="FR", gender=Gender.FEMALE)) == (5, [])
    assert gender_points(a, make_user("b", native="FR", gender=Gender.MALE)) == (0, [])
    assert gender_points(make_user("a"), make_user("b", native="FR")) == (5, [])


# ------------------------------
# Travel / regional
# ------------------------------

def _trip(city="Lyon", country="FR", name="France", active=True):
    return TravelDestination(country=country, country_name=name, city=city, active=active)


def test_travel_each_direction_adds_a_reason_but_caps_at_5():
    a = make_user("a", location="Boston, United States", travel_destination=_trip())
    b = make_user("b", native="FR", location="Lyon, France",
                  travel_destination=_trip(city="Boston", country="US", name="United States"))
    points, reasons = travel_points(a, b)
    assert points == config.TRAVEL_CAP == 5
    assert reasons == [config.REASON_TRAVELING_TO_THEM, config.REASON_TRAVELING_TO_YOU]


def test_travel_inactive_trip_ignored():
    a = make_user("a", travel_destination=_trip(active=False))
    b = make_user("b", native="FR", location="Lyon, France")
    assert travel_points(a, b) == (0, [])


def test_travel_matches_country_name_when_city_differs():
    a = make_user("a", travel_destination=_trip(city="Marseille"))
    b = make_user("b", native="FR", location="Lyon, France")
    assert travel_points(a, b) == (5, [config.REASON_TRAVELING_TO_THEM])


def test_regional_preference_reason_is_requester_side_only():
    a = make_user("a", native="EN", location="Boston, United States",
                  regional_language_preferences={"FR": frozenset({"FR"})})
    b = make_user("b", native="FR", location="Lyon, France",
                  regional_language_preferences={"EN": frozenset({"US"})})
    assert regional_points(a, b) == (5, [config.REASON_REGIONAL])
    # reverse view: b's own preference holds, a's still counts toward the cap
    assert regional_points(b, a) == (5, [config.REASON_REGIONAL])


def test_regional_reciprocal_only_adds_score():
    a = make_user("a", native="EN", location="Boston, United States")
    b = make_user("b", native="FR", location="Lyon, France",
                  regional_language_preferences={"EN": frozenset({"US"})})
    assert regional_points(a, b) == (5, [])


def test_regional_wrong_country():
    a = make_user("a", regional_language_preferences={"FR": frozenset({"CA"})})
    b = make_user("b", native="FR", location="Lyon, France")
    assert regional_points(a, b) == (0, [])


# ------------------------------
# Totals
# ------------------------------

def test_components_follow_factor_order(english_speaker, french_speaker):
    components = compute_score_components(english_speaker, french_speaker)
    assert tuple(components) == FACTORS


def _full_marks_pair():
    trip = _trip()
    a = make_user(
        "a", native="EN", learning=[("FR", I), ("ES", I)], age=28, location="Lyon, France",
        coordinates=LYON, location_preference=LocationPreference.MAX_DISTANCE,
        travel_destination=trip, regional_language_preferences={"FR": frozenset({"FR"})},
    )
    b = make_user(
        "b", native="FR", learning=[("EN", I), ("ES", I)], age=29, location="Lyon, France",
        coordinates=VILLEURBANNE, travel_destination=trip,
    )
    return a, b


def test_reasons_follow_factor_order_when_every_factor_is_maxed():
    a, b = _full_marks_pair()
    total, reasons = score(a, b)
    assert sum(points for points, _ in compute_score_components(a, b).values()) == config.SCORE_CAP
    assert total == config.SCORE_CAP
    assert reasons == [
        config.REASON_PERFECT_EXCHANGE,
        config.REASON_SIMILAR_PROFICIENCY,
        config.REASON_SIMILAR_AGE,
        config.REASON_LOCAL,
        config.REASON_INTENT["open_to_dating"],
        config.REASON_TRAVELING_TO_THEM,
        config.REASON_TRAVELING_TO_YOU,
        config.REASON_REGIONAL,
    ]


def test_score_bounds_for_eligible_pairs(english_speaker, french_speaker):
    others = [
        french_speaker,
        make_user("x", native="FR", learning=[("EN", N)], age=None),
        make_user("y", native="FR", learning=[("EN", B)], age=70, coordinates=BOSTON),
    ]
    for other in others:
        if can_match(english_speaker, other):
            total, _ = score(english_speaker, other)
            assert 0 <= total <= 100


def test_score_is_clamped_when_factors_overshoot(monkeypatch):
    monkeypatch.setattr(scoring_module, "LANGUAGE_PRIMARY_POINTS", 45)
    a, b = _full_marks_pair()
    assert sum(points for points, _ in compute_score_components(a, b).values()) == 105
    assert score(a, b)[0] == 100
