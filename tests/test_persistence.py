"""
Tests for JSON profile storage.
"""

import json

import pytest

from langmatch.persistence import ProfileFormatError, load_profiles, profiles_from_dict, save_profiles

from .builders import make_user


def test_missing_file_means_no_users(tmp_path):
    assert load_profiles(str(tmp_path / "nope.json")) == {}


def test_save_then_load(tmp_path):
    path = str(tmp_path / "profiles.json")
    users = [make_user("b", native="FR", is_online=True), make_user("a", age=None)]
    save_profiles(users, path)

    loaded = load_profiles(path)
    assert list(loaded) == ["b", "a"]
    assert loaded["b"] == users[0]
    assert loaded["a"] == users[1]
    assert not (tmp_path / "profiles.json.tmp").exists()


def test_load_keeps_file_order(tmp_path, sample_profiles_dict):
    path = tmp_path / "profiles.json"
    path.write_text(json.dumps(sample_profiles_dict), encoding="utf-8")
    assert list(load_profiles(str(path))) == ["u1", "u2"]


def test_invalid_json(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ProfileFormatError):
        load_profiles(str(path))


def test_invalid_utf8_is_a_format_error(tmp_path):
    path = tmp_path / "profiles.json"
    path.write_bytes(b'{"users": [{"user_id": "\xff"}]}')
    with pytest.raises(ProfileFormatError):
        load_profiles(str(path))


def test_unreadable_path_is_a_format_error(tmp_path):
    with pytest.raises(ProfileFormatError, match="could not read"):
        load_profiles(str(tmp_path))


def test_missing_users_list():
    with pytest.raises(ProfileFormatError):
        profiles_from_dict({"people": []})


def test_bad_record_reports_user_id(sample_profiles_dict):
    sample_profiles_dict["users"][1]["learning_languages"] = [{"language": "EN", "proficiency": "fluent"}]
    with pytest.raises(ProfileFormatError) as excinfo:
        profiles_from_dict(sample_profiles_dict)
    assert excinfo.value.user_id == "u2"


def test_duplicate_user_id(sample_profiles_dict):
    sample_profiles_dict["users"].append(dict(sample_profiles_dict["users"][0]))
    with pytest.raises(ProfileFormatError, match="duplicate"):
        profiles_from_dict(sample_profiles_dict)


@pytest.mark.parametrize("preferences", [["x"], "anywhere", 3])
def test_non_object_preferences_report_user_id(sample_profiles_dict, preferences):
    sample_profiles_dict["users"][1]["preferences"] = preferences
    with pytest.raises(ProfileFormatError) as excinfo:
        profiles_from_dict(sample_profiles_dict)
    assert excinfo.value.user_id == "u2"


def test_non_object_record_is_a_format_error(sample_profiles_dict):
    sample_profiles_dict["users"].append("u3")
    with pytest.raises(ProfileFormatError):
        profiles_from_dict(sample_profiles_dict)
