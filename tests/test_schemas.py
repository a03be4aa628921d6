"""Tests for the profile schema."""
from resume_extractor.schemas import ExtractedProfile, ProfileLinks


def test_defaults_are_empty():
    profile = ExtractedProfile()
    assert profile.is_empty()
    assert profile.links == ProfileLinks()
    assert profile.skills == []


def test_accepts_field_names_and_aliases():
    by_name = ExtractedProfile(contact_number="9876543210", date_of_birth="4/2/1995")
    by_alias = ExtractedProfile.model_validate({"contactNumber": "9876543210", "dateOfBirth": "4/2/1995"})
    assert by_name == by_alias
    assert not by_name.is_empty()


def test_to_record_uses_camel_case_keys():
    record = ExtractedProfile(name="Jane", links=ProfileLinks(github="https://github.com/jane")).to_record()
    assert record["contactNumber"] == ""
    assert record["dateOfBirth"] == ""
    assert record["links"]["github"] == "https://github.com/jane"
    assert "contact_number" not in record
