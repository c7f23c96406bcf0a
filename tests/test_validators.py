"""
Unit tests — Input validation (validators.py).

Covers the four field parsers used by the prompt loops and the
RegistrationData model that validates a complete player payload.

All tests are synchronous; no console required.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from tigerclub.validators import (
    COUNT_ERROR,
    JERSEY_ERROR,
    NAME_ERROR,
    TYPE_ERROR,
    RegistrationData,
    parse_jersey_choice,
    parse_name,
    parse_player_count,
    parse_registration_type,
)


# ─────────────────────────── Player count ────────────────────────────────────

class TestParsePlayerCount:
    @pytest.mark.parametrize("raw,expected", [
        ("1", 1),
        ("4", 4),
        ("  3  ", 3),
        ("+2", 2),
    ])
    def test_accepts_integers_in_range(self, raw: str, expected: int) -> None:
        assert parse_player_count(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "5", "-1", "abc", "", "   ", "2.0", "1_0", "3 players"])
    def test_rejects_non_numeric_and_out_of_range(self, raw: str) -> None:
        with pytest.raises(ValueError, match="between 1 and 4"):
            parse_player_count(raw)

    @pytest.mark.parametrize("raw", ["٣", "２", "१"])
    def test_rejects_non_ascii_digits(self, raw: str) -> None:
        """Arabic-Indic three, fullwidth two, Devanagari one."""
        with pytest.raises(ValueError, match="between 1 and 4"):
            parse_player_count(raw)

    def test_error_message_is_fixed(self) -> None:
        assert COUNT_ERROR == "Invalid input. Please enter a number between 1 and 4."


# ─────────────────────────── Name ────────────────────────────────────────────

class TestParseName:
    def test_trims_surrounding_whitespace(self) -> None:
        assert parse_name("  Alex Morgan  ") == "Alex Morgan"

    def test_minimum_length_two_chars(self) -> None:
        assert parse_name("Jo") == "Jo"

    @pytest.mark.parametrize("raw", ["", "   ", "A", "  B  "])
    def test_rejects_empty_or_too_short(self, raw: str) -> None:
        with pytest.raises(ValueError) as exc_info:
            parse_name(raw)
        assert str(exc_info.value) == NAME_ERROR


# ─────────────────────────── Registration type ───────────────────────────────

class TestParseRegistrationType:
    @pytest.mark.parametrize("raw,expected", [
        ("kids", "Kids"),
        ("KIDS", "Kids"),
        ("kIdS", "Kids"),
        ("adult", "Adult"),
        ("ADULT", "Adult"),
        ("  Adult ", "Adult"),
    ])
    def test_canonicalises_to_title_case(self, raw: str, expected: str) -> None:
        assert parse_registration_type(raw) == expected

    @pytest.mark.parametrize("raw", ["", "kid", "adults", "senior", "k"])
    def test_rejects_unknown_types(self, raw: str) -> None:
        with pytest.raises(ValueError) as exc_info:
            parse_registration_type(raw)
        assert str(exc_info.value) == TYPE_ERROR


# ─────────────────────────── Jersey choice ───────────────────────────────────

class TestParseJerseyChoice:
    @pytest.mark.parametrize("raw", ["yes", "YES", "y", "Y", " yes "])
    def test_yes_variants(self, raw: str) -> None:
        assert parse_jersey_choice(raw) is True

    @pytest.mark.parametrize("raw", ["no", "NO", "n", "N", " n "])
    def test_no_variants(self, raw: str) -> None:
        assert parse_jersey_choice(raw) is False

    @pytest.mark.parametrize("raw", ["", "true", "1", "on", "yep", "nope"])
    def test_rejects_anything_else(self, raw: str) -> None:
        with pytest.raises(ValueError) as exc_info:
            parse_jersey_choice(raw)
        assert str(exc_info.value) == JERSEY_ERROR


# ─────────────────────────── RegistrationData ────────────────────────────────

class TestRegistrationData:
    def test_canonicalises_all_fields(self) -> None:
        d = RegistrationData(name="  Sam ", registration_type="adult", wants_jersey="Y")
        assert d.name == "Sam"
        assert d.registration_type == "Adult"
        assert d.wants_jersey is True

    def test_accepts_plain_bool(self) -> None:
        d = RegistrationData(name="Alex", registration_type="Kids", wants_jersey=False)
        assert d.wants_jersey is False

    def test_model_dump_matches_player_fields(self) -> None:
        d = RegistrationData(name="Alex", registration_type="kids", wants_jersey="no")
        assert d.model_dump() == {
            "name": "Alex",
            "registration_type": "Kids",
            "wants_jersey": False,
        }

    def test_short_name_raises(self) -> None:
        with pytest.raises(ValidationError):
            RegistrationData(name="A", registration_type="Kids", wants_jersey=False)

    def test_unknown_type_raises(self) -> None:
        with pytest.raises(ValidationError):
            RegistrationData(name="Alex", registration_type="Senior", wants_jersey=False)

    def test_loose_bool_strings_raise(self) -> None:
        """Only yes/y/no/n are accepted, not pydantic's wider bool vocabulary."""
        with pytest.raises(ValidationError):
            RegistrationData(name="Alex", registration_type="Kids", wants_jersey="true")

    def test_non_string_name_raises(self) -> None:
        with pytest.raises(ValidationError):
            RegistrationData(name=42, registration_type="Kids", wants_jersey=False)

    def test_is_frozen(self) -> None:
        d = RegistrationData(name="Alex", registration_type="Kids", wants_jersey=False)
        with pytest.raises(ValidationError):
            d.name = "Other"
