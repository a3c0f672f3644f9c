"""Tests for form-level aggregation."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from formvalidation.exceptions import RuleConfigurationError
from formvalidation.validators import FieldValidator, FormValidator


def _field(name, text, pattern, message):
    field = FieldValidator(text, name=name)
    field.add_pattern_rule(pattern, message)
    field.revalidate()
    return field


@pytest.fixture
def good_field():
    return _field("name", "Ada", r"[A-Za-z]+", "Letters only")


@pytest.fixture
def bad_field():
    return _field("zip", "abcd", r"\d{5}", "Must be 5 digits")


# -- valid --------------------------------------------------------------------


class TestValid:
    def test_empty_form_is_valid(self):
        form = FormValidator()
        assert form.valid is True
        assert form.error_message == ""

    def test_all_valid(self, good_field):
        other = _field("age", "42", r"\d+", "Digits only")
        assert FormValidator(good_field, other).valid is True

    def test_one_invalid_field_makes_form_invalid(self, good_field, bad_field):
        form = FormValidator(good_field, bad_field)
        assert form.valid is False
        assert form.error_message == "Must be 5 digits"

    def test_reading_valid_does_not_revalidate(self, bad_field, recorder):
        bad_field.post_validation_callback = recorder
        bad_field.text = "12345"
        form = FormValidator(bad_field)

        assert form.valid is False
        assert recorder.calls == []

    def test_tracks_field_changes(self, bad_field):
        form = FormValidator(bad_field)
        bad_field.text_changed("12345")
        assert form.valid is True

    def test_follows_manual_override(self, bad_field):
        form = FormValidator(bad_field)
        bad_field.is_valid = True
        assert form.valid is True


# -- error_message ------------------------------------------------------------


class TestErrorMessage:
    def test_concatenated_in_field_order(self, bad_field):
        first = _field("email", "nope", r"[^@]+@[^@]+", "Invalid email")
        form = FormValidator(first, bad_field)
        assert form.error_message == "Invalid email\nMust be 5 digits"

    def test_skips_fields_without_messages(self, good_field, bad_field):
        silent = FieldValidator("x", name="silent")
        silent.add_predicate_rule(lambda t, e: False)
        silent.revalidate()
        form = FormValidator(silent, good_field, bad_field)
        assert form.valid is False
        assert form.error_message == "Must be 5 digits"

    def test_separator_from_env(self, monkeypatch, bad_field):
        monkeypatch.setenv("FORMVALIDATION_FORM_ERROR_SEPARATOR", " | ")
        other = _field("email", "nope", r"[^@]+@[^@]+", "Invalid email")
        assert FormValidator(bad_field, other).error_message == "Must be 5 digits | Invalid email"


# -- validate / report --------------------------------------------------------


class TestValidate:
    def test_revalidates_every_field(self, recorder):
        first = FieldValidator("12", name="zip", post_validation_callback=recorder)
        first.add_pattern_rule(r"\d{5}", "Must be 5 digits")
        second = FieldValidator("ok", name="ok", post_validation_callback=recorder)

        form = FormValidator(first, second)
        assert form.valid is True  # nothing computed yet

        with capture_logs() as logs:
            assert form.validate() is False
        assert recorder.calls == [False, True]
        assert form.error_message == "Must be 5 digits"
        completed = [log for log in logs if log["event"] == "form_validated"]
        assert completed[0]["invalid_fields"] == ["zip"]

    def test_empty_form_validates(self):
        assert FormValidator().validate() is True

    def test_report(self, good_field, bad_field):
        report = FormValidator(good_field, bad_field).report()
        assert report.valid is False
        assert report.error_message == "Must be 5 digits"
        assert [f.name for f in report.fields] == ["name", "zip"]
        assert report.invalid_fields == ["zip"]


# -- Construction -------------------------------------------------------------


class TestConstruction:
    def test_fields_fixed_and_ordered(self, good_field, bad_field):
        form = FormValidator(good_field, bad_field)
        assert form.fields == (good_field, bad_field)
        assert len(form) == 2
        assert list(form) == [good_field, bad_field]

    def test_with_fields(self, good_field, bad_field):
        form = FormValidator.with_fields(f for f in [good_field, bad_field])
        assert form.fields == (good_field, bad_field)

    def test_fields_share_state_with_host(self, bad_field):
        form = FormValidator(bad_field)
        assert form.fields[0] is bad_field

    def test_rejects_non_fields(self, good_field):
        with pytest.raises(RuleConfigurationError):
            FormValidator(good_field, "email")
