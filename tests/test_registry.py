"""
Tests for registry.py - derived field lookup
"""
import pytest
from legalfields.core.registry import (
    FIELD_REGISTRY,
    derive_field,
    get_field,
    list_fields,
    register_field,
)


class TestRegistry:

    def test_every_deriver_registered(self):
        names = {field.name for field in list_fields()}
        assert {
            "dutyholder", "baseline_dutyholder", "rus_dutyholder", "duty_type", "popimar",
            "uk_key", "de_key", "url", "title_url", "tech_rule",
            "year", "day", "month", "date", "plan",
        } <= names

    def test_derive_field(self):
        assert derive_field("dutyholder", {"Text": "The employer shall"}) == "Employer"

    def test_derivers_return_strings_for_empty_record(self):
        for field in list_fields():
            assert isinstance(field.deriver({}), str)

    def test_unknown_field(self):
        with pytest.raises(KeyError, match="No derived field named 'nope'"):
            get_field("nope")

    def test_duplicate_registration_rejected(self):
        before = dict(FIELD_REGISTRY)
        with pytest.raises(ValueError):
            register_field("url", lambda record: "", "duplicate")
        assert FIELD_REGISTRY == before
