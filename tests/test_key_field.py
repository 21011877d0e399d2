"""
Tests for key_field.py - generic identifier, German and UK keys
"""
import itertools

import pytest
from legalfields.core.key_field import (
    build_identifier,
    join_locators,
    de_key,
    uk_key,
    record_type_suffix,
    region_suffix,
    UK_LOCATOR_FIELDS,
)


class TestBuildIdentifier:
    """flow prefix + populated locators"""

    @pytest.mark.parametrize("flow,expected", [
        ("", "1_5"),
        ("main", "1_5"),
        ("pre", "_1_5"),
        ("prov", "+1_5"),
        ("post", " 🗒 1_5"),
    ])
    def test_flow_prefixes(self, flow, expected):
        assert build_identifier(["1", "", "5"], flow) == expected

    def test_named_alternate_flow(self):
        assert build_identifier(["", "2"], "annex", "anlage") == " > annex_anlage_2"

    def test_named_alternate_without_locators(self):
        assert build_identifier(["", ""], "annex", "anlage") == " > annex_anlage"

    def test_all_trailing_underscores_stripped(self):
        assert build_identifier(["1__"]) == "1"

    def test_positional_keeps_blank_slots(self):
        assert build_identifier(["1", "", "5", ""], positional=True) == "1__5"

    @pytest.mark.parametrize("flow", ["", "pre", "prov", "post", "annex"])
    def test_no_stray_separators(self, flow):
        """no blank combination leaves a double or trailing underscore"""
        for combo in itertools.product(["", "7"], repeat=5):
            result = build_identifier(list(combo), flow, "anlage")
            assert "__" not in result
            assert not result.endswith("_")


class TestJoinLocators:

    def test_skips_blanks(self):
        assert join_locators(["", "1", "", "", "5"]) == "1_5"

    def test_positional(self):
        assert join_locators(["1", "", "5"], positional=True) == "1__5"


class TestDeKey:
    """German law records"""

    def test_main_flow(self):
        assert de_key({"DE": "ArbSchG", "section": "2", "article": "5"}) == "ArbSchG § 2_5"

    def test_blank_locators_skipped(self):
        assert de_key({"DE": "X", "part": "1", "para": "2"}) == "X § 1_2"

    def test_footnote(self):
        record = {"DE": "ArbSchG", "article": "5", "Article Type": "fußnote"}
        assert de_key(record) == "ArbSchG § 5_fn"

    def test_preamble_other_type(self):
        record = {"DE": "ArbSchG", "flow": "pre", "Article Type": "anlage", "article": "9"}
        assert de_key(record) == "ArbSchG _ anlage"

    def test_preamble_title(self):
        assert de_key({"DE": "ArbSchG", "flow": "pre", "Article Type": "titel"}) == "ArbSchG "

    def test_preamble_enacting_formula(self):
        record = {"DE": "ArbSchG", "flow": "pre", "Article Type": "eingangsformel"}
        assert de_key(record) == "ArbSchG __ eingangsformel"

    def test_preamble_keys_unique(self):
        keys = {
            de_key({"DE": "ArbSchG", "flow": "pre", "Article Type": article_type})
            for article_type in ("titel", "eingangsformel", "anlage")
        }
        assert len(keys) == 3

    def test_provisions(self):
        assert de_key({"DE": "X", "flow": "prov", "article": "3", "para": "1"}) == "X +3_1"

    def test_postscript(self):
        assert de_key({"DE": "X", "flow": "post", "article": "3"}) == "X  🗒 3"

    def test_named_alternate(self):
        record = {"DE": "X", "flow": "1", "Article Type": "anlage", "article": "3"}
        assert de_key(record) == "X  > 1_anlage_3"

    def test_extra_locator(self):
        assert de_key({"DE": "X", "article": "3", "____X_": "a"}) == "X § 3_a"


class TestUkKey:
    """UK law records"""

    def test_main_flow(self):
        record = {"UK": "UK_ukpga_1974_37", "Part": "1", "Section||Regulation": "5"}
        assert uk_key(record) == "UK_ukpga_1974_37_1_5"

    def test_positional_layout(self):
        record = {"UK": "UK", "Part": "1", "Section||Regulation": "5"}
        assert uk_key(record, positional=True) == "UK_1___5"

    def test_numeric_locators(self):
        record = {"UK": "L", "Part": 1.0, "Section||Regulation": 5}
        assert uk_key(record) == "L_1_5"

    def test_postscript_has_no_locators(self):
        assert uk_key({"UK": "L", "flow": "post", "Part": "1"}) == "L-"

    def test_numbered_flow(self):
        assert uk_key({"UK": "L", "flow": "2", "Section||Regulation": "5"}) == "L-2_5"

    def test_record_type_from_multi_select(self):
        record = {"UK": "L", "Section||Regulation": "5", "Record_Type": ["heading", "amendment"]}
        assert uk_key(record) == "L_5_aa"

    def test_modification(self):
        record = {
            "UK": "L",
            "Section||Regulation": "5",
            "Record_Type": "modification",
            "Amendment": "F3",
        }
        assert uk_key(record) == "L_5_am_F3"

    def test_all_suffixes(self):
        record = {
            "UK": "L",
            "Part": "1",
            "Section||Regulation": "5",
            "Record_Type": "extent",
            "Amendment": "E1",
            "Region": "England, Wales",
            "Duplicate": True,
        }
        assert uk_key(record) == "L_1_5_ae_E1_EW_dup"

    def test_duplicate_flag_false(self):
        assert uk_key({"UK": "L", "Part": "1", "Duplicate": "false"}) == "L_1"

    def test_no_stray_separators(self):
        for combo in itertools.product(["", "3"], repeat=len(UK_LOCATOR_FIELDS)):
            record = dict(zip(UK_LOCATOR_FIELDS, combo))
            record["UK"] = "L"
            result = uk_key(record)
            assert "__" not in result
            assert not result.endswith("_")


class TestRecordTypeSuffix:

    @pytest.mark.parametrize("record_type,amendment,expected", [
        ("heading, amendment", "", "_aa"),
        ("amendment, general", "F1", "_aa_F1"),
        ("amendment, textual", "F2", "_aa_F2"),
        ("heading, modification", "", "_am"),
        ("modification", "C1", "_am_C1"),
        ("heading, extent", "", "_ae"),
        ("extent", "E1", "_ae_E1"),
        ("heading, commencement", "", "_c"),
        ("commencement", "C4", "_cC4"),
        ("commencement", "", "_c_"),
        ("section", "F1", ""),
        ("", "", ""),
    ])
    def test_suffix(self, record_type, amendment, expected):
        assert record_type_suffix(record_type, amendment) == expected


class TestRegionSuffix:
    """first matching jurisdiction combination wins"""

    @pytest.mark.parametrize("region,expected", [
        ("UK", "_UK"),
        ("E+W+S+N.I.", "_UK"),
        ("England and Wales and Scotland", "_GB"),
        ("E+W+S", "_GB"),
        ("England, Wales, Northern Ireland", "_EWNI"),
        ("England, Wales", "_EW"),
        ("England and Scotland", "_ES"),
        ("England", "_E"),
        ("Wales", "_W"),
        ("Scotland", "_S"),
        ("Northern Ireland", "_NI"),
        ("", ""),
        ("France", ""),
    ])
    def test_region(self, region, expected):
        assert region_suffix(region) == expected

    @pytest.mark.parametrize("region,expected", [
        ("Wales, England", "_EW"),
        ("Scotland, England", "_ES"),
        ("Northern Ireland, Wales, England", "_EWNI"),
        ("Scotland, Wales, England", "_GB"),
        ("Northern Ireland, Scotland, Wales, England", "_UK"),
    ])
    def test_nation_order_ignored(self, region, expected):
        assert region_suffix(region) == expected

    def test_multi_select_region(self):
        record = {"UK": "UK_ukpga_1974_37", "Section||Regulation": "5", "Region": ["Wales", "England"]}
        assert uk_key(record) == "UK_ukpga_1974_37_5_EW"
