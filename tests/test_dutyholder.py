"""
Tests for dutyholder.py - duty holder tables
"""
import pytest
from legalfields.core.dutyholder import (
    DUTYHOLDER_RULES,
    BASELINE_DUTYHOLDER_RULES,
    RUS_DUTYHOLDER_RULES,
    dutyholders,
    baseline_dutyholders,
    rus_dutyholders,
)
from legalfields.core.rules import tag


class TestRegisterDutyholders:
    """UK register table (whole words)"""

    def test_multiple_roles(self):
        text = "Every employer shall ensure that each worker, and every employee, is trained."
        assert tag(text, DUTYHOLDER_RULES) == "Employer, Employee, Worker"

    def test_plural_is_not_a_whole_word(self):
        assert tag("The employers shall", DUTYHOLDER_RULES) == ""

    def test_definition_phrasing(self):
        """“importer” in quotes and 'person who imports—'"""
        text = "“importer” means a person who imports—"
        assert tag(text, DUTYHOLDER_RULES) == "Person, Importer"

    def test_regulator_synonyms_share_label(self):
        text = "The local authority and the enforcing authority may act."
        assert tag(text, DUTYHOLDER_RULES) == "Regulator, Regulator"

    def test_secretary_of_state(self):
        assert tag("The Secretary of State may by regulations", DUTYHOLDER_RULES) == "Minister"

    def test_record_field(self):
        record = {"Text": "The occupier, and any contractor, shall"}
        assert dutyholders(record) == "Occupier, Contractor"

    def test_missing_field(self):
        assert dutyholders({}) == ""


class TestBaselineDutyholders:
    """baseline paste tool (plain substrings)"""

    def test_substring_matching(self):
        text = "The owner and the occupier must consult the Employees."
        assert tag(text, BASELINE_DUTYHOLDER_RULES) == "Owner, Occupier, Employee"

    def test_upper_case_not_matched(self):
        assert tag("THE EMPLOYER", BASELINE_DUTYHOLDER_RULES) == ""

    def test_principal_designer_also_designer(self):
        record = {"paste_text_here": "The principal designer must"}
        assert baseline_dutyholders(record) == "Principal Designer, Designer"


class TestRusDutyholders:
    """Russian register, English text"""

    @pytest.fixture
    def field(self):
        return "text_en_🏴󠁧󠁢󠁥󠁮󠁧󠁿️"

    def test_representative_is_rep(self, field):
        assert rus_dutyholders({field: "The employer and the representative"}) == "Employer, Rep"

    def test_assessor_label(self):
        assert tag("an assessor.", RUS_DUTYHOLDER_RULES) == "Assessor"

    def test_other_field_ignored(self):
        assert rus_dutyholders({"Text": "The employer"}) == ""
