"""
Technical rule references

German technical rules carry their reference code in the title
("TRGS 555 - Betriebsanweisung ...", "DGUV Vorschrift 1"). The first
series acronym found in the title decides which extraction pattern runs.
"""
import re
from dataclasses import dataclass
from typing import Any, Mapping, Tuple

from ..utils.records import text

TITLE_FIELD = "Title 🇩🇪"


@dataclass(frozen=True)
class RuleSeries:
    acronym: str
    reference: "re.Pattern[str]"


def _series(acronym: str, pattern: str) -> RuleSeries:
    return RuleSeries(acronym, re.compile(pattern))


# Checked in this order
RULE_SERIES: Tuple[RuleSeries, ...] = (
    _series("AMR", r"AMR[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("ASR", r"ASR[ ]?[A-Z]?\.?[ ]?\d*\.?\d*"),
    _series("RAB", r"RAB[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("TRBS", r"TRBS[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("TRBA", r"TRBA[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("TRGS", r"TRGS[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("TRLV", r"TRLV[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("TROS", r"TROS[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("TREMF", r"TREMF[ ]?N?r?\.?[ ]?\d*\.?\d*"),
    _series("DGUV", r"DGUV[ ]?[A-Za-z]*\.?[ ]?\d*\.?\d*"),
)


def extract_reference(title: str) -> str:
    """
    Reference code of the first rule series named in a title

    Examples:
        >>> extract_reference('TRGS 555 - Betriebsanweisung')
        'TRGS 555'
        >>> extract_reference('ASR A1.3 Sicherheitskennzeichnung')
        'ASR A1.3'
        >>> extract_reference('DGUV Vorschrift 1')
        'DGUV Vorschrift 1'
        >>> extract_reference('Arbeitsschutzgesetz')
        ''
    """
    if not title:
        return ""
    for series in RULE_SERIES:
        if series.acronym in title:
            match = series.reference.search(title)
            return match.group(0) if match else ""
    return ""


def tech_rule_reference(record: Mapping[str, Any]) -> str:
    return extract_reference(text(record, TITLE_FIELD))
