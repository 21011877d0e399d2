"""
Dates from German titles

Titles of German legislation usually carry the date they were made, e.g.
"Verordnung ... vom 3. März 2021" or "Richtlinie 2009/104/EG". The year,
day and month are extracted independently of each other.
"""
import re
from typing import Any, Mapping, Tuple

from ..utils.records import text

TITLE_FIELD = "Title"

# Checked in this order: "year/" before "/year", 2000s before 1900s when bare
YEAR_PATTERNS: Tuple["re.Pattern[str]", ...] = tuple(re.compile(p) for p in (
    r"(19[7|8|9]\d)/",
    r"(20[0|1|2]\d)/",
    r"/(19[7|8|9]\d)",
    r"/(20[0|1|2]\d)",
    r"(20[0|1|2]\d)",
    r"(19[7|8|9]\d)",
))

MONTHS: Tuple[Tuple[str, str], ...] = (
    ("Januar", "01"),
    ("Februar", "02"),
    ("März", "03"),
    ("April", "04"),
    ("Mai", "05"),
    ("Juni", "06"),
    ("Juli", "07"),
    ("August", "08"),
    ("September", "09"),
    ("Oktober", "10"),
    ("November", "11"),
    ("Dezember", "12"),
)

DAY_PATTERN = re.compile(
    r"(\d\d?)\.[ ](?:" + "|".join(name for name, _ in MONTHS) + r")"
)


def extract_year(title: str) -> str:
    """
    Four-digit year of a title

    Examples:
        >>> extract_year('Richtlinie 2009/104/EG')
        '2009'
        >>> extract_year('Verordnung vom 12. Mai 1987')
        '1987'
    """
    if not title:
        return ""
    for pattern in YEAR_PATTERNS:
        match = pattern.search(title)
        if match:
            return match.group(1)
    return ""


def extract_day(title: str) -> str:
    """
    Day of month written before a German month name

    Examples:
        >>> extract_day('Gesetz vom 7. August 1996')
        '7'
    """
    if not title:
        return ""
    match = DAY_PATTERN.search(title)
    return match.group(1) if match else ""


def extract_month(title: str) -> str:
    """
    Two-digit code of the first month in calendar order named in a title

    Examples:
        >>> extract_month('Gesetz vom 7. August 1996')
        '08'
    """
    if not title:
        return ""
    for name, code in MONTHS:
        if name in title:
            return code
    return ""


def extract_date(title: str) -> str:
    """
    ISO date (YYYY-MM-DD) when year, month and day can all be found

    Examples:
        >>> extract_date('Gesetz vom 7. August 1996')
        '1996-08-07'
        >>> extract_date('Richtlinie 2009/104/EG')
        ''
    """
    year = extract_year(title)
    month = extract_month(title)
    day = extract_day(title)
    if not (year and month and day):
        return ""
    return f"{year}-{month}-{day.zfill(2)}"


def title_year(record: Mapping[str, Any]) -> str:
    return extract_year(text(record, TITLE_FIELD))


def title_day(record: Mapping[str, Any]) -> str:
    return extract_day(text(record, TITLE_FIELD))


def title_month(record: Mapping[str, Any]) -> str:
    return extract_month(text(record, TITLE_FIELD))


def title_date(record: Mapping[str, Any]) -> str:
    return extract_date(text(record, TITLE_FIELD))
