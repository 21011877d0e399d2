"""
Key field builders

A key identifies one provision record inside a law: the law's own id, a
marker for which flow of text the record sits in (main body, preamble,
provisions, postscript, numbered alternates) and the populated locators
(part, chapter, section, ...).

  build_identifier()  generic flow prefix + locators
  de_key()            German law records
  uk_key()            UK law records, with record type, region and
                      duplicate suffixes
"""
from typing import Any, Dict, Mapping, Sequence
import logging

from ..config import DUPLICATE_SUFFIX
from ..utils.patterns import NUMBERED_FLOW, strip_trailing_underscores
from ..utils.records import flag, text
from .rules import first_match, table

logger = logging.getLogger(__name__)

SEPARATOR = "_"

MAIN = "main"
PRE = "pre"
PROV = "prov"
POST = "post"

FLOW_PREFIXES: Dict[str, str] = {
    MAIN: "",
    PRE: "_",
    PROV: "+",
    POST: " 🗒 ",
}


# =============================================================================
# Generic builder
# =============================================================================

def join_locators(locators: Sequence[str], positional: bool = False) -> str:
    """
    Join locators with "_"

    Blank locators are skipped unless ``positional`` is set, in which case
    every slot is kept so keys line up by position.

    Examples:
        >>> join_locators(['1', '', '5'])
        '1_5'
        >>> join_locators(['1', '', '5'], positional=True)
        '1__5'
    """
    if positional:
        return SEPARATOR.join(locators)
    return SEPARATOR.join(loc for loc in locators if loc)


def build_identifier(
    locators: Sequence[str],
    flow: str = "",
    article_type: str = "",
    prefixes: Mapping[str, str] = FLOW_PREFIXES,
    positional: bool = False,
) -> str:
    """
    Flow prefix followed by the populated locators

    A blank flow is the main flow. A flow that has no entry in ``prefixes``
    is a named alternate and renders as " > <flow>_<article type>".
    Trailing underscores are always stripped.

    Args:
        locators: locator values, outermost first
        flow: flow discriminator
        article_type: article type, only used for named alternates
        prefixes: prefix per known flow
        positional: keep blank locator slots

    Returns:
        identifier fragment

    Examples:
        >>> build_identifier(['1', '', '5'], 'prov')
        '+1_5'
        >>> build_identifier(['2'], 'annex', 'anlage')
        ' > annex_anlage_2'
    """
    flow_key = flow or MAIN
    body = join_locators(locators, positional)

    if flow_key in prefixes:
        head = prefixes[flow_key]
    else:
        head = f" > {flow}_{article_type}"
        if body:
            head += SEPARATOR

    return strip_trailing_underscores(head + body)


# =============================================================================
# German records
# =============================================================================

DE_LAW_FIELD = "DE"
DE_FLOW_FIELD = "flow"
DE_ARTICLE_TYPE_FIELD = "Article Type"
DE_LOCATOR_FIELDS = (
    "part",
    "chapter",
    "section",
    "sub_section",
    "article",
    "para",
    "sub",
    "____X_",
)

DE_FLOW_PREFIXES: Dict[str, str] = {
    MAIN: "§ ",
    PROV: "+",
    POST: " 🗒 ",
}

DE_TITLE = "titel"
DE_ENACTING_FORMULA = "eingangsformel"
DE_FOOTNOTE = "fußnote"
DE_FOOTNOTE_MARK = "fn"


def _de_preamble(article_type: str) -> str:
    # title row sorts first, enacting formula next, everything else after
    if article_type == DE_TITLE:
        return ""
    if article_type == DE_ENACTING_FORMULA:
        return f"__ {article_type}"
    return f"_ {article_type}"


def de_key(record: Mapping[str, Any]) -> str:
    """
    Key of a German law record

    "<law> " then the flow part: the preamble shows only its article type,
    the main body opens with "§ " and marks footnotes with "fn".

    Examples:
        >>> de_key({'DE': 'ArbSchG', 'section': '2', 'article': '5'})
        'ArbSchG § 2_5'
    """
    flow = text(record, DE_FLOW_FIELD)
    article_type = text(record, DE_ARTICLE_TYPE_FIELD)
    locators = [text(record, f) for f in DE_LOCATOR_FIELDS]

    if flow == PRE:
        tail = _de_preamble(article_type)
    else:
        if (flow or MAIN) == MAIN and DE_FOOTNOTE in article_type:
            locators.append(DE_FOOTNOTE_MARK)
        tail = build_identifier(locators, flow, article_type, DE_FLOW_PREFIXES)

    return strip_trailing_underscores(f"{text(record, DE_LAW_FIELD)} {tail}")


# =============================================================================
# UK records
# =============================================================================

UK_LAW_FIELD = "UK"
UK_FLOW_FIELD = "flow"
UK_RECORD_TYPE_FIELD = "Record_Type"
UK_AMENDMENT_FIELD = "Amendment"
UK_REGION_FIELD = "Region"
UK_DUPLICATE_FIELD = "Duplicate"
UK_LOCATOR_FIELDS = (
    "Part",
    "Chapter",
    "Heading",
    "Section||Regulation",
    "Sub_Section||Sub_Regulation",
    "Paragraph",
)

# Record types whose suffix carries the amendment id
UK_RECORD_TYPE_SUFFIXES: Dict[str, str] = {
    "heading, amendment": "_aa",
    "amendment, general": "_aa_{amendment}",
    "amendment, textual": "_aa_{amendment}",
    "heading, modification": "_am",
    "modification": "_am_{amendment}",
    "heading, extent": "_ae",
    "extent": "_ae_{amendment}",
    "heading, commencement": "_c",
    "commencement": "_c{amendment}",
}
UK_COMMENCEMENT = "commencement"


def _all_of(*nations: str) -> str:
    """Pattern matching a region that names every one of ``nations``"""
    return "^" + "".join(f"(?=.*{nation})" for nation in nations)

# First match wins, so wider extents come first. Nation names may appear in
# any order; the E+W style abbreviations are always written in this order.
UK_REGION_RULES = table([
    (rf"^UK$|United Kingdom|{_all_of('England', 'Wales', 'Scotland', 'Northern Ireland')}|E\+W\+S\+N\.?I\.?", "_UK"),
    (rf"{_all_of('England', 'Wales', 'Scotland')}|E\+W\+S", "_GB"),
    (rf"{_all_of('England', 'Wales', 'Northern Ireland')}|E\+W\+N\.?I\.?", "_EWNI"),
    (rf"{_all_of('England', 'Wales')}|E\+W", "_EW"),
    (rf"{_all_of('England', 'Scotland')}|E\+S", "_ES"),
    (r"England|^E$", "_E"),
    (r"Wales|^W$", "_W"),
    (r"Scotland|^S$", "_S"),
    (r"Northern Ireland|^N\.?I\.?$", "_NI"),
])


def uk_flow_part(flow: str, locators: Sequence[str], positional: bool = False) -> str:
    """
    Flow marker and locators of a UK key

    main -> "_" + locators, pre -> locators, post -> "-" (no locators),
    numbered alternate N -> "-N_" + locators.
    """
    body = join_locators(locators, positional)
    if body:
        body += SEPARATOR

    segments = []
    if flow == PRE:
        segments.append(body)
    if flow in ("", MAIN):
        segments.append(SEPARATOR + body)
    if flow == POST:
        segments.append("-")
    if NUMBERED_FLOW.search(flow):
        segments.append(f"-{flow}{SEPARATOR}{body}")
    return "".join(segments)


def record_type_suffix(record_type: str, amendment: str) -> str:
    """
    Suffix code for a UK record type

    Examples:
        >>> record_type_suffix('modification', 'F12')
        '_am_F12'
        >>> record_type_suffix('commencement', '')
        '_c_'
    """
    template = UK_RECORD_TYPE_SUFFIXES.get(record_type)
    if template is None:
        return ""
    if record_type == UK_COMMENCEMENT and not amendment:
        return "_c_"
    return template.format(amendment=amendment)


def region_suffix(region: str) -> str:
    """Region code of the first jurisdiction combination found in ``region``"""
    rule = first_match(region, UK_REGION_RULES)
    return rule.label if rule else ""


def uk_key(record: Mapping[str, Any], positional: bool = False) -> str:
    """
    Key of a UK law record

    <law><flow part> with trailing underscores stripped, then the record
    type suffix, the region suffix and the duplicate suffix.

    Args:
        record: the host record
        positional: keep blank locator slots (the register's legacy layout)

    Returns:
        key string

    Examples:
        >>> uk_key({'UK': 'UK_ukpga_1974_37', 'Part': '1', 'Section||Regulation': '5'})
        'UK_ukpga_1974_37_1_5'
    """
    flow = text(record, UK_FLOW_FIELD)
    locators = [text(record, f) for f in UK_LOCATOR_FIELDS]

    key = strip_trailing_underscores(
        text(record, UK_LAW_FIELD) + uk_flow_part(flow, locators, positional)
    )
    key += record_type_suffix(
        text(record, UK_RECORD_TYPE_FIELD),
        text(record, UK_AMENDMENT_FIELD),
    )
    key += region_suffix(text(record, UK_REGION_FIELD))
    if flag(record, UK_DUPLICATE_FIELD):
        key += DUPLICATE_SUFFIX

    logger.debug(f"uk_key: {key}")
    return key
