"""
Publisher URLs for German regulations

DGUV publications are addressed through the ``_url`` variant: a catalogue
section, optionally the subject area and subject field, the publication
``address`` and, for most variants, the title slug. Everything else
resolves to a BAuA technical rule page or to gesetze-im-internet.de.
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping
import logging

from ..config import BAUA_BASE_URL, DGUV_BASE_URL, DGUV_QUERY, GII_BASE_URL
from ..utils.records import text
from .slug import (
    TITLE_FIELD,
    VARIANT_FIELD,
    UrlVariant,
    slugify_subject,
    slugify_title,
)

logger = logging.getLogger(__name__)

ACRONYM_FIELD = "Acronym"
ADDRESS_FIELD = "address"
NUMBER_FIELD = "Number"
SUBJECT_AREA_FIELD = "dguv_fachbereich_subject"
SUBJECT_FIELD = "dguv_sachgebiet_subject"

DGUV = "DGUV"

# DGUV catalogue sections
BY_SUBJECT = "publikationen-nach-fachbereich"
VORSCHRIFTEN = "dguv-vorschriften"
REGELN = "dguv-regeln"
INFORMATIONEN = "dguv-informationen"
GRUNDSAETZE = "dguv-grundsaetze"

_NUMBER_SEPARATORS = re.compile(r"\.| ")
_SPACE = re.compile(r"[ ]")


@dataclass(frozen=True)
class DguvTemplate:
    """Layout of one DGUV URL variant"""
    section: str
    with_subjects: bool = False
    with_title: bool = True
    with_query: bool = True


DGUV_TEMPLATES: Dict[UrlVariant, DguvTemplate] = {
    UrlVariant.DGUV_LONG: DguvTemplate(BY_SUBJECT, with_subjects=True),
    UrlVariant.DGUV_SHORT: DguvTemplate(VORSCHRIFTEN),
    UrlVariant.DGUV_REGEL: DguvTemplate(REGELN),
    UrlVariant.DGUV_REGEL_LONG: DguvTemplate(BY_SUBJECT, with_subjects=True, with_query=False),
    UrlVariant.DGUV_INFO: DguvTemplate(INFORMATIONEN, with_query=False),
    UrlVariant.DGUV_INFO_LONG: DguvTemplate(BY_SUBJECT, with_subjects=True, with_query=False),
    UrlVariant.DGUV_GRUNDSATZ: DguvTemplate(GRUNDSAETZE, with_query=False),
    UrlVariant.DGUV_GRUNDSATZ_LONG: DguvTemplate(BY_SUBJECT, with_subjects=True, with_query=False),
    UrlVariant.DGUV_UNIQ: DguvTemplate(VORSCHRIFTEN, with_title=False, with_query=False),
    UrlVariant.DGUV_INFO_UNIQ: DguvTemplate(INFORMATIONEN, with_title=False, with_query=False),
    UrlVariant.DGUV_INFO_LONG_UNIQ: DguvTemplate(
        BY_SUBJECT, with_subjects=True, with_title=False, with_query=False
    ),
    UrlVariant.DGUV_REGEL_UNIQ: DguvTemplate(REGELN, with_title=False, with_query=False),
    UrlVariant.DGUV_GRUNDSATZ_UNIQ: DguvTemplate(GRUNDSAETZE, with_title=False, with_query=False),
    UrlVariant.DGUV_GRUNDSATZ_LONG_UNIQ: DguvTemplate(
        BY_SUBJECT, with_subjects=True, with_title=False, with_query=False
    ),
}


def dguv_url(record: Mapping[str, Any], variant: UrlVariant) -> str:
    """
    DGUV publication URL for one variant

    Args:
        record: the host record
        variant: URL variant

    Returns:
        the URL, "" for variants with no DGUV layout

    Examples:
        >>> dguv_url({'address': '2910', 'Title 🇩🇪': 'Grundsätze der Prävention'},
        ...          UrlVariant.DGUV_SHORT)
        'https://publikationen.dguv.de/regelwerk/dguv-vorschriften/2910/grundsätze-der-prävention?c=13'
    """
    template = DGUV_TEMPLATES.get(variant)
    if template is None:
        return ""

    segments = [DGUV_BASE_URL, template.section]
    if template.with_subjects:
        segments.append(slugify_subject(text(record, SUBJECT_AREA_FIELD)))
        segments.append(slugify_subject(text(record, SUBJECT_FIELD)))
    segments.append(text(record, ADDRESS_FIELD))
    if template.with_title:
        segments.append(slugify_title(text(record, TITLE_FIELD), variant))

    url = "/".join(segments)
    if template.with_query:
        url += DGUV_QUERY
    return url


def baua_url(acronym: str, address: str, number: str) -> str:
    """
    BAuA technical rule page

    Without an address the page name is built from the acronym and the
    rule number, dots and spaces turned into hyphens.

    Examples:
        >>> baua_url('TRGS', '', '555')
        'https://www.baua.de/DE/Angebote/Rechtstexte-und-Technische-Regeln/Regelwerk/TRGS/TRGS-555.html'
    """
    if not address:
        address = f"{acronym}-" + _SPACE.sub("", _NUMBER_SEPARATORS.sub("-", number))
    return f"{BAUA_BASE_URL}/{acronym}/{address}.html"


def law_portal_url(acronym: str, address: str) -> str:
    """gesetze-im-internet.de page from the address, else from the acronym"""
    if address:
        return f"{GII_BASE_URL}/{address}"
    if acronym:
        return f"{GII_BASE_URL}/{acronym.lower()}"
    return ""


def build_url(record: Mapping[str, Any]) -> str:
    """
    ``url`` field of a German regulation record

    Returns:
        publisher URL, "" when the record has nothing to address it by or a
        DGUV record names an unrecognised ``_url`` variant
    """
    acronym = text(record, ACRONYM_FIELD)
    address = text(record, ADDRESS_FIELD)
    selector = text(record, VARIANT_FIELD)

    if DGUV in acronym:
        variant = UrlVariant.parse(selector)
        if variant is None:
            if selector:
                logger.warning(f"Unrecognised _url variant for {acronym!r}: {selector!r}")
            return ""
        logger.debug(f"DGUV url variant: {variant.value}")
        return dguv_url(record, variant)

    if selector == UrlVariant.BAUA.value:
        return baua_url(acronym, address, text(record, NUMBER_FIELD))

    return law_portal_url(acronym, address)
