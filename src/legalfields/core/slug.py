"""
URL title slugs

Every ``_url`` variant has its own slug pipeline: an ordered list of
(pattern, replacement) steps applied after trimming and lower-casing.
The pipelines differ in which punctuation they strip, how they treat
hyphens and whether umlauts are transliterated, so each is written out
in full rather than shared.

Transliteration runs last, after spaces have become hyphens.
"""
import re
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple
import logging

from ..utils.records import text

logger = logging.getLogger(__name__)

TITLE_FIELD = "Title 🇩🇪"
VARIANT_FIELD = "_url"


class UrlVariant(str, Enum):
    """Publisher URL layouts selectable through ``_url``"""
    DGUV_LONG = "dguv_long"
    DGUV_SHORT = "dguv_short"
    DGUV_REGEL = "dguv_regel"
    DGUV_REGEL_LONG = "dguv_regel_long"
    DGUV_INFO = "dguv_info"
    DGUV_INFO_LONG = "dguv_info_long"
    DGUV_GRUNDSATZ = "dguv_grundsatz"
    DGUV_GRUNDSATZ_LONG = "dguv_grundsatz_long"
    DGUV_UNIQ = "dguv_uniq"
    DGUV_INFO_UNIQ = "dguv_info_uniq"
    DGUV_INFO_LONG_UNIQ = "dguv_info_long_uniq"
    DGUV_REGEL_UNIQ = "dguv_regel_uniq"
    DGUV_GRUNDSATZ_UNIQ = "dguv_grundsatz_uniq"
    DGUV_GRUNDSATZ_LONG_UNIQ = "dguv_grundsatz_long_uniq"
    BAUA = "baua"

    @classmethod
    def parse(cls, value: str) -> Optional["UrlVariant"]:
        """Variant named by ``value``, None when it is not a known variant"""
        try:
            return cls(value)
        except ValueError:
            return None


Step = Tuple["re.Pattern[str]", str]


def _steps(*pairs: Tuple[str, str]) -> Tuple[Step, ...]:
    return tuple((re.compile(pattern), repl) for pattern, repl in pairs)


# =============================================================================
# Shared step lists
# =============================================================================
# Only literally identical step lists are shared between variants.

# "- " -> " ", strip , | ( )
_PLAIN = _steps(
    (r"- ", " "),
    (r"[,|\(|\)]", ""),
    (r" ", "-"),
)

# strip , | ( ) : ;  then "[- " / " - " / "- " / " -" / "-]" -> " "
_REGEL = _steps(
    (r"[,|\(|\)|:|;]", ""),
    (r"[\[ ]- |- | -|-\]", " "),
    (r" ", "-"),
)

# as _REGEL, the leading class also takes ´ and |
_REGEL_LONG = _steps(
    (r"[,|\(|\)|:|;]", ""),
    (r"[´|\[ ]- |- | -|-\]", " "),
    (r" ", "-"),
)

# "[" "?" " &" quotes "!" "(" ")" ":" removed, then ";" on its own
_INFO = _steps(
    (r'[\[?]| &|„|"|”|!|\(|\)|:', ""),
    (r";", ""),
    (r"-/", "/"),
    (r"-, |, ", ","),
    (r"[\[,]|´| - |- | -|-\]", " "),
    (r" ", "-"),
)

# as _INFO in one strip step, which only removes ";" when followed by "]"
_INFO_LONG = _steps(
    (r'[\[?]| &|„|"|”|!|\(|\)|:|;\]', ""),
    (r"-/", "/"),
    (r"-, |, ", ","),
    (r"[\[,]|´| - |- | -|-\]", " "),
    (r" ", "-"),
)

# as _INFO_LONG, the leading class also takes § and |, then transliterate
_GRUNDSATZ = _steps(
    (r'[§|\[?]| &|„|"|”|!|\(|\)|:|;\]', ""),
    (r"-/", "/"),
    (r"-, |, ", ","),
    (r"[\[,]|´| - |- | -|-\]", " "),
    (r" ", "-"),
    (r"ä", "ae"),
    (r"ö", "oe"),
    (r"ü", "ue"),
    (r"ß", "ss"),
)

# trim and lower-case only
_AS_IS: Tuple[Step, ...] = ()


TITLE_PIPELINES: Dict[UrlVariant, Tuple[Step, ...]] = {
    UrlVariant.DGUV_LONG: _PLAIN,
    UrlVariant.DGUV_SHORT: _PLAIN,
    UrlVariant.DGUV_REGEL: _REGEL,
    UrlVariant.DGUV_REGEL_LONG: _REGEL_LONG,
    UrlVariant.DGUV_INFO: _INFO,
    UrlVariant.DGUV_INFO_LONG: _INFO_LONG,
    UrlVariant.DGUV_GRUNDSATZ: _GRUNDSATZ,
    UrlVariant.DGUV_GRUNDSATZ_LONG: _GRUNDSATZ,
    UrlVariant.DGUV_UNIQ: _AS_IS,
    UrlVariant.DGUV_INFO_UNIQ: _AS_IS,
    UrlVariant.DGUV_INFO_LONG_UNIQ: _INFO_LONG,
    UrlVariant.DGUV_REGEL_UNIQ: _AS_IS,
}

# Subject area / subject field path segments
SUBJECT_STEPS = _steps(
    (r"[-|,|\(|\)]", ""),
    (r" ", "-"),
)


def run_steps(value: str, steps: Sequence[Step]) -> str:
    """Trim, lower-case, then apply each (pattern, replacement) step in order"""
    result = value.strip().lower()
    for pattern, repl in steps:
        result = pattern.sub(repl, result)
    return result


def slugify_title(title: str, variant: UrlVariant) -> str:
    """
    Title slug for one URL variant

    Args:
        title: document title
        variant: URL variant

    Returns:
        slug, "" for variants without a title slug or a blank title

    Examples:
        >>> slugify_title('Prüfung von Leitern (Teil 1)', UrlVariant.DGUV_LONG)
        'prüfung-von-leitern-teil-1'
        >>> slugify_title('Prüfung von Leitern (Teil 1)', UrlVariant.DGUV_GRUNDSATZ)
        'pruefung-von-leitern-teil-1'
    """
    steps = TITLE_PIPELINES.get(variant)
    if steps is None or not title:
        return ""
    return run_steps(title, steps)


def slugify_subject(subject: str) -> str:
    """
    Path segment for a DGUV subject area or subject field

    Examples:
        >>> slugify_subject('Handel und Logistik')
        'handel-und-logistik'
    """
    if not subject:
        return ""
    return run_steps(subject, SUBJECT_STEPS)


def url_title(record: Mapping[str, Any]) -> str:
    """
    ``title_url`` field: title slug for the record's ``_url`` variant

    Only DGUV records carry a title slug.
    """
    if "DGUV" not in text(record, "Acronym"):
        return ""
    selector = text(record, VARIANT_FIELD)
    variant = UrlVariant.parse(selector)
    if variant is None:
        if selector:
            logger.warning(f"Unrecognised _url variant: {selector!r}")
        return ""
    return slugify_title(text(record, TITLE_FIELD), variant)
