"""Registry mapping derived-field names to their derivers."""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping

from . import dutyholder, duty_type, key_field, plan, slug, tech_rules, title, url

Deriver = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class DerivedField:
    name: str
    deriver: Deriver
    description: str


FIELD_REGISTRY: Dict[str, DerivedField] = {}


def register_field(name: str, deriver: Deriver, description: str) -> DerivedField:
    """Register ``deriver`` under ``name``; names must be unique."""
    if name in FIELD_REGISTRY:
        raise ValueError(f"Derived field {name!r} is already registered.")
    field = DerivedField(name, deriver, description)
    FIELD_REGISTRY[name] = field
    return field


def get_field(name: str) -> DerivedField:
    try:
        return FIELD_REGISTRY[name]
    except KeyError as exc:
        available = ", ".join(sorted(FIELD_REGISTRY))
        raise KeyError(f"No derived field named {name!r}. Available: {available}") from exc


def derive_field(name: str, record: Mapping[str, Any]) -> str:
    """Run the deriver registered under ``name`` on one record."""
    return get_field(name).deriver(record)


def list_fields() -> Iterable[DerivedField]:
    return FIELD_REGISTRY.values()


register_field("dutyholder", dutyholder.dutyholders, "UK duty holders named in Text")
register_field("baseline_dutyholder", dutyholder.baseline_dutyholders, "Duty holders in pasted baseline text")
register_field("rus_dutyholder", dutyholder.rus_dutyholders, "Duty holders in the English text of a Russian provision")
register_field("duty_type", duty_type.duty_types, "Duty types of a provision")
register_field("popimar", duty_type.popimar, "POPIMAR categories of a provision")
register_field("uk_key", key_field.uk_key, "Key of a UK law record")
register_field("de_key", key_field.de_key, "Key of a German law record")
register_field("url", url.build_url, "Publisher URL of a German regulation")
register_field("title_url", slug.url_title, "URL title slug of a DGUV publication")
register_field("tech_rule", tech_rules.tech_rule_reference, "Technical rule reference code from the title")
register_field("year", title.title_year, "Year from the title")
register_field("day", title.title_day, "Day of month from the title")
register_field("month", title.title_month, "Month code from the title")
register_field("date", title.title_date, "ISO date from the title")
register_field("plan", plan.classify_plan, "Subscription plan of a law record")


__all__ = [
    "FIELD_REGISTRY",
    "DerivedField",
    "register_field",
    "get_field",
    "derive_field",
    "list_fields",
]
