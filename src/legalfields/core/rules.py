"""
Rule tables

A rule table is an ordered tuple of (compiled pattern, label) pairs. Two
ways of reading one:

  tag()          every matching rule contributes its label, in table order
  first_match()  the first matching rule decides, the rest are ignored

Patterns are written with per-letter alternation ([Ee]mployer) rather than
re.IGNORECASE so mixed-case input behaves exactly like the host regexes.
"""
import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple
import logging

logger = logging.getLogger(__name__)

LABEL_SEPARATOR = ", "


@dataclass(frozen=True)
class Rule:
    """One (pattern, label) pair"""
    pattern: "re.Pattern[str]"
    label: str

    def matches(self, value: str) -> bool:
        return self.pattern.search(value) is not None


RuleTable = Tuple[Rule, ...]


def table(pairs: Iterable[Tuple[str, str]]) -> RuleTable:
    """
    Compile (regex, label) pairs into a rule table, keeping their order

    Examples:
        >>> rules = table([(r"[Ee]mployer", "Employer")])
        >>> rules[0].label
        'Employer'
    """
    return tuple(Rule(re.compile(pattern), label) for pattern, label in pairs)


def matching_labels(value: str, rules: Sequence[Rule]) -> List[str]:
    """Labels of every rule that matches ``value``, in table order"""
    if not value:
        return []
    return [rule.label for rule in rules if rule.matches(value)]


def tag(value: str, rules: Sequence[Rule]) -> str:
    """
    Tag a text with every matching label

    Labels are joined with ", " in table order. Repeated labels are kept;
    no trailing separator is left behind.

    Args:
        value: text to classify
        rules: rule table

    Returns:
        comma-separated labels, "" when nothing matches

    Examples:
        >>> rules = table([(r"[Ee]mployer", "Employer"), (r"[Ww]orker", "Worker")])
        >>> tag("The Employer shall ensure the Worker wears...", rules)
        'Employer, Worker'
    """
    labels = matching_labels(value, rules)
    if labels:
        logger.debug(f"Tagged {len(labels)} label(s): {labels}")
    return LABEL_SEPARATOR.join(labels)


def first_match(value: str, rules: Sequence[Rule]) -> Optional[Rule]:
    """The first rule in table order whose pattern is found in ``value``"""
    if not value:
        return None
    for rule in rules:
        if rule.matches(value):
            return rule
    return None
