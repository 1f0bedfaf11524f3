"""
Ordered classification rules
────────────────────────────────────────
The speech and non-verbal analyzers both classify a handful of metrics into
one categorical verdict plus a list of insights. Their rules are written as
data instead of nested conditionals:

  RuleGroup ──▶ an if / elif chain: the first matching Rule fires, the rest
                of the group is skipped.
  Rule      ──▶ predicate + insight text + optional verdict.

Groups are evaluated top to bottom. Every fired rule appends its insight;
a fired rule that carries a verdict overwrites the current one, so the last
verdict-setting rule to fire decides the result. Predicates over free text
match marker phrases with ``contains_any``.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

V = TypeVar("V")
Facts = Any


@dataclass(frozen=True)
class Rule(Generic[V]):
    name: str
    predicate: Callable[[Facts], bool]
    insight: str
    verdict: Optional[V] = None


@dataclass(frozen=True)
class RuleGroup(Generic[V]):
    name: str
    rules: Tuple[Rule[V], ...]

    def first_match(self, facts: Facts) -> Optional[Rule[V]]:
        for rule in self.rules:
            if rule.predicate(facts):
                return rule
        return None


def evaluate_rules(
    groups: Sequence[RuleGroup[V]],
    facts: Facts,
    initial: V,
) -> Tuple[V, List[str]]:
    """Run ``groups`` against ``facts``; return (final verdict, insights in firing order)."""
    verdict = initial
    insights: List[str] = []

    for group in groups:
        rule = group.first_match(facts)
        if rule is None:
            continue
        insights.append(rule.insight)
        if rule.verdict is not None:
            verdict = rule.verdict
        logger.debug(f"Rule fired: {group.name}/{rule.name} → verdict={getattr(verdict, 'value', verdict)}")

    return verdict, insights


def contains_any(text: str, phrases: Sequence[str]) -> bool:
    """Case-insensitive substring test against a marker set."""
    lowered = text.lower()
    return any(phrase in lowered for phrase in phrases)
