"""First-match-wins evaluation of ordered permission rules.

Rules are consulted in exactly the order the caller gives them, like a
firewall chain. The first rule whose pattern matches the target decides the
outcome with its own sign. If no rule matches, the target is denied.

Ordering is the caller's contract: a broad allow placed before a narrower
deny masks the deny, and vice versa.

Example
-------
::

    chain = RuleChain.from_strings([
        "-:billing:invoices:delete",
        "+:billing",
    ])
    assert chain.authorize("billing:invoices:read") is True
    assert chain.authorize("billing:invoices:delete") is False
    assert chain.authorize("reports") is False
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from permstring.permissions.matcher import covers, matches
from permstring.permissions.permission import (
    InvalidSyntaxError,
    Permission,
    coerce_permission,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Functional API
# ---------------------------------------------------------------------------


def authorize(
    rules: Iterable[Permission | str],
    target: Permission | str,
) -> bool:
    """Return the sign of the first rule matching *target*, else False.

    Only the matching rule's sign is consulted; the target's own sign is
    ignored. String rules and targets are parsed on the fly.

    Raises
    ------
    InvalidSyntaxError
        If a string rule reached during iteration, or a string target, is
        malformed.
    """
    target_perm = coerce_permission(target)
    for rule in rules:
        rule_perm = coerce_permission(rule)
        if matches(rule_perm, target_perm):
            return rule_perm.allow
    return False


def has_permission(rule: Permission | str, target: Permission | str) -> bool:
    """Single-rule check: both signs must allow and *rule* must match *target*.

    Unlike :func:`authorize`, the target's sign is a live condition here, so a
    deny target is never granted.
    """
    rule_perm = coerce_permission(rule)
    target_perm = coerce_permission(target)
    return rule_perm.allow and target_perm.allow and matches(rule_perm, target_perm)


# ---------------------------------------------------------------------------
# AuthorizationResult
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AuthorizationResult:
    """Immutable outcome of evaluating a target against a RuleChain.

    Attributes
    ----------
    allowed:
        Whether the target is authorized.
    target:
        The permission that was evaluated.
    reason:
        Human-readable explanation of the decision.
    matched_rule:
        The rule that decided the outcome, or ``None`` when the
        default-deny applied.
    rule_index:
        Position of ``matched_rule`` in the chain, or ``None``.
    """

    allowed: bool
    target: Permission
    reason: str
    matched_rule: Permission | None = None
    rule_index: int | None = None

    def __bool__(self) -> bool:
        return self.allowed


# ---------------------------------------------------------------------------
# RuleChain
# ---------------------------------------------------------------------------


class RuleChain:
    """An ordered list of permission rules evaluated first-match-wins.

    Rules are never re-sorted. Rules added later are consulted later.

    Parameters
    ----------
    rules:
        Rules in evaluation order, as Permission values or canonical
        strings.
    """

    def __init__(self, rules: Iterable[Permission | str] | None = None) -> None:
        self._rules: list[Permission] = [coerce_permission(r) for r in rules or []]

    @classmethod
    def from_strings(cls, raw_rules: Iterable[str]) -> RuleChain:
        """Build a chain from permission strings.

        Raises
        ------
        InvalidSyntaxError
            If an entry is malformed. The message names its index.
        """
        rules: list[Permission] = []
        for index, raw in enumerate(raw_rules):
            try:
                rules.append(Permission.parse(raw))
            except InvalidSyntaxError as exc:
                raise InvalidSyntaxError(
                    f"rule at index {index} ({raw!r}) is malformed", raw
                ) from exc
        return cls(rules)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def check(self, target: Permission | str) -> AuthorizationResult:
        """Evaluate *target* and explain which rule decided it."""
        target_perm = coerce_permission(target)

        for index, rule in enumerate(self._rules):
            if not matches(rule, target_perm):
                continue
            verdict = "ALLOW" if rule.allow else "DENY"
            logger.debug(
                "Permission %s: target=%s rule[%d]=%s",
                verdict,
                target_perm,
                index,
                rule,
            )
            return AuthorizationResult(
                allowed=rule.allow,
                target=target_perm,
                reason=f"{verdict.lower()} by rule {index} ({rule})",
                matched_rule=rule,
                rule_index=index,
            )

        logger.debug("Permission DEFAULT-DENY: target=%s", target_perm)
        return AuthorizationResult(
            allowed=False,
            target=target_perm,
            reason=f"No rule matches '{target_perm}'. Default policy: deny.",
        )

    def check_all(
        self, targets: Iterable[Permission | str]
    ) -> list[AuthorizationResult]:
        """Evaluate each target, returning results in input order."""
        return [self.check(target) for target in targets]

    def authorize(self, target: Permission | str) -> bool:
        return self.check(target).allowed

    # ------------------------------------------------------------------
    # Management
    # ------------------------------------------------------------------

    def add_rule(self, rule: Permission | str) -> None:
        """Append *rule* to the end of the chain."""
        self._rules.append(coerce_permission(rule))

    def insert_rule(self, index: int, rule: Permission | str) -> None:
        """Insert *rule* before position *index*."""
        self._rules.insert(index, coerce_permission(rule))

    @property
    def rules(self) -> tuple[Permission, ...]:
        """The rules in evaluation order."""
        return tuple(self._rules)

    @property
    def rule_count(self) -> int:
        return len(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Permission]:
        return iter(self._rules)

    def shadowed_rules(self) -> list[tuple[int, int]]:
        """Return ``(earlier, later)`` index pairs where *later* can never decide.

        A later rule is shadowed when an earlier rule covers every path it
        matches, so evaluation always stops at the earlier rule first.
        """
        shadowed: list[tuple[int, int]] = []
        for later_index, later in enumerate(self._rules):
            for earlier_index in range(later_index):
                if covers(self._rules[earlier_index], later):
                    shadowed.append((earlier_index, later_index))
                    break
        return shadowed

    def summary(self) -> dict[str, object]:
        """Return a plain dict summarising the chain."""
        allow_rules = sum(1 for rule in self._rules if rule.allow)
        return {
            "rule_count": self.rule_count,
            "allow_rules": allow_rules,
            "deny_rules": self.rule_count - allow_rules,
        }
