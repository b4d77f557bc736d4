"""Permission strings: codec, wildcard matcher and rule evaluator.

Example
-------
::

    from permstring.permissions import Permission, authorize

    rules = [Permission.parse("-:billing:invoices:delete"), Permission.parse("+:billing")]
    assert authorize(rules, Permission.parse("billing:invoices:read"))
"""
from __future__ import annotations

from permstring.permissions.evaluator import (
    AuthorizationResult,
    RuleChain,
    authorize,
    has_permission,
)
from permstring.permissions.matcher import covers, matches
from permstring.permissions.permission import (
    WILDCARD,
    InvalidSyntaxError,
    Permission,
    coerce_permission,
    format_permission,
    parse_permission,
)
from permstring.permissions.schema import RuleSet

__all__ = [
    # Core types
    "InvalidSyntaxError",
    "Permission",
    "WILDCARD",
    # Codec
    "coerce_permission",
    "format_permission",
    "parse_permission",
    # Matching
    "covers",
    "matches",
    # Evaluation
    "AuthorizationResult",
    "RuleChain",
    "authorize",
    "has_permission",
    # Structured data
    "RuleSet",
]
