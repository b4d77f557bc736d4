"""permstring: hierarchical, wildcard-capable permission strings.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import permstring
>>> permstring.__version__
'0.1.0'
>>> rules = [permstring.parse_permission("+:billing:*")]
>>> permstring.authorize(rules, "billing:invoices")
True
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Codec
# ---------------------------------------------------------------------------
from permstring.permissions.permission import (
    InvalidSyntaxError,
    Permission,
    coerce_permission,
    format_permission,
    parse_permission,
)

# ---------------------------------------------------------------------------
# Matching and evaluation
# ---------------------------------------------------------------------------
from permstring.permissions.matcher import covers, matches
from permstring.permissions.evaluator import (
    AuthorizationResult,
    RuleChain,
    authorize,
    has_permission,
)

# ---------------------------------------------------------------------------
# Structured data
# ---------------------------------------------------------------------------
from permstring.permissions.schema import RuleSet

__all__ = [
    "__version__",
    "AuthorizationResult",
    "InvalidSyntaxError",
    "Permission",
    "RuleChain",
    "RuleSet",
    "authorize",
    "coerce_permission",
    "covers",
    "format_permission",
    "has_permission",
    "matches",
    "parse_permission",
]
