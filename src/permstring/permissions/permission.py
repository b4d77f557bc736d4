"""Permission value type and its colon-delimited text codec.

A permission is a sign (allow or deny) plus an ordered path of namespace
segments. Its canonical text form is the sign marker followed by the
segments, all joined with ``:``::

    +:billing:invoices:read
    -:billing:*

When parsing, a leading sign token is optional and defaults to allow. Only
a first token that is *exactly* ``+`` or ``-`` counts as a sign; ``+billing``
is an ordinary segment.

Example
-------
::

    perm = Permission.parse("billing:invoices")
    assert perm.allow is True
    assert perm.segments == ("billing", "invoices")
    assert str(perm) == "+:billing:invoices"
"""
from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass

SEPARATOR: str = ":"
WILDCARD: str = "*"
ALLOW_MARKER: str = "+"
DENY_MARKER: str = "-"

_SIGN_MARKERS: dict[str, bool] = {ALLOW_MARKER: True, DENY_MARKER: False}


class InvalidSyntaxError(ValueError):
    """Raised when text cannot be decoded into a valid Permission.

    Attributes
    ----------
    text:
        The offending input, if it was text.
    """

    def __init__(self, message: str, text: object = None) -> None:
        self.text = text
        super().__init__(f"permission: invalid syntax: {message}")


# ---------------------------------------------------------------------------
# Permission
# ---------------------------------------------------------------------------


@dataclass(frozen=True, eq=False)
class Permission:
    """Immutable allow/deny permission over a namespace path.

    Two permissions are equal when their canonical forms are equal.

    Attributes
    ----------
    allow:
        ``True`` for an allow (``+``) permission, ``False`` for deny (``-``).
    segments:
        The namespace path. Lists are normalised to tuples. ``*`` is the
        wildcard segment.
    """

    allow: bool
    segments: tuple[str, ...]

    def __post_init__(self) -> None:
        if isinstance(self.segments, str):
            raise InvalidSyntaxError(
                "segments must be a sequence of strings, not a string",
                self.segments,
            )
        segments = tuple(self.segments)
        _validate_segments(segments, text=None)
        object.__setattr__(self, "segments", segments)
        if not isinstance(self.allow, bool):
            raise InvalidSyntaxError(
                f"allow must be a bool, got {type(self.allow).__name__}",
                self.allow,
            )

    @classmethod
    def parse(cls, text: str) -> Permission:
        """Decode *text* into a Permission.

        Raises
        ------
        InvalidSyntaxError
            If *text* is not a string, or any segment left after the sign
            token is stripped is empty.
        """
        if not isinstance(text, str):
            raise InvalidSyntaxError(
                f"expected a string, got {type(text).__name__}", text
            )

        tokens = text.split(SEPARATOR)
        allow = True
        if tokens[0] in _SIGN_MARKERS:
            allow = _SIGN_MARKERS[tokens[0]]
            tokens = tokens[1:]

        _validate_segments(tokens, text=text)
        return cls(allow=allow, segments=tuple(tokens))

    @classmethod
    def from_json(cls, data: str | bytes) -> Permission:
        """Decode a JSON string literal such as ``'"+:a:b"'``."""
        if not isinstance(data, (str, bytes)):
            raise InvalidSyntaxError(
                f"expected str or bytes, got {type(data).__name__}", data
            )
        try:
            value = json.loads(data)
        except json.JSONDecodeError as exc:
            raise InvalidSyntaxError(f"malformed JSON: {exc.msg}", data) from exc
        except UnicodeDecodeError as exc:
            raise InvalidSyntaxError(f"undecodable bytes: {exc.reason}", data) from exc
        if not isinstance(value, str):
            raise InvalidSyntaxError(
                f"JSON value must be a string, got {type(value).__name__}", data
            )
        return cls.parse(value)

    def to_json(self) -> str:
        """Encode the canonical form as a JSON string literal."""
        return json.dumps(self.to_string())

    def to_string(self) -> str:
        marker = ALLOW_MARKER if self.allow else DENY_MARKER
        return marker + SEPARATOR + SEPARATOR.join(self.segments)

    # ------------------------------------------------------------------
    # Path helpers
    # ------------------------------------------------------------------

    @property
    def depth(self) -> int:
        """Number of segments in the path."""
        return len(self.segments)

    @property
    def is_wildcard(self) -> bool:
        """Return True if any segment is the wildcard."""
        return WILDCARD in self.segments

    def negate(self) -> Permission:
        """Return the same path with the opposite sign."""
        return Permission(allow=not self.allow, segments=self.segments)

    def matches(self, target: Permission) -> bool:
        """Return True if this permission, used as a pattern, covers *target*."""
        from permstring.permissions.matcher import matches

        return matches(self, target)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Permission({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __hash__(self) -> int:
        return hash(self.to_string())


def _validate_segments(segments: Sequence[str], text: object) -> None:
    if not segments:
        raise InvalidSyntaxError("permission has no segments", text)
    for index, segment in enumerate(segments):
        if not isinstance(segment, str):
            raise InvalidSyntaxError(
                f"segment {index} must be a string, got {type(segment).__name__}",
                text,
            )
        if segment == "":
            raise InvalidSyntaxError(f"segment {index} is empty", text)


# ---------------------------------------------------------------------------
# Module-level codec API
# ---------------------------------------------------------------------------


def parse_permission(text: str) -> Permission:
    """Decode *text* into a Permission. See :meth:`Permission.parse`."""
    return Permission.parse(text)


def format_permission(permission: Permission) -> str:
    """Return the canonical ``sign:seg:seg`` form of *permission*."""
    return permission.to_string()


def coerce_permission(value: Permission | str) -> Permission:
    """Return *value* unchanged if it is a Permission, else parse it."""
    if isinstance(value, Permission):
        return value
    return Permission.parse(value)
