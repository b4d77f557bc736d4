"""Segment-wise wildcard matching of permission paths.

A pattern is a left-anchored partial path. It covers a target when it is no
longer than the target and every pattern segment is either the wildcard
``*`` or equal to the target segment at the same position. Target segments
past the end of the pattern are not inspected, so ``billing`` covers
``billing:invoices:read``.

The sign of either permission plays no part in matching.
"""
from __future__ import annotations

from permstring.permissions.permission import WILDCARD, Permission


def matches(pattern: Permission, target: Permission) -> bool:
    """Return True if *pattern* covers the path of *target*.

    Parameters
    ----------
    pattern:
        The permission whose segments may contain wildcards.
    target:
        The concrete permission being tested.

    Returns
    -------
    bool
    """
    if len(pattern.segments) > len(target.segments):
        return False

    for pattern_segment, target_segment in zip(pattern.segments, target.segments):
        if pattern_segment == WILDCARD:
            continue
        if pattern_segment != target_segment:
            return False

    return True


def covers(broader: Permission, narrower: Permission) -> bool:
    """Return True if every path matched by *narrower* is matched by *broader*.

    Unlike :func:`matches`, a wildcard in *narrower* is only covered by a
    wildcard in *broader*.
    """
    if len(broader.segments) > len(narrower.segments):
        return False

    for broad_segment, narrow_segment in zip(broader.segments, narrower.segments):
        if broad_segment == WILDCARD:
            continue
        if narrow_segment == WILDCARD or broad_segment != narrow_segment:
            return False

    return True
