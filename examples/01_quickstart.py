#!/usr/bin/env python3
"""Example: Quickstart for permstring

Parse permission strings, test wildcard coverage, and evaluate an ordered
rule chain.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install permstring
"""
from __future__ import annotations

import permstring as ps


def main() -> None:
    print(f"permstring version: {ps.__version__}")

    # Step 1: Parse permissions (the sign defaults to allow)
    pattern = ps.parse_permission("billing:*:read")
    print(f"Parsed pattern: {pattern}")

    # Step 2: Test path coverage
    for text in ["billing:invoices:read", "billing:invoices:write", "billing"]:
        target = ps.parse_permission(text)
        print(f"  {pattern} covers {target}? {ps.matches(pattern, target)}")

    # Step 3: Evaluate an ordered rule chain (first match wins, default deny)
    chain = ps.RuleChain.from_strings(
        [
            "-:billing:invoices:delete",
            "+:billing",
            "+:reports:*:read",
        ]
    )
    print(f"\nRule chain ready: {chain.rule_count} rules")
    for text in [
        "billing:invoices:read",
        "billing:invoices:delete",
        "reports:q3:read",
        "admin:users",
    ]:
        result = chain.check(text)
        icon = "ALLOW" if result.allowed else "DENY"
        print(f"  [{icon}] {text}: {result.reason}")


if __name__ == "__main__":
    main()
