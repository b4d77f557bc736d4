#!/usr/bin/env python3
"""Example: Rule sets in structured data

Embed a rule chain in YAML/JSON, validate it, and find rules that can
never take effect.

Usage:
    python examples/02_rule_sets.py

Requirements:
    pip install permstring
"""
from __future__ import annotations

from pydantic import ValidationError

from permstring import RuleSet

_YAML = """\
version: "1"
description: Support team access
rules:
  - "+:tickets"
  - "-:tickets:internal"
  - "+:customers:*:read"
  - "-:*"
"""


def main() -> None:
    # Step 1: Validate a rule set from YAML text
    rule_set = RuleSet.from_yaml(_YAML)
    print(f"Loaded {len(rule_set.rules)} rules: {rule_set.description}")

    # Step 2: Evaluate targets
    chain = rule_set.to_chain()
    for target in ["tickets:42", "tickets:internal:notes", "customers:7:read"]:
        print(f"  {target}: {'ALLOW' if chain.authorize(target) else 'DENY'}")

    # Step 3: Report rules masked by earlier, broader rules
    for earlier, later in chain.shadowed_rules():
        print(f"  rule {later} ({chain.rules[later]}) is shadowed by rule {earlier} ({chain.rules[earlier]})")

    # Step 4: Serialise back to JSON
    print(f"\nJSON: {rule_set.to_json()}")

    # Step 5: Malformed rules are rejected at validation time
    try:
        RuleSet.from_dict({"rules": ["tickets::42"]})
    except ValidationError as exc:
        print(f"\nRejected malformed rule set:\n{exc}")


if __name__ == "__main__":
    main()
