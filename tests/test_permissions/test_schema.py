"""Tests for the RuleSet structured-data model."""
from __future__ import annotations

import json
import textwrap

import pytest
from pydantic import ValidationError

from permstring.permissions.evaluator import RuleChain
from permstring.permissions.permission import InvalidSyntaxError, Permission
from permstring.permissions.schema import RuleSet


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

_VALID_DATA: dict[str, object] = {
    "version": "1",
    "description": "Billing service access",
    "rules": [
        "-:billing:invoices:delete",
        "+:billing",
    ],
}

_YAML_TEXT = textwrap.dedent(
    """\
    version: "1.0"
    description: Reports
    rules:
      - "+:reports:*:read"
      - "-:*"
    """
)


@pytest.fixture()
def rule_set() -> RuleSet:
    return RuleSet.from_dict(_VALID_DATA)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestRuleSetValidation:
    def test_rules_parsed_in_order(self, rule_set: RuleSet) -> None:
        assert rule_set.rules == [
            Permission(False, ["billing", "invoices", "delete"]),
            Permission(True, ["billing"]),
        ]

    def test_accepts_permission_values(self) -> None:
        rule_set = RuleSet(rules=[Permission.parse("-:a"), "+:b"])
        assert rule_set.rules[0].allow is False
        assert rule_set.rules[1] == Permission.parse("b")

    def test_defaults(self) -> None:
        rule_set = RuleSet()
        assert rule_set.version == "1"
        assert rule_set.description is None
        assert rule_set.rules == []

    def test_malformed_rule_raises_validation_error(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            RuleSet.from_dict({"rules": ["+:a", "a::b"]})
        cause = exc_info.value.errors()[0]["ctx"]["error"]
        assert isinstance(cause, InvalidSyntaxError)

    def test_empty_rule_string_raises(self) -> None:
        with pytest.raises(ValidationError, match="invalid syntax"):
            RuleSet.from_dict({"rules": [""]})

    def test_rules_must_be_a_list(self) -> None:
        with pytest.raises(ValidationError):
            RuleSet.from_dict({"rules": "+:a"})

    def test_unsupported_version_raises(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported"):
            RuleSet.from_dict({"version": "2", "rules": []})

    def test_numeric_version_accepted(self) -> None:
        assert RuleSet.from_dict({"version": 1, "rules": []}).version == "1"

    def test_extra_keys_allowed(self) -> None:
        rule_set = RuleSet.from_dict({"rules": [], "owner": "platform-team"})
        assert rule_set.model_extra == {"owner": "platform-team"}


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------


class TestRuleSetSerialisation:
    def test_to_dict_emits_canonical_strings(self, rule_set: RuleSet) -> None:
        data = rule_set.to_dict()
        assert data["rules"] == ["-:billing:invoices:delete", "+:billing"]

    def test_sign_defaults_normalised(self) -> None:
        data = RuleSet.from_dict({"rules": ["a:b"]}).to_dict()
        assert data["rules"] == ["+:a:b"]

    def test_json_round_trip(self, rule_set: RuleSet) -> None:
        encoded = rule_set.to_json()
        assert json.loads(encoded)["rules"][1] == "+:billing"
        assert RuleSet.from_json(encoded).rules == rule_set.rules

    def test_from_json_malformed_rule(self) -> None:
        with pytest.raises(ValidationError):
            RuleSet.from_json('{"rules": [":world"]}')

    def test_from_yaml(self) -> None:
        rule_set = RuleSet.from_yaml(_YAML_TEXT)
        assert rule_set.version == "1.0"
        assert rule_set.rules[0] == Permission(True, ["reports", "*", "read"])
        assert rule_set.rules[1] == Permission(False, ["*"])

    def test_yaml_round_trip(self, rule_set: RuleSet) -> None:
        restored = RuleSet.from_yaml(rule_set.to_yaml())
        assert restored.rules == rule_set.rules
        assert restored.description == rule_set.description

    def test_yaml_round_trip_with_wildcard(self) -> None:
        rule_set = RuleSet(rules=["-:*"])
        assert RuleSet.from_yaml(rule_set.to_yaml()).rules == rule_set.rules

    def test_empty_yaml_gives_defaults(self) -> None:
        assert RuleSet.from_yaml("").rules == []


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


class TestRuleSetToChain:
    def test_returns_rule_chain(self, rule_set: RuleSet) -> None:
        assert isinstance(rule_set.to_chain(), RuleChain)

    def test_chain_preserves_order(self, rule_set: RuleSet) -> None:
        chain = rule_set.to_chain()
        assert chain.authorize("billing:invoices:delete") is False
        assert chain.authorize("billing:invoices:read") is True
        assert chain.authorize("reports") is False

    def test_yaml_chain(self) -> None:
        chain = RuleSet.from_yaml(_YAML_TEXT).to_chain()
        assert chain.authorize("reports:q3:read") is True
        assert chain.authorize("reports:q3:write") is False
