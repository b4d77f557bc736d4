"""Pydantic v2 models for embedding permission rules in structured data.

Each rule is stored as its canonical permission string, so a rule set reads
naturally in JSON or YAML::

    version: "1"
    description: Billing service access
    rules:
      - "-:billing:invoices:delete"
      - "+:billing"

Only in-memory text is handled here; reading and writing files is left to
the caller.

Example
-------
>>> rule_set = RuleSet.from_yaml(yaml_text)
>>> chain = rule_set.to_chain()
>>> chain.authorize("billing:invoices:read")
True
"""
from __future__ import annotations

import logging

import yaml
from pydantic import BaseModel, Field, field_serializer, field_validator

from permstring.permissions.evaluator import RuleChain
from permstring.permissions.permission import Permission, coerce_permission

logger = logging.getLogger(__name__)

_SUPPORTED_VERSIONS: frozenset[str] = frozenset(["1", "1.0"])


class RuleSet(BaseModel):
    """An ordered, serialisable list of permission rules.

    Attributes
    ----------
    version:
        Schema version of the document. One of ``"1"`` or ``"1.0"``.
    description:
        Optional human-readable summary.
    rules:
        Rules in evaluation order. Accepts canonical strings or Permission
        values; always serialised as canonical strings.
    """

    model_config = {"extra": "allow", "arbitrary_types_allowed": True}

    version: str = Field(default="1")
    description: str | None = Field(default=None)
    rules: list[Permission] = Field(default_factory=list)

    @field_validator("version", mode="before")
    @classmethod
    def validate_version(cls, value: object) -> str:
        version = str(value)
        if version not in _SUPPORTED_VERSIONS:
            raise ValueError(
                f"Unsupported rule set version {version!r}. "
                f"Supported: {sorted(_SUPPORTED_VERSIONS)}."
            )
        return version

    @field_validator("rules", mode="before")
    @classmethod
    def parse_rules(cls, value: object) -> list[Permission]:
        if not isinstance(value, list):
            raise ValueError("rules must be a list of permission strings")
        return [coerce_permission(item) for item in value]

    @field_serializer("rules")
    def serialize_rules(self, rules: list[Permission]) -> list[str]:
        return [rule.to_string() for rule in rules]

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def to_chain(self) -> RuleChain:
        """Build a RuleChain preserving rule order."""
        logger.debug("Building rule chain with %d rules", len(self.rules))
        return RuleChain(self.rules)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, object]:
        """Serialise to a plain Python dict (JSON-compatible)."""
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> RuleSet:
        return cls.model_validate(data)

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_json(cls, json_str: str | bytes) -> RuleSet:
        return cls.model_validate_json(json_str)

    def to_yaml(self) -> str:
        """Serialise to a YAML string."""
        return yaml.dump(
            self.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> RuleSet:
        """Deserialise from a YAML string."""
        data: dict[str, object] = yaml.safe_load(yaml_str) or {}
        return cls.from_dict(data)
