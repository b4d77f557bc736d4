"""Test that the top-level permstring API works."""
from __future__ import annotations


def test_version_exposed() -> None:
    import permstring

    assert permstring.__version__ == "0.1.0"


def test_quickstart_authorize() -> None:
    from permstring import authorize, parse_permission

    rules = [parse_permission("-:billing:invoices:delete"), parse_permission("+:billing")]
    assert authorize(rules, parse_permission("billing:invoices:read")) is True
    assert authorize(rules, parse_permission("billing:invoices:delete")) is False


def test_quickstart_rule_chain() -> None:
    from permstring import RuleChain

    chain = RuleChain.from_strings(["+:billing:*"])
    assert chain.authorize("billing:invoices") is True
    assert chain.authorize("reports") is False


def test_quickstart_round_trip() -> None:
    from permstring import Permission, format_permission, parse_permission

    perm = Permission(allow=False, segments=["a", "*"])
    assert parse_permission(format_permission(perm)) == perm


def test_quickstart_rule_set() -> None:
    from permstring import RuleSet

    rule_set = RuleSet.from_dict({"rules": ["+:a"]})
    assert rule_set.to_chain().authorize("a:b") is True


def test_public_names_exported() -> None:
    import permstring

    for name in permstring.__all__:
        assert hasattr(permstring, name), name
