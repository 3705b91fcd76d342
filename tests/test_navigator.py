"""Tests for safe document traversal."""

from copilot_metrics.navigator import lookup, resolve_array


def test_lookup_follows_nested_keys() -> None:
    doc = {"a": {"b": {"c": 3}}}
    assert lookup(doc, "a", "b", "c") == 3


def test_lookup_without_keys_returns_node() -> None:
    doc = {"a": 1}
    assert lookup(doc) is doc


def test_lookup_missing_key_is_absent() -> None:
    assert lookup({"a": {}}, "a", "b") is None


def test_lookup_through_scalar_is_absent() -> None:
    assert lookup({"a": 5}, "a", "b") is None
    assert lookup({"a": [1, 2]}, "a", "b") is None
    assert lookup("text", "a") is None


def test_resolve_array_returns_list() -> None:
    doc = {"completions": {"editors": [{"name": "vscode"}]}}
    assert resolve_array(doc, "completions", "editors") == [{"name": "vscode"}]


def test_resolve_array_keeps_empty_list() -> None:
    assert resolve_array({"models": []}, "models") == []


def test_resolve_array_rejects_non_array_leaf() -> None:
    assert resolve_array({"models": {"name": "default"}}, "models") is None
    assert resolve_array({"models": "default"}, "models") is None
    assert resolve_array({"models": None}, "models") is None


def test_resolve_array_on_non_object_node() -> None:
    assert resolve_array(None, "models") is None
    assert resolve_array([1, 2], "models") is None
