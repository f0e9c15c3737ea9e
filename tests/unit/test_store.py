"""Form state store tests."""

import pytest

from dynaform.state import FormStateStore


@pytest.mark.unit
def test_set_and_get_value():
    store = FormStateStore()
    store.set_value("email", "a@b.com")
    store.set_value("terms", True)

    assert store.get_value("email") == "a@b.com"
    assert store.get_value("terms") is True
    assert len(store) == 2


@pytest.mark.unit
def test_get_value_defaults():
    store = FormStateStore()

    assert store.get_value("missing") == ""
    assert store.get_value("missing", False) is False


@pytest.mark.unit
def test_set_value_leaves_other_entries():
    store = FormStateStore()
    store.set_value("a", "1")
    store.set_value("b", "2")
    store.set_value("a", "3")

    assert dict(store.values) == {"a": "3", "b": "2"}


@pytest.mark.unit
def test_views_are_read_only():
    store = FormStateStore()
    store.set_value("a", "1")

    with pytest.raises(TypeError):
        store.values["a"] = "2"
    with pytest.raises(TypeError):
        store.errors["a"] = "bad"


@pytest.mark.unit
def test_snapshot_is_a_copy():
    store = FormStateStore()
    store.set_value("a", "1")

    snapshot = store.snapshot()
    snapshot["a"] = "changed"

    assert store.get_value("a") == "1"


@pytest.mark.unit
def test_replace_errors_discards_stale_messages():
    store = FormStateStore()
    store.replace_errors({"a": "A is required", "b": "B is required"})
    store.replace_errors({"b": "Invalid format for B field"})

    assert dict(store.errors) == {"b": "Invalid format for B field"}
    assert store.get_error("a") is None


@pytest.mark.unit
def test_clear_resets_values_and_errors():
    store = FormStateStore()
    store.set_value("a", "1")
    store.replace_errors({"a": "bad"})

    store.clear()

    assert dict(store.values) == {}
    assert dict(store.errors) == {}


@pytest.mark.unit
def test_stores_are_independent():
    first, second = FormStateStore(), FormStateStore()
    first.set_value("a", "1")

    assert second.get_value("a") == ""
