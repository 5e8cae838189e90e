"""Tests for the context store."""

import pytest

from ctxcli.lib.errors import ContextNotFoundError, CtxError
from ctxcli.lib.model import Config, Context
from ctxcli.lib.store import ContextStore


def make_config(current: str = "dev") -> Config:
    return Config(
        current_context=current,
        contexts=[
            Context(name="dev", cluster="dev-cluster", user="dev-user", namespace="team-a"),
            Context(name="staging", cluster="stg-cluster", user="stg-user"),
            Context(name="prod", cluster="prod-cluster", user="prod-user"),
        ],
    )


class TestQueries:
    def test_list_preserves_order(self):
        store = ContextStore(make_config())
        assert [c.name for c in store.list()] == ["dev", "staging", "prod"]

    def test_exists_matches_list(self):
        store = ContextStore(make_config())
        names = {c.name for c in store.list()}
        for candidate in ["dev", "prod", "Dev", "pro", "", "missing"]:
            assert store.exists(candidate) == (candidate in names)

    def test_get(self):
        store = ContextStore(make_config())
        assert store.get("staging").cluster == "stg-cluster"

    def test_get_missing_raises(self):
        store = ContextStore(make_config())
        with pytest.raises(ContextNotFoundError) as exc:
            store.get("nope")
        assert exc.value.name == "nope"
        assert isinstance(exc.value, CtxError)

    def test_current_namespace(self):
        assert ContextStore(make_config()).current_namespace() == "team-a"

    def test_current_namespace_empty_without_current(self):
        assert ContextStore(make_config(current="")).current_namespace() == ""

    def test_current_namespace_empty_for_dangling_current(self):
        store = ContextStore(make_config(current="gone"))
        assert store.current() is None
        assert store.current_namespace() == ""


class TestSetCurrent:
    def test_switches_and_sets_namespace(self):
        store = ContextStore(make_config())
        store.set_current("prod", "payments")

        assert store.current_context == "prod"
        assert store.current().name == "prod"
        assert store.current_namespace() == "payments"

    def test_empty_namespace_clears_previous(self):
        store = ContextStore(make_config())
        store.set_current("dev")
        assert store.get("dev").namespace == ""
        assert store.current_namespace() == ""

    def test_other_contexts_untouched(self):
        store = ContextStore(make_config())
        store.set_current("prod", "x")
        assert store.get("dev").namespace == "team-a"

    def test_missing_leaves_config_unmodified(self):
        config = make_config()
        before = config.model_copy(deep=True)

        with pytest.raises(ContextNotFoundError):
            ContextStore(config).set_current("nope", "ns")

        assert config == before


class TestRemove:
    def test_removes_and_keeps_order(self):
        store = ContextStore(make_config())
        removed = store.remove("staging")

        assert removed.name == "staging"
        assert [c.name for c in store.list()] == ["dev", "prod"]
        assert not store.exists("staging")

    def test_missing_raises_and_keeps_length(self):
        store = ContextStore(make_config())
        with pytest.raises(ContextNotFoundError):
            store.remove("nope")
        assert len(store.list()) == 3

    def test_removes_only_first_duplicate(self):
        config = Config(
            contexts=[
                Context(name="a", cluster="first"),
                Context(name="b"),
                Context(name="a", cluster="second"),
            ]
        )
        store = ContextStore(config)
        store.remove("a")
        assert [(c.name, c.cluster) for c in store.list()] == [("b", ""), ("a", "second")]

    def test_remove_active_is_unconditional(self):
        """The store does not guard the active context; callers do."""
        store = ContextStore(make_config())
        store.remove("dev")

        assert not store.exists("dev")
        assert store.current_context == "dev"
        assert store.current() is None
