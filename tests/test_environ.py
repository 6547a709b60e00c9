"""
Tests for applying a store to an environment mapping.
"""

import os

from envctx.core.environ import apply_to_environ
from envctx.core.store import ContextStore


def _store(*pairs):
    store = ContextStore()
    for key, value in pairs:
        store.append(key, value)
    return store


class TestApplyToEnviron:
    """Tests for apply_to_environ()."""

    def test_writes_missing_keys(self):
        env = {}
        written = apply_to_environ(_store(("A", "1"), ("B", "2")), env)
        assert env == {"A": "1", "B": "2"}
        assert written == ["A", "B"]

    def test_existing_variables_win_by_default(self):
        env = {"A": "from-env"}
        written = apply_to_environ(_store(("A", "1"), ("B", "2")), env)
        assert env == {"A": "from-env", "B": "2"}
        assert written == ["B"]

    def test_override(self):
        env = {"A": "from-env"}
        apply_to_environ(_store(("A", "1")), env, override=True)
        assert env["A"] == "1"

    def test_first_definition_applied(self):
        env = {}
        apply_to_environ(_store(("A", "first"), ("A", "second")), env, override=True)
        assert env["A"] == "first"

    def test_defaults_to_os_environ(self, monkeypatch):
        monkeypatch.delenv("ENVCTX_TEST_VAR", raising=False)
        apply_to_environ(_store(("ENVCTX_TEST_VAR", "yes")))
        try:
            assert os.environ["ENVCTX_TEST_VAR"] == "yes"
        finally:
            del os.environ["ENVCTX_TEST_VAR"]
