"""
Tests for merging bettermath into host namespaces.
"""

import pytest
import types
import weakref

import bettermath
from bettermath import hooks


@pytest.fixture
def namespace():
    """Fresh attribute namespace, uninstalled after the test."""
    ns = types.SimpleNamespace()
    yield ns
    hooks.uninstall(ns)


class TestExports:
    """Test the export table."""

    def test_contains_operations(self):
        table = hooks.exports()
        for name in ("mean", "is_prime", "scale", "zscore", "range", "pluck", "is_array"):
            assert name in table

    def test_contains_aliases(self):
        table = hooks.exports()
        assert table["average"] is table["mean"]
        assert table["ln"] is table["log"]
        assert table["scalemm"] is table["scale"]

    def test_functions_match_package(self):
        table = hooks.exports()
        assert table["sum"] is bettermath.sum
        assert table["wilson"] is bettermath.wilson


class TestHooksInstallation:
    """Test hooks installation."""

    def test_loading_does_not_install(self):
        """Importing bettermath leaves namespaces alone."""
        assert hooks.status()["installations"] == []

    def test_hooks_can_install(self, namespace):
        """Test manual hooks installation."""
        assert hooks.install(namespace)
        assert hooks.is_installed(namespace)
        assert namespace.mean([1, 2, 3]) == 2.0
        assert namespace.is_even([4, 501]) == [True, False]

    def test_install_idempotent(self, namespace):
        assert hooks.install(namespace)
        assert not hooks.install(namespace)

    def test_hooks_can_uninstall(self, namespace):
        """Test hooks uninstallation."""
        hooks.install(namespace)
        assert hooks.uninstall(namespace)
        assert not hooks.is_installed(namespace)
        assert not hasattr(namespace, "mean")

    def test_uninstall_without_install(self, namespace):
        assert not hooks.uninstall(namespace)

    def test_installed_namespace_kept_alive_until_uninstall(self):
        class Host:
            pass

        host = Host()
        ref = weakref.ref(host)
        hooks.install(host, names=["mean"])
        del host
        assert ref() is not None
        assert hooks.uninstall(ref())
        assert not hooks.is_installed(ref())

    def test_restores_originals(self, namespace):
        sentinel = object()
        namespace.sum = sentinel
        hooks.install(namespace)
        assert namespace.sum is bettermath.sum
        hooks.uninstall(namespace)
        assert namespace.sum is sentinel

    def test_no_overwrite_keeps_existing(self, namespace):
        sentinel = object()
        namespace.max = sentinel
        hooks.install(namespace, overwrite=False)
        assert namespace.max is sentinel
        assert namespace.min is bettermath.min
        hooks.uninstall(namespace)
        assert namespace.max is sentinel

    def test_rebound_names_left_alone(self, namespace):
        hooks.install(namespace)
        namespace.mean = "mine"
        hooks.uninstall(namespace)
        assert namespace.mean == "mine"

    def test_selected_names(self, namespace):
        hooks.install(namespace, names=["mean", "median"])
        assert namespace.median([1, 3, 5]) == 3
        assert not hasattr(namespace, "sum")

    def test_unknown_name(self, namespace):
        with pytest.raises(KeyError):
            hooks.install(namespace, names=["not_a_function"])
        assert not hooks.is_installed(namespace)

    def test_dict_target(self):
        target = {"keep": 1}
        hooks.install(target)
        try:
            assert target["factors"](12) == [2, 2, 3]
        finally:
            hooks.uninstall(target)
        assert target == {"keep": 1}

    def test_module_target(self):
        module = types.ModuleType("host_math")
        hooks.install(module, names=["sqrt"])
        try:
            assert module.sqrt(9) == 3.0
        finally:
            hooks.uninstall(module)
        assert not hasattr(module, "sqrt")

    def test_class_target(self):
        class Host:
            pass

        hooks.install(Host, names=["square"])
        try:
            assert Host.square(4) == 16
        finally:
            hooks.uninstall(Host)

    def test_hooks_disabled_by_env(self, namespace, monkeypatch):
        """Test that hooks can be disabled by environment variable."""
        monkeypatch.setenv("BETTERMATH_NO_HOOKS", "1")
        assert not hooks._is_enabled()
        assert not hooks.install(namespace)
        assert not hasattr(namespace, "mean")


class TestInspection:
    """Test status and as_namespace."""

    def test_status(self, namespace):
        hooks.install(namespace, names=["mean"])
        info = hooks.status()
        assert info["hooks_enabled"]
        assert info["exported"] == len(hooks.exports())
        assert info["installations"][0]["installed"] == ["mean"]

    def test_as_namespace(self):
        bm = hooks.as_namespace()
        assert bm.is_even([4, 501]) == [True, False]
        assert bm.sum([{"a": 1}, {"a": 2, "b": 5}, {"a": 3}], "a") == 6
        assert hooks.status()["installations"] == []
