"""Unit tests for request classification."""

import pytest

from conftest import NAMESPACE
from embedui.errors import InvalidRoutePrefixError
from embedui.resources import ResourceIndex
from embedui.router import Delegate, Redirect, Router, ServeAsset, ServeEntry, index_url


@pytest.fixture
def router(bundle) -> Router:
    return Router("custom/ui", ResourceIndex(bundle, "custom/ui"))


class TestRedirect:
    """GET on the bare prefix redirects to the entry URL."""

    @pytest.mark.parametrize("path", ["/custom/ui", "/custom/ui/", "/Custom/UI", "/CUSTOM/ui/"])
    def test_prefix_redirects(self, router, path) -> None:
        outcome = router.classify("GET", path, f"http://host{path}")

        assert isinstance(outcome, Redirect)
        assert outcome.location == f"http://host{path.rstrip('/')}/index"

    def test_query_string_kept(self, router) -> None:
        outcome = router.classify("GET", "/custom/ui/", "http://host/custom/ui/?tab=2")
        assert outcome == Redirect(location="http://host/custom/ui/index?tab=2")

    def test_non_get_is_delegated(self, router) -> None:
        assert router.classify("POST", "/custom/ui", "http://host/custom/ui") == Delegate()

    def test_longer_path_is_not_redirected(self, router) -> None:
        outcome = router.classify("GET", "/custom/uix", "http://host/custom/uix")
        assert not isinstance(outcome, Redirect)


class TestServeEntry:
    """GET under /<prefix>/index serves the entry document."""

    @pytest.mark.parametrize(
        "path", ["/custom/ui/index", "/custom/ui/index.html", "/Custom/Ui/INDEX", "/custom/ui/index/users/7"]
    )
    def test_entry_paths(self, router, path) -> None:
        assert router.classify("GET", path, f"http://host{path}") == ServeEntry(path=path)

    def test_entry_needs_leading_slash_and_prefix(self, router) -> None:
        outcome = router.classify("GET", "/elsewhere/index", "http://host/elsewhere/index")
        assert outcome == Delegate()

    def test_head_is_not_entry(self, router) -> None:
        outcome = router.classify("HEAD", "/custom/ui/index", "http://host/custom/ui/index")
        assert outcome == Delegate()


class TestServeAsset:
    """Any GET path matching a bundle resource serves it."""

    def test_asset_under_prefix(self, router) -> None:
        outcome = router.classify("GET", "/custom/ui/app.js", "http://host/custom/ui/app.js")

        assert isinstance(outcome, ServeAsset)
        assert outcome.resource.identifier == f"{NAMESPACE}.app.js"

    def test_asset_outside_prefix(self, router) -> None:
        outcome = router.classify("GET", "/assets/vendor.js", "http://host/assets/vendor.js")

        assert isinstance(outcome, ServeAsset)
        assert outcome.resource.relative_path == "assets/vendor.js"

    def test_non_get_is_delegated(self, router) -> None:
        outcome = router.classify("POST", "/custom/ui/app.js", "http://host/custom/ui/app.js")
        assert outcome == Delegate()


class TestDelegate:
    def test_unknown_path(self, router) -> None:
        assert router.classify("GET", "/other/route", "http://host/other/route") == Delegate()

    def test_unknown_asset_under_prefix(self, router) -> None:
        outcome = router.classify("GET", "/custom/ui/missing.js", "http://host/custom/ui/missing.js")
        assert outcome == Delegate()

    @pytest.mark.parametrize("path", ["/js", "/html", "/css"])
    def test_extension_named_path(self, router, path) -> None:
        assert router.classify("GET", path, f"http://host{path}") == Delegate()


class TestNamespace:
    def test_in_namespace(self, router) -> None:
        assert router.in_namespace("/custom/ui")
        assert router.in_namespace("/custom/ui/missing.js")
        assert router.in_namespace("/CUSTOM/UI/x")
        assert not router.in_namespace("/custom/uix")
        assert not router.in_namespace("/other/custom/ui")


class TestRouterConstruction:
    @pytest.mark.parametrize("prefix", ["", "/custom/ui", "custom/ui/", "custom ui"])
    def test_invalid_prefix(self, bundle, prefix) -> None:
        with pytest.raises(InvalidRoutePrefixError):
            Router(prefix, ResourceIndex(bundle, "custom/ui"))


class TestIndexUrl:
    def test_trailing_slashes_trimmed(self) -> None:
        assert index_url("http://host/custom/ui//") == "http://host/custom/ui/index"

    def test_port_and_query_kept(self) -> None:
        assert index_url("https://h:8443/custom/ui?x=1") == "https://h:8443/custom/ui/index?x=1"
