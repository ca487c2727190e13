"""Unit tests for Django CasefoldMiddleware."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import Mock

import pytest
from django.http import HttpRequest, HttpResponse

from casefold_django.middleware import CasefoldMiddleware


def echo_path(request: HttpRequest) -> HttpResponse:
    """Response reporting the path the view would be resolved with."""
    response = HttpResponse(request.path_info)
    response["X-Final-Path"] = request.path_info
    return response


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter")
class TestCasefoldMiddleware:
    """Test path rewriting in the Django middleware."""

    def test_lower_mode_rewrites_path(self, request_factory, casefold_settings) -> None:
        """Test a mixed-case path is lowercased before resolution."""
        with casefold_settings({"MODE": "lower"}):
            middleware = CasefoldMiddleware(echo_path)

        request = request_factory.get("/HeLLo/World")
        response = middleware(request)

        assert response["X-Final-Path"] == "/hello/world"
        assert request.path == "/hello/world"
        assert request.META["HTTP_X_ORIGINAL_URI"] == "/HeLLo/World"
        assert request.headers["X-Original-URI"] == "/HeLLo/World"
        assert response["X-Original-URI"] == "/HeLLo/World"

    def test_unchanged_path_sets_no_header(
        self, request_factory, casefold_settings
    ) -> None:
        """Test a lowercase path produces no original-path header."""
        with casefold_settings({}):
            middleware = CasefoldMiddleware(echo_path)

        request = request_factory.get("/hello/world")
        response = middleware(request)

        assert response["X-Final-Path"] == "/hello/world"
        assert "HTTP_X_ORIGINAL_URI" not in request.META
        assert not response.has_header("X-Original-URI")

    def test_excluded_path_kept(self, request_factory, casefold_settings) -> None:
        """Test exclusion patterns keep the original casing."""
        with casefold_settings({"EXCLUDE": ["/API/*"]}):
            middleware = CasefoldMiddleware(echo_path)

        response = middleware(request_factory.get("/API/MixedCase"))

        assert response["X-Final-Path"] == "/API/MixedCase"
        assert not response.has_header("X-Original-URI")

    def test_fold_mode(self, request_factory, casefold_settings) -> None:
        """Test fold mode folds ß to ss."""
        with casefold_settings({"MODE": "fold"}):
            middleware = CasefoldMiddleware(echo_path)

        response = middleware(request_factory.get("/Straße"))

        assert response["X-Final-Path"] == "/strasse"
        assert response["X-Original-URI"] == "/Stra%C3%9Fe"

    def test_fs_mode(self, request_factory, casefold_settings, site_root: Path) -> None:
        """Test fs mode recovers the on-disk casing."""
        with casefold_settings({"MODE": "fs", "ROOT": str(site_root)}):
            middleware = CasefoldMiddleware(echo_path)

        response = middleware(request_factory.get("/scripts/myscript.bat"))

        assert response["X-Final-Path"] == "/scripts/MyScript.bat"
        assert response["X-Original-URI"] == "/scripts/myscript.bat"

    def test_fs_mode_traversal_unchanged(
        self, request_factory, casefold_settings, site_root: Path
    ) -> None:
        """Test traversal segments are left for Django to handle."""
        with casefold_settings({"MODE": "fs", "ROOT": str(site_root / "scripts")}):
            middleware = CasefoldMiddleware(echo_path)

        request = request_factory.get("/x")
        request.path_info = request.path = "/../Scripts/MyScript.bat"
        response = middleware(request)

        assert response["X-Final-Path"] == "/../Scripts/MyScript.bat"
        assert not response.has_header("X-Original-URI")

    def test_script_name_prefix_kept(self, request_factory, casefold_settings) -> None:
        """Test only path_info is rewritten when mounted below SCRIPT_NAME."""
        with casefold_settings({}):
            middleware = CasefoldMiddleware(echo_path)

        request = request_factory.get("/Hello", SCRIPT_NAME="/Mount")
        request.path = "/Mount/Hello"
        request.path_info = "/Hello"
        middleware(request)

        assert request.path_info == "/hello"
        assert request.path == "/Mount/hello"
        assert request.META["HTTP_X_ORIGINAL_URI"] == "/Mount/Hello"

    def test_query_string_preserved(self, request_factory, casefold_settings) -> None:
        """Test the query string is untouched."""
        with casefold_settings({}):
            middleware = CasefoldMiddleware(echo_path)

        request = request_factory.get("/Hello?Name=Ada")
        middleware(request)

        assert request.path == "/hello"
        assert request.GET["Name"] == "Ada"
        assert request.META["QUERY_STRING"] == "Name=Ada"

    def test_custom_header_name(self, request_factory, casefold_settings) -> None:
        """Test the configured header name is used on request and response."""
        with casefold_settings({"HEADER_NAME": "X-Was"}):
            middleware = CasefoldMiddleware(echo_path)

        request = request_factory.get("/Hello")
        response = middleware(request)

        assert request.META["HTTP_X_WAS"] == "/Hello"
        assert response["X-Was"] == "/Hello"

    def test_disabled_passes_through(self, request_factory, casefold_settings) -> None:
        """Test ENABLED=False leaves requests alone."""
        with casefold_settings({"ENABLED": False}):
            middleware = CasefoldMiddleware(echo_path)

        assert middleware(request_factory.get("/Hello"))["X-Final-Path"] == "/Hello"


@pytest.mark.tier(1)
@pytest.mark.tra("Adapter")
class TestCasefoldMiddlewareResilience:
    """Test configuration and runtime failures never break requests."""

    def test_missing_settings_passes_through(self, request_factory) -> None:
        """Test no CASEFOLD setting means no rewriting."""
        middleware = CasefoldMiddleware(echo_path)

        assert middleware.rewriter is None
        assert middleware(request_factory.get("/Hello"))["X-Final-Path"] == "/Hello"

    def test_invalid_settings_pass_through(
        self, request_factory, casefold_settings, caplog
    ) -> None:
        """Test invalid CASEFOLD values disable rewriting with a warning."""
        with casefold_settings({"EXCLUDE": [1]}):
            with caplog.at_level(logging.WARNING):
                middleware = CasefoldMiddleware(echo_path)

        assert middleware.rewriter is None
        assert middleware(request_factory.get("/Hello"))["X-Final-Path"] == "/Hello"
        assert any("Invalid CASEFOLD settings" in r.message for r in caplog.records)

    def test_unknown_mode_defaults_to_lower(
        self, request_factory, casefold_settings, caplog
    ) -> None:
        """Test an unknown MODE warns and lowercases."""
        with casefold_settings({"MODE": "upper"}):
            with caplog.at_level(logging.WARNING):
                middleware = CasefoldMiddleware(echo_path)

        assert middleware(request_factory.get("/Hello"))["X-Final-Path"] == "/hello"
        assert any("unknown casefold mode" in r.message for r in caplog.records)

    def test_fs_without_root_passes_through(
        self, request_factory, casefold_settings, caplog
    ) -> None:
        """Test fs mode without ROOT warns and never rewrites."""
        with casefold_settings({"MODE": "fs"}):
            with caplog.at_level(logging.WARNING):
                middleware = CasefoldMiddleware(echo_path)

        assert middleware(request_factory.get("/Hello"))["X-Final-Path"] == "/Hello"
        assert any("root not set" in r.message for r in caplog.records)

    def test_decision_failure_fails_open(
        self, request_factory, casefold_settings, caplog
    ) -> None:
        """Test an exception while deciding leaves the path unchanged."""
        with casefold_settings({}):
            middleware = CasefoldMiddleware(echo_path)
        middleware.rewriter = Mock(is_passthrough=False)
        middleware.rewriter.decide.side_effect = RuntimeError("boom")

        with caplog.at_level(logging.WARNING):
            response = middleware(request_factory.get("/Hello"))

        assert response["X-Final-Path"] == "/Hello"
        assert any("boom" in r.message for r in caplog.records)
