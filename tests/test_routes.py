"""Tests for the routes module."""

from __future__ import annotations

import dataclasses

import pytest

from routegen.routes import HTTP_METHODS, Route, collect_methods, derive_routes, translate_path


class TestTranslatePath:
    """Test OpenAPI -> gin path parameter translation."""

    def test_single_param(self):
        assert translate_path("/users/{id}") == "/users/:id"

    def test_multiple_params(self):
        assert translate_path("/owners/{ownerId}/pets/{petId}") == "/owners/:ownerId/pets/:petId"

    def test_no_params(self):
        assert translate_path("/health") == "/health"

    def test_root(self):
        assert translate_path("/") == "/"

    def test_empty_segments_preserved(self):
        assert translate_path("//a//{b}/") == "//a//:b/"

    def test_empty_param_name(self):
        """A bare {} becomes ':' rather than being rejected."""
        assert translate_path("/files/{}") == "/files/:"

    def test_partial_brace_segments_untouched(self):
        assert translate_path("/a/{b/c}") == "/a/{b/c}"
        assert translate_path("/a/{b}c") == "/a/{b}c"
        assert translate_path("/a/x{b}") == "/a/x{b}"
        assert translate_path("/a/{") == "/a/{"
        assert translate_path("/a/}") == "/a/}"

    def test_param_with_dots_kept_verbatim(self):
        assert translate_path("/files/{file.name}") == "/files/:file.name"


class TestCollectMethods:
    """Test HTTP method recognition on a path item."""

    def test_all_methods_canonical_order(self):
        item = {m: {} for m in reversed(HTTP_METHODS)}
        assert collect_methods(item) == (
            "GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS", "TRACE",
        )

    def test_case_insensitive(self):
        for key in ("get", "Get", "GET", "gEt"):
            assert collect_methods({key: {}}) == ("GET",)

    def test_mixed_case_duplicates_collapse(self):
        assert collect_methods({"get": {}, "GET": {}, "Get": {}}) == ("GET",)

    def test_path_level_fields_ignored(self):
        item = {
            "summary": "x",
            "description": "y",
            "parameters": [],
            "servers": [],
            "$ref": "#/x",
            "x-internal": True,
            "post": {},
        }
        assert collect_methods(item) == ("POST",)

    def test_no_methods(self):
        assert collect_methods({"parameters": []}) == ()

    def test_operation_body_ignored(self):
        assert collect_methods({"get": None, "put": "anything"}) == ("GET", "PUT")


class TestDeriveRoutes:
    """Test route list derivation."""

    def test_pets(self, pets_spec):
        routes = derive_routes(pets_spec["paths"])
        assert routes == [
            Route(path="/health", gin_path="/health", methods=("GET",)),
            Route(path="/pets/{petId}", gin_path="/pets/:petId", methods=("GET", "POST")),
        ]

    def test_paths_sorted(self):
        paths = {"/b": {"get": {}}, "/a/{id}": {"get": {}}, "/a": {"get": {}}}
        assert [r.path for r in derive_routes(paths)] == ["/a", "/a/{id}", "/b"]

    def test_unrecognized_only_dropped(self):
        paths = {"/a": {"parameters": []}, "/b": {"get": {}}}
        assert [r.path for r in derive_routes(paths)] == ["/b"]

    def test_empty_path_item_dropped(self):
        assert derive_routes({"/a": {}}) == []

    def test_empty_paths(self):
        assert derive_routes({}) == []

    def test_every_route_has_methods(self):
        paths = {
            "/a": {"get": {}},
            "/b": {"summary": "nothing"},
            "/c": {"TRACE": {}, "parameters": []},
            "/d": {},
        }
        routes = derive_routes(paths)
        assert routes
        for route in routes:
            assert route.methods

    def test_deterministic(self):
        paths = {"/z": {"put": {}, "get": {}}, "/y/{a}": {"delete": {}}}
        reordered = {"/y/{a}": {"delete": {}}, "/z": {"get": {}, "put": {}}}
        assert derive_routes(paths) == derive_routes(reordered)

    def test_route_is_immutable(self):
        route = derive_routes({"/a": {"get": {}}})[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            route.path = "/b"
