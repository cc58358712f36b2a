"""Tests for perch.routing.route — RouteRecord and RouteResult."""

import re

import pytest

from perch.routing.pattern import compile_pattern
from perch.routing.route import RouteRecord, RouteResult


def _record(pattern: str, methods: frozenset[str] | None = None) -> RouteRecord:
    compiled = compile_pattern(pattern, "/")
    return RouteRecord(
        path_pattern=pattern,
        methods=methods or frozenset({"GET"}),
        payload="payload",
        literal=compiled.literal,
        expression=compiled.expression,
        param_names=compiled.param_names,
        param_kinds=compiled.param_kinds,
        is_greedy=compiled.is_greedy,
    )


class TestRouteRecord:
    def test_literal_matcher(self) -> None:
        record = _record("/users")
        assert record.matcher == "/users"

    def test_expression_matcher(self) -> None:
        record = _record("/users/{#id}")
        assert isinstance(record.matcher, re.Pattern)

    def test_frozen(self) -> None:
        record = _record("/users")
        with pytest.raises(AttributeError):
            record.path_pattern = "/other"  # type: ignore[misc]

    def test_accepts(self) -> None:
        record = _record("/users", frozenset({"GET", "POST"}))
        assert record.accepts("GET")
        assert record.accepts("POST")
        assert not record.accepts("DELETE")
        assert record.has_wildcard_method is False

    def test_wildcard_accepts_any(self) -> None:
        record = _record("/users", frozenset({"*"}))
        assert record.has_wildcard_method is True
        assert record.accepts("PATCH")
        assert record.accepts("")


class TestRouteRecordMatch:
    def test_literal_case_insensitive(self) -> None:
        record = _record("/Users")
        assert record.match("/USERS", case_sensitive=False) == {}

    def test_literal_case_sensitive(self) -> None:
        record = _record("/Users")
        assert record.match("/Users", case_sensitive=True) == {}
        assert record.match("/users", case_sensitive=True) is None

    def test_expression_params(self) -> None:
        record = _record("/users/{#id}/{action}")
        assert record.match("/users/007/edit", case_sensitive=False) == {"id": 7, "action": "edit"}

    def test_expression_case(self) -> None:
        record = _record("/Users/{#id}")
        assert record.match("/users/1", case_sensitive=False) == {"id": 1}
        assert record.match("/users/1", case_sensitive=True) is None

    def test_params_preserve_case(self) -> None:
        record = _record("/users/{name}")
        assert record.match("/USERS/Alice", case_sensitive=False) == {"name": "Alice"}

    def test_greedy_spans_separators(self) -> None:
        record = _record("/files/{+path}")
        assert record.match("/files/a/b/c.txt", case_sensitive=False) == {"path": "a/b/c.txt"}

    def test_greedy_needs_one_character(self) -> None:
        record = _record("/files/{+path}")
        assert record.match("/files/", case_sensitive=False) is None

    def test_greedy_spans_newlines(self) -> None:
        record = _record("/files/{+path}")
        assert record.match("/files/a\nb", case_sensitive=False) == {"path": "a\nb"}

    def test_trailing_newline_does_not_match(self) -> None:
        record = _record("/users/{#id}")
        assert record.match("/users/1\n", case_sensitive=False) is None
        assert record.match("/users/1\n", case_sensitive=True) is None

    def test_oversized_integer_is_no_match(self) -> None:
        record = _record("/users/{#id}")
        assert record.match("/users/" + "1" * 5000, case_sensitive=False) is None

    def test_fresh_params_per_match(self) -> None:
        record = _record("/users/{#id}")
        first = record.match("/users/1", case_sensitive=False)
        assert first is not None
        first["id"] = 99
        assert record.match("/users/1", case_sensitive=False) == {"id": 1}


class TestRouteResult:
    def test_creation(self) -> None:
        record = _record("/users/{#id}")
        result = RouteResult(
            path="/users/1", method="GET", params={"id": 1}, record=record, payload="payload"
        )
        assert result.record is record
        assert result.is_default is False

    def test_frozen(self) -> None:
        result = RouteResult(path="/", method="GET", params={}, record=None, payload="x")
        with pytest.raises(AttributeError):
            result.payload = "y"  # type: ignore[misc]
