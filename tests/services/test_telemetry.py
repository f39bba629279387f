"""Tests for telemetry primitives: Span, trace_span, @traced."""

from __future__ import annotations

import time

import pytest

from finset.services.result import ServiceResult
from finset.services.telemetry import (
    Span,
    _current_span,
    disable_telemetry,
    enable_telemetry,
    get_current_span,
    trace_span,
    traced,
)

# ── Span unit tests ──────────────────────────────────────────────────


class TestSpan:
    def test_duration_before_end_is_zero(self) -> None:
        span = Span(name="test")
        assert span.duration_ms == 0.0

    def test_duration_after_end(self) -> None:
        span = Span(name="test")
        time.sleep(0.005)
        span.end()
        assert span.duration_ms > 0

    def test_to_dict_minimal(self) -> None:
        span = Span(name="root")
        span.end()
        d = span.to_dict()
        assert d["name"] == "root"
        assert "duration_ms" in d
        assert "children" not in d
        assert "annotations" not in d

    def test_to_dict_with_children(self) -> None:
        root = Span(name="root")
        child = Span(name="child", parent=root)
        root.children.append(child)
        child.end()
        root.end()
        d = root.to_dict()
        assert [c["name"] for c in d["children"]] == ["child"]

    def test_annotate(self) -> None:
        span = Span(name="test")
        span.annotate("result_count", 4)
        span.end()
        assert span.to_dict()["annotations"] == {"result_count": 4}


# ── trace_span tests ─────────────────────────────────────────────────


class TestTraceSpan:
    def test_disabled_yields_none(self) -> None:
        with trace_span("test") as span:
            assert span is None

    def test_no_root_yields_none(self) -> None:
        enable_telemetry()
        with trace_span("test") as span:
            assert span is None

    def test_nested_spans(self) -> None:
        enable_telemetry()
        root = Span(name="root")
        token = _current_span.set(root)
        try:
            with trace_span("a"), trace_span("b") as inner:
                assert inner is not None
                assert get_current_span() is inner
            assert root.children[0].name == "a"
            assert root.children[0].children[0].name == "b"
            assert root.children[0].end_time is not None
        finally:
            _current_span.reset(token)

    def test_get_current_span_disabled(self) -> None:
        token = _current_span.set(Span(name="root"))
        try:
            assert get_current_span() is None
        finally:
            _current_span.reset(token)


# ── @traced decorator tests ──────────────────────────────────────────


class TestTracedDecorator:
    def test_noop_when_disabled(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            return ServiceResult(ok=True, op="test")

        assert my_func().meta is None

    def test_injects_meta_when_enabled(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            with trace_span("evaluate"):
                pass
            return ServiceResult(ok=True, op="test", meta={"existing": "data"})

        enable_telemetry()
        result = my_func()
        assert result.meta is not None
        assert result.meta["existing"] == "data"
        telemetry = result.meta["telemetry"]
        assert telemetry["name"].endswith("my_func")
        assert telemetry["children"][0]["name"] == "evaluate"

    def test_non_service_result_passthrough(self) -> None:
        @traced
        def my_func() -> str:
            return "hello"

        enable_telemetry()
        assert my_func() == "hello"

    def test_exception_resets_span(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            msg = "boom"
            raise ValueError(msg)

        enable_telemetry()
        with pytest.raises(ValueError, match="boom"):
            my_func()
        assert _current_span.get() is None

    def test_disable_after_enable(self) -> None:
        @traced
        def my_func() -> ServiceResult:
            return ServiceResult(ok=True, op="test")

        enable_telemetry()
        disable_telemetry()
        assert my_func().meta is None
