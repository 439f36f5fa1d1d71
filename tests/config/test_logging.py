"""Tests for shapeguard log rendering, driven by the law service's records."""

from __future__ import annotations

import json
import logging
from io import StringIO
from typing import Any

from shapeguard.config.logging import HANDLER_NAME, configure_logging
from shapeguard.services.laws import Law, run_laws


def _explode() -> bool:
    raise RuntimeError("law exploded")


def _json_lines(buffer: StringIO) -> list[dict[str, Any]]:
    return [json.loads(line) for line in buffer.getvalue().splitlines() if line.strip()]


class TestJsonRendering:
    def test_failed_law_is_structured_warning(self) -> None:
        buffer = StringIO()
        configure_logging(log_json=True, stream=buffer)

        run_laws([Law("never", "always false", lambda: False)])

        [entry] = _json_lines(buffer)
        assert entry["event"] == "Law never failed"
        assert entry["law"] == "never"
        assert entry["level"] == "warning"
        assert entry["logger"] == "shapeguard.services.laws"
        assert "timestamp" in entry

    def test_raising_law_carries_traceback(self) -> None:
        buffer = StringIO()
        configure_logging(log_json=True, stream=buffer)

        run_laws([Law("boom", "raises", _explode)])

        [entry] = _json_lines(buffer)
        assert entry["event"] == "Law boom raised"
        assert entry["law"] == "boom"
        assert "RuntimeError: law exploded" in entry["exception"]

    def test_verbose_adds_timings(self) -> None:
        buffer = StringIO()
        configure_logging(verbose=True, log_json=True, stream=buffer)

        run_laws([Law("fine", "holds", lambda: True)])

        [entry] = _json_lines(buffer)
        assert entry["event"] == "Law fine held"
        assert entry["level"] == "debug"
        assert isinstance(entry["duration_ms"], float)

    def test_passing_laws_silent_without_verbose(self) -> None:
        buffer = StringIO()
        configure_logging(log_json=True, stream=buffer)

        report = run_laws()

        assert report.ok
        assert buffer.getvalue() == ""


class TestConsoleRendering:
    def test_failed_law_rendered_with_fields(self) -> None:
        buffer = StringIO()
        configure_logging(stream=buffer)

        run_laws([Law("never", "always false", lambda: False)])

        output = buffer.getvalue()
        assert "Law never failed" in output
        assert "law=never" in output
        assert "\x1b[" not in output


class TestHandlerScope:
    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        before = root.handlers[:]
        configure_logging(stream=StringIO())
        assert root.handlers == before
        assert logging.getLogger("shapeguard").propagate is False

    def test_reconfigure_replaces_handler(self) -> None:
        first = StringIO()
        second = StringIO()
        configure_logging(log_json=True, stream=first)
        configure_logging(log_json=True, stream=second)

        run_laws([Law("never", "always false", lambda: False)])

        installed = [
            h for h in logging.getLogger("shapeguard").handlers if h.get_name() == HANDLER_NAME
        ]
        assert len(installed) == 1
        assert first.getvalue() == ""
        assert _json_lines(second)[0]["law"] == "never"

    def test_foreign_handlers_preserved(self) -> None:
        pkg = logging.getLogger("shapeguard")
        foreign = logging.NullHandler()
        pkg.addHandler(foreign)
        configure_logging(stream=StringIO())
        assert foreign in pkg.handlers
