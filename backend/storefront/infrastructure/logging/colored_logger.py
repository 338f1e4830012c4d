"""Colored composition logger — ANSI-colored console logging for page composition.

Provides a CompositionLogger with color-coded output per composition stage,
making it easy to follow a page request in the terminal.

Color scheme:
    🟢 Green   — Section fetch
    🔵 Blue    — Catalog fetch
    🟡 Yellow  — Rendering
    🔴 Red     — Failed steps
    ⚪ Gray    — Timing / Stats
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    GRAY = "\033[90m"


# ── Composition Stage Definitions ────────────────────────────────────

class CompositionStage:
    """Predefined composition stages with colors and icons."""

    SECTIONS = ("SECTIONS", _Colors.GREEN, "📄")
    CATALOG = ("CATALOG", _Colors.BLUE, "🛒")
    RENDER = ("RENDER", _Colors.YELLOW, "🎨")


# ── CompositionLogger ────────────────────────────────────────────────

class CompositionLogger:
    """Color-coded logger for page composition.

    Usage:
        log = CompositionLogger("PageComposer")
        with log.timed_step(CompositionStage.SECTIONS, "Loading sections", page="home"):
            sections = await repository.list_by_page("home")
        log.detail("3 active sections")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        self._logger.info(formatted + self._details(kwargs))

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        self._logger.info(formatted + self._details(kwargs))

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        label, _, _ = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.error(formatted)

    def detail(self, message: str, **kwargs: Any) -> None:
        """Log additional detail (gray/dimmed)."""
        formatted = f"   {_Colors.GRAY}├─ {message}{_Colors.RESET}"
        self._logger.debug(formatted + self._details(kwargs))

    def region(self, kind: str, status: str, section_id: str) -> None:
        """Trace one rendered region; degraded regions are highlighted."""
        color = _Colors.GRAY if status == "rendered" else _Colors.RED
        self._logger.debug(
            f"   {color}├─ {kind} → {status}{_Colors.RESET}"
            f" {_Colors.DIM}(section={section_id}){_Colors.RESET}"
        )

    def stats(self, **kwargs: Any) -> None:
        parts = [f"{k}: {v}" for k, v in kwargs.items()]
        self._logger.info(f"   {_Colors.GRAY}📈 {' | '.join(parts)}{_Colors.RESET}")

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time; re-raises failures."""
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed:.2f}s", **kwargs)

    @staticmethod
    def _details(kwargs: dict[str, Any]) -> str:
        if not kwargs:
            return ""
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        return f" {_Colors.GRAY}({details}){_Colors.RESET}"
