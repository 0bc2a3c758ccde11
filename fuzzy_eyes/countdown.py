"""The break countdown: one-second ticks from the configured duration to zero."""
from __future__ import annotations
import enum
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

TICK_MS = 1000


class CountdownState(enum.Enum):
    INACTIVE = "inactive"
    RUNNING = "running"
    COMPLETED = "completed"


class CountdownSession:
    """Runs the user-facing countdown once per activation.

    ``surface`` needs ``show(remaining)``, ``update(remaining)`` and ``hide()``;
    ``audio`` needs ``play_completion()``. Either may be None. Failures in
    them are logged and never reach the caller.
    """

    def __init__(self, root: Any, surface: Optional[Any] = None,
                 audio: Optional[Any] = None, duration: int = 20):
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")
        self.root = root
        self.surface = surface
        self.audio = audio
        self.duration = duration
        self.state = CountdownState.INACTIVE
        self.remaining = 0
        self._on_complete: Optional[Callable[[], Any]] = None
        self._tick_id: Optional[str] = None
        self._generation = 0

    @property
    def is_running(self) -> bool:
        return self.state is CountdownState.RUNNING

    def start(self, duration: Optional[int] = None,
              on_complete: Optional[Callable[[], Any]] = None) -> bool:
        """Begin counting down. Returns False (and changes nothing) if already running."""
        if self.state is CountdownState.RUNNING:
            logger.debug("Countdown already running (%ss left), ignoring start", self.remaining)
            return False
        duration = self.duration if duration is None else duration
        if duration < 0:
            raise ValueError(f"duration must be non-negative, got {duration}")

        self.remaining = duration
        self._on_complete = on_complete
        self.state = CountdownState.RUNNING
        logger.info("Countdown started: %ss", duration)
        self._call(self.surface, "show", self.remaining)
        self._schedule_tick()
        return True

    def tick(self) -> None:
        """Advance one second. Does nothing unless running."""
        if self.state is not CountdownState.RUNNING:
            return
        if self.remaining > 0:
            self.remaining -= 1
            self._call(self.surface, "update", self.remaining)
        if self.remaining == 0:
            self._complete()

    def cancel(self) -> None:
        """Stop without the completion cue or callback."""
        if self.state is CountdownState.INACTIVE:
            return
        was_running = self.state is CountdownState.RUNNING
        self._cancel_tick()
        self.state = CountdownState.INACTIVE
        self._on_complete = None
        if was_running:
            logger.info("Countdown cancelled with %ss left", self.remaining)
            self._call(self.surface, "hide")

    def reset(self) -> None:
        """Mark a completed countdown as handled."""
        if self.state is CountdownState.COMPLETED:
            self.state = CountdownState.INACTIVE

    # ── internals ──
    def _schedule_tick(self) -> None:
        gen = self._generation
        self._tick_id = self.root.after(TICK_MS, self._on_tick, gen)

    def _cancel_tick(self) -> None:
        self._generation += 1
        if self._tick_id is not None:
            self.root.after_cancel(self._tick_id)
            self._tick_id = None

    def _on_tick(self, gen: int) -> None:
        if gen != self._generation:
            return
        self._tick_id = None
        self.tick()
        if self.state is CountdownState.RUNNING:
            self._schedule_tick()

    def _complete(self) -> None:
        self._cancel_tick()
        self.state = CountdownState.COMPLETED
        logger.info("Countdown complete")
        self._call(self.audio, "play_completion")
        self._call(self.surface, "hide")
        cb, self._on_complete = self._on_complete, None
        if cb is not None:
            try:
                cb()
            except Exception:
                logger.exception("Error in countdown completion callback")

    @staticmethod
    def _call(target: Optional[Any], method: str, *args) -> None:
        if target is None:
            return
        try:
            getattr(target, method)(*args)
        except Exception:
            logger.exception("%s.%s failed", type(target).__name__, method)
