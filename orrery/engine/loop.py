"""Fixed timestep driver for the simulation tick."""
from __future__ import annotations

import time
from typing import Callable, Optional


def _noop() -> None:
    return None


class FixedTimestepLoop:
    """Runs ``update`` at a fixed rate and ``render`` once per frame.

    With ``max_updates`` set the loop stops by itself after that many updates,
    which is how the headless runner bounds a session.
    """

    def __init__(
        self,
        update: Callable[[float], None],
        render: Optional[Callable[[float], None]] = None,
        process_events: Optional[Callable[[], None]] = None,
        fixed_hz: float = 60.0,
        max_frame_time: float = 0.25,
        max_updates: Optional[int] = None,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self.update = update
        self.render = render or (lambda alpha: None)
        self.process_events = process_events or _noop
        self.fixed_dt = 1.0 / fixed_hz
        self.max_frame_time = max_frame_time
        self.max_updates = max_updates
        self.updates = 0
        self._clock = clock
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def _step(self) -> None:
        self.update(self.fixed_dt)
        self.updates += 1
        if self.max_updates is not None and self.updates >= self.max_updates:
            self._running = False

    def run_steps(self, count: int) -> None:
        """Run ``count`` updates back to back without wall-clock pacing."""

        for _ in range(max(0, count)):
            self.process_events()
            self._step()
            self.render(0.0)

    def run(self) -> None:
        self._running = True
        accumulator = 0.0
        last_time = self._clock()
        while self._running:
            now = self._clock()
            frame_time = now - last_time
            last_time = now
            if frame_time > self.max_frame_time:
                frame_time = self.max_frame_time
            accumulator += frame_time
            self.process_events()
            while self._running and accumulator >= self.fixed_dt:
                self._step()
                accumulator -= self.fixed_dt
            alpha = accumulator / self.fixed_dt if self.fixed_dt > 0 else 0.0
            self.render(alpha)


__all__ = ["FixedTimestepLoop"]
