"""Run registry and the wall-clock ticker that drives running sequencers."""
from __future__ import annotations
import asyncio
import logging
import threading
import time
import uuid
from typing import Callable, Dict, Optional, Sequence, Tuple
from brewhouse.sequencer.machine import StepSequencer
from brewhouse.sequencer.stages import StageDefinition

log = logging.getLogger(__name__)


class RunRegistry:
    """Per-session sequencer runs, all built from one shared stage table.

    Runs not looked up for ``idle_timeout_seconds`` belong to sessions that
    expired or were abandoned; ``tick_running()`` evicts them before ticking.
    """

    def __init__(
        self,
        definitions: Sequence[StageDefinition],
        idle_timeout_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.definitions: Tuple[StageDefinition, ...] = tuple(definitions)
        self.idle_timeout_seconds = idle_timeout_seconds
        self._clock = clock
        self._runs: Dict[str, StepSequencer] = {}
        self._last_seen: Dict[str, float] = {}
        self._lock = threading.Lock()

    @staticmethod
    def new_run_id() -> str:
        return str(uuid.uuid4())

    def get_or_create(self, run_id: str) -> StepSequencer:
        with self._lock:
            run = self._runs.get(run_id)
            if run is None:
                run = StepSequencer(self.definitions, run_id=run_id)
                self._runs[run_id] = run
                log.info("Created brewing run", extra={"run_id": run_id})
            self._last_seen[run_id] = self._clock()
            return run

    def get(self, run_id: str) -> Optional[StepSequencer]:
        with self._lock:
            run = self._runs.get(run_id)
            if run is not None:
                self._last_seen[run_id] = self._clock()
            return run

    def discard(self, run_id: str) -> bool:
        with self._lock:
            run = self._runs.pop(run_id, None)
            self._last_seen.pop(run_id, None)
        if run is None:
            return False
        log.info("Discarded brewing run", extra={"run_id": run_id})
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._runs)

    def evict_idle(self) -> int:
        """Drop runs idle longer than the timeout; returns how many were dropped."""
        if self.idle_timeout_seconds is None:
            return 0
        cutoff = self._clock() - self.idle_timeout_seconds
        with self._lock:
            stale = [run_id for run_id, seen in self._last_seen.items() if seen < cutoff]
            for run_id in stale:
                del self._runs[run_id]
                del self._last_seen[run_id]
        for run_id in stale:
            log.info("Evicted idle brewing run", extra={"run_id": run_id})
        return len(stale)

    def tick_running(self) -> int:
        """Tick every running sequencer once; returns how many were ticked."""
        self.evict_idle()
        with self._lock:
            runs = list(self._runs.values())
        ticked = 0
        for run in runs:
            if run.is_running:
                run.tick()
                ticked += 1
        return ticked


class SequencerTicker:
    """Fires ``registry.tick_running()`` once per wall-clock interval."""

    def __init__(self, registry: RunRegistry, interval_seconds: float):
        if interval_seconds <= 0:
            raise ValueError("Tick interval must be positive")
        self.registry = registry
        self.interval_seconds = interval_seconds
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._loop())
        log.info("Sequencer ticker started (interval=%ss)", self.interval_seconds)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        log.info("Sequencer ticker stopped")

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                self.registry.tick_running()
            except Exception:
                log.exception("Sequencer tick failed")
