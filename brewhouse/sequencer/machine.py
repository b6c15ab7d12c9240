"""Brewing step sequencer.

Walks a fixed, ordered table of stage definitions forward one logical minute
per ``tick``. All run state lives on the sequencer instance; the definition
table is never mutated, so ``reset`` rebuilds the run from it.
"""
from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple
from brewhouse.sequencer.stages import StageDefinition, StageState
from brewhouse.sequencer.timefmt import format_minutes

log = logging.getLogger(__name__)


class RunStatus(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


@dataclass(frozen=True)
class StageView:
    id: str
    name: str
    description: str
    duration: int
    temperature: Optional[int]
    notes: Optional[str]
    state: StageState
    elapsed: int


@dataclass(frozen=True)
class RunSnapshot:
    status: RunStatus
    stages: Tuple[StageView, ...]
    current_index: int
    elapsed: int
    total_elapsed: int
    is_running: bool
    is_finished: bool
    stage_progress: int
    overall_progress: int
    completed_count: int
    elapsed_display: str
    total_elapsed_display: str


class StepSequencer:
    def __init__(self, definitions: Sequence[StageDefinition], run_id: str = "-"):
        if not definitions:
            raise ValueError("A sequencer needs at least one stage")
        self.definitions: Tuple[StageDefinition, ...] = tuple(definitions)
        self.run_id = run_id
        self._lock = threading.RLock()
        self._reset_state()

    def _reset_state(self) -> None:
        self._states: List[StageState] = [StageState.PENDING for _ in self.definitions]
        self._index = 0
        self._elapsed = 0
        self._total_elapsed = 0
        self._running = False
        self._finished = False

    # --- Commands ---

    def start(self) -> None:
        with self._lock:
            if self._running or self._finished:
                return
            resumed = self._states[self._index] == StageState.PAUSED
            self._states[self._index] = StageState.ACTIVE
            self._running = True
            log.info("%s stage '%s'", "Resumed" if resumed else "Started",
                     self.definitions[self._index].id, extra={"run_id": self.run_id})

    def pause(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._running = False
            self._states[self._index] = StageState.PAUSED
            log.info("Paused stage '%s' at %d min", self.definitions[self._index].id, self._elapsed,
                     extra={"run_id": self.run_id})

    def reset(self) -> None:
        with self._lock:
            self._reset_state()
            log.info("Run reset", extra={"run_id": self.run_id})

    def tick(self) -> None:
        """Advance one minute, then apply the completion rule."""
        with self._lock:
            if not self._running:
                return
            self._elapsed += 1
            self._total_elapsed += 1
            self._complete_if_due()

    def _complete_if_due(self) -> None:
        stage = self.definitions[self._index]
        if self._elapsed < stage.duration:
            return

        self._states[self._index] = StageState.COMPLETED
        log.info("Completed stage '%s' after %d min", stage.id, self._elapsed,
                 extra={"run_id": self.run_id})

        if self._index + 1 < len(self.definitions):
            self._index += 1
            self._elapsed = 0
            self._states[self._index] = StageState.ACTIVE
        else:
            self._running = False
            self._finished = True
            log.info("All stages completed in %s", format_minutes(self._total_elapsed),
                     extra={"run_id": self.run_id})

    # --- Queries ---

    @property
    def current_index(self) -> int:
        return self._index

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def total_elapsed(self) -> int:
        return self._total_elapsed

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_finished(self) -> bool:
        return self._finished

    @property
    def states(self) -> Tuple[StageState, ...]:
        return tuple(self._states)

    @property
    def status(self) -> RunStatus:
        with self._lock:
            if self._finished:
                return RunStatus.FINISHED
            if self._running:
                return RunStatus.RUNNING
            if self._states[self._index] == StageState.PAUSED:
                return RunStatus.PAUSED
            return RunStatus.IDLE

    @property
    def completed_count(self) -> int:
        return sum(1 for state in self._states if state == StageState.COMPLETED)

    @property
    def stage_progress(self) -> int:
        """Current stage elapsed over planned duration, as a 0-100 percentage."""
        with self._lock:
            if self._states[self._index] == StageState.COMPLETED:
                return 100
            duration = self.definitions[self._index].duration
            if duration <= 0:
                return 0
            return min(100, self._elapsed * 100 // duration)

    @property
    def overall_progress(self) -> int:
        """Completed stages over total stages; every stage weighs the same."""
        with self._lock:
            return self.completed_count * 100 // len(self.definitions)

    def _stage_elapsed(self, index: int) -> int:
        if index == self._index:
            return self._elapsed
        if self._states[index] == StageState.COMPLETED:
            return self.definitions[index].duration
        return 0

    def snapshot(self) -> RunSnapshot:
        with self._lock:
            stages = tuple(
                StageView(
                    id=d.id,
                    name=d.name,
                    description=d.description,
                    duration=d.duration,
                    temperature=d.temperature,
                    notes=d.notes,
                    state=self._states[i],
                    elapsed=self._stage_elapsed(i),
                )
                for i, d in enumerate(self.definitions)
            )
            return RunSnapshot(
                status=self.status,
                stages=stages,
                current_index=self._index,
                elapsed=self._elapsed,
                total_elapsed=self._total_elapsed,
                is_running=self._running,
                is_finished=self._finished,
                stage_progress=self.stage_progress,
                overall_progress=self.overall_progress,
                completed_count=self.completed_count,
                elapsed_display=format_minutes(self._elapsed),
                total_elapsed_display=format_minutes(self._total_elapsed),
            )
