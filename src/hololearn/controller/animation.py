"""
Animation Clock
===============
Drives the simulation tick and asks views to render.

Running: every refresh advances the tick by one, emits `frame_requested` and
schedules the next refresh. Paused: the tick is frozen; entering the paused
state and every parameter change while paused emit exactly one
`frame_requested` with the frozen tick. At most one refresh is ever pending.
"""
from __future__ import annotations

from enum import Enum
import logging

from PySide6.QtCore import QObject, QTimer, Signal

from hololearn.config import FRAME_INTERVAL_MS
from hololearn.controller.state import ExperimentStore
from hololearn.model.parameters import ExperimentParameters

logger = logging.getLogger(__name__)


class ClockState(Enum):
    RUNNING = "running"
    PAUSED = "paused"


class AnimationClock(QObject):
    frame_requested = Signal(object, int)  # (ExperimentParameters, tick)
    state_changed = Signal(object)  # ClockState

    def __init__(
        self,
        store: ExperimentStore,
        interval_ms: int = FRAME_INTERVAL_MS,
        parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._tick = 0
        self._state = ClockState.RUNNING if store.parameters.is_playing else ClockState.PAUSED

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.advance)

        store.parameters_changed.connect(self.on_parameters_changed)

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def state(self) -> ClockState:
        return self._state

    @property
    def is_scheduled(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        """Begin the loop, or paint the frozen frame if starting paused."""
        if self._state is ClockState.RUNNING:
            self._schedule()
        else:
            self.frame_requested.emit(self._store.parameters, self._tick)

    def stop(self) -> None:
        """Revoke any pending refresh. Used on teardown."""
        self._timer.stop()

    def advance(self) -> None:
        """One refresh: advance, render, schedule the next."""
        if self._state is not ClockState.RUNNING:
            return
        self._tick += 1
        self.frame_requested.emit(self._store.parameters, self._tick)
        self._schedule()

    def on_parameters_changed(self, params: ExperimentParameters) -> None:
        target = ClockState.RUNNING if params.is_playing else ClockState.PAUSED
        if target is not self._state:
            logger.debug(f"Animation {self._state.value} -> {target.value} at tick {self._tick}.")
            self._state = target
            self.state_changed.emit(target)

        if self._state is ClockState.PAUSED:
            self._timer.stop()
            self.frame_requested.emit(params, self._tick)
        else:
            self._schedule()

    def _schedule(self) -> None:
        # A pending refresh already picks up the newest snapshot
        if not self._timer.isActive():
            self._timer.start()
