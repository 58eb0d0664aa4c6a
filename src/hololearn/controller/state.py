"""
Experiment Store
================
Holds the current ExperimentParameters snapshot and tells views when it
changes.

Why is this file needed?
------------------------
1. State Management: One owner for the parameters. Controls write through the
   store, engines and views read the snapshot it publishes.
2. Decoupling: The control panel, the animation clock and the canvases never
   talk to each other directly, only through `parameters_changed`.
"""
from __future__ import annotations

from dataclasses import replace
import logging
from typing import Any

from PySide6.QtCore import QObject, Signal

from hololearn.model.parameters import ExperimentParameters, HolographyMode

logger = logging.getLogger(__name__)


class ExperimentStore(QObject):
    """Central parameter store. Every snapshot it publishes is already clamped."""
    parameters_changed = Signal(object)

    def __init__(self, initial: ExperimentParameters | None = None) -> None:
        super().__init__()
        self._parameters = (initial or ExperimentParameters()).clamped()

    @property
    def parameters(self) -> ExperimentParameters:
        return self._parameters

    def _publish(self, candidate: ExperimentParameters) -> bool:
        candidate = candidate.clamped()
        if candidate == self._parameters:
            return False
        self._parameters = candidate
        self.parameters_changed.emit(candidate)
        return True

    def update(self, **changes: Any) -> bool:
        """
        Replace some fields of the snapshot.

        Returns:
            True if the published snapshot changed.
        """
        return self._publish(replace(self._parameters, **changes))

    def set_mode(self, mode: HolographyMode) -> bool:
        mode = HolographyMode(mode)
        if mode == self._parameters.mode:
            return False
        logger.info(f"Switching holography mode to {mode.name}.")
        return self._publish(self._parameters.with_mode(mode))

    def set_playing(self, playing: bool) -> bool:
        return self.update(is_playing=bool(playing))

    def toggle_playing(self) -> bool:
        return self.set_playing(not self._parameters.is_playing)

    def reset(self) -> bool:
        logger.info("Resetting experiment parameters.")
        return self._publish(self._parameters.reset())
