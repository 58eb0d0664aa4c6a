"""
pytest configuration and shared fixtures.
"""

import os
import sys
from pathlib import Path

import pytest

# Make the src layout importable without installing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

# Qt objects are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from hololearn.model.parameters import ExperimentParameters, HolographyMode  # noqa: E402


@pytest.fixture(scope="session")
def qt_app():
    """One QApplication for every test that creates QObjects, timers or widgets."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def inline_params() -> ExperimentParameters:
    """Scenario A: co-linear bench with default values."""
    return ExperimentParameters(
        wavelength=20,
        reference_angle=0,
        object_distance=120,
        intensity=4,
        object_opacity=1,
        object_phase=0,
        mode=HolographyMode.CO_LINEAR,
    )


@pytest.fixture
def offaxis_params(inline_params) -> ExperimentParameters:
    """Scenario B: same bench tilted to a 15° reference beam."""
    from dataclasses import replace

    return replace(inline_params, reference_angle=15, mode=HolographyMode.ANGULAR_OFFSET)
