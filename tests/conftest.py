"""
Pytest configuration and fixtures for SpectroEdit tests.
"""
import pytest
import numpy as np
from PyQt6.QtCore import QCoreApplication

from spectroedit.core.grid import SpectralGrid
from spectroedit.core.session import EditSession
from spectroedit.core.undo_manager import UndoManager


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Qt application instance for signal delivery."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def zero_grid() -> SpectralGrid:
    """4 frames x 3 bins, all zeros."""
    return SpectralGrid(frame_count=4, bin_count=3)


@pytest.fixture
def random_grid() -> SpectralGrid:
    """32 frames x 17 bins of reproducible random magnitudes."""
    rng = np.random.default_rng(1234)
    return SpectralGrid.from_array(rng.standard_normal((32, 17)))


@pytest.fixture
def region_events(random_grid) -> list:
    """Regions reported by random_grid.regionChanged, in emission order."""
    events = []
    random_grid.regionChanged.connect(lambda region: events.append(region))
    return events


@pytest.fixture
def session(random_grid) -> EditSession:
    """Create an edit session over the random grid."""
    return EditSession(random_grid, max_depth=10)


@pytest.fixture
def undo_manager() -> UndoManager:
    """Create an undo manager."""
    return UndoManager(max_depth=10)
