"""
Tests for SpectralGrid and Frame.
"""
import pytest
import numpy as np

from spectroedit.core.config import GRID_CONFIG, SPECTROGRAM_CONFIG
from spectroedit.core.errors import BinIndexError, FrameIndexError
from spectroedit.core.grid import SpectralGrid
from spectroedit.core.types import Region


class TestSpectralGrid:
    """Tests for grid shape and frame access."""
    
    def test_default_initialization(self):
        grid = SpectralGrid()
        assert grid.frame_count == GRID_CONFIG.default_frame_count
        assert grid.bin_count == SPECTROGRAM_CONFIG.n_fft // 2 + 1
    
    def test_zero_filled(self, zero_grid):
        assert zero_grid.shape == (4, 3)
        assert np.all(zero_grid.to_array() == 0.0)
    
    def test_invalid_dimensions_rejected(self):
        with pytest.raises(ValueError):
            SpectralGrid(4, 0)
        with pytest.raises(ValueError):
            SpectralGrid(-1, 3)
    
    def test_from_array_copies(self):
        source = np.arange(6, dtype=np.float64).reshape(2, 3)
        grid = SpectralGrid.from_array(source)
        source[0, 0] = 99.0
        assert grid.frame_at(0).get_sample(0) == 0.0
    
    def test_from_array_rejects_1d(self):
        with pytest.raises(ValueError):
            SpectralGrid.from_array(np.zeros(5))
    
    def test_frame_at_out_of_range(self, zero_grid):
        with pytest.raises(FrameIndexError):
            zero_grid.frame_at(4)
        with pytest.raises(IndexError):
            zero_grid.frame_at(-1)
    
    def test_to_array_is_copy(self, zero_grid):
        snapshot = zero_grid.to_array()
        snapshot[0, 0] = 1.0
        assert zero_grid.frame_at(0).get_sample(0) == 0.0
    
    def test_notify_region_changed_emits_once(self, zero_grid):
        events = []
        zero_grid.regionChanged.connect(lambda region: events.append(region))
        zero_grid.notify_region_changed(Region(1, 1, 2, 2))
        assert events == [Region(1, 1, 2, 2)]
    
    def test_append_frames(self, zero_grid):
        changed = []
        zero_grid.framesChanged.connect(lambda: changed.append(True))
        zero_grid.append_frames(np.ones((2, 3)))
        assert zero_grid.frame_count == 6
        assert zero_grid.frame_at(5).get_sample(2) == 1.0
        assert changed == [True]
    
    def test_append_frames_wrong_bins(self, zero_grid):
        with pytest.raises(ValueError):
            zero_grid.append_frames(np.ones((2, 4)))
    
    def test_truncate(self, zero_grid):
        zero_grid.truncate(2)
        assert zero_grid.frame_count == 2
        with pytest.raises(FrameIndexError):
            zero_grid.frame_at(2)


class TestFrame:
    """Tests for per-frame sample access."""
    
    def test_set_and_get_sample(self, zero_grid):
        frame = zero_grid.frame_at(1)
        frame.set_sample(2, 5.5)
        assert frame.get_sample(2) == 5.5
        assert zero_grid.to_array()[1, 2] == 5.5
    
    def test_set_sample_does_not_notify(self, zero_grid):
        events = []
        zero_grid.regionChanged.connect(lambda region: events.append(region))
        zero_grid.frame_at(0).set_sample(0, 1.0)
        assert events == []
    
    def test_bin_out_of_range(self, zero_grid):
        frame = zero_grid.frame_at(0)
        with pytest.raises(BinIndexError):
            frame.get_sample(3)
        with pytest.raises(BinIndexError):
            frame.set_sample(-1, 1.0)
    
    def test_get_samples_returns_copy(self, zero_grid):
        frame = zero_grid.frame_at(0)
        row = frame.get_samples(0, 3)
        row[:] = 7.0
        assert frame.get_sample(0) == 0.0
    
    def test_set_samples_out_of_range_writes_nothing(self, zero_grid):
        frame = zero_grid.frame_at(0)
        with pytest.raises(BinIndexError):
            frame.set_samples(2, [1.0, 2.0])
        assert np.all(zero_grid.to_array() == 0.0)
    
    def test_bin_count(self, zero_grid):
        assert zero_grid.frame_at(0).bin_count == 3
        assert len(zero_grid.frame_at(0)) == 3
