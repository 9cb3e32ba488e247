"""
Centralized configuration for SpectroEdit.
All magic numbers and default settings in one place.
"""
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SpectrogramConfig:
    """Analysis settings that determine the grid's frequency resolution."""
    n_fft: int = 2048
    hop_length: int = 512

    @property
    def bin_count(self) -> int:
        return self.n_fft // 2 + 1


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Spectral grid defaults."""
    default_frame_count: int = 0
    default_bin_count: int = SpectrogramConfig().bin_count
    dtype: str = "float64"  # Snapshots must hold grid values verbatim


@dataclass(frozen=True, slots=True)
class UndoConfig:
    """Undo/Redo configuration."""
    max_depth: int = 50


# Global config instances (immutable singletons)
SPECTROGRAM_CONFIG = SpectrogramConfig()
GRID_CONFIG = GridConfig()
UNDO_CONFIG = UndoConfig()
