"""
Basic region operations for SpectroEdit.
All functions are pure (no side effects) and operate on (frames, bins)
numpy arrays; EditSession writes their results back into the grid.
"""
from __future__ import annotations
import numpy as np

from .types import SpectralArray


def apply_gain(data: SpectralArray, factor: float = 2.0) -> SpectralArray:
    """
    Multiply spectral data by a gain factor.

    Args:
        data: Region samples
        factor: Gain multiplier (1.0 = no change)

    Returns:
        Scaled region data
    """
    return data * factor


def apply_silence(data: SpectralArray) -> SpectralArray:
    """Zero out the whole region."""
    return np.zeros_like(data)


def apply_threshold(data: SpectralArray, floor: float = 0.1) -> SpectralArray:
    """
    Zero every sample whose magnitude is below a floor.

    Args:
        data: Region samples
        floor: Magnitude below which samples are removed

    Returns:
        Thresholded region data
    """
    return np.where(np.abs(data) < floor, 0.0, data)


def apply_fade(data: SpectralArray, fade_in: bool = True) -> SpectralArray:
    """
    Apply a linear ramp across the region's frames.

    Args:
        data: Region samples
        fade_in: Ramp from 0 to 1 when True, from 1 to 0 otherwise

    Returns:
        Faded region data
    """
    length = len(data)
    if length == 0:
        return data

    fade_curve = np.linspace(0, 1, length) if fade_in else np.linspace(1, 0, length)
    return data * fade_curve[:, np.newaxis]
