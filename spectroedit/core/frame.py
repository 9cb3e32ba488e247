from __future__ import annotations

import numpy as np

from .errors import BinIndexError
from .types import FrameArray


class Frame:
    """
    One time slice of spectral data: a fixed-size row of real samples,
    one per frequency bin.

    A frame is a handle onto a row of its grid's storage, so writes land in
    the grid directly. Writes do not notify observers; the grid owner does
    that once a whole region has been written.
    """
    __slots__ = ('index', '_row')

    def __init__(self, index: int, row: FrameArray):
        self.index = index
        self._row = row

    @property
    def bin_count(self) -> int:
        return self._row.shape[0]

    def __len__(self) -> int:
        return self.bin_count

    def _check_bin(self, bin_index: int) -> None:
        if not 0 <= bin_index < self.bin_count:
            raise BinIndexError(
                f"Bin {bin_index} out of range for frame {self.index} "
                f"({self.bin_count} bins)"
            )

    def check_span(self, first_bin: int, count: int) -> None:
        if first_bin < 0 or count < 0 or first_bin + count > self.bin_count:
            raise BinIndexError(
                f"Bins [{first_bin}, {first_bin + count}) out of range for "
                f"frame {self.index} ({self.bin_count} bins)"
            )

    def get_sample(self, bin_index: int) -> float:
        self._check_bin(bin_index)
        return float(self._row[bin_index])

    def set_sample(self, bin_index: int, value: float) -> None:
        self._check_bin(bin_index)
        self._row[bin_index] = value

    def get_samples(self, first_bin: int, count: int) -> FrameArray:
        """Returns a copy of ``count`` samples starting at ``first_bin``."""
        self.check_span(first_bin, count)
        return self._row[first_bin:first_bin + count].copy()

    def set_samples(self, first_bin: int, values) -> None:
        """Overwrites a contiguous bin range; nothing is written if the range is invalid."""
        values = np.asarray(values, dtype=self._row.dtype)
        if values.ndim != 1:
            raise ValueError(f"Expected a 1-D row of samples, got shape {values.shape}")
        self.check_span(first_bin, values.shape[0])
        self._row[first_bin:first_bin + values.shape[0]] = values

    def __repr__(self) -> str:
        return f"Frame(index={self.index}, bins={self.bin_count})"
