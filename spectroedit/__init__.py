"""
SpectroEdit: reversible region editing for spectral data grids.
"""
__version__ = "0.1.0"
