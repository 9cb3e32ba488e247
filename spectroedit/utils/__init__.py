"""
SpectroEdit Utilities Module

Utility functions and helpers:
- logger: Logging configuration
"""
from .logger import logger, setup_logger

__all__ = ['logger', 'setup_logger']
