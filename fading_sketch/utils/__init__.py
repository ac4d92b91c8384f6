"""Utility functions for Fading Sketch"""

from .logging_config import LoggingConfig

__all__ = ['LoggingConfig']
