"""Test utilities"""

from .observe import Observed, observe

__all__ = ["Observed", "observe"]
