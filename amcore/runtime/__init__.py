"""
Runtime package: runs line-oriented programs through a machine.
"""

from .executor import Executor

__all__ = ["Executor"]
