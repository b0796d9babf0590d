"""Pure workout ledger package.

This package holds the in-memory workout records, input validation, id
generation, and the storage codec. It must not import Django or perform any
I/O so it can be tested without a rendering surface.
"""

from .records import Ledger, WorkoutRecord

__all__ = ["Ledger", "WorkoutRecord"]
