"""
Managers Package

Upload state helpers.
"""

from upload.managers.progress_tracker import ProgressTracker, next_offset

__all__ = [
    "ProgressTracker",
    "next_offset",
]
