"""
Interfaces Package

Abstract interfaces for upload implementations.
"""

from upload.interfaces.uploader_interface import (
    UploaderError,
    UploaderInterface,
    UploadOutcome,
)

__all__ = [
    "UploaderInterface",
    "UploadOutcome",
    "UploaderError",
]
