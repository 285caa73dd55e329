"""
Controllers Package

UploadController merges default properties and drives an uploader.
"""

from upload.controllers.upload_controller import UploadController

__all__ = [
    "UploadController",
]
