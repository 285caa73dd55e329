"""
Implementations Package

Concrete uploader implementations.
"""

from upload.implementations.vimeo_uploader import VimeoUploader

__all__ = [
    "VimeoUploader",
]
