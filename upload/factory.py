"""
Upload Factory

Factory pattern for creating uploader implementations.
Follows same pattern as transport/factory.py for consistency.

Automatically configures from environment variables.
"""

import logging
from typing import Literal, Optional

from transport.factory import TransportFactory
from transport.interfaces.transport_interface import TransportInterface
from upload.config import UploadConfig
from upload.implementations.vimeo_uploader import VimeoUploader
from upload.interfaces.uploader_interface import UploaderInterface

# Type alias
UploaderMode = Literal["auto", "vimeo", "mock"]


class UploaderFactory:
    """
    Factory for creating uploader implementations.

    Reads configuration from environment variables:
    - VIMEO_ACCESS_TOKEN: Bearer token for the API
    - UPLOAD_CONFIG_PATH: YAML overrides for retry/timeout settings

    Usage:
        # Auto-detect from environment
        uploader = UploaderFactory.create_uploader()

        # Force mock transport for testing
        uploader = UploaderFactory.create_uploader(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_uploader(
        cls,
        mode: UploaderMode = "auto",
        transport: Optional[TransportInterface] = None,
        config: Optional[UploadConfig] = None,
        access_token: Optional[str] = None,
    ) -> UploaderInterface:
        """
        Create an uploader instance.

        Args:
            mode: "auto" (from env), "vimeo" (force real), "mock" (force sim)
            transport: Use this transport instead of creating one
            config: Upload configuration (None = load default)
            access_token: Override token from environment

        Returns:
            UploaderInterface implementation

        Raises:
            RuntimeError: If mode="vimeo" but credentials not available
        """
        if transport is None:
            transport_mode = {"vimeo": "requests", "mock": "mock"}.get(mode, "auto")
            transport = TransportFactory.create_transport(
                mode=transport_mode,
                access_token=access_token,
            )

        cls._logger.info(
            f"Creating Vimeo Uploader ({type(transport).__name__}, mode: {mode})"
        )
        return VimeoUploader(transport=transport, config=config)


# Convenience function for quick creation
def create_uploader(
    force_mock: bool = False,
    access_token: Optional[str] = None,
) -> UploaderInterface:
    """
    Quick uploader creation with simple mock override.

    Args:
        force_mock: If True, upload through the mock transport
        access_token: Override token from environment

    Returns:
        UploaderInterface

    Example:
        # Normal usage
        uploader = create_uploader()

        # Testing
        uploader = create_uploader(force_mock=True)
    """
    mode = "mock" if force_mock else "auto"
    return UploaderFactory.create_uploader(mode=mode, access_token=access_token)
