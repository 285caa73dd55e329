"""
Transport Factory

Factory pattern for creating transport implementations.
Follows the same pattern as upload/factory.py.

Automatically configures from environment variables.
"""

import logging
from typing import Literal, Optional

from config.settings import VIMEO_ACCESS_TOKEN, VIMEO_API_BASE_URL
from transport.implementations.mock_transport import MockTransport
from transport.implementations.requests_transport import RequestsTransport
from transport.interfaces.transport_interface import TransportInterface

# Type alias
TransportMode = Literal["auto", "requests", "mock"]


class TransportFactory:
    """
    Factory for creating transport implementations.

    Reads configuration from environment variables:
    - VIMEO_ACCESS_TOKEN: Bearer token for the API
    - VIMEO_API_BASE_URL: API base URL (default https://api.vimeo.com)

    Usage:
        # Auto-detect from environment
        transport = TransportFactory.create_transport()

        # Force mock for testing
        transport = TransportFactory.create_transport(mode="mock")
    """

    _logger = logging.getLogger(__name__)

    @classmethod
    def create_transport(
        cls,
        mode: TransportMode = "auto",
        access_token: Optional[str] = None,
    ) -> TransportInterface:
        """
        Create a transport instance.

        Args:
            mode: "auto" (from env), "requests" (force real), "mock" (force sim)
            access_token: Override token from environment

        Returns:
            TransportInterface implementation

        Raises:
            RuntimeError: If mode="requests" but no access token is available
        """
        if mode == "mock":
            cls._logger.info("Creating Mock Transport (forced)")
            return MockTransport()

        if mode == "requests":
            try:
                transport = cls._create_requests_transport(access_token)
                cls._logger.info("Creating Requests Transport (forced)")
                return transport
            except ValueError as e:
                raise RuntimeError(
                    f"Requests transport requested but not available: {e}"
                ) from e

        # mode == "auto" - real transport when a token exists, else mock
        try:
            transport = cls._create_requests_transport(access_token)
            cls._logger.info("Creating Requests Transport (auto-detected)")
            return transport
        except ValueError as e:
            cls._logger.warning(
                f"Requests transport not available ({e}), using Mock Transport"
            )
            return MockTransport(authenticated=False)

    @classmethod
    def _create_requests_transport(
        cls,
        access_token: Optional[str] = None,
    ) -> RequestsTransport:
        """
        Create requests transport from environment configuration.

        Raises:
            ValueError: If no access token is configured
        """
        token = access_token or VIMEO_ACCESS_TOKEN

        if not token:
            raise ValueError(
                "VIMEO_ACCESS_TOKEN not set in environment. "
                "Add to .env file: VIMEO_ACCESS_TOKEN=<personal access token>"
            )

        return RequestsTransport(access_token=token, base_url=VIMEO_API_BASE_URL)

    @classmethod
    def is_requests_available(cls) -> bool:
        """
        Check if the real transport can be created.

        Returns:
            True if an access token is configured
        """
        try:
            cls._create_requests_transport()
            return True
        except ValueError:
            return False


# Convenience function for quick creation
def create_transport(
    force_mock: bool = False,
    access_token: Optional[str] = None,
) -> TransportInterface:
    """
    Quick transport creation with simple mock override.

    Args:
        force_mock: If True, always use mock
        access_token: Override token from environment

    Returns:
        TransportInterface
    """
    mode = "mock" if force_mock else "auto"
    return TransportFactory.create_transport(mode=mode, access_token=access_token)
