"""
HTTP client utilities with connection pooling.
Provides a reusable httpx client for upstream API calls.
"""
import httpx


class HTTPClientManager:
    """Manages the shared httpx client with connection pooling."""

    _upstream_client: httpx.AsyncClient | None = None

    @classmethod
    def get_upstream_client(cls, timeout: float | None = None) -> httpx.AsyncClient:
        """
        Get or create a shared httpx client for upstream chat-completion calls.

        Features:
        - Connection pooling (reuses TCP connections)
        - No timeout unless one is configured

        Args:
            timeout: Seconds before an upstream call is abandoned, None for no limit

        Returns:
            Configured httpx.AsyncClient for upstream calls
        """
        if cls._upstream_client is None:
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=5,
                keepalive_expiry=30.0
            )

            cls._upstream_client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout),
                limits=limits,
                http2=True
            )

        return cls._upstream_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close the managed client and clean up connections.
        """
        if cls._upstream_client is not None:
            await cls._upstream_client.aclose()
            cls._upstream_client = None
