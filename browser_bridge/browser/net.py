"""Ephemeral port allocation for the DevTools endpoint."""

import asyncio
import socket

from browser_bridge.errors import AllocationError
from browser_bridge.utils.logging import get_logger

logger = get_logger(__name__)


class PortAllocator:
    """Asks the OS for a currently free TCP port."""

    def __init__(self, host: str = "127.0.0.1") -> None:
        self.host = host

    async def allocate(self) -> int:
        """
        Allocate a free port.

        A listening socket is bound to port 0, the OS-assigned number is read
        back and the socket is closed before returning. Only the number is kept.

        Returns:
            The free port number.

        Raises:
            AllocationError: If the socket cannot be created or bound, or the
                bound address carries no usable port.
        """
        try:
            address = await asyncio.to_thread(self._probe)
        except OSError as e:
            raise AllocationError(f"Failed to get port: {e}") from e

        port = address[1] if isinstance(address, tuple) and len(address) >= 2 else None
        if not isinstance(port, int) or port <= 0:
            raise AllocationError(f"Failed to get port: unusable address {address!r}")

        logger.debug("Allocated free port", host=self.host, port=port)
        return port

    def _probe(self) -> object:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            sock.bind((self.host, 0))
            sock.listen(1)
            address: object = sock.getsockname()
            return address
