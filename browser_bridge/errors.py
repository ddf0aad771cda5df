"""Errors raised by the browser bridge."""


class BrowserBridgeError(Exception):
    """Base error for the browser bridge."""

    pass


class AllocationError(BrowserBridgeError):
    """No free TCP port could be obtained from the OS."""

    pass


class LaunchError(BrowserBridgeError):
    """The automation driver failed to produce a live browser and page."""

    pass


class ClientInitError(BrowserBridgeError):
    """The MCP client registry is unavailable or registration/connect failed."""

    pass


class NotAvailable(BrowserBridgeError):
    """A handle is still absent after a full lifecycle attempt."""

    pass
