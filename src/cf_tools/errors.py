"""Errors raised at the Cloudflare transport boundary."""


class CloudflareError(RuntimeError):
    """Base class for client errors."""

    def __init__(self, action: str, message: str):
        self.action = action
        super().__init__(f"{action}: {message}")


class TransportError(CloudflareError):
    """The request could not complete (DNS, connection, timeout)."""


class DecodeError(CloudflareError):
    """The response body was not a JSON object."""

    def __init__(self, action: str, message: str, body: str = ""):
        self.body = body
        super().__init__(action, message)
