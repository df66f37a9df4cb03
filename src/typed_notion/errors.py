"""Exceptions raised by the client."""


class NotionClientError(Exception):
    """Base class for every error raised by this library."""


class InvalidIdentifier(NotionClientError, ValueError):
    """Raised when a string cannot be turned into an identifier of the given kind."""

    def __init__(self, raw: object, kind: str):
        self.raw = raw
        self.kind = kind
        super().__init__(f"Invalid {kind} expected uuid string: {raw!r}")


class RemoteApiError(NotionClientError):
    """Raised when Notion answers with its error envelope."""

    def __init__(self, code: str, message: str, status: int | None = None):
        self.code = code
        self.message = message
        self.status = status
        super().__init__(f"Notion API error: {code} {message}")


class MalformedUrl(NotionClientError, ValueError):
    """Raised when a URL can be read neither as absolute nor relative to notion.so."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Invalid URL: {raw!r}")
