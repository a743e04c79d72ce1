"""Client errors."""


class ClientError(Exception):
    """Base client error."""

    pass


class MissingCredentialsError(ClientError):
    """Raised when a write is attempted without a configured user."""

    def __init__(self) -> None:
        super().__init__("No user provided")


class TransportError(ClientError):
    """Raised when the server cannot be reached or the exchange breaks."""

    pass


class ServerError(ClientError):
    """Base for non-success status codes."""

    def __init__(self, status_code: int, detail: str | None = None):
        self.status_code = status_code
        self.detail = detail
        super().__init__(detail or f"Server returned {status_code}")


class BadRequestError(ServerError):
    """Raised on 400: validation or business failure."""

    pass


class UnauthorizedError(ServerError):
    """Raised on 401: bad credentials."""

    pass


class UnknownServerError(ServerError):
    """Raised on any status code other than 200, 400 and 401."""

    pass


class InvalidResponseError(ClientError):
    """Raised when a response body cannot be decoded.

    Decoding is all or nothing: no partial result accompanies this error.
    """

    pass
