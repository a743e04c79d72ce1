"""NNNTP client."""

from nnntp.client.client import NnntpClient
from nnntp.client.error import (
    BadRequestError,
    ClientError,
    InvalidResponseError,
    MissingCredentialsError,
    ServerError,
    TransportError,
    UnauthorizedError,
    UnknownServerError,
)
from nnntp.client.model import PostListing, UserCredentials

__all__ = [
    "NnntpClient",
    "UserCredentials",
    "PostListing",
    "ClientError",
    "MissingCredentialsError",
    "TransportError",
    "ServerError",
    "BadRequestError",
    "UnauthorizedError",
    "UnknownServerError",
    "InvalidResponseError",
]
