"""User entity."""

from nnntp.domain.model.common import DomainModel


class User(DomainModel):
    """A registered account.

    Only the bcrypt digest of the password is ever held or stored.
    """

    username: str
    password_digest: str
