"""Base class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the rules that involve a repository, such as checking a
    username before storing it. Entities themselves stay plain data.
    """

    pass
