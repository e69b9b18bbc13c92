"""Base class for domain errors.

Every module's business-rule violations derive from ``DomainException``
so the API exception handler can translate them in one place.
"""


class DomainException(Exception):
    """Base class for all domain errors.

    The first positional argument is the human-readable message returned
    to the client.
    """

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else self.__class__.__name__
