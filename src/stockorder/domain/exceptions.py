"""Domain-level exceptions.

Recoverable operator errors are subclasses of DomainException so the
CLI layer can catch them uniformly and display user-friendly messages.
InvariantViolation is not a DomainException: it signals a bug or a
misconfigured store and propagates out of the CLI.
"""


class DomainException(Exception):
    """Base class for all recoverable domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class UnknownItemError(EntityNotFoundError):
    """No inventory entry exists for the given item id."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Unknown id: {item_id}")
        self.item_id = item_id


class InsufficientStockError(ValidationError):
    """A stock adjustment would drive the on-hand quantity below zero."""

    def __init__(self, item_id: int, available: int, requested: int) -> None:
        super().__init__(
            f"Not enough stock (ID: {item_id}): "
            f"need {requested}, have {available} available"
        )
        self.item_id = item_id
        self.available = available
        self.requested = requested


class InvalidInputError(ValidationError):
    """Operator input could not be interpreted."""


class InvariantViolation(Exception):
    """The store was asked to do something only a bug could ask for."""


class TotalOverflowError(InvariantViolation):
    """An aggregated order total does not fit the storage width."""
