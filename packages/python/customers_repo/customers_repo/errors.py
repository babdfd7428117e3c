"""Domain-level errors for the customers repository."""


class CustomerRepositoryError(Exception):
    """Base class for errors raised by the customers repository."""


class IncorrectResultSizeError(CustomerRepositoryError):
    """Raised when a single-result lookup matches more than one customer."""

    def __init__(self, field_name: str, value: object, expected: int = 1) -> None:
        super().__init__(
            f"Expected at most {expected} customer with {field_name}={value!r}, found more"
        )
        self.field_name = field_name
        self.value = value
        self.expected = expected


class UnknownFieldError(CustomerRepositoryError):
    """Raised when a lookup names a field the Customer record does not have."""


class CustomerAlreadyPersistedError(CustomerRepositoryError):
    """Raised when inserting a customer that already carries an id."""
