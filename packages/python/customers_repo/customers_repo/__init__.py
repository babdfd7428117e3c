"""Customers repository: the Customer record and its MongoDB storage gateway."""

from .errors import (
    CustomerAlreadyPersistedError,
    CustomerRepositoryError,
    IncorrectResultSizeError,
    UnknownFieldError,
)
from .models import Customer
from .repository import CustomerRepository, collection_name_for

__all__ = [
    "Customer",
    "CustomerAlreadyPersistedError",
    "CustomerRepository",
    "CustomerRepositoryError",
    "IncorrectResultSizeError",
    "UnknownFieldError",
    "collection_name_for",
]
