"""Async persistence layer for customers.

The repository is written out by hand against a Motor collection: every query
the application needs is an explicit method, nothing is derived from method
names at runtime.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Iterable, List, Optional

from bson import ObjectId
from db_core import get_db
from loguru import logger
from motor.motor_asyncio import AsyncIOMotorCollection

from .errors import CustomerAlreadyPersistedError, IncorrectResultSizeError, UnknownFieldError
from .models import Customer


def collection_name_for(model: type) -> str:
    """Collection name derived from a record class: ``Customer`` -> ``customer``."""

    name = model.__name__
    return name[:1].lower() + name[1:]


def _stored_field_names() -> dict[str, str]:
    names = {"id": "_id", "_id": "_id"}
    for field_name, info in Customer.model_fields.items():
        stored = info.alias or field_name
        names[field_name] = stored
        names[stored] = stored
    return names


_FIELD_NAMES = _stored_field_names()


class CustomerRepository:
    """Storage gateway for :class:`Customer` records."""

    def __init__(
        self,
        collection: Optional[AsyncIOMotorCollection] = None,
        *,
        collection_name: Optional[str] = None,
    ) -> None:
        self.collection_name = collection_name or collection_name_for(Customer)
        self._collection = collection

    @property
    def collection(self) -> AsyncIOMotorCollection:
        # Resolved lazily so settings can still be overridden after construction.
        if self._collection is None:
            self._collection = get_db()[self.collection_name]
        return self._collection

    # ---------------------------------------------------------
    # WRITE
    # ---------------------------------------------------------
    async def insert(self, customer: Customer) -> Customer:
        """Persist a new ``customer`` and return a copy carrying the assigned id.

        Raises :class:`CustomerAlreadyPersistedError` if ``customer.id`` is set;
        use :meth:`save` to write an existing record back.
        """

        if customer.id is not None:
            raise CustomerAlreadyPersistedError(f"Customer {customer.id} is already stored")
        result = await self.collection.insert_one(customer.to_document())
        saved = customer.model_copy(update={"id": str(result.inserted_id)})
        logger.debug("Inserted {customer}", customer=saved)
        return saved

    async def save(self, customer: Customer) -> Customer:
        """Insert a new customer, or replace the stored document with the same id."""

        if customer.id is None:
            return await self.insert(customer)
        doc = customer.to_document()
        await self.collection.replace_one({"_id": doc["_id"]}, doc, upsert=True)
        logger.debug("Saved {customer}", customer=customer)
        return customer

    async def insert_many(self, customers: Iterable[Customer]) -> List[Customer]:
        pending = list(customers)
        for customer in pending:
            if customer.id is not None:
                raise CustomerAlreadyPersistedError(f"Customer {customer.id} is already stored")
        if not pending:
            return []
        result = await self.collection.insert_many([c.to_document() for c in pending])
        return [
            customer.model_copy(update={"id": str(inserted_id)})
            for customer, inserted_id in zip(pending, result.inserted_ids)
        ]

    async def delete_all(self) -> None:
        """Remove every customer in the collection. Safe to call repeatedly."""

        result = await self.collection.delete_many({})
        logger.debug(
            "Deleted {count} documents from {collection}",
            count=result.deleted_count,
            collection=self.collection_name,
        )

    # ---------------------------------------------------------
    # READ
    # ---------------------------------------------------------
    async def count(self) -> int:
        return await self.collection.count_documents({})

    async def find_all(self) -> AsyncIterator[Customer]:
        """Yield every stored customer. Each call runs a fresh query; order is unspecified."""

        async for doc in self.collection.find({}):
            yield Customer.from_document(doc)

    async def find_one_by_field(self, field_name: str, value: Any) -> Optional[Customer]:
        """Exact-match lookup expecting at most one result.

        Returns ``None`` when nothing matches and raises
        :class:`IncorrectResultSizeError` when more than one customer matches.
        """

        query = self._filter(field_name, value)
        docs = [doc async for doc in self.collection.find(query, limit=2)]
        if len(docs) > 1:
            raise IncorrectResultSizeError(field_name, value)
        if not docs:
            return None
        return Customer.from_document(docs[0])

    async def find_many_by_field(self, field_name: str, value: Any) -> AsyncIterator[Customer]:
        """Yield every customer whose ``field_name`` equals ``value``; order is unspecified."""

        query = self._filter(field_name, value)
        async for doc in self.collection.find(query):
            yield Customer.from_document(doc)

    async def find_by_first_name(self, first_name: str) -> Optional[Customer]:
        return await self.find_one_by_field("first_name", first_name)

    def find_by_last_name(self, last_name: str) -> AsyncIterator[Customer]:
        return self.find_many_by_field("last_name", last_name)

    # ---------------------------------------------------------
    # HELPERS
    # ---------------------------------------------------------
    @staticmethod
    def _filter(field_name: str, value: Any) -> dict[str, Any]:
        stored = _FIELD_NAMES.get(field_name)
        if stored is None:
            raise UnknownFieldError(f"Customer has no field named {field_name!r}")
        if stored == "_id" and isinstance(value, str) and ObjectId.is_valid(value):
            value = ObjectId(value)
        return {stored: value}
