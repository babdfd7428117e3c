"""Pydantic model describing a stored customer."""

from __future__ import annotations

from typing import Any, Optional

from bson import ObjectId
from db_core import MongoDocument
from pydantic import BaseModel, ConfigDict, Field


class Customer(BaseModel):
    """Representation of a customer entry stored in MongoDB.

    ``id`` stays ``None`` until the record is inserted; the storage layer
    assigns it. Field names follow Python conventions while the stored
    documents use ``firstName`` / ``lastName``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None, alias="_id")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    def __str__(self) -> str:
        return (
            f"Customer[id={self.id}, firstName='{self.first_name}', "
            f"lastName='{self.last_name}']"
        )

    def to_document(self) -> dict[str, Any]:
        """Return the MongoDB document for this record (without ``_id`` when unset).

        Ids assigned by the server are stored back as ``ObjectId`` so the
        document keeps the key it was inserted with.
        """

        doc = self.model_dump(by_alias=True, exclude_none=True)
        if ObjectId.is_valid(doc.get("_id")):
            doc["_id"] = ObjectId(doc["_id"])
        return doc

    @classmethod
    def from_document(cls, doc: MongoDocument) -> "Customer":
        data = dict(doc)
        if data.get("_id") is not None:
            data["_id"] = str(data["_id"])
        return cls.model_validate(data)
