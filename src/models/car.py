"""
Car-related Pydantic models
"""

import re
from typing import Any, Dict

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")

# BSON stores integers as signed 64-bit values
INT64_MIN = -2**63
INT64_MAX = 2**63 - 1


def is_valid_car_id(value: str) -> bool:
    """Check that a path identifier is exactly 24 hex characters"""
    return isinstance(value, str) and OBJECT_ID_PATTERN.fullmatch(value) is not None


class CarPayload(BaseModel):
    """Request body for creating and updating a car.

    Omitted fields take their zero value, so an update always overwrites
    every field. An ``id`` key in the body is ignored.
    """
    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    make: str = ""
    model: str = ""
    year: int = Field(0, ge=INT64_MIN, le=INT64_MAX)
    price: float = 0.0

    def to_document(self) -> Dict[str, Any]:
        """Storage representation (without ``_id``)"""
        return {
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "price": self.price,
        }


class CarResponse(BaseModel):
    id: str = Field(..., description="ObjectId as a 24 character hex string")
    make: str
    model: str
    year: int
    price: float

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "CarResponse":
        """Build a response from a stored document"""
        data = dict(document)
        if "_id" in data:
            data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    @classmethod
    def from_payload(cls, car_id: ObjectId, payload: CarPayload) -> "CarResponse":
        return cls(id=str(car_id), **payload.to_document())
