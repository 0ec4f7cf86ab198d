"""Tests for the car wire and storage encodings."""

import pytest
from bson import ObjectId
from pydantic import ValidationError

from models.car import CarPayload, CarResponse, is_valid_car_id


class TestCarPayload:

    def test_omitted_fields_default_to_zero_values(self):
        payload = CarPayload.model_validate({"make": "Audi"})
        assert payload.to_document() == {"make": "Audi", "model": "", "year": 0, "price": 0.0}

    @pytest.mark.parametrize("data", [
        {"year": "2020"},
        {"year": 2020.5},
        {"price": "19999.99"},
        {"make": None},
        {"price": float("nan")},
        {"price": float("inf")},
        {"price": float("-inf")},
        {"year": 10**30},
        {"year": 2**63},
    ])
    def test_wrong_types_are_rejected(self, data):
        with pytest.raises(ValidationError):
            CarPayload.model_validate(data)

    def test_id_and_unknown_keys_are_ignored(self):
        payload = CarPayload.model_validate({"id": str(ObjectId()), "color": "red", "make": "Audi"})
        assert "id" not in payload.to_document()
        assert "color" not in payload.to_document()


class TestCarResponse:

    def test_from_document_stringifies_object_id(self):
        car_id = ObjectId()
        car = CarResponse.from_document(
            {"_id": car_id, "make": "Audi", "model": "A4", "year": 2015, "price": 15000}
        )
        assert car.id == str(car_id)
        assert car.price == 15000.0

    def test_from_document_without_fields_fails(self):
        with pytest.raises(ValidationError):
            CarResponse.from_document({"_id": ObjectId(), "make": "Audi"})


@pytest.mark.parametrize("value,expected", [
    (str(ObjectId()), True),
    ("507f1f77bcf86cd799439011", True),
    ("not-a-valid-id", False),
    ("507f1f77bcf86cd79943901", False),
    ("507f1f77bcf86cd79943901z", False),
    ("", False),
    (" " + "a" * 22 + " ", False),
    ("aaaa aaaaaaaaaaaaaaaaaaa", False),
    ("0x" + "a" * 22, False),
])
def test_is_valid_car_id(value, expected):
    assert is_valid_car_id(value) is expected
