"""
Cars service - business logic for car records
"""

import asyncio
import logging

from bson import ObjectId
from fastapi import Request
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from config.settings import REQUEST_TIMEOUT_SECONDS
from database.car_repository import CarRepository
from models.car import CarPayload, CarResponse, is_valid_car_id
from models.enums import ErrorType
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

# Failures that surface as a storage error (500)
STORAGE_FAILURES = (PyMongoError, asyncio.TimeoutError)

INVALID_ID = "Invalid car ID"
NOT_FOUND = "Car not found"


class CarsService(BaseService):
    """Service for car CRUD operations.

    Every operation is a single pass: validate the identifier, make one
    timed storage call, and report the outcome as a ServiceResult.
    """

    def __init__(self, repository: CarRepository, timeout: float = REQUEST_TIMEOUT_SECONDS):
        super().__init__("cars", timeout)
        self.repository = repository

    async def ping(self) -> bool:
        try:
            await self.with_deadline(self.repository.ping())
        except STORAGE_FAILURES as e:
            logger.warning(f"Database ping failed: {e!r}")
            return False
        return True

    async def list_cars(self) -> ServiceResult:
        """
        Get all cars

        Returns:
            ServiceResult with a (possibly empty) list of CarResponse
        """
        try:
            documents = await self.with_deadline(self.repository.find_all())
        except STORAGE_FAILURES as e:
            logger.error(f"Failed to fetch cars: {e!r}", exc_info=True)
            return ServiceResult.fail(ErrorType.STORAGE_ERROR, "Failed to fetch cars")

        try:
            cars = [CarResponse.from_document(document) for document in documents]
        except ValidationError as e:
            logger.error(f"Failed to decode stored cars: {e}")
            return ServiceResult.fail(ErrorType.STORAGE_ERROR, "Failed to load cars")

        return ServiceResult.ok(cars)

    async def create_car(self, payload: CarPayload) -> ServiceResult:
        """
        Create a new car

        Args:
            payload: Decoded request body

        Returns:
            ServiceResult with the created CarResponse, including its new id
        """
        try:
            car_id = await self.with_deadline(self.repository.insert(payload.to_document()))
        except STORAGE_FAILURES as e:
            logger.error(f"Failed to add car: {e!r}", exc_info=True)
            return ServiceResult.fail(ErrorType.STORAGE_ERROR, "Failed to add car")

        logger.info(f"Created car {car_id}")
        return ServiceResult.ok(CarResponse.from_payload(car_id, payload))

    async def get_car(self, car_id: str) -> ServiceResult:
        """
        Get a car by its ID

        Args:
            car_id: ObjectId hex string taken from the request path
        """
        if not is_valid_car_id(car_id):
            return ServiceResult.fail(ErrorType.VALIDATION_ERROR, INVALID_ID)

        try:
            document = await self.with_deadline(self.repository.find_by_id(ObjectId(car_id)))
        except STORAGE_FAILURES as e:
            logger.error(f"Failed to fetch car {car_id}: {e!r}", exc_info=True)
            return ServiceResult.fail(ErrorType.STORAGE_ERROR, "Failed to fetch car")

        if document is None:
            return ServiceResult.fail(ErrorType.NOT_FOUND, NOT_FOUND)

        try:
            return ServiceResult.ok(CarResponse.from_document(document))
        except ValidationError as e:
            logger.error(f"Failed to decode stored car {car_id}: {e}")
            return ServiceResult.fail(ErrorType.STORAGE_ERROR, "Failed to fetch car")

    async def update_car(self, car_id: str, payload: CarPayload) -> ServiceResult:
        """
        Replace every field of a car with the submitted values

        Fields omitted from the request body overwrite stored values with
        their zero value.

        Args:
            car_id: ObjectId hex string taken from the request path
            payload: Decoded request body

        Returns:
            ServiceResult with a CarResponse echoing the id and submitted fields
        """
        if not is_valid_car_id(car_id):
            return ServiceResult.fail(ErrorType.VALIDATION_ERROR, INVALID_ID)

        object_id = ObjectId(car_id)
        try:
            matched = await self.with_deadline(
                self.repository.replace_fields(object_id, payload.to_document())
            )
        except STORAGE_FAILURES as e:
            logger.error(f"Failed to update car {car_id}: {e!r}", exc_info=True)
            return ServiceResult.fail(ErrorType.STORAGE_ERROR, "Failed to update car")

        if matched == 0:
            return ServiceResult.fail(ErrorType.NOT_FOUND, NOT_FOUND)

        logger.info(f"Updated car {car_id}")
        return ServiceResult.ok(CarResponse.from_payload(object_id, payload))

    async def delete_car(self, car_id: str) -> ServiceResult:
        """
        Delete a car

        Args:
            car_id: ObjectId hex string taken from the request path
        """
        if not is_valid_car_id(car_id):
            return ServiceResult.fail(ErrorType.VALIDATION_ERROR, INVALID_ID)

        try:
            deleted = await self.with_deadline(self.repository.delete(ObjectId(car_id)))
        except STORAGE_FAILURES as e:
            logger.error(f"Failed to delete car {car_id}: {e!r}", exc_info=True)
            return ServiceResult.fail(ErrorType.STORAGE_ERROR, "Failed to delete car")

        if deleted == 0:
            return ServiceResult.fail(ErrorType.NOT_FOUND, NOT_FOUND)

        logger.info(f"Deleted car {car_id}")
        return ServiceResult.ok()


def get_cars_service(request: Request) -> CarsService:
    """Dependency returning the service built at application startup"""
    return request.app.state.cars_service
