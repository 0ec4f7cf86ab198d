"""
Car API routes
All storage access goes through the cars service; handlers only map
service results onto HTTP responses.
"""

from typing import List

from fastapi import APIRouter, Depends, Response

from models.car import CarPayload, CarResponse
from services.cars_service import CarsService, get_cars_service
from utils.error_handling import raise_for_result

router = APIRouter()


@router.get("/cars", response_model=List[CarResponse])
async def list_cars(service: CarsService = Depends(get_cars_service)):
    """List all cars"""
    result = await service.list_cars()
    raise_for_result(result)
    return result.data


@router.post("/cars", response_model=CarResponse, status_code=201)
async def create_car(
    car: CarPayload,
    service: CarsService = Depends(get_cars_service)
):
    """Create a new car"""
    result = await service.create_car(car)
    raise_for_result(result)
    return result.data


@router.get("/car/{car_id}", response_model=CarResponse)
async def get_car(car_id: str, service: CarsService = Depends(get_cars_service)):
    """Get car details"""
    result = await service.get_car(car_id)
    raise_for_result(result)
    return result.data


@router.put("/car/{car_id}", response_model=CarResponse)
async def update_car(
    car_id: str,
    car: CarPayload,
    service: CarsService = Depends(get_cars_service)
):
    """Replace every field of a car"""
    result = await service.update_car(car_id, car)
    raise_for_result(result)
    return result.data


@router.delete("/car/{car_id}", status_code=204, response_class=Response)
async def delete_car(car_id: str, service: CarsService = Depends(get_cars_service)):
    """Delete a car"""
    result = await service.delete_car(car_id)
    raise_for_result(result)
    return Response(status_code=204)
