"""
Health check API route
"""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException, Depends

from services.cars_service import CarsService, get_cars_service

router = APIRouter()


@router.get("/health")
async def health_check(service: CarsService = Depends(get_cars_service)):
    """
    Health check - reports whether the document store answers within the
    request deadline
    """
    if not await service.ping():
        raise HTTPException(status_code=503, detail="Health check failed: database unreachable")

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "database": "connected",
    }
