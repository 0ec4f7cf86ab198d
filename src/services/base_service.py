"""
Base service layer for timed storage operations
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Optional, TypeVar

from config.settings import REQUEST_TIMEOUT_SECONDS
from models.enums import ErrorType

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[Any] = None
    error: Optional[str] = None
    error_type: Optional[ErrorType] = None

    @classmethod
    def ok(cls, data: Any = None) -> "ServiceResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error_type: ErrorType, error: str) -> "ServiceResult":
        return cls(success=False, error=error, error_type=error_type)


class BaseService:
    """Base service that bounds every storage call with a deadline"""

    def __init__(self, resource_name: str, timeout: float = REQUEST_TIMEOUT_SECONDS):
        self.resource_name = resource_name
        self.timeout = timeout
        logger.info(f"BaseService initialized for resource: {resource_name} (timeout={timeout}s)")

    async def with_deadline(self, call: Awaitable[T]) -> T:
        """
        Await a single storage call under the service deadline

        The deadline starts here and is released as soon as the call
        returns, raises, or times out.

        Raises:
            asyncio.TimeoutError: if the call does not finish in time
        """
        return await asyncio.wait_for(call, timeout=self.timeout)
