"""
Bounded backend calls.

Every collaborator call goes through call_backend so a stalled or failing
backend surfaces as one GenerationError with the user-facing message of the
stage that made the call.
"""
import asyncio
import logging
from typing import Awaitable, TypeVar

from videgen.exceptions import GenerationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def call_backend(awaitable: Awaitable[T], timeout: float, label: str, message: str) -> T:
    """
    Await a collaborator call with a timeout.

    Args:
        awaitable: The pending collaborator call
        timeout: Seconds before giving up (<= 0 disables the bound)
        label: Log tag of the calling stage
        message: Generic message returned to the API caller on failure
    """
    try:
        if timeout and timeout > 0:
            return await asyncio.wait_for(awaitable, timeout=timeout)
        return await awaitable
    except asyncio.TimeoutError as e:
        logger.error(f"[{label}] Backend call timed out after {timeout:.0f}s")
        raise GenerationError(message, detail=f"timed out after {timeout}s") from e
    except GenerationError:
        raise
    except Exception as e:
        logger.error(f"[{label}] Backend call failed: {e}")
        raise GenerationError(message, detail=str(e)) from e
