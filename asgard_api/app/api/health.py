"""
Liveness probe.

``GET /health`` performs a trivial storage round‑trip under a short
timeout.  The call itself always succeeds; a slow or failing store is
reported as ``"db": "error"``.
"""

import asyncio
import logging
from typing import Callable, Dict

from fastapi import APIRouter, Request

logger = logging.getLogger(__name__)

router = APIRouter()


async def check_storage(ping: Callable[[], bool], timeout: float) -> bool:
    try:
        return await asyncio.wait_for(asyncio.to_thread(ping), timeout)
    except asyncio.TimeoutError:
        logger.warning("Storage health check timed out after %ss", timeout)
        return False
    except Exception as exc:
        # The probe reports degraded status instead of failing the request.
        logger.warning("Storage health check failed: %s", exc)
        return False


@router.get("/health")
async def health(request: Request) -> Dict[str, str]:
    state = request.app.state
    db_ok = await check_storage(state.repositories.ping, state.settings.health_timeout_seconds)
    return {"status": "ok", "db": "ok" if db_ok else "error"}
