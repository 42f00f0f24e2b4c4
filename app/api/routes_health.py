from __future__ import annotations

import datetime as dt
import time
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.api.responses import success_response
from app.db.session import get_db
from app.models.inventory_schemas import ApiResponse, HealthStatus

router = APIRouter(tags=["health"])


def _check_db(db: Session) -> bool:
    db.execute(text("SELECT 1"))
    return True


@router.get("/health", response_model=ApiResponse[HealthStatus], response_model_exclude_unset=True)
async def health():
    """Liveness probe (no dependencies)."""
    return success_response(HealthStatus(status="ok", timestamp=dt.datetime.now(dt.timezone.utc)))


@router.get("/ready")
def ready(db: Annotated[Session, Depends(get_db)]) -> dict[str, object]:
    """Readiness probe checking database connectivity."""
    start = time.time()
    try:
        db_ok = _check_db(db)
    except Exception:  # noqa: BLE001
        db_ok = False
    duration_ms = int((time.time() - start) * 1000)
    if not db_ok:
        raise HTTPException(status_code=503, detail={
            "message": "Database connectivity check failed",
            "db": db_ok,
            "latency_ms": duration_ms,
        })
    return {
        "success": True,
        "data": {"status": "ready", "db": db_ok, "latencyMs": duration_ms},
    }
