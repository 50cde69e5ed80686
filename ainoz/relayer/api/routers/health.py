from datetime import datetime, timezone

from fastapi import APIRouter

from ainoz.schemas.health import HealthResponse

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    # e.g. 2025-01-01T12:00:00.000Z
    now = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(status="ok", timestamp=now)
