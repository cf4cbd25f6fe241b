# File: app/api/v1/routes_health.py

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz", summary="Liveness probe")
def healthz():
    return {"status": "ok"}
