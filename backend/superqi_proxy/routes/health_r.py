from fastapi import APIRouter

from superqi_proxy.schemas import HealthResponse

SERVICE_NAME = "superqi-proxy"

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health_check():
    return {"status": "ok", "service": SERVICE_NAME}
