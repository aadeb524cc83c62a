from fastapi import HTTPException, Request, status

from superqi_proxy.services.superqi_client import SuperQiClient


def get_superqi_client(request: Request) -> SuperQiClient:
    client = getattr(request.app.state, "superqi_client", None)
    if client is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="SuperQi client is not initialized",
        )
    return client
