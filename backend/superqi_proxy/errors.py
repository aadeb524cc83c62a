import logging

from fastapi import HTTPException, status

from superqi_proxy.services.superqi_errors import (
    DecodeError,
    SigningError,
    TransportError,
    TransportTimeoutError,
)

logger = logging.getLogger(__name__)


def raise_http_error_from_exception(exc: Exception) -> None:
    if isinstance(exc, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    if isinstance(exc, TransportTimeoutError):
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT,
            detail="upstream provider timed out",
        ) from exc
    if isinstance(exc, (TransportError, DecodeError)):
        logger.warning("event=upstream_failure error=%s", str(exc))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="upstream provider failure",
        ) from exc
    if isinstance(exc, SigningError):
        logger.error("event=signing_failed error=%s", str(exc))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="request signing failed",
        ) from exc

    raise exc
