from __future__ import annotations

import logging
import time

import httpx

from superqi_proxy.services.superqi_errors import TransportError, TransportTimeoutError

logger = logging.getLogger(__name__)


class Transport:
    """Single-attempt HTTP transport against the provider base URL.

    The wrapped ``httpx.Client`` is safe to share between threads, so one
    transport serves every concurrent request.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        client: httpx.Client | None = None,
    ) -> None:
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be greater than 0")
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client or httpx.Client(timeout=httpx.Timeout(timeout_seconds))

    def send(
        self,
        path: str,
        method: str,
        headers: dict[str, str],
        body: str,
    ) -> bytes:
        url = f"{self.base_url}{path}"
        started = time.monotonic()
        try:
            response = self._client.request(
                method,
                url,
                content=body.encode("utf-8"),
                headers=headers,
                timeout=httpx.Timeout(self.timeout_seconds),
            )
        except httpx.TimeoutException as exc:
            logger.warning(
                "event=superqi_timeout path=%s timeout_seconds=%s",
                path,
                self.timeout_seconds,
            )
            raise TransportTimeoutError("superqi request timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "event=superqi_network_error path=%s error=%s",
                path,
                str(exc),
            )
            raise TransportError("superqi request failed") from exc

        elapsed_ms = int((time.monotonic() - started) * 1000)
        if not response.is_success:
            logger.warning(
                "event=superqi_http_error path=%s status=%s latency_ms=%s",
                path,
                response.status_code,
                elapsed_ms,
            )
            raise TransportError(
                f"superqi responded with status {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug(
            "event=superqi_response path=%s status=%s latency_ms=%s",
            path,
            response.status_code,
            elapsed_ms,
        )
        return response.content

    def close(self) -> None:
        self._client.close()
