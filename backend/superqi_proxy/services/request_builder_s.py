from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import uuid

from superqi_proxy.services.signing_s import Signer, canonicalize_params

CONTENT_TYPE = "application/json; charset=UTF-8"
# the provider reads the request timestamp from "request-time"
TIMESTAMP_HEADER = "request-time"


@dataclass(frozen=True)
class SignedRequest:
    method: str
    path: str
    body: str
    headers: dict[str, str]
    request_time: str
    nonce: str


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_request_time(now: datetime) -> str:
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds")


def new_nonce() -> str:
    return uuid.uuid4().hex


def build_signed_request(
    signer: Signer,
    method: str,
    path: str,
    params: dict,
    *,
    now: datetime | None = None,
    nonce: str | None = None,
) -> SignedRequest:
    method = method.upper()
    request_time = format_request_time(now or _utc_now())
    request_nonce = nonce or new_nonce()
    body = canonicalize_params(params)
    signature = signer.sign(method, path, params, request_time)

    headers = {
        "client-id": signer.client_id,
        TIMESTAMP_HEADER: request_time,
        "nonce": request_nonce,
        "signature": signer.signature_header(signature),
        "content-type": CONTENT_TYPE,
    }
    return SignedRequest(
        method=method,
        path=path,
        body=body,
        headers=headers,
        request_time=request_time,
        nonce=request_nonce,
    )


def build_headers(
    signer: Signer,
    method: str,
    path: str,
    params: dict,
    *,
    now: datetime | None = None,
    nonce: str | None = None,
) -> dict[str, str]:
    return build_signed_request(
        signer,
        method,
        path,
        params,
        now=now,
        nonce=nonce,
    ).headers
