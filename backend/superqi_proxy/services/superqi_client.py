from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from typing import TypeVar

from pydantic import ValidationError

from superqi_proxy.config import SuperQiSettings
from superqi_proxy.schemas.superqi_s import (
    MAX_PAYMENT_AMOUNT,
    MINOR_UNIT_FACTOR,
    ApplyTokenResponse,
    InquiryUserCardListResponse,
    InquiryUserInfoResponse,
    PayResponse,
    ProviderResponse,
)
from superqi_proxy.services.request_builder_s import build_signed_request
from superqi_proxy.services.signing_s import Signer
from superqi_proxy.services.superqi_errors import DecodeError
from superqi_proxy.services.transport_s import Transport

ONLINE_PURCHASE = "51051000101000000011"
AGREEMENT_PAYMENT = "51051000101000100031"
ONLINE_PURCHASE_AUTH_CAPTURE = "51051000101000000012"

APPLY_TOKEN_PATH = "/v1/authorizations/applyToken"
INQUIRY_USER_INFO_PATH = "/v1/users/inquiryUserInfo"
INQUIRY_USER_CARD_LIST_PATH = "/v1/users/inquiryUserCardList"
PAY_PATH = "/v1/payments/pay"

PAYMENT_CURRENCY = "IQD"
RESULT_STATUS_FAILED = "F"

ResponseT = TypeVar("ResponseT", bound=ProviderResponse)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PaymentSucceeded:
    response: PayResponse


@dataclass(frozen=True)
class PaymentRejected:
    message: str
    result_code: str | None
    response: PayResponse


PayOutcome = PaymentSucceeded | PaymentRejected


def _require_text(value: object, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value


def scale_payment_amount(amount: int) -> str:
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError("amount must be an integer")
    if amount <= 0:
        raise ValueError("amount must be greater than 0")
    if amount > MAX_PAYMENT_AMOUNT:
        raise ValueError("amount is too large")
    return str(amount * MINOR_UNIT_FACTOR)


def _decode_response(raw: bytes, model: type[ResponseT], *, path: str) -> ResponseT:
    try:
        payload = json.loads(raw)
    except (TypeError, ValueError) as exc:
        logger.warning("event=superqi_decode_failed path=%s reason=invalid_json", path)
        raise DecodeError("superqi returned malformed JSON") from exc

    if not isinstance(payload, dict):
        logger.warning("event=superqi_decode_failed path=%s reason=not_an_object", path)
        raise DecodeError("superqi returned an unexpected JSON payload")

    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("event=superqi_decode_failed path=%s reason=schema", path)
        raise DecodeError("superqi response did not match the expected shape") from exc


class SuperQiClient:
    def __init__(self, *, signer: Signer, transport: Transport) -> None:
        self._signer = signer
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: SuperQiSettings) -> SuperQiClient:
        signer = Signer(
            client_id=settings.client_id,
            private_key=settings.private_key,
            key_version=settings.key_version,
        )
        transport = Transport(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
        )
        return cls(signer=signer, transport=transport)

    def close(self) -> None:
        self._transport.close()

    def _call(self, path: str, params: dict, model: type[ResponseT]) -> ResponseT:
        request = build_signed_request(self._signer, "POST", path, params)
        logger.info(
            "event=superqi_request path=%s nonce=%s",
            path,
            request.nonce,
        )
        raw = self._transport.send(
            request.path,
            request.method,
            request.headers,
            request.body,
        )
        return _decode_response(raw, model, path=path)

    def apply_token(self, auth_code: str) -> ApplyTokenResponse:
        params = {
            "grantType": "AUTHORIZATION_CODE",
            "authCode": _require_text(auth_code, "authCode"),
        }
        return self._call(APPLY_TOKEN_PATH, params, ApplyTokenResponse)

    def inquiry_user_info(self, access_token: str) -> InquiryUserInfoResponse:
        params = {"accessToken": _require_text(access_token, "accessToken")}
        return self._call(INQUIRY_USER_INFO_PATH, params, InquiryUserInfoResponse)

    def inquiry_user_card_list(self, access_token: str) -> InquiryUserCardListResponse:
        params = {"accessToken": _require_text(access_token, "accessToken")}
        return self._call(
            INQUIRY_USER_CARD_LIST_PATH,
            params,
            InquiryUserCardListResponse,
        )

    def pay(
        self,
        *,
        amount: int,
        request_id: str,
        access_token: str,
        customer_id: str,
        order_desc: str,
        notify_url: str,
        product_code: str = ONLINE_PURCHASE,
    ) -> PayOutcome:
        order_title = _require_text(order_desc, "orderDesc")
        params = {
            "paymentAuthCode": _require_text(access_token, "accessToken"),
            "paymentAmount": {
                "currency": PAYMENT_CURRENCY,
                "value": scale_payment_amount(amount),
            },
            "productCode": _require_text(product_code, "productCode"),
            "paymentRequestId": _require_text(request_id, "requestId"),
            "paymentOrderTitle": order_title,
            "order": {
                "orderDescription": order_title,
                "buyer": {
                    "referenceBuyerId": _require_text(customer_id, "customerId"),
                },
            },
            "paymentNotifyUrl": _require_text(notify_url, "notifyUrl"),
        }

        response = self._call(PAY_PATH, params, PayResponse)
        result = response.result
        if result is not None and result.result_status == RESULT_STATUS_FAILED:
            message = result.result_message or "payment rejected"
            logger.info(
                "event=superqi_payment_rejected payment_request_id=%s result_code=%s message=%s",
                params["paymentRequestId"],
                result.result_code,
                message,
            )
            return PaymentRejected(
                message=message,
                result_code=result.result_code,
                response=response,
            )

        logger.info(
            "event=superqi_payment_accepted payment_request_id=%s payment_id=%s result_status=%s",
            params["paymentRequestId"],
            response.payment_id,
            result.result_status if result is not None else None,
        )
        return PaymentSucceeded(response=response)
