import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from superqi_proxy.dependencies.superqi_d import get_superqi_client
from superqi_proxy.errors import raise_http_error_from_exception
from superqi_proxy.schemas import (
    ApplyTokenRequest,
    InquiryUserCardListRequest,
    InquiryUserInfoRequest,
    PayRequest,
    PaymentStatusResponse,
)
from superqi_proxy.services.superqi_client import PaymentRejected, SuperQiClient

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/apply-token")
def apply_token(
    payload: ApplyTokenRequest,
    client: SuperQiClient = Depends(get_superqi_client),
):
    try:
        response = client.apply_token(payload.auth_code)
    except Exception as exc:
        raise_http_error_from_exception(exc)
    return response.to_payload()


@router.post("/user-info")
def inquiry_user_info(
    payload: InquiryUserInfoRequest,
    client: SuperQiClient = Depends(get_superqi_client),
):
    try:
        response = client.inquiry_user_info(payload.access_token)
    except Exception as exc:
        raise_http_error_from_exception(exc)
    return response.to_payload()


@router.post("/user-cards")
def inquiry_user_card_list(
    payload: InquiryUserCardListRequest,
    client: SuperQiClient = Depends(get_superqi_client),
):
    try:
        response = client.inquiry_user_card_list(payload.access_token)
    except Exception as exc:
        raise_http_error_from_exception(exc)
    return response.to_payload()


@router.post("/pay")
def pay(
    payload: PayRequest,
    client: SuperQiClient = Depends(get_superqi_client),
):
    try:
        outcome = client.pay(
            amount=payload.amount,
            request_id=payload.request_id,
            access_token=payload.access_token,
            customer_id=payload.customer_id,
            order_desc=payload.order_desc,
            notify_url=payload.notify_url,
        )
    except Exception as exc:
        raise_http_error_from_exception(exc)

    if isinstance(outcome, PaymentRejected):
        raise HTTPException(
            status_code=status.HTTP_402_PAYMENT_REQUIRED,
            detail=outcome.message,
        )
    return outcome.response.to_payload()


@router.get("/payment/{payment_id}/status")
def get_payment_status(payment_id: str):
    logger.info("event=payment_status_unimplemented payment_id=%s", payment_id)
    body = PaymentStatusResponse(
        payment_id=payment_id,
        status="not_implemented",
        message="Payment status inquiry not yet implemented",
    )
    return JSONResponse(
        status_code=status.HTTP_501_NOT_IMPLEMENTED,
        content=body.model_dump(by_alias=True),
    )
