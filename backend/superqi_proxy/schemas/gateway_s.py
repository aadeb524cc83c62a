from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from superqi_proxy.schemas.superqi_s import MAX_PAYMENT_AMOUNT

GATEWAY_REQUEST_CONFIG = ConfigDict(
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class ApplyTokenRequest(BaseModel):
    model_config = GATEWAY_REQUEST_CONFIG
    auth_code: str = Field(min_length=1)


class InquiryUserInfoRequest(BaseModel):
    model_config = GATEWAY_REQUEST_CONFIG
    access_token: str = Field(min_length=1)


class InquiryUserCardListRequest(BaseModel):
    model_config = GATEWAY_REQUEST_CONFIG
    access_token: str = Field(min_length=1)


class PayRequest(BaseModel):
    model_config = GATEWAY_REQUEST_CONFIG
    amount: int = Field(strict=True, gt=0, le=MAX_PAYMENT_AMOUNT)
    request_id: str = Field(min_length=1, max_length=64)
    access_token: str = Field(min_length=1)
    customer_id: str = Field(min_length=1)
    order_desc: str = Field(min_length=1, max_length=256)
    notify_url: str = Field(min_length=1, pattern=r"^https?://\S+$")


class PaymentStatusResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    payment_id: str
    status: str
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
