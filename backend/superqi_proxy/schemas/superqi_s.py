from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

MINOR_UNIT_FACTOR = 1000
MAX_PAYMENT_AMOUNT = (2**63 - 1) // MINOR_UNIT_FACTOR

PROVIDER_MODEL_CONFIG = ConfigDict(
    extra="allow",
    alias_generator=to_camel,
    populate_by_name=True,
)


class ProviderResult(BaseModel):
    model_config = PROVIDER_MODEL_CONFIG
    result_code: Any = None
    result_status: str | None = None
    result_message: str | None = None


class ProviderResponse(BaseModel):
    model_config = PROVIDER_MODEL_CONFIG
    result: ProviderResult | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


class ApplyTokenResponse(ProviderResponse):
    access_token: Any = None
    access_token_expiry_time: Any = None
    refresh_token: Any = None
    refresh_token_expiry_time: Any = None
    customer_id: Any = None


class InquiryUserInfoResponse(ProviderResponse):
    user_info: Any = None


class InquiryUserCardListResponse(ProviderResponse):
    card_list: Any = None


class PayResponse(ProviderResponse):
    payment_id: Any = None
    payment_time: Any = None
    payment_amount: Any = None
    redirect_action_form: Any = None
