from superqi_proxy.schemas.gateway_s import (
    ApplyTokenRequest,
    HealthResponse,
    InquiryUserCardListRequest,
    InquiryUserInfoRequest,
    PayRequest,
    PaymentStatusResponse,
)
from superqi_proxy.schemas.superqi_s import (
    ApplyTokenResponse,
    InquiryUserCardListResponse,
    InquiryUserInfoResponse,
    PayResponse,
    ProviderResult,
)

__all__ = [
    "ApplyTokenRequest",
    "InquiryUserInfoRequest",
    "InquiryUserCardListRequest",
    "PayRequest",
    "PaymentStatusResponse",
    "HealthResponse",
    "ApplyTokenResponse",
    "InquiryUserInfoResponse",
    "InquiryUserCardListResponse",
    "PayResponse",
    "ProviderResult",
]
