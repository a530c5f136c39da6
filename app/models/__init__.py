"""Data models for the proposal generator."""

from .proposal import ProposalRequest, ProposalResponse
from .provider import AuthMode, RequestBodyShape, ProviderConfig, PROVIDER_PRESETS
from .error import ErrorResponse

__all__ = [
    # Proposal models
    "ProposalRequest",
    "ProposalResponse",
    # Provider models
    "AuthMode",
    "RequestBodyShape",
    "ProviderConfig",
    "PROVIDER_PRESETS",
    # Error models
    "ErrorResponse",
]
