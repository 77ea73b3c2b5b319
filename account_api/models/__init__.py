from account_api.models.account import ApiMessage, CreatedUser, TokenResult, TokenStatus, UserAccount
from account_api.models.user_profile import Address, Company, ErrorPayload, Preferences, UserProfile

__all__ = [
    "ApiMessage",
    "CreatedUser",
    "TokenResult",
    "TokenStatus",
    "UserAccount",
    "Address",
    "Company",
    "ErrorPayload",
    "Preferences",
    "UserProfile",
]
