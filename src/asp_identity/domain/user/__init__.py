"""User domain: identity profile, claims and external logins."""

from asp_identity.domain.user.aggregates import User
from asp_identity.domain.user.repositories import UserRepository
from asp_identity.domain.user.value_objects import (
    Claim,
    Email,
    UserLoginInfo,
)

__all__ = [
    "Claim",
    "Email",
    "User",
    "UserLoginInfo",
    "UserRepository",
]
