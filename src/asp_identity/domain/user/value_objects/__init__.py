"""Value objects for the user domain."""

from asp_identity.domain.user.value_objects.claim import Claim
from asp_identity.domain.user.value_objects.email import Email
from asp_identity.domain.user.value_objects.login_info import UserLoginInfo

__all__ = [
    "Claim",
    "Email",
    "UserLoginInfo",
]
