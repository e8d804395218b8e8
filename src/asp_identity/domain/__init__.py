"""Identity domain: users, roles, claims and external logins."""

from asp_identity.domain.exceptions import (
    DuplicateRoleNameError,
    DuplicateUserNameError,
    EmailAlreadyExistsError,
    IdentityError,
    InvalidEmailError,
    InvalidRoleNameError,
    InvalidUserNameError,
    LoginAlreadyAssociatedError,
    RoleNotFoundError,
    UserNotFoundError,
)
from asp_identity.domain.keys import normalize_key
from asp_identity.domain.role import Role, RoleRepository
from asp_identity.domain.user import (
    Claim,
    Email,
    User,
    UserLoginInfo,
    UserRepository,
)

__all__ = [
    "Claim",
    "DuplicateRoleNameError",
    "DuplicateUserNameError",
    "Email",
    "EmailAlreadyExistsError",
    "IdentityError",
    "InvalidEmailError",
    "InvalidRoleNameError",
    "InvalidUserNameError",
    "LoginAlreadyAssociatedError",
    "Role",
    "RoleNotFoundError",
    "RoleRepository",
    "User",
    "UserLoginInfo",
    "UserNotFoundError",
    "UserRepository",
    "normalize_key",
]
