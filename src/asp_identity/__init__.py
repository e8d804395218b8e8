"""ASP Identity - the identity schema and its stores.

This package holds everything identity-shaped that the data context
exposes:
- Users, roles and role membership
- User and role claims
- External logins and provider tokens

Authentication flows, password hashing and token issuance are left to
an external identity framework; the schema only stores their results.
"""

from asp_identity.domain import (
    Claim,
    DuplicateRoleNameError,
    DuplicateUserNameError,
    Email,
    EmailAlreadyExistsError,
    IdentityError,
    InvalidEmailError,
    InvalidRoleNameError,
    InvalidUserNameError,
    LoginAlreadyAssociatedError,
    Role,
    RoleNotFoundError,
    RoleRepository,
    User,
    UserLoginInfo,
    UserNotFoundError,
    UserRepository,
    normalize_key,
)

__all__ = [
    # Domain
    "Claim",
    "Email",
    "Role",
    "User",
    "UserLoginInfo",
    "normalize_key",
    # Repositories (interfaces)
    "RoleRepository",
    "UserRepository",
    # Exceptions
    "DuplicateRoleNameError",
    "DuplicateUserNameError",
    "EmailAlreadyExistsError",
    "IdentityError",
    "InvalidEmailError",
    "InvalidRoleNameError",
    "InvalidUserNameError",
    "LoginAlreadyAssociatedError",
    "RoleNotFoundError",
    "UserNotFoundError",
]
