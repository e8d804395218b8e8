"""Identity domain exceptions.

Raised for validation failures and for violations of the identity
schema's uniqueness rules. ORM and driver errors are not translated
except where they signal one of these rules.
"""


class IdentityError(Exception):
    """Base exception for identity errors."""


class InvalidEmailError(IdentityError, ValueError):
    """Raised when email format is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidUserNameError(IdentityError, ValueError):
    """Raised when a user name is empty or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidRoleNameError(IdentityError, ValueError):
    """Raised when a role name is empty or too long."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class EmailAlreadyExistsError(IdentityError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class DuplicateUserNameError(IdentityError):
    """User name already taken."""

    def __init__(self, user_name: str) -> None:
        self.user_name = user_name
        super().__init__(f"User name already taken: {user_name}")


class DuplicateRoleNameError(IdentityError):
    """Role name already taken."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(f"Role already exists: {role_name}")


class UserNotFoundError(IdentityError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(f"User not found: {user_id}")


class RoleNotFoundError(IdentityError):
    """Role not found."""

    def __init__(self, role_name: str) -> None:
        self.role_name = role_name
        super().__init__(f"Role not found: {role_name}")


class LoginAlreadyAssociatedError(IdentityError):
    """External login already linked to a different user."""

    def __init__(self, login_provider: str, provider_key: str) -> None:
        self.login_provider = login_provider
        self.provider_key = provider_key
        super().__init__(
            f"Login {login_provider}/{provider_key} is already linked to another user",
        )
