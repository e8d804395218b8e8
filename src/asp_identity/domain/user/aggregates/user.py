"""User aggregate."""

from datetime import datetime
from typing import Union
from uuid import UUID, uuid4

from asp_identity.domain.exceptions import InvalidUserNameError
from asp_identity.domain.keys import normalize_key
from asp_identity.domain.shared.time import utc_now
from asp_identity.domain.user.value_objects.email import Email

MAX_USER_NAME_LENGTH = 256


def new_security_stamp() -> str:
    return uuid4().hex.upper()


class User:
    """
    User aggregate root.

    Holds profile identity only. Credentials, lockout counters and tokens
    live in the persistence model and are managed by external services.

    The email is optional: a user needs a user name or an email, and the
    user name defaults to the email.
    """

    def __init__(  # noqa: PLR0913
        self,
        email: Union[str, Email, None],
        user_name: str | None = None,
        id: UUID | None = None,
        email_confirmed: bool = False,
        phone_number: str | None = None,
        security_stamp: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = Email.parse_optional(email)
        if user_name is None:
            if self._email is None:
                msg = "A user needs a user name or an email"
                raise InvalidUserNameError(msg)
            user_name = self._email.value
        self._user_name = self._validate_user_name(user_name)
        self._id = id or uuid4()
        self._email_confirmed = email_confirmed
        self._phone_number = phone_number
        self._security_stamp = security_stamp or new_security_stamp()
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @staticmethod
    def _validate_user_name(user_name: str) -> str:
        cleaned = user_name.strip()
        if not cleaned:
            msg = "User name cannot be empty"
            raise InvalidUserNameError(msg)
        if len(cleaned) > MAX_USER_NAME_LENGTH:
            msg = f"User name cannot exceed {MAX_USER_NAME_LENGTH} characters"
            raise InvalidUserNameError(msg)
        return cleaned

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def user_name(self) -> str:
        return self._user_name

    @property
    def normalized_user_name(self) -> str:
        return normalize_key(self._user_name)

    @property
    def email(self) -> str | None:
        return self._email.value if self._email else None

    @property
    def email_obj(self) -> Email | None:
        return self._email

    @property
    def normalized_email(self) -> str | None:
        return self._email.normalized if self._email else None

    @property
    def email_confirmed(self) -> bool:
        return self._email_confirmed

    @property
    def phone_number(self) -> str | None:
        return self._phone_number

    @property
    def security_stamp(self) -> str:
        return self._security_stamp

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def rename(self, user_name: str) -> None:
        self._user_name = self._validate_user_name(user_name)
        self._touch()

    def confirm_email(self) -> None:
        self._email_confirmed = True
        self._touch()

    def change_email(self, email: Union[str, Email]) -> None:
        """Replace the email; the new address starts unconfirmed."""
        new_email = email if isinstance(email, Email) else Email(email)
        if new_email == self._email:
            return
        self._email = new_email
        self._email_confirmed = False
        self._security_stamp = new_security_stamp()
        self._touch()

    def set_phone_number(self, phone_number: str | None) -> None:
        self._phone_number = phone_number.strip() if phone_number else None
        self._touch()

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        user_name: str | None = None,
    ) -> "User":
        return cls(email=email, user_name=user_name)

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: UUID,
        user_name: str,
        email: Union[str, Email, None],
        email_confirmed: bool,
        phone_number: str | None,
        security_stamp: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        if isinstance(email, str):
            email = Email.reconstitute(email) if email.strip() else None
        return cls(
            id=id,
            user_name=user_name,
            email=email,
            email_confirmed=email_confirmed,
            phone_number=phone_number,
            security_stamp=security_stamp,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, user_name={self._user_name})"
