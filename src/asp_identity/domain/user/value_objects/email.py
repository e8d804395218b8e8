"""Email address as stored on a user record.

The address keeps the spelling it was entered with; lookups and equality
go through its normalized key, the same upper-cased form written to
``users.normalized_email``.
"""

import re
from dataclasses import dataclass, field

from asp_identity.domain.exceptions import InvalidEmailError
from asp_identity.domain.keys import normalize_key

# local@domain.tld, matched case-insensitively
EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$", re.IGNORECASE)

# users.email / users.normalized_email column width
MAX_EMAIL_LENGTH = 256


@dataclass(frozen=True, eq=False)
class Email:
    """Validated email address.

    Examples
    --------
    >>> Email(" Alice@Example.com ").value
    'Alice@Example.com'
    >>> Email("Alice@Example.com") == Email("alice@example.COM")
    True
    """

    value: str
    normalized: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        address = (self.value or "").strip()
        if not address:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        if len(address) > MAX_EMAIL_LENGTH:
            msg = f"Email cannot exceed {MAX_EMAIL_LENGTH} characters"
            raise InvalidEmailError(msg)
        if not EMAIL_PATTERN.match(address):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        object.__setattr__(self, "value", address)
        object.__setattr__(self, "normalized", normalize_key(address))

    @classmethod
    def reconstitute(cls, value: str) -> "Email":
        """Rebuild a stored address without re-validating its format."""
        email = object.__new__(cls)
        object.__setattr__(email, "value", value)
        object.__setattr__(email, "normalized", normalize_key(value))
        return email

    @classmethod
    def parse_optional(cls, value: "str | Email | None") -> "Email | None":
        """Accept an ``Email``, a string, or nothing (None / blank)."""
        if isinstance(value, Email):
            return value
        if value is None or not value.strip():
            return None
        return cls(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return NotImplemented
        return self.normalized == other.normalized

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self.value
