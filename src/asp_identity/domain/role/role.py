"""Role aggregate."""

from uuid import UUID, uuid4

from asp_identity.domain.exceptions import InvalidRoleNameError
from asp_identity.domain.keys import normalize_key

MAX_ROLE_NAME_LENGTH = 256


class Role:
    """A named group of users, e.g. ``Administrator``."""

    def __init__(self, name: str, id: UUID | None = None):
        self._name = self._validate_name(name)
        self._id = id or uuid4()

    @staticmethod
    def _validate_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            msg = "Role name cannot be empty"
            raise InvalidRoleNameError(msg)
        if len(cleaned) > MAX_ROLE_NAME_LENGTH:
            msg = f"Role name cannot exceed {MAX_ROLE_NAME_LENGTH} characters"
            raise InvalidRoleNameError(msg)
        return cleaned

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def normalized_name(self) -> str:
        return normalize_key(self._name)

    def rename(self, name: str) -> None:
        self._name = self._validate_name(name)

    @classmethod
    def create(cls, name: str) -> "Role":
        return cls(name=name)

    @classmethod
    def reconstitute(cls, id: UUID, name: str) -> "Role":
        return cls(name=name, id=id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Role):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Role(id={self._id}, name={self._name})"
