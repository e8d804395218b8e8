from dataclasses import dataclass


@dataclass(frozen=True)
class Claim:
    """A typed statement about a user or role, e.g. ``("department", "sales")``."""

    type: str
    value: str

    def __post_init__(self) -> None:
        if not self.type or not self.type.strip():
            msg = "Claim type cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.type}: {self.value}"
