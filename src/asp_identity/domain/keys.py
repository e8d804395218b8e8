"""Lookup keys for case-insensitive identity queries."""


def normalize_key(value: str) -> str:
    """Return the normalized lookup form of a user name, email or role name.

    Normalized keys are stored next to the display value and carry the
    uniqueness constraints, so ``Alice`` and ``alice`` collide.
    """
    return value.strip().upper()
