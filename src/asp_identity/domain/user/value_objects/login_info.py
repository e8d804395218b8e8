from dataclasses import dataclass


@dataclass(frozen=True)
class UserLoginInfo:
    """Link between a local user and an external login provider account."""

    login_provider: str
    provider_key: str
    display_name: str | None = None

    def __post_init__(self) -> None:
        if not self.login_provider or not self.provider_key:
            msg = "Login provider and provider key are required"
            raise ValueError(msg)
