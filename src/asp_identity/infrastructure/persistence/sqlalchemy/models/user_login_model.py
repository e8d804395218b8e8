"""SQLAlchemy models for external logins and provider tokens."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from asp_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class UserLoginModel(IdentityBase):
    """An external provider account (``login_provider``, ``provider_key``)."""

    __tablename__ = "user_logins"

    login_provider: Mapped[str] = mapped_column(String(128), primary_key=True)
    provider_key: Mapped[str] = mapped_column(String(128), primary_key=True)
    provider_display_name: Mapped[str | None] = mapped_column(
        String(256),
        nullable=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<UserLoginModel(login_provider={self.login_provider}, "
            f"user_id={self.user_id})>"
        )


class UserTokenModel(IdentityBase):
    """A named value a login provider issued for a user."""

    __tablename__ = "user_tokens"

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    login_provider: Mapped[str] = mapped_column(String(128), primary_key=True)
    name: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<UserTokenModel(user_id={self.user_id}, "
            f"login_provider={self.login_provider}, name={self.name})>"
        )
