"""SQLAlchemy model for roles."""

from uuid import UUID, uuid4

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from asp_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase


class RoleModel(IdentityBase):
    __tablename__ = "roles"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    name: Mapped[str] = mapped_column(String(256), nullable=False)
    normalized_name: Mapped[str] = mapped_column(
        String(256),
        unique=True,
        nullable=False,
        index=True,
    )
    concurrency_stamp: Mapped[str | None] = mapped_column(
        String(64),
        nullable=True,
        default=lambda: str(uuid4()),
    )

    def __repr__(self) -> str:
        return f"<RoleModel(id={self.id}, name={self.name})>"
