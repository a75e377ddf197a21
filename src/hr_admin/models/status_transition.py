import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_admin.models.base import Base, UUIDPrimaryKeyMixin, utcnow

if TYPE_CHECKING:
    from hr_admin.models.applicant import Applicant


class StatusTransition(UUIDPrimaryKeyMixin, Base):
    """Append-only record of one applicant status change."""

    __tablename__ = "status_transitions"

    applicant_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("applicants.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    from_status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    to_status: Mapped[str] = mapped_column(String(20), nullable=False)
    actor_id: Mapped[uuid.UUID | None] = mapped_column(nullable=True)
    actor_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )

    applicant: Mapped["Applicant"] = relationship(back_populates="transitions")

    def __repr__(self) -> str:
        return f"<StatusTransition {self.from_status} -> {self.to_status}>"
