import uuid
from typing import TYPE_CHECKING, Any

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hr_admin.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from hr_admin.models.status_transition import StatusTransition

INTERVIEWER_SLOTS = (1, 2, 3)
INTERVIEWER_FIELDS = ("name", "designation", "sign", "date")


class Applicant(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "applicants"
    __table_args__ = (
        CheckConstraint(
            "status IN ('pending', 'selected', 'not-selected', 'future-select')",
            name="ck_applicants_status",
        ),
    )

    # Personal
    name: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hometown: Mapped[str | None] = mapped_column(String(200), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    nic_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    employee_status: Mapped[str | None] = mapped_column(String(100), nullable=True)
    family_details: Mapped[str | None] = mapped_column(nullable=True)
    reason_for_leaving: Mapped[str | None] = mapped_column(nullable=True)
    experience: Mapped[str | None] = mapped_column(nullable=True)

    # Scoring
    punctuality: Mapped[int | None] = mapped_column(Integer, nullable=True)
    preparedness: Mapped[int | None] = mapped_column(Integer, nullable=True)
    communication_skills: Mapped[int | None] = mapped_column(Integer, nullable=True)
    experience_required: Mapped[int | None] = mapped_column(Integer, nullable=True)
    qualification_required: Mapped[int | None] = mapped_column(Integer, nullable=True)
    total_marks: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )

    # Evaluation
    comments: Mapped[str | None] = mapped_column(nullable=True)
    notice_period: Mapped[str | None] = mapped_column(String(100), nullable=True)
    present_salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    expected_salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    possible_start_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    overall_result: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", server_default="pending", index=True
    )

    # Interview panel
    interviewer1_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer1_designation: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer1_sign: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer1_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    interviewer2_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer2_designation: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer2_sign: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer2_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    interviewer3_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer3_designation: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer3_sign: Mapped[str | None] = mapped_column(String(200), nullable=True)
    interviewer3_date: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Appointment
    position: Mapped[str | None] = mapped_column(String(200), nullable=True)
    company_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    department: Mapped[str | None] = mapped_column(String(200), nullable=True)
    agreed_salary: Mapped[int | None] = mapped_column(Integer, nullable=True)
    appointment_date: Mapped[str | None] = mapped_column(String(50), nullable=True)
    benefits: Mapped[str | None] = mapped_column(nullable=True)

    cv_file: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    # Audit
    created_by: Mapped[uuid.UUID | None] = mapped_column(nullable=True)
    created_by_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    transitions: Mapped[list["StatusTransition"]] = relationship(
        back_populates="applicant",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="StatusTransition.created_at",
    )

    @property
    def interviewers(self) -> list[dict[str, Any]]:
        """Filled interviewer slots, in slot order."""
        panel = []
        for slot in INTERVIEWER_SLOTS:
            if not getattr(self, f"interviewer{slot}_name"):
                continue
            panel.append(
                {field: getattr(self, f"interviewer{slot}_{field}") for field in INTERVIEWER_FIELDS}
            )
        return panel

    @property
    def appointment(self) -> dict[str, Any] | None:
        if not self.position:
            return None
        return {
            "position": self.position,
            "company_name": self.company_name,
            "department": self.department,
            "agreed_salary": self.agreed_salary,
            "appointment_date": self.appointment_date,
            "benefits": self.benefits,
        }

    def __repr__(self) -> str:
        return f"<Applicant {self.name} ({self.status})>"
