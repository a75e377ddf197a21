"""initial schema: admins, applicants, status transitions

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2026-10-16 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    ]


def _interviewer_columns() -> list[sa.Column]:
    columns = []
    for slot in (1, 2, 3):
        columns += [
            sa.Column(f"interviewer{slot}_name", sa.String(length=200), nullable=True),
            sa.Column(f"interviewer{slot}_designation", sa.String(length=200), nullable=True),
            sa.Column(f"interviewer{slot}_sign", sa.String(length=200), nullable=True),
            sa.Column(f"interviewer{slot}_date", sa.String(length=50), nullable=True),
        ]
    return columns


def upgrade() -> None:
    """Create admins, applicants and status_transitions tables."""
    op.create_table(
        "admins",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), server_default="admin", nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_admins_username"), "admins", ["username"], unique=True)
    op.create_index(op.f("ix_admins_email"), "admins", ["email"], unique=True)
    op.create_index(op.f("ix_admins_created_at"), "admins", ["created_at"], unique=False)
    op.create_index(op.f("ix_admins_updated_at"), "admins", ["updated_at"], unique=False)

    op.create_table(
        "applicants",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("hometown", sa.String(length=200), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("nic_number", sa.String(length=50), nullable=True),
        sa.Column("employee_status", sa.String(length=100), nullable=True),
        sa.Column("family_details", sa.String(), nullable=True),
        sa.Column("reason_for_leaving", sa.String(), nullable=True),
        sa.Column("experience", sa.String(), nullable=True),
        sa.Column("punctuality", sa.Integer(), nullable=True),
        sa.Column("preparedness", sa.Integer(), nullable=True),
        sa.Column("communication_skills", sa.Integer(), nullable=True),
        sa.Column("experience_required", sa.Integer(), nullable=True),
        sa.Column("qualification_required", sa.Integer(), nullable=True),
        sa.Column("total_marks", sa.Integer(), server_default="0", nullable=False),
        sa.Column("comments", sa.String(), nullable=True),
        sa.Column("notice_period", sa.String(length=100), nullable=True),
        sa.Column("present_salary", sa.Integer(), nullable=True),
        sa.Column("expected_salary", sa.Integer(), nullable=True),
        sa.Column("possible_start_date", sa.String(length=50), nullable=True),
        sa.Column("overall_result", sa.String(length=50), nullable=True),
        sa.Column("status", sa.String(length=20), server_default="pending", nullable=False),
        *_interviewer_columns(),
        sa.Column("position", sa.String(length=200), nullable=True),
        sa.Column("company_name", sa.String(length=200), nullable=True),
        sa.Column("department", sa.String(length=200), nullable=True),
        sa.Column("agreed_salary", sa.Integer(), nullable=True),
        sa.Column("appointment_date", sa.String(length=50), nullable=True),
        sa.Column("benefits", sa.String(), nullable=True),
        sa.Column("cv_file", sa.String(length=1000), nullable=True),
        sa.Column("created_by", sa.Uuid(), nullable=True),
        sa.Column("created_by_name", sa.String(length=100), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'selected', 'not-selected', 'future-select')",
            name="ck_applicants_status",
        ),
    )
    op.create_index(op.f("ix_applicants_name"), "applicants", ["name"], unique=False)
    op.create_index(op.f("ix_applicants_status"), "applicants", ["status"], unique=False)
    op.create_index(op.f("ix_applicants_created_at"), "applicants", ["created_at"], unique=False)
    op.create_index(op.f("ix_applicants_updated_at"), "applicants", ["updated_at"], unique=False)

    op.create_table(
        "status_transitions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("applicant_id", sa.Uuid(), nullable=False),
        sa.Column("from_status", sa.String(length=20), nullable=True),
        sa.Column("to_status", sa.String(length=20), nullable=False),
        sa.Column("actor_id", sa.Uuid(), nullable=True),
        sa.Column("actor_name", sa.String(length=100), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.ForeignKeyConstraint(["applicant_id"], ["applicants.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_status_transitions_applicant_id"),
        "status_transitions",
        ["applicant_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f("ix_status_transitions_applicant_id"), table_name="status_transitions")
    op.drop_table("status_transitions")
    op.drop_index(op.f("ix_applicants_updated_at"), table_name="applicants")
    op.drop_index(op.f("ix_applicants_created_at"), table_name="applicants")
    op.drop_index(op.f("ix_applicants_status"), table_name="applicants")
    op.drop_index(op.f("ix_applicants_name"), table_name="applicants")
    op.drop_table("applicants")
    op.drop_index(op.f("ix_admins_updated_at"), table_name="admins")
    op.drop_index(op.f("ix_admins_created_at"), table_name="admins")
    op.drop_index(op.f("ix_admins_email"), table_name="admins")
    op.drop_index(op.f("ix_admins_username"), table_name="admins")
    op.drop_table("admins")
