import uuid
from datetime import datetime
from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class ApplicantStatus(StrEnum):
    PENDING = "pending"
    SELECTED = "selected"
    NOT_SELECTED = "not-selected"
    FUTURE_SELECT = "future-select"


class OverallResult(StrEnum):
    MEETS_REQUIREMENT = "MEETS JOB REQUIREMENT"
    DOES_NOT_MEET_REQUIREMENT = "DOES NOT MEET JOB REQUIREMENT"
    OVER_QUALIFIED = "OVER QUALIFIED FOR THE JOB"
    SUITABLE_FOR_ANOTHER_POSITION = "SUITABLE FOR ANOTHER POSITION"


SubScore = Annotated[int, Field(ge=0, le=10)]


class Interviewer(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, max_length=200)
    designation: str | None = Field(None, max_length=200)
    sign: str | None = Field(None, max_length=200)
    date: str | None = Field(None, max_length=50)


class Appointment(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    position: str = Field(..., min_length=1, max_length=200)
    company_name: str | None = Field(None, max_length=200)
    department: str | None = Field(None, max_length=200)
    agreed_salary: int | None = Field(None, ge=0)
    appointment_date: str | None = Field(None, max_length=50)
    benefits: str | None = None


class ApplicantCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr | None = None
    hometown: str | None = Field(None, max_length=200)
    age: int | None = Field(None, ge=0, le=120)
    phone: str | None = Field(None, max_length=50)
    nic_number: str | None = Field(None, max_length=50)
    employee_status: str | None = Field(None, max_length=100)
    family_details: str | None = None
    reason_for_leaving: str | None = None
    experience: str | None = None

    punctuality: SubScore | None = None
    preparedness: SubScore | None = None
    communication_skills: SubScore | None = None
    experience_required: SubScore | None = None
    qualification_required: SubScore | None = None

    comments: str | None = None
    notice_period: str | None = Field(None, max_length=100)
    present_salary: int | None = Field(None, ge=0)
    expected_salary: int | None = Field(None, ge=0)
    possible_start_date: str | None = Field(None, max_length=50)
    overall_result: OverallResult | None = None
    status: ApplicantStatus = ApplicantStatus.PENDING

    interviewers: list[Interviewer] = Field(default_factory=list, max_length=3)
    appointment: Appointment | None = None


class ApplicantUpdate(BaseModel):
    """Fields omitted from the payload are left untouched."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=200)
    email: EmailStr | None = None
    hometown: str | None = Field(None, max_length=200)
    age: int | None = Field(None, ge=0, le=120)
    phone: str | None = Field(None, max_length=50)
    nic_number: str | None = Field(None, max_length=50)
    employee_status: str | None = Field(None, max_length=100)
    family_details: str | None = None
    reason_for_leaving: str | None = None
    experience: str | None = None

    punctuality: SubScore | None = None
    preparedness: SubScore | None = None
    communication_skills: SubScore | None = None
    experience_required: SubScore | None = None
    qualification_required: SubScore | None = None

    comments: str | None = None
    notice_period: str | None = Field(None, max_length=100)
    present_salary: int | None = Field(None, ge=0)
    expected_salary: int | None = Field(None, ge=0)
    possible_start_date: str | None = Field(None, max_length=50)
    overall_result: OverallResult | None = None
    status: ApplicantStatus | None = None

    interviewers: list[Interviewer] | None = Field(None, max_length=3)
    appointment: Appointment | None = None


class ApplicantStatusUpdate(BaseModel):
    status: ApplicantStatus


class ApplicantRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str | None
    hometown: str | None
    age: int | None
    phone: str | None
    nic_number: str | None
    employee_status: str | None
    family_details: str | None
    reason_for_leaving: str | None
    experience: str | None

    punctuality: int | None
    preparedness: int | None
    communication_skills: int | None
    experience_required: int | None
    qualification_required: int | None
    total_marks: int

    comments: str | None
    notice_period: str | None
    present_salary: int | None
    expected_salary: int | None
    possible_start_date: str | None
    overall_result: str | None
    status: str

    interviewers: list[Interviewer]
    appointment: Appointment | None
    cv_file: str | None

    created_by: uuid.UUID | None
    created_by_name: str | None
    created_at: datetime
    updated_at: datetime


class StatusTransitionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    applicant_id: uuid.UUID
    from_status: str | None
    to_status: str
    actor_id: uuid.UUID | None
    actor_name: str | None
    created_at: datetime
