import uuid
from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DateRange(StrEnum):
    ALL_TIME = "all-time"
    LAST_7_DAYS = "last-7-days"
    LAST_30_DAYS = "last-30-days"
    THIS_YEAR = "this-year"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MonthlyBucket(_CamelModel):
    month: int
    applicants: int


class DashboardStats(_CamelModel):
    total_applicants: int
    selected_count: int
    not_selected_count: int
    future_select_count: int
    pending_count: int
    monthly: list[MonthlyBucket]


class ActivityEntry(_CamelModel):
    id: uuid.UUID
    applicant_name: str
    action: str
    timestamp: datetime
    user_name: str
