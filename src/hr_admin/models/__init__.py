from hr_admin.models.admin import Admin
from hr_admin.models.applicant import Applicant
from hr_admin.models.base import Base
from hr_admin.models.status_transition import StatusTransition

__all__ = ["Admin", "Applicant", "Base", "StatusTransition"]
