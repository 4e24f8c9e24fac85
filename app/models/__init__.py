"""
Database models package.
"""

from app.models.lookup import Status, JobType, Industry, ResourceType, Currency
from app.models.admin import Admin, AdminRole
from app.models.user import User, UserRole
from app.models.company import Company
from app.models.job_source import JobSource
from app.models.job import Job, SalaryFrequency
from app.models.resource import Resource

__all__ = [
    "Status", "JobType", "Industry", "ResourceType", "Currency",
    "Admin", "AdminRole", "User", "UserRole",
    "Company", "JobSource", "Job", "SalaryFrequency", "Resource",
]
