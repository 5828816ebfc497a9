from app.models.user import User, UserRole
from app.models.job import Job

__all__ = ["User", "UserRole", "Job"]
