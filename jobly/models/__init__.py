# __init__.py
from jobly.models.application import Application
from jobly.models.company import Company
from jobly.models.jobs import Job
from jobly.models.user import User

__all__ = [
	"Application",
	"Company",
	"Job",
	"User",
]
