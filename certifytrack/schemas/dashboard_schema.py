from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DashboardStats(BaseModel):
    """Platform-wide totals, serialised with camelCase keys (``totalUsers`` ...)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total_users: int = 0
    total_courses: int = 0
    total_internships: int = 0
    total_tasks: int = 0
    total_submissions: int = 0
    total_certificates: int = 0
