"""Route registration helpers."""

from .auth import register_auth_routes
from .categories import register_category_routes
from .info import register_info_routes
from .statistics import register_statistics_routes
from .tasks import register_task_routes
from .users import register_user_routes

__all__ = [
    "register_auth_routes",
    "register_category_routes",
    "register_info_routes",
    "register_statistics_routes",
    "register_task_routes",
    "register_user_routes",
]
