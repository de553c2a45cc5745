from portfolio.domains.admin.schemas import DashboardStats
from portfolio.domains.admin.services import AdminStatsService

__all__ = ["DashboardStats", "AdminStatsService"]
