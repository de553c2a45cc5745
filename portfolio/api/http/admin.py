from fastapi import APIRouter, Depends

from portfolio.api.deps import get_admin_stats_service
from portfolio.core.auth import get_current_user
from portfolio.domains.admin.schemas import DashboardStats
from portfolio.domains.admin.services import AdminStatsService

router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(get_current_user)])


@router.get("/stats", response_model=DashboardStats)
async def get_stats(stats_service: AdminStatsService = Depends(get_admin_stats_service)):
    """Количество проектов, заметок, видео, непрочитанных сообщений и сумма просмотров"""
    return await stats_service.get_stats()
