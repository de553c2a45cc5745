from pydantic import BaseModel, ConfigDict, Field


class DashboardStats(BaseModel):
    """Сводная статистика для админки"""
    projects: int = 0
    notes: int = 0
    videos: int = 0
    messages: int = 0
    total_views: int = Field(0, alias="totalViews")

    model_config = ConfigDict(populate_by_name=True)
