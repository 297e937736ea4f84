from app.schemas.base import CamelModel


class DashboardStatsResponse(CamelModel):
    total_platforms: int
    total_products: int
    today_rankings: int
    total_categories: int
