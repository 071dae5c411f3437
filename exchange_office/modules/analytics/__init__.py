"""Client analytics exports"""

from .models import AnalyticsSummary, CurrencyShare, MonthlyActivity, PairRate, Trends
from .service import AnalyticsService, build_summary

__all__ = [
    "AnalyticsSummary",
    "AnalyticsService",
    "CurrencyShare",
    "MonthlyActivity",
    "PairRate",
    "Trends",
    "build_summary",
]
