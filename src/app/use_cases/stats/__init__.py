from .get_stats_use_case import GetStatsUseCase, StatsResponse

__all__ = ["GetStatsUseCase", "StatsResponse"]
