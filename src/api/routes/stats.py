from fastapi import APIRouter, Depends, status

from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.stats import GetStatsUseCase, StatsResponse
from src.depends import get_unit_of_work

router = APIRouter(tags=["Stats"])


@router.get("/stats", status_code=status.HTTP_200_OK, response_model=StatsResponse)
async def get_stats(uow: UnitOfWork = Depends(get_unit_of_work)):
    result = await GetStatsUseCase(uow).execute()
    return result.value
