"""
Milestone Use Cases

Reading is open; changes need the team lead or a head/overall coordinator.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Milestone
from .access import load_project, load_project_for_manager
from .dtos import (
    CreateMilestoneCommand,
    MilestoneInfo,
    MilestoneListResponse,
    UpdateMilestoneCommand,
)

logger = logging.getLogger(__name__)

MILESTONE_NOT_FOUND = Error("MILESTONE_NOT_FOUND", "Milestone not found")


class ListMilestonesUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: int) -> Result[MilestoneListResponse]:
        async with self.uow:
            project_result = await load_project(self.uow, project_id)
            if project_result.is_err():
                return project_result

            milestones = await self.uow.milestones.list_for_project(project_id)
            return Return.ok(
                MilestoneListResponse(
                    milestones=[MilestoneInfo.from_milestone(m) for m in milestones]
                )
            )


class GetMilestoneUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: int, milestone_id: int) -> Result[MilestoneInfo]:
        async with self.uow:
            milestone = await self.uow.milestones.get(project_id, milestone_id)
            if milestone is None:
                return Return.err(MILESTONE_NOT_FOUND)
            return Return.ok(MilestoneInfo.from_milestone(milestone))


class CreateMilestoneUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, current_user_id: int, project_id: int, command: CreateMilestoneCommand
    ) -> Result[MilestoneInfo]:
        title = command.title.strip()
        if not title:
            return Return.err(Error("VALIDATION_ERROR", "Title is required"))

        async with self.uow:
            access = await load_project_for_manager(self.uow, current_user_id, project_id)
            if access.is_err():
                return access
            user, _ = access.value

            milestone = await self.uow.milestones.create(
                Milestone(
                    project_id=project_id,
                    title=title,
                    description=command.description,
                    target_date=command.target_date,
                    completed=command.completed,
                    created_by=user.id,
                )
            )
            await self.uow.commit()

            logger.info(f"User {user.id} added milestone {milestone.id} to project {project_id}")
            return Return.ok(MilestoneInfo.from_milestone(milestone))


class UpdateMilestoneUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        current_user_id: int,
        project_id: int,
        milestone_id: int,
        command: UpdateMilestoneCommand,
    ) -> Result[MilestoneInfo]:
        async with self.uow:
            access = await load_project_for_manager(self.uow, current_user_id, project_id)
            if access.is_err():
                return access

            milestone = await self.uow.milestones.get(project_id, milestone_id)
            if milestone is None:
                return Return.err(MILESTONE_NOT_FOUND)

            if command.title is not None:
                title = command.title.strip()
                if not title:
                    return Return.err(Error("VALIDATION_ERROR", "Title cannot be empty"))
                milestone.title = title
            for field in ("description", "target_date", "completed"):
                value = getattr(command, field)
                if value is not None:
                    setattr(milestone, field, value)

            milestone.updated_at = utcnow()
            milestone = await self.uow.milestones.update(milestone)
            await self.uow.commit()

            return Return.ok(MilestoneInfo.from_milestone(milestone))


class DeleteMilestoneUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int, project_id: int, milestone_id: int) -> Result[None]:
        async with self.uow:
            access = await load_project_for_manager(self.uow, current_user_id, project_id)
            if access.is_err():
                return access

            milestone = await self.uow.milestones.get(project_id, milestone_id)
            if milestone is None:
                return Return.err(MILESTONE_NOT_FOUND)

            await self.uow.milestones.delete(milestone)
            await self.uow.commit()

            logger.info(f"User {current_user_id} deleted milestone {milestone_id}")
            return Return.ok(None)
