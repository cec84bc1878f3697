"""
Create Project Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import PROJECT_MANAGER_POSITIONS, Project
from .dtos import CreateProjectCommand, ProjectInfo

logger = logging.getLogger(__name__)


class CreateProjectUseCase:
    """
    Business Rules:
    - Only head and overall coordinators may create projects
    - Team lead defaults to the caller and must be an existing user
    - end_date, when given, must fall after start_date
    - Team lead name is copied onto the project
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int, command: CreateProjectCommand) -> Result[ProjectInfo]:
        title = command.title.strip()
        description = command.description.strip()
        if not title or not description:
            return Return.err(Error("VALIDATION_ERROR", "Title and description are required"))
        if command.end_date is not None and command.end_date <= command.start_date:
            return Return.err(Error("VALIDATION_ERROR", "End date must be after start date"))

        async with self.uow:
            creator = await self.uow.users.get_by_id(current_user_id)
            if creator is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))
            if creator.position not in PROJECT_MANAGER_POSITIONS:
                return Return.err(
                    Error("INSUFFICIENT_ROLE", "Only head or overall coordinators can create projects")
                )

            team_lead = creator
            if command.team_lead_id is not None and command.team_lead_id != creator.id:
                team_lead = await self.uow.users.get_by_id(command.team_lead_id)
                if team_lead is None:
                    return Return.err(Error("USER_NOT_FOUND", "Team lead not found"))

            project = Project(
                title=title,
                description=description,
                category=command.category,
                status=command.status,
                priority=command.priority,
                start_date=command.start_date,
                end_date=command.end_date,
                team_lead_id=team_lead.id,
                team_lead_name=team_lead.name,
                technologies=[t.strip() for t in command.technologies if t.strip()],
                tags=[t.strip() for t in command.tags if t.strip()],
                progress_percentage=command.progress_percentage,
                github_url=command.github_url,
                demo_url=command.demo_url,
                image_url=command.image_url,
                is_featured=command.is_featured,
            )
            project = await self.uow.projects.create(project)
            await self.uow.commit()

            logger.info(f"User {creator.id} created project {project.id}")
            return Return.ok(ProjectInfo.from_project(project))
