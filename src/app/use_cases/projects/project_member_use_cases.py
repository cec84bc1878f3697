"""
Project Member Use Cases

Roster changes are soft: removing a member deactivates the row and stamps
left_at, and adding the same user again reactivates it.
"""

import logging

from libs.result import Error, Result, Return
from src.app.repositories.user_repository import UserFilter
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import ProjectMember
from .access import can_manage_project, load_project, load_project_for_manager
from .dtos import AddMemberCommand, MemberInfo, MemberListResponse, UpdateMemberCommand

logger = logging.getLogger(__name__)


class ListProjectMembersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, project_id: int) -> Result[MemberListResponse]:
        async with self.uow:
            project_result = await load_project(self.uow, project_id)
            if project_result.is_err():
                return project_result

            members = await self.uow.project_members.list_active(project_id)
            users = {}
            if members:
                found = await self.uow.users.list(UserFilter(ids=[m.user_id for m in members]))
                users = {user.id: user for user in found}
            return Return.ok(
                MemberListResponse(
                    members=[MemberInfo.from_member(m, users.get(m.user_id)) for m in members]
                )
            )


class AddProjectMemberUseCase:
    """
    Business Rules:
    - Only the team lead or a head/overall coordinator may add members
    - The user must exist and must not already be an active member
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, current_user_id: int, project_id: int, command: AddMemberCommand
    ) -> Result[MemberInfo]:
        role = command.role.strip()
        if not role:
            return Return.err(Error("VALIDATION_ERROR", "Role is required"))

        async with self.uow:
            access = await load_project_for_manager(self.uow, current_user_id, project_id)
            if access.is_err():
                return access

            user = await self.uow.users.get_by_id(command.user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            now = utcnow()
            member = await self.uow.project_members.get(project_id, user.id)
            if member is not None and member.is_active:
                return Return.err(
                    Error("ALREADY_PROJECT_MEMBER", "User is already a member of this project")
                )

            if member is None:
                member = await self.uow.project_members.create(
                    ProjectMember(
                        project_id=project_id,
                        user_id=user.id,
                        role=role,
                        contributions=command.contributions,
                        joined_at=now,
                    )
                )
            else:
                member.is_active = True
                member.left_at = None
                member.joined_at = now
                member.role = role
                member.contributions = command.contributions
                member.updated_at = now
                member = await self.uow.project_members.update(member)
            await self.uow.commit()

            logger.info(f"User {current_user_id} added user {user.id} to project {project_id}")
            return Return.ok(MemberInfo.from_member(member, user))


class UpdateProjectMemberUseCase:
    """Team lead or head/overall coordinator changes a member's role, notes or status"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, current_user_id: int, project_id: int, user_id: int, command: UpdateMemberCommand
    ) -> Result[MemberInfo]:
        async with self.uow:
            access = await load_project_for_manager(self.uow, current_user_id, project_id)
            if access.is_err():
                return access

            member = await self.uow.project_members.get(project_id, user_id)
            if member is None:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))
            user = await self.uow.users.get_by_id(user_id)

            now = utcnow()
            if command.role is not None:
                role = command.role.strip()
                if not role:
                    return Return.err(Error("VALIDATION_ERROR", "Role cannot be empty"))
                member.role = role
            if command.contributions is not None:
                member.contributions = command.contributions
            if command.is_active is not None and command.is_active != member.is_active:
                member.is_active = command.is_active
                member.left_at = None if command.is_active else now

            member.updated_at = now
            member = await self.uow.project_members.update(member)
            await self.uow.commit()

            return Return.ok(MemberInfo.from_member(member, user))


class RemoveProjectMemberUseCase:
    """
    Business Rules:
    - The team lead, a head/overall coordinator, or the member themselves
      may remove a membership
    - Removal deactivates the row and stamps left_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, current_user_id: int, project_id: int, user_id: int) -> Result[None]:
        async with self.uow:
            project_result = await load_project(self.uow, project_id)
            if project_result.is_err():
                return project_result
            project = project_result.value

            if current_user_id != user_id:
                caller = await self.uow.users.get_by_id(current_user_id)
                if caller is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))
                if not can_manage_project(caller, project):
                    return Return.err(Error("FORBIDDEN", "Permission denied"))

            member = await self.uow.project_members.get(project_id, user_id)
            if member is None or not member.is_active:
                return Return.err(Error("MEMBER_NOT_FOUND", "Member not found"))

            now = utcnow()
            member.is_active = False
            member.left_at = now
            member.updated_at = now
            await self.uow.project_members.update(member)
            await self.uow.commit()

            logger.info(f"User {current_user_id} removed user {user_id} from project {project_id}")
            return Return.ok(None)
