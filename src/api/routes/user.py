from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from src.api.error import raise_for_error
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import UserInfo
from src.app.use_cases.users import (
    ListAssignableUsersUseCase,
    ListAssigneesUseCase,
    ListFeaturedTeamUseCase,
    ListUsersUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
    UserListResponse,
)
from src.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


class UpdateProfileResponse(BaseModel):
    user: UserInfo


@router.get("/user", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_users(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Member directory, signed-in users only"""
    result = await ListUsersUseCase(uow).execute()
    return result.value


@router.get("/user/assignable", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_assignable_users(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Users the caller may assign tasks to: everyone whose position ranks at or
    below the caller's, excluding the caller.

    Raises:
        - 401 Unauthorized: No or invalid session
        - 404 Not Found: Session user no longer exists
    """
    result = await ListAssignableUsersUseCase(uow).execute(int(current_user["user_id"]))

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/users/assignees", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def list_assignees(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    result = await ListAssigneesUseCase(uow).execute()
    return result.value


@router.get("/team/featured", status_code=status.HTTP_200_OK, response_model=UserListResponse)
async def featured_team(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Public list of coordinators and executives, most senior first"""
    result = await ListFeaturedTeamUseCase(uow).execute()
    return result.value


@router.post("/user/update", status_code=status.HTTP_200_OK, response_model=UpdateProfileResponse)
async def update_profile(
    request: UpdateProfileCommand,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update the signed-in user's profile.

    Raises:
        - 400 Bad Request: Malformed fields or email already taken
        - 401 Unauthorized: No or invalid session
        - 403 Forbidden: id belongs to another user
        - 404 Not Found: User not found
    """
    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(int(current_user["user_id"]), request)

    if result.is_err():
        raise_for_error(result.error, overrides={"EMAIL_ALREADY_EXISTS": status.HTTP_400_BAD_REQUEST})

    return UpdateProfileResponse(user=result.value)
