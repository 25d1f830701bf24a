"""
Admin API endpoints.

User management, reserved for the super admin.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_admin_service
from api.middleware.auth import require_super_admin
from modules.users.models import UserSummary
from shared.models import AuthenticatedUser

from .interfaces import IAdminService
from .models import CreateUserRequest, DeleteResult, SetAdminRequest, UserListResponse

router = APIRouter()


@router.get("/users", response_model=UserListResponse)
async def list_users(
    admin: AuthenticatedUser = Depends(require_super_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UserListResponse:
    """List all users, newest first."""
    users = await service.list_users()
    return UserListResponse(users=users, total=len(users))


@router.get("/admins", response_model=UserListResponse)
async def list_admins(
    admin: AuthenticatedUser = Depends(require_super_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UserListResponse:
    """List super admins and admins."""
    users = await service.list_admins()
    return UserListResponse(users=users, total=len(users))


@router.post("/users", response_model=UserSummary, status_code=201)
async def create_user(
    request: CreateUserRequest,
    admin: AuthenticatedUser = Depends(require_super_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UserSummary:
    """Create an email+password user."""
    return await service.create_user(request.name, request.email, request.password)


@router.patch("/users/{user_id}", response_model=UserSummary)
async def set_admin(
    user_id: str,
    request: SetAdminRequest,
    admin: AuthenticatedUser = Depends(require_super_admin),
    service: IAdminService = Depends(get_admin_service),
) -> UserSummary:
    """Promote or demote a user. The super admin cannot be demoted."""
    return await service.set_admin(user_id, request.is_admin)


@router.delete("/users/{user_id}", response_model=DeleteResult)
async def delete_user(
    user_id: str,
    admin: AuthenticatedUser = Depends(require_super_admin),
    service: IAdminService = Depends(get_admin_service),
) -> DeleteResult:
    """Delete one user. The super admin cannot be deleted."""
    deleted = await service.delete_user(user_id)
    return DeleteResult(deleted_count=deleted, message="User deleted successfully")


@router.delete("/users", response_model=DeleteResult)
async def delete_all_users(
    admin: AuthenticatedUser = Depends(require_super_admin),
    service: IAdminService = Depends(get_admin_service),
) -> DeleteResult:
    """Delete every user except the super admin."""
    deleted = await service.delete_all_users()
    return DeleteResult(deleted_count=deleted, message=f"Deleted {deleted} users")
