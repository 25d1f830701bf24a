"""
Admin module.

User management for the super admin: listing, creation, promotion and
demotion, and deletion.

Public API:
- IAdminService: Interface for user management
- Request/response models
"""

from .interfaces import IAdminService
from .models import CreateUserRequest, DeleteResult, SetAdminRequest, UserListResponse

__all__ = [
    # Interface
    "IAdminService",
    # Models
    "CreateUserRequest",
    "DeleteResult",
    "SetAdminRequest",
    "UserListResponse",
]
