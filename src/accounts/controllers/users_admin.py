import typing as t
from uuid import UUID

from django.db.models import QuerySet
from ninja_extra import api_controller, route, status
from ninja_extra.pagination import PageNumberPaginationExtra, PaginatedResponseSchema, paginate
from ninja_extra.searching import Searching, searching

from accounts import schema
from accounts.models import ClubUser
from accounts.service import account as account_service
from common.auth_base import AdminJWTAuth
from common.controllers import UserAwareController
from common.schema import ValidationErrorResponse
from common.throttling import WriteThrottle


@api_controller("/admin/users", auth=AdminJWTAuth(), tags=["Admin Users"], throttle=WriteThrottle())
class UserAdminController(UserAwareController):
    """Club administrators manage member accounts here."""

    def get_one(self, user_id: UUID) -> ClubUser:
        return t.cast(ClubUser, self.get_object_or_exception(ClubUser.objects.all(), pk=user_id))

    @route.get("", url_name="list_users", response=PaginatedResponseSchema[schema.ClubUserSchema])
    @paginate(PageNumberPaginationExtra, page_size=50)
    @searching(Searching, search_fields=["email", "name", "phone_number"])
    def list_users(self) -> QuerySet[ClubUser]:
        """List all users, newest first. Supports `?search=`."""
        return ClubUser.objects.all()

    @route.get("/{user_id}", url_name="get_user", response=schema.ClubUserSchema)
    def get_user(self, user_id: UUID) -> ClubUser:
        return self.get_one(user_id)

    @route.post(
        "",
        url_name="create_user",
        response={201: schema.ClubUserSchema, 400: ValidationErrorResponse},
    )
    def create_user(self, payload: schema.UserCreateSchema) -> tuple[int, ClubUser]:
        """Create a member or administrator account."""
        return status.HTTP_201_CREATED, account_service.create_user(payload)

    @route.put(
        "/{user_id}",
        url_name="update_user",
        response={200: schema.ClubUserSchema, 400: ValidationErrorResponse},
    )
    def update_user(self, user_id: UUID, payload: schema.UserUpdateSchema) -> ClubUser:
        """Edit a user. Omitted fields are left untouched."""
        return account_service.update_user(self.get_one(user_id), payload)

    @route.delete("/{user_id}", url_name="delete_user", response={204: None})
    def delete_user(self, user_id: UUID) -> tuple[int, None]:
        """Delete a user and all of their event registrations."""
        account_service.delete_user(self.get_one(user_id))
        return 204, None
