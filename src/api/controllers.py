"""Controllers: translate use case outcomes into HTTP envelopes.

No business rules and no repository access live here. A failed Outcome is
mapped to a status code by its ErrorKind; an exception escaping the use case
is reported as 500.
"""

import logging
from collections.abc import Callable, Mapping

from fastapi import status
from fastapi.responses import JSONResponse

from api.response import send_response
from domain.model.errors import ErrorKind
from domain.model.result import Outcome
from services.create_user import CreateUser
from services.get_all_users import GetAllUsers
from services.get_user_by_id import GetUserById

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _serialize(value):
    if isinstance(value, list):
        return [item.to_dict() for item in value]
    return value.to_dict()


def _respond(
    operation: str,
    run: Callable[[], Outcome],
    success_status: int,
    success_message: str,
) -> JSONResponse:
    try:
        outcome = run()
    except Exception as e:
        logger.exception("Unexpected failure", extra={"operation": operation})
        return send_response(
            STATUS_BY_KIND[ErrorKind.UNEXPECTED],
            False,
            str(e) or "Internal server error",
        )

    if not outcome.is_ok:
        logger.warning(
            "Request failed",
            extra={"operation": operation, "kind": outcome.error_kind.value, "reason": outcome.message},
        )
        return send_response(STATUS_BY_KIND[outcome.error_kind], False, outcome.message)

    return send_response(success_status, True, success_message, _serialize(outcome.value))


class CreateUserController:
    def __init__(self, create_user: CreateUser):
        self.create_user = create_user

    def handle(self, payload: Mapping) -> JSONResponse:
        return _respond(
            "create_user",
            lambda: self.create_user.execute(payload),
            status.HTTP_201_CREATED,
            "User created successfully",
        )


class GetUsersController:
    def __init__(self, get_all_users: GetAllUsers, get_user_by_id: GetUserById):
        self.get_all_users = get_all_users
        self.get_user_by_id = get_user_by_id

    def get_all(self) -> JSONResponse:
        return _respond(
            "get_all_users",
            self.get_all_users.execute,
            status.HTTP_200_OK,
            "Users retrieved successfully",
        )

    def get_by_id(self, user_id: str) -> JSONResponse:
        return _respond(
            "get_user_by_id",
            lambda: self.get_user_by_id.execute(user_id),
            status.HTTP_200_OK,
            "User retrieved successfully",
        )
