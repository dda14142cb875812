from fastapi import Depends, HTTPException, Request

from api.controllers import CreateUserController, GetUsersController
from port.user_repository import UserRepository
from services.create_user import CreateUser
from services.get_all_users import GetAllUsers
from services.get_user_by_id import GetUserById


def get_user_repo(request: Request) -> UserRepository:
    """Repository wired by the composition root, raising 503 if none is."""
    repo = getattr(request.app.state, 'user_repository', None)
    if repo is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return repo


def get_create_user_controller(repo: UserRepository = Depends(get_user_repo)) -> CreateUserController:
    return CreateUserController(CreateUser(repo))


def get_users_controller(repo: UserRepository = Depends(get_user_repo)) -> GetUsersController:
    return GetUsersController(GetAllUsers(repo), GetUserById(repo))
