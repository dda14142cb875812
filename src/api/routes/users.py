"""User routes.

Endpoints:
- POST /api/v1/users: Create a user
- GET /api/v1/users: List all users
- GET /api/v1/users/{user_id}: Get one user
"""

from fastapi import APIRouter, Depends

from api.controllers import CreateUserController, GetUsersController
from api.dependencies import get_create_user_controller, get_users_controller
from api.models import CreateUserRequest, Envelope

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post("", response_model=Envelope, status_code=201)
async def create_user(
    request: CreateUserRequest,
    controller: CreateUserController = Depends(get_create_user_controller),
):
    return controller.handle(request.model_dump())


@router.get("", response_model=Envelope)
async def get_users(controller: GetUsersController = Depends(get_users_controller)):
    return controller.get_all()


@router.get("/{user_id}", response_model=Envelope)
async def get_user(user_id: str, controller: GetUsersController = Depends(get_users_controller)):
    return controller.get_by_id(user_id)
