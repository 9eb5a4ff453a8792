"""User and login routes."""
from fastapi import APIRouter, Depends

from ..application.services import UserService
from ..dependencies import get_actor, get_user_service
from ..models import Actor, CreateUserInput, LoginInput, LoginResult, SafeUser

router = APIRouter()


@router.post("/user", response_model=SafeUser, response_model_exclude_none=True)
async def create_user(
    data: CreateUserInput,
    actor: Actor = Depends(get_actor),
    service: UserService = Depends(get_user_service)
):
    """Create a user (admin only)."""
    return await service.create_user(actor, data)


@router.get("/user/{username}", response_model=SafeUser, response_model_exclude_none=True)
async def get_user(
    username: str,
    actor: Actor = Depends(get_actor),
    service: UserService = Depends(get_user_service)
):
    """Get the calling user's own record."""
    return await service.get_user(actor, username)


@router.post("/login", response_model=LoginResult, response_model_exclude_none=True)
async def login(data: LoginInput, service: UserService = Depends(get_user_service)):
    """Exchange username and password for a session token."""
    return await service.login(data.username, data.password)
