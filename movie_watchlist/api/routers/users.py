"""
User registration and session API endpoints.
"""

from fastapi import APIRouter, Depends

from movie_watchlist.api.dependencies import get_coordinator
from movie_watchlist.api.models.user import UserCreate, LoginRequest, MessageResponse
from movie_watchlist.core.coordinator import Coordinator

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=MessageResponse, status_code=201)
def create_user(user_in: UserCreate, coordinator: Coordinator = Depends(get_coordinator)):
    """Register a user; their empty watchlist is created with them."""
    message = coordinator.create_user(user_in.name, user_in.email, user_in.password)
    return MessageResponse(message=message)


@router.post("/login", response_model=MessageResponse)
def login_user(login_in: LoginRequest, coordinator: Coordinator = Depends(get_coordinator)):
    """Log in by email and password."""
    return MessageResponse(message=coordinator.login_user(login_in.email, login_in.password))


@router.post("/logout", response_model=MessageResponse)
def logout_user(coordinator: Coordinator = Depends(get_coordinator)):
    """Log out the current user."""
    return MessageResponse(message=coordinator.logout_user())
