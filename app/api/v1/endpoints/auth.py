"""
Authentication endpoints.

Handles registration, login, token refresh/rotation, logout and
account management.
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.security import OAuth2PasswordRequestForm
from pydantic import ValidationError
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.token import AuthResponse, RefreshRequest, Token
from app.schemas.user import MeResponse, PasswordChange, UserCreate, UserLogin, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.post("/register",
             summary="User registration endpoint.",
             response_model=AuthResponse,
             status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user.

    Args:
        user_data: User registration data (email, password)
        db: Database session

    Returns:
        Created user data (without password) and a token pair

    Raises:
        HTTPException 409: If email already registered
    """
    service = UserService(db)
    return service.register(user_data)


@router.post("/login",
             summary="User login endpoint via JSON.",
             response_model=AuthResponse)
def login(login_data: UserLogin, db: Session = Depends(get_db)):
    """
    Authenticate user via JSON body.

    Args:
        login_data: User login credentials (email, password)
        db: Database session

    Returns:
        The user with a JWT access token and a refresh token
    """
    service = UserService(db)
    return service.authenticate(login_data)


@router.post("/token",
             summary="User login endpoint via OAuth2 form (for Swagger UI).",
             response_model=AuthResponse)
def login_form(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    Authenticate user via OAuth2 form (for Swagger UI).

    Use email as username.
    """
    try:
        login_data = UserLogin(email=form_data.username, password=form_data.password)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors())
    service = UserService(db)
    return service.authenticate(login_data)


@router.post("/refresh",
             summary="Rotate a refresh token.",
             response_model=Token)
def refresh(body: RefreshRequest, db: Session = Depends(get_db)):
    """Exchange a refresh token for a new access/refresh pair.  The old refresh token stops working."""
    service = UserService(db)
    return service.refresh(body.refresh_token)


@router.post("/logout",
             summary="Revoke a refresh token.",
             status_code=status.HTTP_204_NO_CONTENT)
def logout(body: RefreshRequest, db: Session = Depends(get_db)):
    service = UserService(db)
    service.logout(body.refresh_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me",
            summary="User info endpoint.",
            response_model=MeResponse)
def me(user: User = Depends(get_current_user)):
    return MeResponse(user=UserResponse.model_validate(user))


@router.put("/account/password",
            summary="Change the account password.",
            status_code=status.HTTP_204_NO_CONTENT)
def change_password(data: PasswordChange, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """Change the password.  Every refresh token of the account is revoked."""
    service = UserService(db)
    service.change_password(user, data)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/account",
               summary="Delete the account and all of its data.",
               status_code=status.HTTP_204_NO_CONTENT)
def delete_account(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    service = UserService(db)
    service.delete_account(user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
