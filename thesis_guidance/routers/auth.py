from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from thesis_guidance.core.config import Settings, get_settings
from thesis_guidance.core.current_user import get_current_user
from thesis_guidance.core.deps import get_db
from thesis_guidance.crud import users as users_crud
from thesis_guidance.models.user import User
from thesis_guidance.schemas.auth import LoginRequest, LoginResponse, TokenResponse
from thesis_guidance.schemas.user import UserCreate, UserRead

router = APIRouter()


@router.post(
    "/register",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Username or email already exists"},
    },
)
def register(payload: UserCreate, db: Session = Depends(get_db)):
    return users_crud.register_user(db, payload)


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={
        401: {"description": "Invalid credentials"},
    },
)
def login(
    payload: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    user, token = users_crud.authenticate_user(db, payload.username, payload.password, settings)
    return {"user": user, "token": token, "token_type": "bearer"}


# OAuth2 form flow, used by the interactive docs "Authorize" button
@router.post("/token", response_model=TokenResponse)
def token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    _user, access_token = users_crud.authenticate_user(
        db, form_data.username, form_data.password, settings
    )
    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/me", response_model=UserRead)
def me(current_user: User = Depends(get_current_user)):
    return current_user
