from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from thesis_guidance.core.deps import get_db
from thesis_guidance.core.permissions import require_admin
from thesis_guidance.crud import users as users_crud
from thesis_guidance.models.user import User
from thesis_guidance.schemas.user import UserRead

router = APIRouter()


@router.get("", response_model=list[UserRead])
def list_users(
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return users_crud.list_users(db)


@router.delete("/{user_id}", response_model=bool)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(require_admin),
):
    return users_crud.delete_user(db, user_id)
