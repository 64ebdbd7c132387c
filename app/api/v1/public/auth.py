from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.common import DataResponse
from app.schemas.user import AdminCreate, LoginRequest, RegisterRequest, Token
from app.services import auth as auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=DataResponse[Token], status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    """Create a `user` (default) or `owner` account and return a bearer token."""
    return DataResponse(data=auth_service.register(db, body))


@router.post("/admin/register", response_model=DataResponse[Token], status_code=status.HTTP_201_CREATED)
def admin_register(body: AdminCreate, db: Session = Depends(get_db)):
    return DataResponse(data=auth_service.register_admin(db, body))


@router.post("/login", response_model=DataResponse[Token])
def login(body: LoginRequest, db: Session = Depends(get_db)):
    return DataResponse(data=auth_service.login(db, body))
