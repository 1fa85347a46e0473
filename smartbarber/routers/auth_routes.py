# smartbarber/routers/auth_routes.py

from fastapi import APIRouter, Depends
from sqlmodel import Session, select

from smartbarber.auth import create_access_token, get_current_user, hash_password, verify_password
from smartbarber.db import get_session
from smartbarber.errors import NotFoundError, ValidationError
from smartbarber.models import User
from smartbarber.schemas import AuthResponse, LoginRequest, RegisterRequest, UserPublic

router = APIRouter(
    prefix="/auth",
    tags=["auth"],
)


@router.post("/register", response_model=AuthResponse, status_code=201)
def register(
    body: RegisterRequest,
    session: Session = Depends(get_session),
):
    email = body.email.strip().lower()
    existing = session.exec(select(User).where(User.email == email)).first()
    if existing is not None:
        raise ValidationError("User with this email already exists")

    user = User(
        name=body.name,
        email=email,
        password_hash=hash_password(body.password),
        avatar=f"https://api.dicebear.com/7.x/avataaars/svg?seed={body.name.replace(' ', '')}",
    )
    session.add(user)
    session.commit()
    session.refresh(user)  # fills user.id

    return {"user": UserPublic.model_validate(user), "token": create_access_token(user.id)}


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    session: Session = Depends(get_session),
):
    user = session.exec(
        select(User).where(User.email == body.email.strip().lower())
    ).first()

    if user is None or not verify_password(body.password, user.password_hash):
        raise ValidationError("Invalid email or password")

    return {"user": UserPublic.model_validate(user), "token": create_access_token(user.id)}


@router.get("/profile", response_model=UserPublic)
def profile(
    session: Session = Depends(get_session),
    current_user: dict = Depends(get_current_user),
):
    user = session.get(User, current_user["id"])
    if user is None:
        raise NotFoundError("User not found")
    return user
