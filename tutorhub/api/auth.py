from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from tutorhub import models
from tutorhub.database import get_db
from tutorhub.schemas import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from tutorhub.services import auth_service
from tutorhub.utils.security import get_current_user

router = APIRouter(tags=["Authentication"])


# ===== REGISTER ENDPOINT =====

@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    """Register a student or tutor and return the profile with a token"""
    user, token = auth_service.register_user(
        db,
        name=user_data.name,
        email=user_data.email,
        password=user_data.password,
        role=user_data.role,
        subjects=user_data.subjects,
        bio=user_data.bio,
    )
    return AuthResponse(user=UserPublic.model_validate(user), token=token)


# ===== LOGIN ENDPOINT =====

@router.post("/login", response_model=AuthResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Verify credentials and return access token"""
    user, token = auth_service.login_user(
        db,
        email=credentials.email,
        password=credentials.password,
    )
    return AuthResponse(user=UserPublic.model_validate(user), token=token)


# ===== CURRENT USER =====

@router.get("/me", response_model=UserPublic)
def read_me(current_user: models.User = Depends(get_current_user)):
    return UserPublic.model_validate(current_user)
