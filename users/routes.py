# backend/users/routes.py
from fastapi import APIRouter, Depends, status
from auth.dependencies import TokenClaims, get_token_claims, get_current_user
from core.payload import payload
from models.user import User
from .models import UserRegister, UserLogin, ProfileUpdate, PasswordChange
from .controllers import (
    register_user, login_user, get_profile, update_profile,
    delete_profile, change_password
)

router = APIRouter()

# ------------------------------------------------------------
# 🔹 Register
# ------------------------------------------------------------
@router.get("/register")
def register_page():
    return {"message": "User registration page"}

@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(data: UserRegister = Depends(payload(UserRegister))):
    return register_user(data)

# ------------------------------------------------------------
# 🔹 Login
# ------------------------------------------------------------
@router.get("/login")
def login_page():
    return {"message": "return login page"}

@router.post("/login")
def login(data: UserLogin = Depends(payload(UserLogin))):
    return login_user(data)

# ------------------------------------------------------------
# 🔹 Profile
# ------------------------------------------------------------
@router.get("/profile")
def read_profile(claims: TokenClaims = Depends(get_token_claims)):
    return get_profile(claims)

@router.put("/profile")
def edit_profile(
    current_user: User = Depends(get_current_user),
    data: ProfileUpdate = Depends(payload(ProfileUpdate)),
):
    return update_profile(current_user, data)

@router.delete("/profile")
def remove_profile(claims: TokenClaims = Depends(get_token_claims)):
    return delete_profile(claims)

# ------------------------------------------------------------
# 🔹 Change password
# ------------------------------------------------------------
@router.put("/change-password")
def update_password(
    claims: TokenClaims = Depends(get_token_claims),
    data: PasswordChange = Depends(payload(PasswordChange)),
):
    return change_password(claims, data)
