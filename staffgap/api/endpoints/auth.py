# staffgap/api/endpoints/auth.py

from fastapi import APIRouter, Depends, HTTPException, status

from staffgap.api.deps import get_current_user, get_portal
from staffgap.core.config import settings
from staffgap.core.portal import Portal
from staffgap.core.security import create_access_token
from staffgap.models.user import User
from staffgap.schemas.auth import LoginRequest, TokenWithUser
from staffgap.schemas.user import UserRead

router = APIRouter(prefix="/api/auth", tags=["Auth"])


# -------------------------------------------------------------------
# LOGIN (any role)
# -------------------------------------------------------------------
@router.post("/login", response_model=TokenWithUser)
async def login(
    payload: LoginRequest,
    portal: Portal = Depends(get_portal),
):
    user = portal.identity.login(payload.username, payload.password)
    if not user:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Invalid username or password")

    token = create_access_token(
        subject=user.id,
        data={
            "role": user.role.value,
            "faculty_id": user.faculty_id,
            "department_id": user.department_id,
        },
    )

    return TokenWithUser(
        access_token=token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        user=UserRead.model_validate(user),
    )


# -------------------------------------------------------------------
# LOGOUT
# -------------------------------------------------------------------
@router.post("/logout")
async def logout(
    current_user: User = Depends(get_current_user),
    portal: Portal = Depends(get_portal),
):
    session_user = portal.identity.current_user
    if session_user and session_user.id == current_user.id:
        portal.identity.logout()
    return {"detail": "Logged out"}


# -------------------------------------------------------------------
# WHO AM I
# -------------------------------------------------------------------
@router.get("/me", response_model=UserRead)
async def me(current_user: User = Depends(get_current_user)):
    return current_user
