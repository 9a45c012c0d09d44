from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from teamflow.core.database import get_db
from teamflow.core.security import verify_password, get_password_hash, create_access_token
from teamflow.core.logging_config import logger, set_user_id
from teamflow.core.rate_limiter import limiter, auth_rate_limit
from teamflow.core.types import utcnow
from teamflow.models.user import User, UserRole
from teamflow.schemas.auth import UserRegister, UserLogin, LoginResponse, UserResponse
from teamflow.modules.auth.dependencies import get_current_user


router = APIRouter()


def build_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        full_name=user.full_name,
        role=user.role.value,
        is_active=user.is_active,
        created_at=user.created_at,
        last_login=user.last_login,
    )


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("3/minute")
async def register(
    request: Request,
    user_data: UserRegister,
    db: AsyncSession = Depends(get_db)
):
    """Register new user (rate limited: 3/min). New accounts get the member role."""
    client_ip = request.client.host if request.client else "unknown"

    result = await db.execute(
        select(User).where(User.email == user_data.email)
    )
    if result.scalar_one_or_none():
        logger.log_auth_event(
            event="register",
            success=False,
            user_email=user_data.email,
            reason="Email already registered",
            client_ip=client_ip
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered"
        )

    user = User(
        email=user_data.email,
        hashed_password=get_password_hash(user_data.password),
        full_name=user_data.full_name,
        role=UserRole.MEMBER,
    )

    db.add(user)
    await db.commit()
    await db.refresh(user)

    logger.log_auth_event(
        event="register",
        success=True,
        user_email=user_data.email,
        client_ip=client_ip
    )

    return build_user_response(user)


@router.post("/login", response_model=LoginResponse)
@auth_rate_limit()
async def login(
    request: Request,
    credentials: UserLogin,
    db: AsyncSession = Depends(get_db)
):
    """Login and receive a bearer token (rate limited: 5/min)"""
    client_ip = request.client.host if request.client else "unknown"

    result = await db.execute(
        select(User).where(User.email == credentials.email)
    )
    user = result.scalar_one_or_none()

    if not user or not verify_password(credentials.password, user.hashed_password):
        logger.log_auth_event(
            event="login",
            success=False,
            user_email=credentials.email,
            reason="Invalid credentials",
            client_ip=client_ip
        )
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        logger.log_auth_event(
            event="login",
            success=False,
            user_email=credentials.email,
            reason="Account inactive",
            client_ip=client_ip
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is inactive"
        )

    user.last_login = utcnow()
    await db.commit()

    set_user_id(str(user.id))
    logger.log_auth_event(event="login", success=True, user_email=user.email, client_ip=client_ip)

    access_token = create_access_token({"sub": str(user.id), "email": user.email, "role": user.role.value})
    return LoginResponse(access_token=access_token, user=build_user_response(user))


@router.get("/me", response_model=UserResponse)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get current user"""
    return build_user_response(current_user)
