from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from direcional.config.database import get_db
from direcional.config.settings import settings
from direcional.core.auth.service import AuthService
from direcional.core.auth.schemas import UserLogin, UserRegister, TokenResponse, UserResponse
from direcional.core.auth.dependencies import get_current_user
from direcional.shared.database.models import User

router = APIRouter()


def _login(db: Session, username: str, password: str) -> TokenResponse:
    user = AuthService.authenticate(db, username, password)

    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Credenciais inválidas",
            headers={"WWW-Authenticate": "Bearer"},
        )

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Usuário inativo"
        )

    return TokenResponse(
        access_token=AuthService.token_for(user),
        token_type="bearer",
        expires_at=datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes),
        user=UserResponse.model_validate(user)
    )


@router.post("/login", response_model=TokenResponse)
async def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db)
):
    """
    Login via formulário (compatível com o botão Authorize do Swagger)

    **Parâmetros:**
    - **username**: username ou email
    - **password**: senha
    """
    return _login(db, form_data.username, form_data.password)


@router.post("/login-json", response_model=TokenResponse)
async def login_json(
    user_login: UserLogin,
    db: Session = Depends(get_db)
):
    """Login alternativo que aceita JSON"""
    return _login(db, user_login.username, user_login.password)


@router.post("/register", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: UserRegister,
    db: Session = Depends(get_db)
):
    """Registrar novo usuário com papel 'User'"""
    user = AuthService.register_user(db, data.username, data.email, data.password)
    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """
    Informações do usuário atual

    **Headers requeridos:**
    - Authorization: Bearer {token}
    """
    return UserResponse.model_validate(current_user)


@router.post("/logout")
async def logout():
    """Logout (JWT stateless, apenas informativo)"""
    return {"message": "Logout realizado. Remova o token do cliente."}
