from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from typing import List

from direcional.config.database import get_db
from direcional.shared.database.models import User
from direcional.shared.enums import UserRole
from direcional.core.auth.service import AuthService

security = HTTPBearer(auto_error=False)

class AuthenticationError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )

class AuthorizationError(HTTPException):
    def __init__(self, detail: str = "Not enough permissions"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail
        )

async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """Obter usuário atual a partir do token"""
    if credentials is None:
        raise AuthenticationError("Token de acesso ausente")

    payload = AuthService.verify_token(credentials.credentials)
    if payload is None:
        raise AuthenticationError("Token inválido ou expirado")

    user_id = payload.get("user_id")
    if user_id is None:
        raise AuthenticationError("Payload do token inválido")

    user = db.query(User).filter(User.id == user_id).first()

    if user is None:
        raise AuthenticationError("Usuário não encontrado")

    if not user.is_active:
        raise AuthenticationError("Usuário inativo")

    return user

def require_roles(allowed_roles: List[str]):
    """Factory para dependency que exige papéis específicos"""
    def role_checker(current_user: User = Depends(get_current_user)) -> User:
        if current_user.role not in allowed_roles:
            raise AuthorizationError(
                f"Papel '{current_user.role}' não autorizado. Papéis permitidos: {allowed_roles}"
            )
        return current_user
    return role_checker

def get_admin_user(current_user: User = Depends(require_roles([UserRole.ADMIN.value]))):
    """Dependency para administradores"""
    return current_user
