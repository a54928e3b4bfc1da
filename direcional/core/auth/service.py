from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import uuid

from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from direcional.config.settings import settings
from direcional.core.exceptions import ConflictError
from direcional.shared.database.models import User
from direcional.shared.enums import UserRole

logger = logging.getLogger(__name__)

# Password context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

class AuthService:
    """Serviço de autenticação"""

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verificar senha"""
        try:
            # bcrypt considera apenas os primeiros 72 bytes
            encoded_password = plain_password.encode('utf-8')[:72].decode('utf-8', errors='ignore')
            return pwd_context.verify(encoded_password, hashed_password)
        except ValueError as e:
            logger.warning(f"Hash de senha inválido: {e}")
            return False

    @staticmethod
    def get_password_hash(password: str) -> str:
        """Gerar hash da senha"""
        encoded_password = password.encode('utf-8')[:72].decode('utf-8', errors='ignore')
        return pwd_context.hash(encoded_password)

    @staticmethod
    def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Criar token de acesso"""
        to_encode = data.copy()

        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=settings.access_token_expire_minutes)

        if "user_id" not in to_encode:
            raise ValueError("user_id é obrigatório no token")

        to_encode.update({
            "exp": expire,
            "iss": settings.jwt_issuer,
            "aud": settings.jwt_audience,
            "jti": uuid.uuid4().hex
        })

        return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

    @staticmethod
    def verify_token(token: str) -> Optional[dict]:
        """Verificar e decodificar token"""
        try:
            return jwt.decode(
                token,
                settings.secret_key,
                algorithms=[settings.algorithm],
                audience=settings.jwt_audience,
                issuer=settings.jwt_issuer
            )
        except JWTError:
            return None

    @staticmethod
    def authenticate(db: Session, username: str, password: str) -> Optional[User]:
        """Buscar usuário por username ou email e validar a senha"""
        user = db.query(User).filter(
            (User.username == username) | (User.email == username)
        ).first()

        if not user or not AuthService.verify_password(password, user.password_hash):
            return None
        return user

    @staticmethod
    def token_for(user: User) -> str:
        return AuthService.create_access_token({
            "sub": user.username,
            "user_id": user.id,
            "email": user.email,
            "role": user.role
        })

    @staticmethod
    def register_user(
        db: Session,
        username: str,
        email: str,
        password: str,
        role: str = UserRole.USER.value
    ) -> User:
        """Registrar novo usuário; username e email são únicos"""
        if db.query(User).filter(User.username == username).first():
            raise ConflictError(f"Usuário '{username}' já existe")
        if db.query(User).filter(User.email == email).first():
            raise ConflictError(f"Email '{email}' já está em uso")

        user = User(
            username=username,
            email=email,
            password_hash=AuthService.get_password_hash(password),
            role=role,
            is_active=True
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info(f"Usuário {user.id} ({user.username}) registrado com papel {user.role}")
        return user
