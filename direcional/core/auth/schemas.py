from pydantic import BaseModel, ConfigDict, EmailStr, Field
from datetime import datetime

class UserLogin(BaseModel):
    """Schema para login de usuário"""
    username: str = Field(..., description="Username ou email do usuário")
    password: str = Field(..., min_length=6, description="Senha do usuário")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "username": "corretor",
            "password": "corretor123"
        }
    })

class UserRegister(BaseModel):
    """Schema para registro de usuário"""
    username: str = Field(..., min_length=3, max_length=100, pattern=r"^[A-Za-z0-9_.-]+$")
    email: EmailStr
    password: str = Field(..., min_length=6)

class UserResponse(BaseModel):
    """Schema para resposta de usuário"""
    id: int
    username: str
    email: str
    role: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)

class TokenResponse(BaseModel):
    """Schema para resposta de token"""
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserResponse
