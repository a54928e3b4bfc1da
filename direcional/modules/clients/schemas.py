# direcional/modules/clients/schemas.py
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import List, Optional
from decimal import Decimal
from datetime import date, datetime
import re

from direcional.shared.enums import ClientStatus


def _only_digits(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return re.sub(r"\D", "", value)


class ClientBase(BaseModel):
    name: str = Field(..., min_length=2, max_length=200, description="Nome completo")
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=300)
    city: Optional[str] = Field(None, max_length=100)
    state: Optional[str] = Field(None, min_length=2, max_length=2, description="UF")
    zip_code: Optional[str] = Field(None, description="CEP")
    birth_date: Optional[date] = None
    monthly_income: Optional[Decimal] = Field(None, ge=0, description="Renda mensal")
    notes: Optional[str] = Field(None, max_length=1000)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('O nome não pode estar vazio')
        return v.strip()

    @field_validator('state')
    @classmethod
    def validate_state(cls, v):
        return v.upper() if v else v

    @field_validator('zip_code')
    @classmethod
    def validate_zip_code(cls, v):
        digits = _only_digits(v)
        if digits and len(digits) != 8:
            raise ValueError('CEP deve ter 8 dígitos')
        return digits or None

    @field_validator('birth_date')
    @classmethod
    def validate_birth_date(cls, v):
        if v and v > date.today():
            raise ValueError('Data de nascimento no futuro')
        return v


class ClientCreateRequest(ClientBase):
    cpf: str = Field(..., description="CPF, com ou sem máscara")
    status: ClientStatus = ClientStatus.ACTIVE

    @field_validator('cpf')
    @classmethod
    def validate_cpf(cls, v):
        digits = _only_digits(v)
        if len(digits) != 11:
            raise ValueError('CPF deve ter 11 dígitos')
        return digits

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "name": "João da Silva",
            "cpf": "123.456.789-09",
            "email": "joao@email.com.br",
            "phone": "(31) 99999-0000",
            "city": "Belo Horizonte",
            "state": "MG",
            "monthly_income": "12000.00"
        }
    })


class ClientUpdateRequest(ClientBase):
    """CPF não pode ser alterado"""
    status: Optional[ClientStatus] = Field(None, description="Mantém o status atual quando omitido")


class ClientResponse(BaseModel):
    id: int
    name: str
    cpf: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    birth_date: Optional[date] = None
    monthly_income: Optional[Decimal] = None
    status: ClientStatus
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ClientListResponse(BaseModel):
    clients: List[ClientResponse]
    count: int
