# direcional/modules/apartments/schemas.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional
from decimal import Decimal
from datetime import date, datetime

from direcional.shared.enums import ApartmentStatus


class ApartmentBase(BaseModel):
    unit_number: str = Field(..., min_length=1, max_length=20, description="Número do apartamento")
    block: Optional[str] = Field(None, max_length=20, description="Bloco/torre")
    floor: Optional[int] = Field(None, ge=0, description="Andar")
    total_area: Decimal = Field(..., gt=0, description="Área total (m²)")
    private_area: Optional[Decimal] = Field(None, gt=0, description="Área privativa (m²)")
    bedrooms: int = Field(..., ge=0)
    suites: int = Field(0, ge=0)
    bathrooms: int = Field(..., ge=0)
    parking_spots: int = Field(0, ge=0)
    has_balcony: bool = False
    price: Decimal = Field(..., gt=0, description="Valor de venda")
    condo_fee: Optional[Decimal] = Field(None, ge=0, description="Valor do condomínio")
    description: Optional[str] = Field(None, max_length=2000)
    development: Optional[str] = Field(None, max_length=200, description="Empreendimento")
    expected_delivery: Optional[date] = None

    @model_validator(mode='after')
    def validate_layout(self):
        if self.private_area is not None and self.private_area > self.total_area:
            raise ValueError('Área privativa não pode ser maior que a área total')
        if self.suites > self.bedrooms:
            raise ValueError('Número de suítes não pode ser maior que o de quartos')
        return self


class ApartmentCreateRequest(ApartmentBase):
    """Apartamentos sempre entram no cadastro como Disponível"""

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "unit_number": "101",
            "block": "A",
            "floor": 1,
            "total_area": "68.50",
            "bedrooms": 2,
            "suites": 1,
            "bathrooms": 2,
            "parking_spots": 1,
            "has_balcony": True,
            "price": "250000.00",
            "development": "Residencial Vista Verde"
        }
    })


class ApartmentUpdateRequest(ApartmentBase):
    status: Optional[ApartmentStatus] = Field(
        None, description="Somente Disponível/Indisponível; Reservado e Vendido vêm das vendas"
    )


class ApartmentResponse(BaseModel):
    id: int
    unit_number: str
    block: Optional[str] = None
    floor: Optional[int] = None
    total_area: Decimal
    private_area: Optional[Decimal] = None
    bedrooms: int
    suites: int
    bathrooms: int
    parking_spots: int
    has_balcony: bool
    price: Decimal
    condo_fee: Optional[Decimal] = None
    status: ApartmentStatus
    description: Optional[str] = None
    development: Optional[str] = None
    expected_delivery: Optional[date] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ApartmentListResponse(BaseModel):
    apartments: List[ApartmentResponse]
    count: int
