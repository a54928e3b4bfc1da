# direcional/modules/sales/schemas.py
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime, date

from direcional.shared.enums import SaleStatus


class PaymentTerms(BaseModel):
    """Preço e condições de pagamento da venda"""
    price: Optional[Decimal] = Field(None, gt=0, description="Valor da venda; padrão é o preço do apartamento")
    payment_method: Optional[str] = Field(None, max_length=50, description="À vista, financiamento, consórcio...")
    down_payment: Optional[Decimal] = Field(None, ge=0, description="Valor de entrada")
    installments: Optional[int] = Field(None, ge=1, le=480, description="Número de parcelas")
    installment_value: Optional[Decimal] = Field(None, gt=0, description="Valor de cada parcela")
    first_installment_date: Optional[date] = None
    seller: Optional[str] = Field(None, max_length=100, description="Corretor responsável")
    seller_commission: Optional[Decimal] = Field(None, ge=0, le=100, description="Comissão do corretor (%)")
    notes: Optional[str] = Field(None, max_length=1000)

    @field_validator('payment_method', 'seller')
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return v
        return v.strip() or None

    @model_validator(mode='after')
    def validate_terms(self):
        if self.price is not None and self.down_payment is not None and self.down_payment > self.price:
            raise ValueError('A entrada não pode ser maior que o valor da venda')
        return self


class SaleCreateRequest(PaymentTerms):
    client_id: int = Field(..., gt=0)
    apartment_id: int = Field(..., gt=0)
    requires_review: bool = Field(False, description="Inicia a venda em análise em vez de pendente")

    @model_validator(mode='after')
    def validate_installments(self):
        if self.installment_value is not None and not self.installments:
            raise ValueError('Informe o número de parcelas junto com o valor da parcela')
        return self

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "client_id": 1,
            "apartment_id": 1,
            "price": "250000.00",
            "payment_method": "Financiamento",
            "down_payment": "50000.00",
            "installments": 360,
            "installment_value": "1200.00",
            "seller": "Maria Souza",
            "seller_commission": "3.5"
        }
    })


class SaleUpdateRequest(PaymentTerms):
    payoff_date: Optional[datetime] = None


class SaleResponse(BaseModel):
    id: int
    client_id: int
    apartment_id: int
    sale_date: datetime
    price: Decimal
    payment_method: Optional[str] = None
    down_payment: Optional[Decimal] = None
    installments: Optional[int] = None
    installment_value: Optional[Decimal] = None
    first_installment_date: Optional[date] = None
    status: SaleStatus
    seller: Optional[str] = None
    seller_commission: Optional[Decimal] = None
    notes: Optional[str] = None
    confirmed_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    payoff_date: Optional[datetime] = None
    apartment_status: Optional[str] = None
    client_name: Optional[str] = None
    apartment_label: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class SaleListResponse(BaseModel):
    sales: List[SaleResponse]
    count: int
