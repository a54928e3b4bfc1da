# direcional/modules/sales/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from direcional.config.database import get_db
from direcional.core.auth.dependencies import get_current_user, get_admin_user
from direcional.shared.enums import SaleStatus
from .service import SalesService
from .schemas import (
    SaleCreateRequest, SaleUpdateRequest, SaleResponse, SaleListResponse
)

router = APIRouter()

@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
async def create_sale(
    sale_data: SaleCreateRequest,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """
    Registrar venda de um apartamento para um cliente

    **Regras:**
    - 404 se cliente ou apartamento não existir
    - 409 se o apartamento não estiver Disponível
    - Venda nasce Pendente (ou Em Análise) e o apartamento fica Reservado
    """
    return SalesService(db).create_sale(sale_data)

@router.get("", response_model=SaleListResponse)
async def list_sales(
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Listar todas as vendas"""
    return SalesService(db).list_sales()

@router.get("/client/{client_id}", response_model=SaleListResponse)
async def list_sales_by_client(
    client_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Vendas de um cliente"""
    return SalesService(db).list_by_client(client_id)

@router.get("/apartment/{apartment_id}", response_model=SaleListResponse)
async def list_sales_by_apartment(
    apartment_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Histórico de vendas de um apartamento"""
    return SalesService(db).list_by_apartment(apartment_id)

@router.get("/status/{sale_status}", response_model=SaleListResponse)
async def list_sales_by_status(
    sale_status: SaleStatus,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Vendas em um status (Pendente, Confirmada, Cancelada, Em Análise)"""
    return SalesService(db).list_by_status(sale_status)

@router.get("/{sale_id}", response_model=SaleResponse)
async def get_sale(
    sale_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return SalesService(db).get_sale(sale_id)

@router.put("/{sale_id}", response_model=SaleResponse)
async def update_sale(
    sale_id: int,
    update_data: SaleUpdateRequest,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Atualizar condições de pagamento (409 se a venda já foi finalizada)"""
    return SalesService(db).update_sale(sale_id, update_data)

@router.post("/{sale_id}/confirm", response_model=SaleResponse)
async def confirm_sale(
    sale_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Confirmar venda pendente; apartamento passa a Vendido"""
    return SalesService(db).confirm_sale(sale_id)

@router.post("/{sale_id}/cancel", response_model=SaleResponse)
async def cancel_sale(
    sale_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Cancelar venda ativa; apartamento volta a Disponível"""
    return SalesService(db).cancel_sale(sale_id)

@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_sale(
    sale_id: int,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """Excluir venda (libera o apartamento se ainda estava ativa)"""
    SalesService(db).delete_sale(sale_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
