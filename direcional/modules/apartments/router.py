# direcional/modules/apartments/router.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from direcional.config.database import get_db
from direcional.core.auth.dependencies import get_current_user, get_admin_user
from direcional.shared.enums import ApartmentStatus
from .service import ApartmentsService
from .schemas import (
    ApartmentCreateRequest, ApartmentUpdateRequest, ApartmentResponse, ApartmentListResponse
)

router = APIRouter()

@router.get("", response_model=ApartmentListResponse)
async def list_apartments(
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return ApartmentsService(db).list_apartments()

@router.get("/status/{apartment_status}", response_model=ApartmentListResponse)
async def list_apartments_by_status(
    apartment_status: ApartmentStatus,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Apartamentos em um status (Disponível, Reservado, Vendido, Indisponível)"""
    return ApartmentsService(db).list_by_status(apartment_status)

@router.get("/{apartment_id}", response_model=ApartmentResponse)
async def get_apartment(
    apartment_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return ApartmentsService(db).get_apartment(apartment_id)

@router.post("", response_model=ApartmentResponse, status_code=status.HTTP_201_CREATED)
async def create_apartment(
    apartment_data: ApartmentCreateRequest,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """Cadastrar apartamento (entra como Disponível)"""
    return ApartmentsService(db).create_apartment(apartment_data)

@router.put("/{apartment_id}", response_model=ApartmentResponse)
async def update_apartment(
    apartment_id: int,
    update_data: ApartmentUpdateRequest,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """
    Atualizar apartamento

    **Status:** apenas Disponível <-> Indisponível e sem venda em andamento (409 caso contrário)
    """
    return ApartmentsService(db).update_apartment(apartment_id, update_data)

@router.delete("/{apartment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_apartment(
    apartment_id: int,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """Excluir apartamento (409 se houver vendas vinculadas)"""
    ApartmentsService(db).delete_apartment(apartment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
