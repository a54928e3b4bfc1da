# direcional/modules/clients/router.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from direcional.config.database import get_db
from direcional.core.auth.dependencies import get_current_user, get_admin_user
from direcional.shared.enums import ClientStatus
from .service import ClientsService
from .schemas import (
    ClientCreateRequest, ClientUpdateRequest, ClientResponse, ClientListResponse
)

router = APIRouter()

@router.get("", response_model=ClientListResponse)
async def list_clients(
    client_status: Optional[ClientStatus] = Query(None, alias="status"),
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Listar clientes, opcionalmente filtrando por status"""
    return ClientsService(db).list_clients(client_status)

@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: int,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return ClientsService(db).get_client(client_id)

@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
async def create_client(
    client_data: ClientCreateRequest,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Cadastrar cliente (409 se o CPF já existir)"""
    return ClientsService(db).create_client(client_data)

@router.put("/{client_id}", response_model=ClientResponse)
async def update_client(
    client_id: int,
    update_data: ClientUpdateRequest,
    current_user = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    return ClientsService(db).update_client(client_id, update_data)

@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_client(
    client_id: int,
    current_user = Depends(get_admin_user),
    db: Session = Depends(get_db)
):
    """Excluir cliente (409 se houver vendas vinculadas)"""
    ClientsService(db).delete_client(client_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
