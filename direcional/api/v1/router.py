# direcional/api/v1/router.py
from fastapi import APIRouter
from direcional.api.v1.auth import router as auth_router
from direcional.modules.clients import router as clients_router
from direcional.modules.apartments import router as apartments_router
from direcional.modules.sales import router as sales_router
from direcional.modules.dashboard import router as dashboard_router


# Router principal da API v1
api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])

api_router.include_router(
    clients_router,
    prefix="/clients",
    tags=["Clients"]
)

api_router.include_router(
    apartments_router,
    prefix="/apartments",
    tags=["Apartments"]
)

api_router.include_router(
    sales_router,
    prefix="/sales",
    tags=["Sales"]
)

api_router.include_router(
    dashboard_router,
    prefix="/dashboard",
    tags=["Dashboard"]
)
