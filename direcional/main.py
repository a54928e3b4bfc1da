# direcional/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from direcional.config.settings import settings
from direcional.config.database import init_db
from direcional.core.middleware import setup_logging, setup_middleware, setup_exception_handlers
from direcional.api.v1.router import api_router

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 {settings.app_name} iniciando - versão {settings.version}")
    logger.info(f"🌍 Ambiente: {'Development' if settings.debug else 'Production'}")
    logger.info(f"🗄️  Database: {settings.database_url.split('@')[1] if '@' in settings.database_url else settings.database_url}")
    init_db()

    yield

    # Shutdown
    logger.info(f"🛑 {settings.app_name} encerrando")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Gestão de vendas imobiliárias: clientes, apartamentos e vendas",
    docs_url="/docs",
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

setup_middleware(app)
setup_exception_handlers(app)

app.include_router(api_router, prefix="/api/v1")

@app.get("/")
async def root():
    return {
        "message": f"{settings.app_name} - Gestão de Vendas Imobiliárias",
        "version": settings.version,
        "status": "running",
        "environment": "production" if not settings.debug else "development",
        "docs": "/docs",
        "api": "/api/v1"
    }

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "version": settings.version,
        "app": settings.app_name
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "direcional.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
