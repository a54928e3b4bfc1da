# direcional/config/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from .settings import settings

engine_kwargs = {
    "pool_pre_ping": True,
    "echo": settings.debug
}

if settings.is_sqlite:
    # Sessões do FastAPI podem cruzar threads do threadpool
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs["pool_recycle"] = 300

# Create engine
engine = create_engine(
    settings.database_url_with_ssl,
    **engine_kwargs
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Criar tabelas que ainda não existem"""
    from direcional.shared.database.models import Base
    Base.metadata.create_all(bind=bind or engine)


# Database dependency
def get_db():
    """Sessão por requisição: a unidade de trabalho de cada operação"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
