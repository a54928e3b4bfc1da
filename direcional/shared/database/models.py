# direcional/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, Date, Text,
    Numeric, ForeignKey, Index, func, text
)
from sqlalchemy.orm import declarative_base

from direcional.shared.enums import (
    ClientStatus, ApartmentStatus, SaleStatus, UserRole
)

Base = declarative_base()

# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que adiciona created_at e updated_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# USUÁRIOS
# =====================================================

class User(Base, TimestampMixin):
    """Usuário do painel administrativo"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.USER.value)
    is_active = Column(Boolean, nullable=False, default=True)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value


# =====================================================
# CLIENTES
# =====================================================

class Client(Base, TimestampMixin):
    """Comprador: identificação, contato e perfil financeiro"""
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    cpf = Column(String(11), unique=True, nullable=False, index=True)
    email = Column(String(255))
    phone = Column(String(20))
    address = Column(String(300))
    city = Column(String(100))
    state = Column(String(2))
    zip_code = Column(String(8))
    birth_date = Column(Date)
    monthly_income = Column(Numeric(12, 2))
    status = Column(String(20), nullable=False, default=ClientStatus.ACTIVE.value, index=True)
    notes = Column(Text)


# =====================================================
# APARTAMENTOS
# =====================================================

class Apartment(Base, TimestampMixin):
    """Unidade à venda. O status é o único estado alterado pelo fluxo de vendas."""
    __tablename__ = "apartments"

    id = Column(Integer, primary_key=True, index=True)
    unit_number = Column(String(20), nullable=False)
    block = Column(String(20))
    floor = Column(Integer)
    total_area = Column(Numeric(10, 2), nullable=False)
    private_area = Column(Numeric(10, 2))
    bedrooms = Column(Integer, nullable=False)
    suites = Column(Integer, nullable=False, default=0)
    bathrooms = Column(Integer, nullable=False)
    parking_spots = Column(Integer, nullable=False, default=0)
    has_balcony = Column(Boolean, nullable=False, default=False)
    price = Column(Numeric(14, 2), nullable=False)
    condo_fee = Column(Numeric(10, 2))
    status = Column(String(20), nullable=False, default=ApartmentStatus.AVAILABLE.value, index=True)
    description = Column(Text)
    development = Column(String(200))
    expected_delivery = Column(Date)

    # Concorrência otimista: UPDATE com versão divergente gera StaleDataError
    version = Column(Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    @property
    def label(self) -> str:
        return f"{self.block}-{self.unit_number}" if self.block else self.unit_number


# =====================================================
# VENDAS
# =====================================================

class Sale(Base, TimestampMixin):
    """Venda: liga um cliente a um apartamento com preço e condições de pagamento"""
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    apartment_id = Column(Integer, ForeignKey("apartments.id"), nullable=False, index=True)
    sale_date = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    price = Column(Numeric(14, 2), nullable=False)
    payment_method = Column(String(50))
    down_payment = Column(Numeric(14, 2))
    installments = Column(Integer)
    installment_value = Column(Numeric(14, 2))
    first_installment_date = Column(Date)
    status = Column(String(20), nullable=False, default=SaleStatus.PENDING.value, index=True)
    seller = Column(String(100))
    seller_commission = Column(Numeric(5, 2))
    notes = Column(Text)
    confirmed_at = Column(DateTime)
    cancelled_at = Column(DateTime)
    payoff_date = Column(DateTime)

    __table_args__ = (
        # No máximo uma venda não cancelada por apartamento
        Index(
            "uq_sales_apartment_open",
            "apartment_id",
            unique=True,
            postgresql_where=text("status <> 'Cancelada'"),
            sqlite_where=text("status <> 'Cancelada'"),
        ),
    )
