"""
Scaffolding Property Metadata - pytest Configuration and Fixtures

Provides shared test fixtures for:
- SQLAlchemy declarative models covering keys, enums and store generation
- Plain classes and dataclasses for the no-data-context path
- Models declared with postponed annotations (deferred_models)

No database connection is needed: everything is read from mapper metadata.
"""

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Annotated, List, Optional

import pytest
from sqlalchemy import Computed, Enum, FetchedValue, ForeignKey, Identity, String, func
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import DeclarativeBase, Mapped, column_property, mapped_column, relationship
from sqlalchemy.types import UserDefinedType

from scaffolding.models import ScaffoldColumn
from deferred_models import Gadget, Invoice


# ============================================================================
# Enumerations
# ============================================================================

class DeviceStatus(enum.Enum):
    """Plain enumeration"""
    ACTIVE = "active"
    RETIRED = "retired"


class Permission(enum.Flag):
    """Bit-flags enumeration"""
    READ = 1
    WRITE = 2
    ADMIN = 4


class OpaqueType(UserDefinedType):
    """Column type that cannot report a Python type"""
    cache_ok = True

    def get_col_spec(self, **kw):
        return "OPAQUE"


# ============================================================================
# SQLAlchemy Models
# ============================================================================

class Base(DeclarativeBase):
    """Base class for test ORM models"""
    pass


class Owner(Base):
    __tablename__ = "owners"

    owner_id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)

    devices: Mapped[List["Device"]] = relationship("Device", back_populates="owner")


class Device(Base):
    __tablename__ = "devices"

    # Primary Key
    device_id: Mapped[int] = mapped_column(Identity(always=True), primary_key=True)

    # Relationships
    owner_id: Mapped[int] = mapped_column(ForeignKey("owners.owner_id"), nullable=False)
    owner: Mapped["Owner"] = relationship("Owner", back_populates="devices")

    serial: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[DeviceStatus] = mapped_column(
        Enum(DeviceStatus, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=DeviceStatus.ACTIVE
    )

    # Scaffold markers
    internal_notes: Mapped[Optional[str]] = mapped_column(String(255), info={"scaffold": False})
    display_name: Mapped[str] = mapped_column(String(200), info={"scaffold": True})
    firmware: Mapped[Annotated[str, ScaffoldColumn(False)]] = mapped_column(String(32))

    # Store generation
    price_cents: Mapped[int] = mapped_column(nullable=False)
    price_with_tax: Mapped[int] = mapped_column(Computed("price_cents * 2"))
    synced_at: Mapped[datetime] = mapped_column(
        server_default=func.now(),
        server_onupdate=FetchedValue()
    )
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Query-time expressions
    price_doubled: Mapped[int] = column_property(price_cents * 2)

    # Type only known from the annotation
    blob: Mapped[bytes] = mapped_column(OpaqueType())
    # Type known from neither the column nor an annotation
    legacy_blob = mapped_column("legacy_blob", OpaqueType())

    @hybrid_property
    def price_dollars(self) -> float:
        return self.price_cents / 100


class AccessGrant(Base):
    __tablename__ = "access_grants"

    status: Mapped[Permission] = mapped_column(Enum(Permission), primary_key=True)
    owner_id: Mapped[int] = mapped_column(ForeignKey("owners.owner_id"), primary_key=True)


# ============================================================================
# Plain Classes (no data context)
# ============================================================================

@dataclass
class CustomerForm:
    age: int
    nickname: Optional[str] = None
    notes: Annotated[str, ScaffoldColumn(False)] = ""
    status: DeviceStatus = DeviceStatus.ACTIVE
    permissions: Permission = Permission.READ
    audit_tag: str = field(default="", metadata={"scaffold": False})
    tags: List[str] = field(default_factory=list)


class Account:
    account_id: int
    balance: Annotated[float, ScaffoldColumn(True)]
    legacy = None


class PremiumAccount(Account):
    tier: str


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def owner_model():
    return Owner


@pytest.fixture
def device_model():
    return Device


@pytest.fixture
def access_grant_model():
    return AccessGrant


@pytest.fixture
def customer_form():
    return CustomerForm


@pytest.fixture
def account_class():
    return Account


@pytest.fixture
def premium_account_class():
    return PremiumAccount


@pytest.fixture
def device_status_enum():
    return DeviceStatus


@pytest.fixture
def permission_enum():
    return Permission


@pytest.fixture
def gadget_model():
    """Mapped class whose relationship target is only imported for type checking"""
    return Gadget


@pytest.fixture
def invoice_class():
    """Plain class with postponed annotations, one of them unresolvable"""
    return Invoice
