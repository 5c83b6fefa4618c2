"""
SQLAlchemy models for the database.
Maps domain entities to database tables.
"""

import uuid

from sqlalchemy import (
    Column, Integer, String, DateTime, Text,
    Numeric, Date, ForeignKey, Enum as SQLEnum,
    Index, CheckConstraint
)
from sqlalchemy.orm import relationship

from invoicer.domain.models.base import utcnow
from invoicer.domain.models.invoice import InvoiceStatus
from invoicer.domain.models.user import UserRole
from invoicer.infrastructure.db.database import Base


def new_id() -> str:
    return str(uuid.uuid4())


class UserModel(Base):
    """Account table, provisioned from the OAuth identity provider"""
    __tablename__ = 'users'

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    image = Column(String(500))
    currency = Column(String(3), default='USD')
    role = Column(SQLEnum(UserRole, name='user_role'), nullable=False, default=UserRole.USER)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    invoices = relationship("InvoiceModel", back_populates="owner")
    settings = relationship("SettingsModel", back_populates="owner", uselist=False)


class AddressModel(Base):
    """Sender or recipient block of exactly one invoice"""
    __tablename__ = 'addresses'

    id = Column(String(36), primary_key=True, default=new_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255))
    address1 = Column(String(255), nullable=False, default='')
    address2 = Column(String(255))
    address3 = Column(String(255))

    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class InvoiceModel(Base):
    """Invoice table"""
    __tablename__ = 'invoices'

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey('users.id'), nullable=False)
    from_address_id = Column(String(36), ForeignKey('addresses.id'), nullable=False, unique=True)
    to_address_id = Column(String(36), ForeignKey('addresses.id'), nullable=False, unique=True)

    # Invoice details
    invoice_no = Column(String(50), nullable=False)
    status = Column(SQLEnum(InvoiceStatus, name='invoice_status'), nullable=False, default=InvoiceStatus.UNPAID)
    notes = Column(Text)

    # Amounts and currency, stored as submitted
    currency = Column(String(3), nullable=False, default='USD')
    sub_total = Column(Numeric(12, 2), nullable=False)
    discount = Column(Numeric(12, 2))
    tax_percentage = Column(Numeric(5, 2))
    total = Column(Numeric(12, 2), nullable=False)

    # Dates
    invoice_date = Column(Date, nullable=False)
    due_date = Column(Date, nullable=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("UserModel", back_populates="invoices")
    from_address = relationship("AddressModel", foreign_keys=[from_address_id], cascade="all")
    to_address = relationship("AddressModel", foreign_keys=[to_address_id], cascade="all")
    items = relationship(
        "ItemModel",
        back_populates="invoice",
        cascade="all, delete-orphan",
        order_by="ItemModel.position"
    )

    # Indexes
    __table_args__ = (
        Index('idx_invoices_user_created', 'user_id', 'created_at'),
        Index('idx_invoices_user_date', 'user_id', 'invoice_date'),
        Index('idx_invoices_status', 'status'),
        CheckConstraint('total >= 0', name='check_invoice_total_non_negative'),
        CheckConstraint('due_date >= invoice_date', name='check_invoice_due_after_issue'),
    )


class ItemModel(Base):
    """Invoice line item table"""
    __tablename__ = 'items'

    id = Column(String(36), primary_key=True, default=new_id)
    invoice_id = Column(String(36), ForeignKey('invoices.id', ondelete='CASCADE'), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    item_name = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(12, 2), nullable=False)
    total = Column(Numeric(12, 2), nullable=False)

    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    invoice = relationship("InvoiceModel", back_populates="items")

    __table_args__ = (
        Index('idx_items_invoice', 'invoice_id', 'position'),
        CheckConstraint('quantity >= 0', name='check_item_quantity_non_negative'),
        CheckConstraint('price >= 0', name='check_item_price_non_negative'),
    )


class SettingsModel(Base):
    """Per-account invoice settings"""
    __tablename__ = 'settings'

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), ForeignKey('users.id'), nullable=False, unique=True)
    invoice_logo = Column(String(2048))

    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    owner = relationship("UserModel", back_populates="settings")
    signature = relationship(
        "SignatureModel",
        back_populates="settings",
        uselist=False,
        cascade="all, delete-orphan"
    )


class SignatureModel(Base):
    """Signature attached to one settings row"""
    __tablename__ = 'signatures'

    id = Column(String(36), primary_key=True, default=new_id)
    settings_id = Column(String(36), ForeignKey('settings.id', ondelete='CASCADE'), nullable=False, unique=True)
    name = Column(String(255))
    image = Column(String(2048))

    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    # Relationships
    settings = relationship("SettingsModel", back_populates="signature")
