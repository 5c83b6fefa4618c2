"""Initial schema: users, addresses, invoices, items, settings, signatures.

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

user_role = sa.Enum('USER', 'ADMIN', name='user_role')
invoice_status = sa.Enum('UNPAID', 'PAID', 'OVERDUE', 'CANCELLED', name='invoice_status')


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('first_name', sa.String(100)),
        sa.Column('last_name', sa.String(100)),
        sa.Column('image', sa.String(500)),
        sa.Column('currency', sa.String(3)),
        sa.Column('role', user_role, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        'addresses',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255)),
        sa.Column('address1', sa.String(255), nullable=False),
        sa.Column('address2', sa.String(255)),
        sa.Column('address3', sa.String(255)),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        'invoices',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('from_address_id', sa.String(36), sa.ForeignKey('addresses.id'), nullable=False, unique=True),
        sa.Column('to_address_id', sa.String(36), sa.ForeignKey('addresses.id'), nullable=False, unique=True),
        sa.Column('invoice_no', sa.String(50), nullable=False),
        sa.Column('status', invoice_status, nullable=False),
        sa.Column('notes', sa.Text()),
        sa.Column('currency', sa.String(3), nullable=False),
        sa.Column('sub_total', sa.Numeric(12, 2), nullable=False),
        sa.Column('discount', sa.Numeric(12, 2)),
        sa.Column('tax_percentage', sa.Numeric(5, 2)),
        sa.Column('total', sa.Numeric(12, 2), nullable=False),
        sa.Column('invoice_date', sa.Date(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('total >= 0', name='check_invoice_total_non_negative'),
        sa.CheckConstraint('due_date >= invoice_date', name='check_invoice_due_after_issue'),
    )
    op.create_index('idx_invoices_user_created', 'invoices', ['user_id', 'created_at'])
    op.create_index('idx_invoices_user_date', 'invoices', ['user_id', 'invoice_date'])
    op.create_index('idx_invoices_status', 'invoices', ['status'])

    op.create_table(
        'items',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('invoice_id', sa.String(36), sa.ForeignKey('invoices.id', ondelete='CASCADE'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('item_name', sa.String(255), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('total', sa.Numeric(12, 2), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint('quantity >= 0', name='check_item_quantity_non_negative'),
        sa.CheckConstraint('price >= 0', name='check_item_price_non_negative'),
    )
    op.create_index('idx_items_invoice', 'items', ['invoice_id', 'position'])

    op.create_table(
        'settings',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False, unique=True),
        sa.Column('invoice_logo', sa.String(2048)),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )

    op.create_table(
        'signatures',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('settings_id', sa.String(36), sa.ForeignKey('settings.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('name', sa.String(255)),
        sa.Column('image', sa.String(2048)),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table('signatures')
    op.drop_table('settings')
    op.drop_index('idx_items_invoice', table_name='items')
    op.drop_table('items')
    op.drop_index('idx_invoices_status', table_name='invoices')
    op.drop_index('idx_invoices_user_date', table_name='invoices')
    op.drop_index('idx_invoices_user_created', table_name='invoices')
    op.drop_table('invoices')
    op.drop_table('addresses')
    op.drop_table('users')
    invoice_status.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
