"""Create billing tables

Revision ID: 001
Revises:
Create Date: 2024-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'Customer',
        sa.Column('ID', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('FirstName', sa.String(64), nullable=True),
        sa.Column('LastName', sa.String(64), nullable=True),
        sa.Column('Street', sa.String(128), nullable=True),
        sa.Column('City', sa.String(64), nullable=True),
        sa.PrimaryKeyConstraint('ID')
    )
    op.create_index(op.f('ix_Customer_City'), 'Customer', ['City'], unique=False)

    op.create_table(
        'Product',
        sa.Column('ID', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('Name', sa.String(256), nullable=True),
        sa.Column('Price', sa.Numeric(10, 2), nullable=False),
        sa.PrimaryKeyConstraint('ID')
    )

    op.create_table(
        'Invoice',
        sa.Column('ID', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('CustomerID', sa.Integer(), nullable=False),
        sa.Column('Total', sa.Numeric(10, 2), server_default=sa.text('0'), nullable=False),
        sa.ForeignKeyConstraint(['CustomerID'], ['Customer.ID']),
        sa.PrimaryKeyConstraint('ID')
    )
    op.create_index(op.f('ix_Invoice_CustomerID'), 'Invoice', ['CustomerID'], unique=False)

    op.create_table(
        'Item',
        sa.Column('InvoiceID', sa.Integer(), nullable=False),
        sa.Column('Item', sa.Integer(), autoincrement=False, nullable=False),
        sa.Column('ProductID', sa.Integer(), nullable=False),
        sa.Column('Quantity', sa.Integer(), nullable=False),
        sa.Column('Cost', sa.Numeric(10, 2), nullable=False),
        sa.CheckConstraint('"Quantity" > 0', name='ck_item_quantity_positive'),
        sa.ForeignKeyConstraint(['InvoiceID'], ['Invoice.ID']),
        sa.ForeignKeyConstraint(['ProductID'], ['Product.ID']),
        sa.PrimaryKeyConstraint('InvoiceID', 'Item')
    )

    op.execute(
        """
        CREATE OR REPLACE FUNCTION item_update_invoice_total() RETURNS trigger AS $body$
        BEGIN
            UPDATE "Invoice" SET "Total" = "Total" + NEW."Quantity" * NEW."Cost"
            WHERE "ID" = NEW."InvoiceID";
            RETURN NEW;
        END;
        $body$ LANGUAGE plpgsql
        """
    )
    op.execute(
        """
        CREATE TRIGGER trg_item_update_invoice_total
        AFTER INSERT ON "Item"
        FOR EACH ROW EXECUTE FUNCTION item_update_invoice_total()
        """
    )


def downgrade() -> None:
    op.execute('DROP TRIGGER IF EXISTS trg_item_update_invoice_total ON "Item"')
    op.execute('DROP FUNCTION IF EXISTS item_update_invoice_total()')
    op.drop_table('Item')
    op.drop_index(op.f('ix_Invoice_CustomerID'), table_name='Invoice')
    op.drop_table('Invoice')
    op.drop_table('Product')
    op.drop_index(op.f('ix_Customer_City'), table_name='Customer')
    op.drop_table('Customer')
