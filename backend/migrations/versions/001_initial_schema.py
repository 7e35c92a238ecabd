"""initial_schema

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ORDER_STATUSES = ("Pending", "In Progress", "Ready", "Delivered", "Completed")


def _label(*values: str, name: str) -> sa.Enum:
    return sa.Enum(*values, name=name, native_enum=False, length=32)


def upgrade() -> None:
    # Monthly order identifier counter
    op.create_table(
        "sequence_counters",
        sa.Column("key", sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column("period_label", sqlmodel.sql.sqltypes.AutoString(length=7), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False),
        sa.Column("last_reset_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("key"),
    )

    op.create_table(
        "companies",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("address", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("gst_number", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("hr_name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("hr_phone", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("manager_name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("manager_phone", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("landline_number", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("estimated_orders", sa.Integer(), nullable=False),
        sa.Column("total_orders", sa.Integer(), nullable=False),
        sa.Column("status", _label("Active", "Inactive", name="companystatus"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_companies_name"), "companies", ["name"], unique=True)

    # Orders (ULID as UUID)
    op.create_table(
        "orders",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("order_id", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("period_label", sqlmodel.sql.sqltypes.AutoString(length=7), nullable=False),
        sa.Column("company_id", sa.Integer(), nullable=True),
        sa.Column("position", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("phone", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("email", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("no_of_sets", sa.Integer(), nullable=False),
        sa.Column("shirt_amount", sa.Float(), nullable=False),
        sa.Column("pant_amount", sa.Float(), nullable=False),
        sa.Column("total_amount", sa.Float(), nullable=False),
        sa.Column("payment_method", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("shirt", sa.JSON().with_variant(postgresql.JSONB(), "postgresql"), nullable=False),
        sa.Column("pant", sa.JSON().with_variant(postgresql.JSONB(), "postgresql"), nullable=False),
        sa.Column("status", _label(*ORDER_STATUSES, name="orderstatus"), nullable=False),
        sa.Column("order_date", sa.Date(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["company_id"], ["companies.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("period_label", "order_id", name="uq_orders_period_order_id"),
    )
    op.create_index(op.f("ix_orders_order_id"), "orders", ["order_id"], unique=False)
    op.create_index(op.f("ix_orders_period_label"), "orders", ["period_label"], unique=False)
    op.create_index(op.f("ix_orders_company_id"), "orders", ["company_id"], unique=False)

    op.create_table(
        "labour",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("category", _label("Tailor", "Iron Master", "Embroider", name="labourcategory"), nullable=False),
        sa.Column("specialist", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("phone", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("photo", sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        sa.Column("join_date", sa.Date(), nullable=False),
        sa.Column("status", _label("Active", "Inactive", name="labourstatus"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "wage_configurations",
        sa.Column("key", sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column("pant", sa.Float(), nullable=False),
        sa.Column("shirt", sa.Float(), nullable=False),
        sa.Column("ironing_pant", sa.Float(), nullable=False),
        sa.Column("ironing_shirt", sa.Float(), nullable=False),
        sa.Column("embroidery", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("key"),
    )

    op.create_table(
        "work_assignments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("labour_id", sa.Integer(), nullable=False),
        sa.Column("order_id", sa.Uuid(), nullable=False),
        sa.Column("work_type", _label("Pant", "Shirt", "Ironing", "Embroidery", name="worktype"), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("wage_per_unit", sa.Float(), nullable=False),
        sa.Column("total_wages", sa.Float(), nullable=False),
        sa.Column("custom_wage", sa.Float(), nullable=True),
        sa.Column("order_customer_name", sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column("order_date", sa.Date(), nullable=False),
        sa.Column("status", _label("Assigned", "InProgress", "Completed", name="assignmentstatus"), nullable=False),
        sa.Column("assigned_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["labour_id"], ["labour.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["order_id"], ["orders.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_work_assignments_labour_id"), "work_assignments", ["labour_id"], unique=False)
    op.create_index(op.f("ix_work_assignments_order_id"), "work_assignments", ["order_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_work_assignments_order_id"), table_name="work_assignments")
    op.drop_index(op.f("ix_work_assignments_labour_id"), table_name="work_assignments")
    op.drop_table("work_assignments")
    op.drop_table("wage_configurations")
    op.drop_table("labour")
    op.drop_index(op.f("ix_orders_company_id"), table_name="orders")
    op.drop_index(op.f("ix_orders_period_label"), table_name="orders")
    op.drop_index(op.f("ix_orders_order_id"), table_name="orders")
    op.drop_table("orders")
    op.drop_index(op.f("ix_companies_name"), table_name="companies")
    op.drop_table("companies")
    op.drop_table("sequence_counters")
