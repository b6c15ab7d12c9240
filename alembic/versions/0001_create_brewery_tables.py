"""create brewery tables

Revision ID: 0001
Revises:
Create Date: 2026-10-17
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(with_updated: bool = True):
    cols = [sa.Column("created_at", sa.DateTime(), nullable=False)]
    if with_updated:
        cols.append(sa.Column("updated_at", sa.DateTime(), nullable=False))
    return cols


def _brewery_fk():
    return sa.Column("brewery_id", sa.String(length=36), sa.ForeignKey("breweries.id"), nullable=True, index=True)


def upgrade():
    op.create_table(
        "breweries",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("location", sa.String(length=200), nullable=False),
        sa.Column("founded_year", sa.Integer(), nullable=True),
        sa.Column("website", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("brewing_capacity", sa.String(length=100), nullable=True),
        sa.Column("specialties", sa.String(length=255), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("username", sa.String(length=100), nullable=False, unique=True),
        sa.Column("email", sa.String(length=255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        _brewery_fk(),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("profile_image_url", sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "inventory_items",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _brewery_fk(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("quantity", sa.Float(), nullable=False),
        sa.Column("minimum_quantity", sa.Float(), nullable=True),
        sa.Column("unit", sa.String(length=30), nullable=False),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("expiration_date", sa.DateTime(), nullable=True),
        sa.Column("cost", sa.Float(), nullable=True),
        sa.Column("supplier", sa.String(length=200), nullable=True),
        sa.Column("barcode", sa.String(length=100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "ingredient_sources",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _brewery_fk(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("type", sa.String(length=50), nullable=False),
        sa.Column("supplier", sa.String(length=200), nullable=False),
        sa.Column("location", sa.String(length=200), nullable=False),
        sa.Column("contact", sa.String(length=200), nullable=True),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "equipment",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _brewery_fk(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("type", sa.String(length=100), nullable=False),
        sa.Column("capacity", sa.String(length=100), nullable=True),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("utilization", sa.Integer(), nullable=True),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column("purchase_date", sa.DateTime(), nullable=True),
        sa.Column("last_maintenance", sa.DateTime(), nullable=True),
        sa.Column("next_maintenance", sa.DateTime(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "recipes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _brewery_fk(),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("style", sa.String(length=100), nullable=False),
        sa.Column("batch_size", sa.Float(), nullable=False),
        sa.Column("target_abv", sa.Float(), nullable=True),
        sa.Column("target_ibu", sa.Integer(), nullable=True),
        sa.Column("ingredients", sa.JSON(), nullable=False),
        sa.Column("instructions", sa.Text(), nullable=False),
        sa.Column("fermentation_temp", sa.String(length=50), nullable=True),
        sa.Column("fermentation_time", sa.String(length=50), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("image_url", sa.String(length=500), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "brewing_schedules",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _brewery_fk(),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("recipe_id", sa.Integer(), sa.ForeignKey("recipes.id", ondelete="SET NULL"), nullable=True),
        sa.Column("equipment_id", sa.Integer(), sa.ForeignKey("equipment.id", ondelete="SET NULL"), nullable=True),
        sa.Column("start_date", sa.DateTime(), nullable=False),
        sa.Column("end_date", sa.DateTime(), nullable=False),
        sa.Column("status", sa.String(length=30), nullable=False),
        sa.Column("batch_size", sa.Float(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_table(
        "ingredient_price_history",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        _brewery_fk(),
        sa.Column("ingredient_id", sa.Integer(), sa.ForeignKey("inventory_items.id", ondelete="CASCADE"), nullable=True, index=True),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("supplier", sa.String(length=200), nullable=True),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        *_timestamps(with_updated=False),
    )


def downgrade():
    op.drop_table("ingredient_price_history")
    op.drop_table("brewing_schedules")
    op.drop_table("recipes")
    op.drop_table("equipment")
    op.drop_table("ingredient_sources")
    op.drop_table("inventory_items")
    op.drop_table("users")
    op.drop_table("breweries")
