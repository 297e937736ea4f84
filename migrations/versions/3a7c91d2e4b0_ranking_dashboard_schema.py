"""ranking dashboard schema

Revision ID: 3a7c91d2e4b0
Revises:
Create Date: 2026-10-19 10:12:41.508213

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a7c91d2e4b0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade():
    op.create_table(
        "platforms",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("base_url", sa.String(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_platforms_id", "platforms", ["id"])
    op.create_index("ix_platforms_name", "platforms", ["name"], unique=True)

    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("display_name", sa.String(), nullable=False),
        sa.Column("parent_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_categories_id", "categories", ["id"])
    op.create_index("ix_categories_parent_id", "categories", ["parent_id"])

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("platform_id", sa.Integer(), sa.ForeignKey("platforms.id"), nullable=False),
        sa.Column("platform_product_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True),
        sa.Column("brand", sa.String(), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("original_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("discount_rate", sa.Numeric(5, 2), nullable=True),
        sa.Column("image_url", sa.String(), nullable=True),
        sa.Column("product_url", sa.String(), nullable=False),
        sa.Column("rating", sa.Numeric(3, 2), nullable=True),
        sa.Column("review_count", sa.Integer(), server_default="0"),
        sa.Column("is_available", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("last_updated", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_products_id", "products", ["id"])
    op.create_index("ix_products_platform_id", "products", ["platform_id"])
    op.create_index("ix_products_category_id", "products", ["category_id"])

    op.create_table(
        "rankings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("platform_id", sa.Integer(), sa.ForeignKey("platforms.id"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=True),
        sa.Column("rank", sa.Integer(), nullable=False),
        sa.Column("rank_date", sa.DateTime(), nullable=False),
        sa.Column("sales_volume", sa.Integer(), nullable=True),
        sa.Column("view_count", sa.Integer(), nullable=True),
        sa.Column("rank_change", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_rankings_id", "rankings", ["id"])
    op.create_index("ix_rankings_product_id", "rankings", ["product_id"])
    op.create_index("ix_rankings_platform_id", "rankings", ["platform_id"])
    op.create_index("ix_rankings_platform_date_rank", "rankings", ["platform_id", "rank_date", "rank"])

    op.create_table(
        "price_history",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("original_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("discount_rate", sa.Numeric(5, 2), nullable=True),
        sa.Column("recorded_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_price_history_id", "price_history", ["id"])
    op.create_index("ix_price_history_product_id", "price_history", ["product_id"])
    op.create_index("ix_price_history_recorded_at", "price_history", ["recorded_at"])

    op.create_table(
        "product_analysis",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("trend_score", sa.Numeric(5, 2), nullable=True),
        sa.Column("price_stability", sa.Numeric(5, 2), nullable=True),
        sa.Column("competitiveness", sa.Numeric(5, 2), nullable=True),
        sa.Column("market_position", sa.String(), nullable=True),
        sa.Column("recommendation_score", sa.Numeric(5, 2), nullable=True),
        sa.Column("analysis_data", sa.JSON(), nullable=True),
        sa.Column("last_analyzed", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_product_analysis_id", "product_analysis", ["id"])
    op.create_index("ix_product_analysis_product_id", "product_analysis", ["product_id"])

    op.create_table(
        "watchlist",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_email", sa.String(), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("products.id"), nullable=False),
        sa.Column("notify_price_change", sa.Boolean(), server_default=sa.false()),
        sa.Column("notify_rank_change", sa.Boolean(), server_default=sa.false()),
        sa.Column("target_price", sa.Numeric(12, 2), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_watchlist_id", "watchlist", ["id"])
    op.create_index("ix_watchlist_user_email", "watchlist", ["user_email"])

    op.create_table(
        "data_collection_logs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("platform_id", sa.Integer(), sa.ForeignKey("platforms.id"), nullable=False),
        sa.Column("status", sa.String(), nullable=False),
        sa.Column("products_updated", sa.Integer(), server_default="0"),
        sa.Column("rankings_updated", sa.Integer(), server_default="0"),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column("started_at", sa.DateTime(), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_data_collection_logs_id", "data_collection_logs", ["id"])
    op.create_index("ix_data_collection_logs_platform_id", "data_collection_logs", ["platform_id"])


def downgrade():
    op.drop_table("data_collection_logs")
    op.drop_table("watchlist")
    op.drop_table("product_analysis")
    op.drop_table("price_history")
    op.drop_table("rankings")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("platforms")
