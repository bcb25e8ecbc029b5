"""create users and designs

Revision ID: 4f2a9c1d7b3e
Revises:
Create Date: 2026-10-17 09:12:44.518203

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f2a9c1d7b3e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)
    op.create_index(op.f("ix_users_created_at"), "users", ["created_at"], unique=False)

    # Values match ItemType string values
    item_type_enum = sa.Enum("tshirt", "pants", name="item_type")

    op.create_table(
        "designs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("item_type", item_type_enum, nullable=False),
        sa.Column("color", sa.String(length=64), nullable=False),
        sa.Column("style", sa.String(length=255), nullable=True),
        sa.Column("text_overlay", sa.String(length=500), nullable=True),
        sa.Column("image_url", sa.String(length=500), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_designs_id"), "designs", ["id"], unique=False)
    op.create_index(op.f("ix_designs_user_id"), "designs", ["user_id"], unique=False)
    op.create_index(op.f("ix_designs_created_at"), "designs", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_designs_created_at"), table_name="designs")
    op.drop_index(op.f("ix_designs_user_id"), table_name="designs")
    op.drop_index(op.f("ix_designs_id"), table_name="designs")
    op.drop_table("designs")
    sa.Enum(name="item_type").drop(op.get_bind(), checkfirst=True)

    op.drop_index(op.f("ix_users_created_at"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_index(op.f("ix_users_id"), table_name="users")
    op.drop_table("users")
