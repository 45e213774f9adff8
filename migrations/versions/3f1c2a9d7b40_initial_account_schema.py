"""initial_account_schema

Create the account schema for Spoonjoy:
- Users (email unique ignoring case, username unique as written)
- OAuth accounts (linked Google / Apple identities, one per provider per user)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-17 09:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),  # Stored lowercase
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.Text(), nullable=True),
        sa.Column("photo_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index(
        "uq_users_email_lower",
        "users",
        [sa.text("lower(email)")],
        unique=True,
    )

    # ========================================================================
    # OAUTH_ACCOUNTS table
    # ========================================================================
    op.create_table(
        "oauth_accounts",
        sa.Column("provider", sa.String(50), nullable=False),  # 'google', 'apple'
        sa.Column("provider_user_id", sa.String(255), nullable=False),
        sa.Column("provider_username", sa.String(255), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("user_id", "provider", name="pk_oauth_accounts"),
        sa.UniqueConstraint(
            "provider", "provider_user_id", name="uq_oauth_provider_identity"
        ),
    )
    op.create_index("idx_oauth_accounts_user_id", "oauth_accounts", ["user_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_oauth_accounts_user_id", table_name="oauth_accounts")
    op.drop_table("oauth_accounts")
    op.drop_index("uq_users_email_lower", table_name="users")
    op.drop_table("users")
