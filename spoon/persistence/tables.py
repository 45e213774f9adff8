"""SQLAlchemy table definitions for Spoonjoy accounts.

They match the schema defined in Alembic migrations. Unique indexes here
are the final word on email/username ownership; service-level checks only
exist to produce friendly errors.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),  # Stored lowercase
    Column("username", String(255), nullable=False),
    Column("hashed_password", Text, nullable=True),  # NULL for OAuth-only users
    Column("photo_url", Text, nullable=True),  # NULL means default avatar
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("username", name="uq_users_username"),
)

Index("uq_users_email_lower", func.lower(users_table.c.email), unique=True)

# ============================================================================
# OAUTH ACCOUNTS TABLE (Linked Google / Apple identities)
# ============================================================================
oauth_accounts_table = Table(
    "oauth_accounts",
    metadata,
    Column("provider", String(50), nullable=False),  # 'google', 'apple'
    Column("provider_user_id", String(255), nullable=False),
    Column("provider_username", String(255), nullable=False),
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "provider", name="pk_oauth_accounts"),
    UniqueConstraint("provider", "provider_user_id", name="uq_oauth_provider_identity"),
)

Index("idx_oauth_accounts_user_id", oauth_accounts_table.c.user_id)
