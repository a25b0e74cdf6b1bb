"""SQLAlchemy table definitions for votex.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# VOTES TABLE (polymorphic on both sides)
# ============================================================================
votes_table = Table(
    "votex_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column("voter_type", String(255), nullable=False),  # e.g. 'User'
    Column("voter_id", String(255), nullable=False),
    Column("votable_type", String(255), nullable=False),  # e.g. 'Post'
    Column("votable_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default=text("NOW()")
    ),
    UniqueConstraint(
        "voter_type", "voter_id", "votable_type", "votable_id", name="uq_votex_vote"
    ),
)

Index("idx_votex_votes_voter", votes_table.c.voter_type, votes_table.c.voter_id)
Index(
    "idx_votex_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id
)
