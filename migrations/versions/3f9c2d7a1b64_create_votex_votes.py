"""create_votex_votes

Create the polymorphic votes table:
- voter and votable referenced by type tag + identifier (no foreign keys)
- one vote per voter per votable (uq_votex_vote)

Revision ID: 3f9c2d7a1b64
Revises:
Create Date: 2026-10-19 10:12:44.318022

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f9c2d7a1b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "votex_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("voter_type", sa.String(255), nullable=False),
        sa.Column("voter_id", sa.String(255), nullable=False),
        sa.Column("votable_type", sa.String(255), nullable=False),
        sa.Column("votable_id", sa.String(255), nullable=False),
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
        sa.UniqueConstraint(
            "voter_type",
            "voter_id",
            "votable_type",
            "votable_id",
            name="uq_votex_vote",
        ),
    )
    op.create_index(
        "idx_votex_votes_voter", "votex_votes", ["voter_type", "voter_id"]
    )
    op.create_index(
        "idx_votex_votes_votable", "votex_votes", ["votable_type", "votable_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votex_votes_votable", table_name="votex_votes")
    op.drop_index("idx_votex_votes_voter", table_name="votex_votes")
    op.drop_table("votex_votes")
