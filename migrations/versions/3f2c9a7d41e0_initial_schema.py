"""initial_schema

Create the votes and comments tables:
- Votes (one per user name and Wednesday, upserted on re-vote)
- Comments (append-only thread per Wednesday)

Revision ID: 3f2c9a7d41e0
Revises:
Create Date: 2026-10-17 10:12:44.310552

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9a7d41e0"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "votes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_name", sa.String(100), nullable=False),
        sa.Column("vote_date", sa.Date(), nullable=False),
        sa.Column("attendance", sa.String(10), nullable=False),
        sa.Column("min_players", sa.String(10), nullable=False, server_default="any"),
        sa.Column("guests", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("user_name", "vote_date", name="uq_votes_user_date"),
        # Keep in sync with midweek.domain.value.Attendance / MinPlayers
        sa.CheckConstraint("attendance IN ('yes', 'no')", name="ck_votes_attendance"),
        sa.CheckConstraint(
            "min_players IN ('any', '6', '8')", name="ck_votes_min_players"
        ),
        sa.CheckConstraint("guests BETWEEN 0 AND 10", name="ck_votes_guests"),
    )
    op.create_index("idx_votes_date", "votes", ["vote_date"])

    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_name", sa.String(100), nullable=False),
        sa.Column("vote_date", sa.Date(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint(
            "length(trim(text)) > 0", name="ck_comments_text_not_blank"
        ),
    )
    op.create_index("idx_comments_date", "comments", ["vote_date"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_date", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_votes_date", table_name="votes")
    op.drop_table("votes")
