"""SQLAlchemy table definitions for Midweek.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from midweek.domain.value import Attendance, MinPlayers


def _in_values(column: str, enum: type) -> str:
    values = ", ".join(f"'{member.value}'" for member in enum)
    return f"{column} IN ({values})"


metadata = MetaData()

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_name", String(100), nullable=False),
    Column("vote_date", Date, nullable=False),
    Column("attendance", String(10), nullable=False),
    Column("min_players", String(10), nullable=False, server_default="any"),
    Column("guests", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per person per Wednesday, the upsert conflicts on this
    UniqueConstraint("user_name", "vote_date", name="uq_votes_user_date"),
    CheckConstraint(_in_values("attendance", Attendance), name="ck_votes_attendance"),
    CheckConstraint(
        _in_values("min_players", MinPlayers), name="ck_votes_min_players"
    ),
    CheckConstraint("guests BETWEEN 0 AND 10", name="ck_votes_guests"),
)

Index("idx_votes_date", votes_table.c.vote_date)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_name", String(100), nullable=False),
    Column("vote_date", Date, nullable=False),
    Column("text", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(trim(text)) > 0", name="ck_comments_text_not_blank"),
)

Index("idx_comments_date", comments_table.c.vote_date)
