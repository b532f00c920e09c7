"""Add member_since to users when missing.

Revision ID: 002
Revises: 001
Create Date: 2024-05-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _has_member_since() -> bool:
    columns = sa.inspect(op.get_bind()).get_columns("users")
    return any(c["name"] == "member_since" for c in columns)


def upgrade() -> None:
    # Databases patched by scripts/migrate_db.py already carry the column
    if not _has_member_since():
        op.add_column("users", sa.Column("member_since", sa.DateTime(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table("users") as batch_op:
        batch_op.drop_column("member_since")
