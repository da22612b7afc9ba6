"""001: create cash_cards table

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # amount is deliberately unconstrained: negative values are valid
    op.execute("""
        CREATE TABLE cash_cards (
            id      BIGSERIAL           PRIMARY KEY,
            amount  DOUBLE PRECISION    NOT NULL,
            owner   VARCHAR(256)        NOT NULL
        );
    """)
    op.execute("CREATE INDEX idx_cash_cards_owner ON cash_cards (owner);")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS cash_cards CASCADE;")
