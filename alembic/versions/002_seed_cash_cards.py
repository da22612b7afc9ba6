"""002: seed demo cash cards

Revision ID: 002
Revises: 001
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Owners match the demo accounts in src/cc_gateway/auth/users.py
    op.execute("""
        INSERT INTO cash_cards (id, amount, owner) VALUES
            (99,  123.45, 'sarah1'),
            (100, 1.00,   'sarah1'),
            (101, 150.00, 'sarah1'),
            (102, 200.00, 'kumar2');
    """)
    # Explicit ids bypass the sequence; move it past them
    op.execute("""
        SELECT setval(
            pg_get_serial_sequence('cash_cards', 'id'),
            (SELECT MAX(id) FROM cash_cards)
        );
    """)


def downgrade() -> None:
    op.execute("DELETE FROM cash_cards WHERE id IN (99, 100, 101, 102);")
