"""Staff, offices, staff_offices and messages

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ── 1. Enum types (SQLAlchemy persists member names) ──────────────────
    op.execute("CREATE TYPE staffrole AS ENUM ('ADMIN', 'MPRO', 'MA', 'TOSM', 'EM');")
    op.execute(
        "CREATE TYPE officecategory AS ENUM "
        "('MOO', 'WSO', 'ABO', 'SSO', 'PLO', 'WO', 'RSTLO', 'RUFO', 'PGAPO');"
    )

    # ── 2. Staff ──────────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE staff (
            id SERIAL PRIMARY KEY,
            username VARCHAR(100) NOT NULL UNIQUE,
            name VARCHAR(100) NOT NULL,
            surname VARCHAR(100) NOT NULL,
            password_hash VARCHAR(255) NOT NULL,
            role staffrole NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
        );
    """)
    op.execute("CREATE INDEX ix_staff_role ON staff (role);")

    # ── 3. Offices ────────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE offices (
            id SERIAL PRIMARY KEY,
            name VARCHAR(255) NOT NULL UNIQUE,
            description TEXT NOT NULL DEFAULT '',
            category officecategory NOT NULL,
            is_external BOOLEAN NOT NULL DEFAULT false,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
        );
    """)
    op.execute("CREATE INDEX ix_offices_category_external ON offices (category, is_external);")

    # ── 4. Membership join table ──────────────────────────────────────────
    op.execute("""
        CREATE TABLE staff_offices (
            staff_id INTEGER NOT NULL REFERENCES staff(id) ON DELETE CASCADE,
            office_id INTEGER NOT NULL REFERENCES offices(id) ON DELETE CASCADE,
            PRIMARY KEY (staff_id, office_id)
        );
    """)

    # ── 5. Messages ───────────────────────────────────────────────────────
    op.execute("""
        CREATE TABLE messages (
            id SERIAL PRIMARY KEY,
            timestamp TIMESTAMPTZ NOT NULL DEFAULT now(),
            message TEXT NOT NULL,
            is_private BOOLEAN NOT NULL DEFAULT false,
            staff_id INTEGER REFERENCES staff(id) ON DELETE SET NULL
        );
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS messages;")
    op.execute("DROP TABLE IF EXISTS staff_offices;")
    op.execute("DROP TABLE IF EXISTS offices;")
    op.execute("DROP TABLE IF EXISTS staff;")
    op.execute("DROP TYPE IF EXISTS officecategory;")
    op.execute("DROP TYPE IF EXISTS staffrole;")
