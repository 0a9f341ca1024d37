"""Catalog schema: types, pokemons and their association.

Revision ID: 0001_catalog_schema
Revises:
Create Date: 2026-10-17 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_catalog_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_types")),
        sa.UniqueConstraint("name", name=op.f("uq_types_name")),
    )
    op.create_table(
        "pokemons",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("height", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("weight", sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column("base_experience", sa.Integer(), nullable=False),
        sa.Column("sprite_url", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_pokemons")),
    )
    op.create_table(
        "pokemon_types",
        sa.Column("pokemon_id", sa.Integer(), nullable=False),
        sa.Column("type_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["pokemon_id"],
            ["pokemons.id"],
            name=op.f("fk_pokemon_types_pokemon_id_pokemons"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["type_id"],
            ["types.id"],
            name=op.f("fk_pokemon_types_type_id_types"),
            ondelete="RESTRICT",
        ),
        sa.PrimaryKeyConstraint("pokemon_id", "type_id", name=op.f("pk_pokemon_types")),
    )
    with op.batch_alter_table("pokemon_types", schema=None) as batch_op:
        batch_op.create_index(batch_op.f("ix_pokemon_types_type_id"), ["type_id"], unique=False)


def downgrade() -> None:
    with op.batch_alter_table("pokemon_types", schema=None) as batch_op:
        batch_op.drop_index(batch_op.f("ix_pokemon_types_type_id"))

    op.drop_table("pokemon_types")
    op.drop_table("pokemons")
    op.drop_table("types")
