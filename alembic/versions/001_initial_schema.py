"""Initial schema - document heads and their version chains.

Revision ID: 001
Revises:
Create Date: 2025-03-04

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    artifact_kind = sa.Enum("text", "code", "image", "sheet", name="artifact_kind")
    document_visibility = sa.Enum("public", "private", name="document_visibility")

    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("kind", artifact_kind, nullable=False, server_default="text"),
        sa.Column("visibility", document_visibility, nullable=False, server_default="private"),
        sa.Column("owner_id", sa.Text(), nullable=False),
        sa.Column("chat_id", sa.UUID(), nullable=True),
        sa.Column("current_version_id", sa.UUID(), nullable=True),
        sa.Column("is_current", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("style", JSONB(), nullable=True),
        sa.Column("author", sa.Text(), nullable=True),
        sa.Column("slug", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_document_owner_id", "document", ["owner_id"])

    op.create_table(
        "document_version",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column(
            "document_id",
            sa.UUID(),
            sa.ForeignKey("document.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("diff_content", sa.Text(), nullable=True),
        sa.Column(
            "previous_version_id",
            sa.UUID(),
            sa.ForeignKey("document_version.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("document_id", "version", name="uq_document_version_number"),
        sa.CheckConstraint("version >= 1", name="ck_document_version_positive"),
        sa.CheckConstraint(
            "previous_version_id IS NULL OR previous_version_id <> id",
            name="ck_document_version_not_self",
        ),
    )
    op.create_index(
        "ix_document_version_previous",
        "document_version",
        ["previous_version_id"],
        unique=True,
    )

    # Created after document_version exists; document and version reference each other.
    op.create_foreign_key(
        "fk_document_current_version",
        "document",
        "document_version",
        ["current_version_id"],
        ["id"],
        ondelete="SET NULL",
    )


def downgrade() -> None:
    op.drop_constraint("fk_document_current_version", "document", type_="foreignkey")
    op.drop_index("ix_document_version_previous", table_name="document_version")
    op.drop_table("document_version")
    op.drop_index("ix_document_owner_id", table_name="document")
    op.drop_table("document")
    sa.Enum(name="document_visibility").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="artifact_kind").drop(op.get_bind(), checkfirst=True)
