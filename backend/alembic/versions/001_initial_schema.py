"""Initial schema — users, user_auth, question, answer.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Questions and answers cascade on delete at the DB level so that deleting a
question removes its answers even outside the ORM.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.String(200), nullable=False, unique=True),
        sa.Column("username", sa.String(30), nullable=False, unique=True),
        sa.Column("email", sa.String(50), nullable=False, unique=True),
        sa.Column("role", sa.String(30), nullable=False, server_default="nonadmin"),
    )

    op.create_table(
        "user_auth",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.String(200), nullable=False, unique=True),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("access_token", sa.String(500), nullable=False, unique=True),
        sa.Column("login_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("logout_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "question",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.String(200), nullable=False, unique=True),
        sa.Column("content", sa.String(500), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
    )
    op.create_index("ix_question_content", "question", ["content"])

    op.create_table(
        "answer",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("uuid", sa.String(200), nullable=False, unique=True),
        sa.Column("ans", sa.String(255), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column(
            "question_id", sa.Integer,
            sa.ForeignKey("question.id", ondelete="CASCADE"), nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("answer")
    op.drop_index("ix_question_content", table_name="question")
    op.drop_table("question")
    op.drop_table("user_auth")
    op.drop_table("users")
