"""initial_schema

Revision ID: 5a1c9e7d2b40
Revises:
Create Date: 2026-06-02 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5a1c9e7d2b40"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


DEFAULT_LANGUAGES = [
    {"code": "en", "name": "English", "native_name": "English", "is_rtl": False},
    {"code": "es", "name": "Spanish", "native_name": "Español", "is_rtl": False},
    {"code": "ar", "name": "Arabic", "native_name": "العربية", "is_rtl": True},
    {"code": "he", "name": "Hebrew", "native_name": "עברית", "is_rtl": True},
    {"code": "fr", "name": "French", "native_name": "Français", "is_rtl": False},
    {"code": "de", "name": "German", "native_name": "Deutsch", "is_rtl": False},
    {"code": "zh", "name": "Chinese", "native_name": "中文", "is_rtl": False},
    {"code": "fa", "name": "Persian", "native_name": "فارسی", "is_rtl": True},
    {"code": "ur", "name": "Urdu", "native_name": "اردو", "is_rtl": True},
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    languages = op.create_table(
        "supported_languages",
        sa.Column("code", sa.String(length=10), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("native_name", sa.String(length=100), nullable=False),
        sa.Column("is_rtl", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("enabled", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.PrimaryKeyConstraint("code"),
    )
    op.bulk_insert(
        languages,
        [{**language, "enabled": True} for language in DEFAULT_LANGUAGES],
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("author_name", sa.String(length=255), nullable=False),
        sa.Column("author_email", sa.String(length=255), nullable=True),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("link_url", sa.String(length=2000), nullable=True),
        sa.Column("image_url", sa.String(length=2000), nullable=True),
        sa.Column("post_type", sa.String(length=50), nullable=False),
        sa.Column("original_language", sa.String(length=10), nullable=False),
        sa.Column("text_direction", sa.String(length=3), nullable=False),
        sa.Column("published", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["original_language"], ["supported_languages.code"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_posts_published"), "posts", ["published"], unique=False)

    op.create_table(
        "events",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("organizer_name", sa.String(length=255), nullable=False),
        sa.Column("organizer_email", sa.String(length=255), nullable=True),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("event_date", sa.Date(), nullable=False),
        sa.Column("event_time", sa.Time(), nullable=True),
        sa.Column("location", sa.String(length=500), nullable=True),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("is_free", sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column("ticket_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("ticket_url", sa.String(length=2000), nullable=True),
        sa.Column("original_language", sa.String(length=10), nullable=False),
        sa.Column("text_direction", sa.String(length=3), nullable=False),
        sa.Column("published", sa.Boolean(), server_default=sa.false(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["original_language"], ["supported_languages.code"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_events_published"), "events", ["published"], unique=False)
    op.create_index(op.f("ix_events_event_date"), "events", ["event_date"], unique=False)
    op.create_index(op.f("ix_events_category"), "events", ["category"], unique=False)

    for table, parent, fk_column, body_column, constraint in (
        ("post_translations", "posts", "post_id", "content", "uq_post_translation_lang"),
        ("event_translations", "events", "event_id", "description", "uq_event_translation_lang"),
    ):
        op.create_table(
            table,
            sa.Column("id", sa.String(length=36), nullable=False),
            sa.Column(fk_column, sa.String(length=36), nullable=False),
            sa.Column("language_code", sa.String(length=10), nullable=False),
            sa.Column("title", sa.String(length=1000), nullable=False),
            sa.Column(body_column, sa.Text(), nullable=True),
            sa.Column("text_direction", sa.String(length=3), nullable=False),
            sa.Column(
                "translated_at",
                sa.DateTime(timezone=True),
                server_default=sa.func.now(),
                nullable=False,
            ),
            sa.ForeignKeyConstraint([fk_column], [f"{parent}.id"], ondelete="CASCADE"),
            sa.ForeignKeyConstraint(["language_code"], ["supported_languages.code"]),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint(fk_column, "language_code", name=constraint),
        )
        op.create_index(op.f(f"ix_{table}_{fk_column}"), table, [fk_column], unique=False)

    op.create_table(
        "admin_sessions",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("session_token", sa.String(length=128), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("session_token"),
    )


def downgrade() -> None:
    op.drop_table("admin_sessions")
    for table, fk_column in (("event_translations", "event_id"), ("post_translations", "post_id")):
        op.drop_index(op.f(f"ix_{table}_{fk_column}"), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f("ix_events_category"), table_name="events")
    op.drop_index(op.f("ix_events_event_date"), table_name="events")
    op.drop_index(op.f("ix_events_published"), table_name="events")
    op.drop_table("events")
    op.drop_index(op.f("ix_posts_published"), table_name="posts")
    op.drop_table("posts")
    op.drop_table("supported_languages")
