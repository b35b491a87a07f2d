"""Tests for the Alembic migrations."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect, text

import townsquare_database

MIGRATIONS_DIR = Path(townsquare_database.__file__).parent / "migrations"


def _alembic_config(db_path: Path) -> Config:
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", f"sqlite+aiosqlite:///{db_path}")
    return config


@pytest.fixture
def migrated_db(tmp_path: Path) -> Path:
    db_path = tmp_path / "migrations.db"
    command.upgrade(_alembic_config(db_path), "head")
    return db_path


def test_upgrade_creates_tables(migrated_db: Path) -> None:
    engine = create_engine(f"sqlite:///{migrated_db}")
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()

    assert {
        "supported_languages",
        "posts",
        "events",
        "post_translations",
        "event_translations",
        "admin_sessions",
    } <= tables


def test_upgrade_seeds_default_languages(migrated_db: Path) -> None:
    engine = create_engine(f"sqlite:///{migrated_db}")
    try:
        with engine.connect() as conn:
            rows = conn.execute(
                text("SELECT code, is_rtl FROM supported_languages ORDER BY code")
            ).all()
    finally:
        engine.dispose()

    codes = {code: bool(is_rtl) for code, is_rtl in rows}
    assert set(codes) == {"en", "es", "ar", "he", "fr", "de", "zh", "fa", "ur"}
    assert codes["ar"] is True
    assert codes["en"] is False


def test_downgrade_drops_tables(tmp_path: Path) -> None:
    db_path = tmp_path / "downgrade.db"
    config = _alembic_config(db_path)
    command.upgrade(config, "head")
    command.downgrade(config, "base")

    engine = create_engine(f"sqlite:///{db_path}")
    try:
        tables = set(inspect(engine).get_table_names())
    finally:
        engine.dispose()

    assert "posts" not in tables
