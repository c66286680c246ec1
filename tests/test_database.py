"""Tests for configuration and database setup."""

import logging
from datetime import date, time

import pytest
from peewee import PeeweeException, SqliteDatabase

from eventplanner.app import create_app
from eventplanner.config import Config
from eventplanner.database import (
    _pooled_url,
    apply_row_level_security,
    close_database,
    connect_database,
    init_database,
)
from eventplanner.models.event import Event
from eventplanner.models.rsvp import RSVP


def test_config_from_env_mapping() -> None:
    config = Config.from_env({
        "DATABASE_URL": "postgresql://u:p@host/db",
        "DATABASE_SSL": "false",
        "PORT": "8080",
        "ADMIN_TOKEN": "tok",
        "SEED_DATA": "FALSE",
        "LOG_LEVEL": "debug",
    })

    assert config.database_url == "postgresql://u:p@host/db"
    assert config.database_ssl is False
    assert config.port == 8080
    assert config.admin_token == "tok"
    assert config.admin_enabled is True
    assert config.seed_data is False
    assert config.log_level == "DEBUG"


def test_config_defaults() -> None:
    config = Config.from_env({})

    assert config.database_url == ""
    assert config.database_ssl is True
    assert config.port == 3000
    assert config.admin_enabled is False
    assert config.seed_data is True


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgres://u@h/db", "postgresql+pool://u@h/db"),
        ("postgresql://u@h/db?sslmode=require", "postgresql+pool://u@h/db?sslmode=require"),
        ("sqlite:///tmp/x.db", "sqlite:///tmp/x.db"),
    ],
)
def test_postgres_urls_use_the_pool(url, expected) -> None:
    assert _pooled_url(url) == expected


def test_missing_database_url_warns_and_fails_initialization(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="eventplanner"):
        db = connect_database(Config())

    assert "DATABASE_URL is not set" in caplog.text
    with pytest.raises(PeeweeException):
        init_database(db)


def test_create_app_fails_without_database() -> None:
    with pytest.raises(PeeweeException):
        create_app(Config(admin_token="tok"))


def test_init_database_seeds_three_events_once(tmp_path) -> None:
    db = connect_database(Config(database_url=f"sqlite:///{tmp_path / 'seed.db'}"))
    today = date(2024, 3, 1)
    try:
        init_database(db, today=today)
        init_database(db, today=today)

        events = list(Event.select().order_by(Event.event_date))
        assert [e.event_date for e in events] == [
            date(2024, 3, 3),
            date(2024, 3, 7),
            date(2024, 3, 11),
        ]
        assert events[0].title == "Friday Game Night"
        assert events[2].event_time == time(18, 30)
    finally:
        close_database(db)


def test_init_database_without_seed(tmp_path) -> None:
    db = connect_database(Config(database_url=f"sqlite:///{tmp_path / 'empty.db'}"))
    try:
        init_database(db, seed=False)

        assert Event.select().count() == 0
        assert RSVP.select().count() == 0
    finally:
        close_database(db)


def test_row_level_security_skipped_on_sqlite(tmp_path) -> None:
    db = SqliteDatabase(str(tmp_path / "rls.db"))

    assert apply_row_level_security(db) is False


def test_foreign_key_cascade_in_store(tmp_path) -> None:
    db = connect_database(Config(database_url=f"sqlite:///{tmp_path / 'fk.db'}"))
    try:
        init_database(db, seed=False)
        event = Event.create(title="T", description="D", event_date=date(2024, 3, 1))
        RSVP.create(event=event, name="Alice", session_id="s1")

        Event.delete().where(Event.id == event.id).execute()

        assert RSVP.select().count() == 0
    finally:
        close_database(db)
