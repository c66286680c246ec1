"""Shared test fixtures."""

from urllib.parse import parse_qs, urlparse

import pytest
from flask import template_rendered

from eventplanner.app import create_app
from eventplanner.config import Config
from eventplanner.database import close_database

ADMIN_TOKEN = "s3cret-token"


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        database_url=f"sqlite:///{tmp_path / 'events.db'}",
        admin_token=ADMIN_TOKEN,
        seed_data=False,
    )


@pytest.fixture
def app(config):
    app = create_app(config)
    app.config["TESTING"] = True
    yield app
    close_database(app.extensions["database"])


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def captured_templates(app):
    """Record (template, context) for every template the app renders."""
    recorded = []

    def record(sender, template, context, **extra):
        recorded.append((template, context))

    template_rendered.connect(record, app)
    yield recorded
    template_rendered.disconnect(record, app)


def redirect_target(response) -> tuple[str, dict[str, list[str]]]:
    """Split a redirect response's Location into path and query params."""
    location = urlparse(response.headers["Location"])
    return location.path, parse_qs(location.query)
