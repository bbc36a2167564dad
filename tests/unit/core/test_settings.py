"""
Unit tests for Settings.
"""

import pytest

from bakery.config.settings import Settings


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, JWT_SECRET_KEY="secret", **overrides)


@pytest.mark.unit
def test_database_url_encodes_credentials():
    settings = make_settings(DB_USER="baker@shop", DB_PASSWORD="p@ss/w:rd", DB_HOST="db", DB_PORT=5433, DB_NAME="bakery")

    assert settings.database_url == "postgresql://baker%40shop:p%40ss%2Fw%3Ard@db:5433/bakery"


@pytest.mark.unit
def test_database_url_without_password():
    settings = make_settings(DB_USER="postgres", DB_PASSWORD=None, DB_HOST="localhost", DB_PORT=5432, DB_NAME="bakery")

    assert settings.database_url == "postgresql://postgres@localhost:5432/bakery"


@pytest.mark.unit
def test_currency_is_upper_cased():
    assert make_settings(CURRENCY="egp").CURRENCY == "EGP"


@pytest.mark.unit
def test_unknown_log_format_is_rejected():
    with pytest.raises(ValueError):
        make_settings(LOG_FORMAT="xml")
