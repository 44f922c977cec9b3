# =============================================================================
# tests/test_config.py - Settings and startup validation
# =============================================================================

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import make_url

from users_api.app.core.config import ConfigurationError, Settings
from users_api.app.main import create_app


def full_settings(**overrides):
    values = dict(
        db_user="app",
        db_password="s3cret",
        db_host="db",
        db_port="5432",
        db_name="users",
        database_url=None,
    )
    values.update(overrides)
    return Settings(**values)


class TestSettingsFromEnvironment:

    def test_reads_database_variables(self, monkeypatch):
        monkeypatch.setenv("DB_USER", "alice")
        monkeypatch.setenv("DB_PASSWORD", "pw")
        monkeypatch.setenv("DB_HOST", "pg.internal")
        monkeypatch.setenv("DB_PORT", "6543")
        monkeypatch.setenv("DB_NAME", "people")

        settings = Settings()

        assert settings.db_user == "alice"
        assert settings.db_host == "pg.internal"
        assert settings.db_port == "6543"
        assert settings.db_name == "people"

    def test_reads_presentation_client_variables(self, monkeypatch):
        monkeypatch.setenv("WEB_HOST", "127.0.0.1")
        monkeypatch.setenv("WEB_PORT", "8080")
        monkeypatch.setenv("API_BASE_URL", "http://api:5000")

        settings = Settings()

        assert settings.web_host == "127.0.0.1"
        assert settings.web_port == 8080
        assert settings.api_base_url == "http://api:5000"

    def test_defaults(self, monkeypatch):
        for name in (
            "API_PORT", "LOG_LEVEL", "DB_POOL_SIZE", "DB_MAX_OVERFLOW",
            "WEB_PORT", "API_BASE_URL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.api_port == 5000
        assert settings.web_port == 3000
        assert settings.api_base_url == "http://localhost:5000"
        assert settings.log_level == "INFO"
        assert settings.db_pool_size == 5
        assert settings.db_max_overflow == 10


class TestValidate:

    def test_complete_settings_pass(self):
        full_settings().validate()

    @pytest.mark.parametrize(
        "attr, env",
        [
            ("db_user", "DB_USER"),
            ("db_password", "DB_PASSWORD"),
            ("db_host", "DB_HOST"),
            ("db_port", "DB_PORT"),
            ("db_name", "DB_NAME"),
        ],
    )
    def test_each_missing_variable_is_named(self, attr, env):
        settings = full_settings(**{attr: None})

        assert settings.missing_variables() == [env]
        with pytest.raises(ConfigurationError, match=env):
            settings.validate()

    def test_all_missing_variables_reported_together(self):
        settings = Settings(
            db_user=None, db_password=None, db_host=None, db_port=None, db_name=None, database_url=None
        )

        with pytest.raises(ConfigurationError) as exc_info:
            settings.validate()

        assert "DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, DB_NAME" in str(exc_info.value)

    def test_database_url_replaces_individual_variables(self):
        settings = Settings(
            db_user=None, db_password=None, db_host=None, db_port=None, db_name=None,
            database_url="postgresql+psycopg2://u:p@h:5432/d",
        )

        settings.validate()
        assert settings.sqlalchemy_url() == "postgresql+psycopg2://u:p@h:5432/d"

    def test_non_numeric_port_rejected(self):
        with pytest.raises(ConfigurationError, match="DB_PORT"):
            full_settings(db_port="fivefourthreetwo").validate()


def test_sqlalchemy_url_targets_postgres():
    url = make_url(full_settings().sqlalchemy_url())

    assert url.drivername == "postgresql+psycopg2"
    assert url.username == "app"
    assert url.password == "s3cret"
    assert url.host == "db"
    assert url.port == 5432
    assert url.database == "users"


def test_create_app_fails_fast_on_missing_configuration():
    with pytest.raises(ConfigurationError, match="DB_HOST"):
        create_app(settings=full_settings(db_host=None))


def test_create_app_with_engine_skips_database_validation(users_engine):
    app = create_app(settings=full_settings(db_host=None), engine=users_engine)

    with TestClient(app) as client:
        assert client.get("/health").status_code == 200
        users = client.get("/api/users")

    assert users.status_code == 200
    assert users.json() == [{"id": 1, "name": "Alice"}, {"id": 2, "name": "Bob"}]
