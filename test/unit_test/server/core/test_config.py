"""Unit tests for server configuration settings model.

Tests verify that the Settings model binds environment variables named in
the .env.example file and exposes them as grouped configuration models.
"""

from pathlib import Path

import pytest

from rockmundo.server.core.config import CORSConfig, GameConfig, Settings, SupabaseAuthConfig


@pytest.fixture
def env_example_path() -> Path:
    """Get path to .env.example file."""
    return Path(__file__).resolve().parent.parent.parent.parent.parent / ".env.example"


@pytest.fixture
def env_example_vars(env_example_path: Path) -> dict[str, str]:
    """Parse .env.example file and return environment variables."""
    env_vars = {}
    with open(env_example_path) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                key, value = line.split("=", 1)
                env_vars[key.strip()] = value.strip()
    return env_vars


class TestEnvExample:
    def test_every_setting_is_documented(self, env_example_vars: dict[str, str]):
        """Each Settings alias appears in .env.example."""
        aliases = {field.alias for field in Settings.model_fields.values()}
        assert aliases <= set(env_example_vars)


class TestSettingsBinding:
    """Test Settings model environment variable binding."""

    def test_server_binding(self, env_example_vars: dict[str, str], monkeypatch):
        monkeypatch.setenv("ROCKMUNDO_SERVER_HOST", env_example_vars["ROCKMUNDO_SERVER_HOST"])
        monkeypatch.setenv("ROCKMUNDO_SERVER_PORT", "9100")
        monkeypatch.setenv("ROCKMUNDO_LOG_LEVEL", "debug")

        settings = Settings()
        assert settings.server_host == "0.0.0.0"
        assert settings.server_port == 9100
        assert settings.log_level.upper() == "DEBUG"

    def test_database_url_binding(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://user:pw@db:5432/game")

        assert Settings().database_url == "postgresql+asyncpg://user:pw@db:5432/game"

    def test_file_logging_binding(self, monkeypatch):
        monkeypatch.setenv("ENABLE_FILE_LOGGING", "true")
        monkeypatch.setenv("LOG_FILE_DIR", "/var/log/rockmundo")

        settings = Settings()
        assert settings.enable_file_logging is True
        assert settings.log_file_dir == "/var/log/rockmundo"


class TestSupabaseAuthConfigBinding:
    def test_grouped_from_settings(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_JWT_SECRET", "super-secret")
        monkeypatch.setenv("SUPABASE_JWT_AUDIENCE", "service")

        auth = Settings().supabase_auth
        assert isinstance(auth, SupabaseAuthConfig)
        assert auth.jwt_secret == "super-secret"
        assert auth.jwt_audience == "service"
        assert auth.jwt_algorithm == "HS256"

    def test_populate_by_name(self):
        auth = SupabaseAuthConfig(jwt_secret="s")
        assert auth.jwt_secret == "s"
        assert auth.jwt_audience == "authenticated"


class TestCORSConfigBinding:
    def test_json_lists(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", '["https://rockmundo.example"]')
        monkeypatch.setenv("CORS_ALLOW_HEADERS", '["authorization","content-type"]')

        cors = Settings().cors
        assert isinstance(cors, CORSConfig)
        assert cors.origins == ["https://rockmundo.example"]
        assert cors.allow_headers == ["authorization", "content-type"]


class TestGameConfigBinding:
    def test_game_tuning(self, monkeypatch):
        monkeypatch.setenv("GAME_DEFAULT_FESTIVAL_PAYOUT", "7500")
        monkeypatch.setenv("GAME_GIFTED_SONG_COOLDOWN_DAYS", "3")

        game = Settings().game
        assert isinstance(game, GameConfig)
        assert game.default_festival_payout == 7500
        assert game.gifted_song_cooldown_days == 3


class TestSettingsDefaults:
    @pytest.mark.parametrize(
        "field, default",
        [
            ("server_host", "0.0.0.0"),
            ("server_port", 8000),
            ("log_level", "INFO"),
            ("enable_file_logging", False),
            ("supabase_jwt_secret", None),
            ("supabase_jwt_audience", "authenticated"),
            ("game_default_festival_payout", 5000),
            ("game_gifted_song_cooldown_days", 7),
        ],
    )
    def test_field_defaults(self, field, default):
        assert Settings.model_fields[field].default == default

    def test_grouped_defaults(self):
        assert GameConfig().default_festival_payout == 5000
        assert CORSConfig().origins == ["*"]
        assert "authorization" in CORSConfig().allow_headers
