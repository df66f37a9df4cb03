import logging

from typed_notion.config import Settings, configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("NOTION_API_KEY", "NOTION_API_BASE", "NOTION_API_VERSION", "NOTION_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings()
        assert settings.api_key is None
        assert settings.api_base == "https://api.notion.com/v1"
        assert settings.api_version == "2022-06-28"
        assert settings.timeout == 30.0

    def test_env_prefix(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("NOTION_API_KEY", "secret_env")
        monkeypatch.setenv("NOTION_TIMEOUT", "5")
        settings = Settings()
        assert settings.api_key == "secret_env"
        assert settings.timeout == 5.0

    def test_env_file(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("NOTION_API_KEY", raising=False)
        (tmp_path / ".env").write_text("NOTION_API_KEY=secret_file\n", encoding="utf-8")
        assert Settings().api_key == "secret_file"

    def test_env_file_with_other_notion_keys(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("NOTION_API_KEY", raising=False)
        (tmp_path / ".env").write_text(
            "NOTION_DATABASE_ID=abc\nNOTION_WEBHOOK_SECRET=s\nNOTION_API_KEY=secret_file\n",
            encoding="utf-8",
        )
        settings = Settings()
        assert settings.api_key == "secret_file"
        assert not hasattr(settings, "database_id")


class TestConfigureLogging:
    def test_level_from_settings(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(Settings(api_key="x", log_level="debug"))
        assert len(calls) == 1
        assert calls[0]["level"] == logging.DEBUG
        assert "%(name)s" in calls[0]["format"]
