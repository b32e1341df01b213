import pytest

from httpforge._config import Config
from httpforge._utils.constants import DEFAULT_USER_AGENT


class TestConfigFromEnv:
    def test_defaults(self):
        config = Config.from_env()

        assert config.user_agent == DEFAULT_USER_AGENT
        assert config.timeout == 30.0
        assert config.follow_redirects is False
        assert config.verify_ssl is True
        assert config.max_retries == 3

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HTTPFORGE_USER_AGENT", "probe/1.0")
        monkeypatch.setenv("HTTPFORGE_TIMEOUT", "2.5")
        monkeypatch.setenv("HTTPFORGE_FOLLOW_REDIRECTS", "yes")
        monkeypatch.setenv("HTTPFORGE_VERIFY_SSL", "0")
        monkeypatch.setenv("HTTPFORGE_MAX_RETRIES", "5")

        config = Config.from_env()

        assert config.user_agent == "probe/1.0"
        assert config.timeout == 2.5
        assert config.follow_redirects is True
        assert config.verify_ssl is False
        assert config.max_retries == 5

    def test_overrides_win_over_environment(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HTTPFORGE_TIMEOUT", "2.5")

        config = Config.from_env(timeout=10.0, verify_ssl=None)

        assert config.timeout == 10.0
        assert config.verify_ssl is True
