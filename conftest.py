"""Pytest configuration and fixtures for s2skill tests.

CRITICAL: Keeps tests away from the developer's ~/.s2skill/config.toml.
"""

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point ConfigManager at a config file inside tmp_path.

    A real ~/.s2skill/config.toml would otherwise change the defaults the
    tests rely on.

    Example:
        def test_something(isolated_config):
            isolated_config.write_text('index_mode = "preserve"')
    """
    from s2skill.config_manager import ConfigManager

    config_dir = tmp_path / ".s2skill"
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / "config.toml"

    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_DIR", config_dir)
    monkeypatch.setattr(ConfigManager, "DEFAULT_CONFIG_FILE", config_file)

    return config_file
