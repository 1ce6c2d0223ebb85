"""Tests for publish target selection."""

import logging
from pathlib import Path

import pytest

from modhelper.config.models import MavenConfig, ProjectConfig
from modhelper.publishing.target import (
    InvalidCredentialsError,
    require_credentials,
    resolve_publish_target,
)


def _config(maven=None) -> ProjectConfig:
    return ProjectConfig(
        id="examplemod",
        group="com.example",
        version="1.2.3",
        minecraft_version="1.21",
        neo_version="21.0.167",
        license={"name": "MIT"},
        maven=maven,
    )


class TestRequireCredentials:
    def test_complete(self):
        maven = MavenConfig(url="https://maven.example.com", user="u", password="p")
        assert require_credentials(maven) is maven

    def test_none(self):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            require_credentials(None)
        assert exc_info.value.missing == ["url", "user", "password"]

    def test_missing_password(self):
        maven = MavenConfig(url="https://maven.example.com", user="u")
        with pytest.raises(InvalidCredentialsError, match="password"):
            require_credentials(maven)


class TestResolvePublishTarget:
    def test_remote(self, tmp_path: Path):
        config = _config({"url": "https://maven.example.com", "user": "u", "password": "p"})
        target = resolve_publish_target(config, tmp_path)
        assert not target.local
        assert target.url == "https://maven.example.com"
        assert target.username == "u"
        assert target.password == "p"

    def test_password_missing_falls_back(self, tmp_path: Path, caplog):
        config = _config({"url": "https://maven.example.com", "user": "u"})
        with caplog.at_level(logging.INFO, logger="modhelper.publishing.target"):
            target = resolve_publish_target(config, tmp_path)
        assert target.local
        assert target.url == (tmp_path / "repo").resolve().as_uri()
        assert target.username is None
        assert "Using repo folder" in caplog.text
        assert "password" in caplog.text

    def test_no_maven_config(self, tmp_path: Path):
        target = resolve_publish_target(_config(), tmp_path)
        assert target.local
        assert target.url.endswith("/repo")
