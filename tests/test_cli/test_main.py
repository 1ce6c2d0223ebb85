"""Tests for the modhelper CLI."""

import tomllib
from pathlib import Path

import pytest
from click.testing import CliRunner

from modhelper.cli.main import cli

CONFIG = """
id: examplemod
group: com.example
version: 1.2.3
name: Example Mod
authors: Alice
description: An example mod.
url: https://example.com/examplemod
minecraft_version: "1.21"
neo_version: 21.0.167
license:
  name: MIT
"""


@pytest.fixture
def project(tmp_path: Path) -> Path:
    path = tmp_path / "modhelper.yaml"
    path.write_text(CONFIG)
    return path


def _base_args(project: Path) -> list[str]:
    return ["--config", str(project), "--build-dir", str(project.parent / "build")]


class TestManifestCommand:
    def test_writes_manifest(self, project):
        runner = CliRunner()
        result = runner.invoke(cli, _base_args(project) + ["manifest"])
        assert result.exit_code == 0, result.output
        path = project.parent / "build" / "generated" / "resources" / "META-INF" / "neoforge.mods.toml"
        assert tomllib.loads(path.read_text())["license"] == "MIT"

    def test_stdout(self, project):
        runner = CliRunner()
        result = runner.invoke(cli, _base_args(project) + ["manifest", "--stdout"])
        assert result.exit_code == 0
        assert tomllib.loads(result.output)["mods"][0]["displayName"] == "Example Mod"

    def test_missing_field_fails(self, project):
        project.write_text(CONFIG.replace("authors: Alice\n", ""))
        runner = CliRunner()
        result = runner.invoke(cli, _base_args(project) + ["manifest"])
        assert result.exit_code == 1
        assert "authors" in result.output

    def test_missing_config_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(cli, ["--config", str(tmp_path / "nope.yaml"), "manifest"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestCiOutputCommand:
    def test_uses_env(self, project, tmp_path):
        output = tmp_path / "gh_out"
        runner = CliRunner()
        result = runner.invoke(
            cli, _base_args(project) + ["ci-output"], env={"GITHUB_OUTPUT": str(output)}
        )
        assert result.exit_code == 0, result.output
        assert output.read_text().splitlines() == [
            "modid=examplemod",
            "version=1.21-1.2.3",
            "minecraft_version=1.21",
        ]

    def test_skips_without_env(self, project):
        runner = CliRunner()
        result = runner.invoke(
            cli, _base_args(project) + ["ci-output"], env={"GITHUB_OUTPUT": None}
        )
        assert result.exit_code == 0
        assert "nothing written" in result.output


class TestAttributesCommand:
    def test_mf_output(self, project):
        runner = CliRunner()
        result = runner.invoke(
            cli, _base_args(project) + ["attributes", "--classifier", "sources", "--mf"]
        )
        assert result.exit_code == 0
        assert "Implementation-Title: examplemod-sources" in result.output


class TestPublishTargetCommand:
    def test_local_fallback(self, project):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            _base_args(project) + ["--maven-user", "u", "publish-target"],
            env={"MAVEN_URL": None, "MAVEN_PASSWORD": None},
        )
        assert result.exit_code == 0
        assert "Local repository" in result.output

    def test_remote_from_env(self, project):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            _base_args(project) + ["publish-target"],
            env={
                "MAVEN_URL": "https://maven.example.com",
                "MAVEN_USER": "u",
                "MAVEN_PASSWORD": "p",
            },
        )
        assert result.exit_code == 0
        assert "Remote repository" in result.output


class TestPomCommand:
    def test_prints_pom(self, project):
        runner = CliRunner()
        result = runner.invoke(cli, _base_args(project) + ["pom"])
        assert result.exit_code == 0
        assert "<artifactId>examplemod</artifactId>" in result.output


class TestBuildCommand:
    def test_build(self, project, tmp_path):
        output = tmp_path / "gh_out"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            _base_args(project) + ["build"],
            env={"GITHUB_OUTPUT": str(output), "MAVEN_URL": None},
        )
        assert result.exit_code == 0, result.output
        assert "examplemod 1.21-1.2.3" in result.output
        assert output.exists()
        assert (project.parent / "build" / "tmp" / "jar" / "MANIFEST.MF").exists()


class TestMinifyJsonCommand:
    def test_minify(self, tmp_path):
        (tmp_path / "a.json").write_text('{ "a": 1 }')
        runner = CliRunner()
        result = runner.invoke(cli, ["minify-json", str(tmp_path)])
        assert result.exit_code == 0
        assert (tmp_path / "a.json").read_text() == '{"a":1}'


class TestErrorReporting:
    def test_null_property_reported(self, project):
        project.write_text(CONFIG + "properties:\n  color: null\n")
        runner = CliRunner()
        result = runner.invoke(cli, _base_args(project) + ["manifest"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "color" in result.output

    def test_non_utf8_resource_reported(self, tmp_path):
        (tmp_path / "lang.json").write_bytes(b'{"name": "caf\xe9"}')
        runner = CliRunner()
        result = runner.invoke(cli, ["minify-json", str(tmp_path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "UTF-8" in result.output

    def test_newline_in_ci_value_reported(self, project, tmp_path):
        project.write_text(CONFIG.replace("version: 1.2.3", 'version: "1.2\\n3"'))
        output = tmp_path / "gh_out"
        runner = CliRunner()
        result = runner.invoke(
            cli, _base_args(project) + ["ci-output"], env={"GITHUB_OUTPUT": str(output)}
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "invalid characters" in result.output
        assert not output.exists()

    def test_build_copies_license_next_to_config(self, project):
        (project.parent / "LICENSE").write_text("MIT License\n")
        project.write_text(CONFIG + "  file: LICENSE\n")
        runner = CliRunner()
        result = runner.invoke(cli, _base_args(project) + ["build"], env={"GITHUB_OUTPUT": None})
        assert result.exit_code == 0, result.output
        assert (project.parent / "build" / "resources" / "main" / "LICENSE").exists()
