"""Unit tests for the s2skill-sync command.

Tests cover:
- CLI syntax validation (help, arguments, index mode)
- Usage errors exit with status 1 and show help
- End-to-end runs against a fake upstream checkout
- Overwrite prompt answers
- Fatal error reporting
"""

import subprocess
from unittest.mock import patch

from click.testing import CliRunner

from s2skill import __version__
from s2skill.cli import main


class TestSyncCommandSyntax:
    """Test CLI syntax for 's2skill-sync'."""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "REPO_PATH" in result.output
        assert "OUTPUT_PATH" in result.output
        assert "--index-mode" in result.output
        assert "preserve" in result.output

    def test_short_help_flag(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-h"])

        assert result.exit_code == 0

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_index_mode_exits_1(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--index-mode", "sometimes"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Usage:" in result.output

    def test_too_many_arguments_exits_1(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path), str(tmp_path), "extra"])

        assert result.exit_code == 1
        assert "Usage:" in result.output

    def test_preserve_mode_requires_repo_path(self, mock_generator):
        runner = CliRunner()
        result = runner.invoke(main, ["--index-mode", "preserve"])

        assert result.exit_code == 1
        assert "repository path is required" in result.output
        assert "Usage:" in result.output
        mock_generator.assert_not_called()


class TestSyncCommandRun:
    """Test full runs through the CLI."""

    def test_generate_run(self, upstream_repo, output_dir, mock_generator):
        runner = CliRunner()
        result = runner.invoke(main, [str(upstream_repo), str(output_dir)])

        assert result.exit_code == 0, result.output
        assert "Success!" in result.output
        assert "6 references" in result.output
        skill_dir = output_dir / "s2-skill"
        assert (skill_dir / "SKILL.md").exists()
        assert len(list((skill_dir / "references").iterdir())) == 6

    def test_generate_run_defaults_to_cwd(self, upstream_repo, mock_generator, monkeypatch):
        monkeypatch.chdir(upstream_repo)

        runner = CliRunner()
        result = runner.invoke(main, [])

        assert result.exit_code == 0, result.output
        assert (upstream_repo / "s2-skill" / "references" / "Button.md").exists()

    def test_preserve_run(self, upstream_repo, output_dir, mock_generator):
        (output_dir / "SKILL.md").write_text("# Hand-written\n")

        runner = CliRunner()
        result = runner.invoke(
            main, ["--index-mode", "preserve", str(upstream_repo), str(output_dir)]
        )

        assert result.exit_code == 0, result.output
        assert (output_dir / "SKILL.md").read_text() == "# Hand-written\n"
        assert (output_dir / "references" / "testing.md").exists()

    def test_declined_overwrite_exits_0(self, upstream_repo, output_dir, mock_generator):
        references = output_dir / "s2-skill" / "references"
        references.mkdir(parents=True)
        (references / "Old.md").write_text("old")

        runner = CliRunner()
        result = runner.invoke(main, [str(upstream_repo), str(output_dir)], input="no\n")

        assert result.exit_code == 0
        assert "Cancelled. Existing folder preserved." in result.output
        assert [p.name for p in references.iterdir()] == ["Old.md"]
        assert not (output_dir / "s2-skill" / "SKILL.md").exists()

    def test_confirmed_overwrite(self, upstream_repo, output_dir, mock_generator):
        references = output_dir / "s2-skill" / "references"
        references.mkdir(parents=True)
        (references / "Old.md").write_text("old")

        runner = CliRunner()
        result = runner.invoke(main, [str(upstream_repo), str(output_dir)], input="YES\n")

        assert result.exit_code == 0, result.output
        assert not (references / "Old.md").exists()
        assert (references / "Button.md").exists()

    def test_missing_file_is_not_fatal(self, upstream_repo, output_dir, mock_generator):
        (upstream_repo / "packages/dev/s2-docs/dist/s2/Picker.md").unlink()

        runner = CliRunner()
        result = runner.invoke(main, [str(upstream_repo), str(output_dir)])

        assert result.exit_code == 0, result.output
        assert "Warning: File not found: Picker.md" in result.output
        assert "5 references" in result.output

    def test_config_file_option(self, upstream_repo, output_dir, mock_generator, tmp_path):
        config_file = tmp_path / "sync.toml"
        config_file.write_text('skill_dir_name = "skill"\n')

        runner = CliRunner()
        result = runner.invoke(
            main, ["--config", str(config_file), str(upstream_repo), str(output_dir)]
        )

        assert result.exit_code == 0, result.output
        assert (output_dir / "skill" / "SKILL.md").exists()


class TestSyncCommandErrors:
    """Test fatal error reporting."""

    def test_missing_generator_script(self, tmp_path, mock_generator):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path), str(tmp_path)])

        assert result.exit_code == 1
        assert "Error: Cannot find generateMarkdownDocs.mjs" in result.output
        mock_generator.assert_not_called()

    def test_generator_failure(self, upstream_repo, output_dir):
        runner = CliRunner()
        with patch(
            "s2skill.modules.generator_runner.subprocess.run",
            side_effect=subprocess.CalledProcessError(1, ["yarn"]),
        ):
            result = runner.invoke(main, [str(upstream_repo), str(output_dir)])

        assert result.exit_code == 1
        assert "Generator command failed" in result.output

    def test_missing_config_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, ["--config", str(tmp_path / "missing.toml")])

        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_closed_stdin_at_prompt_declines(self, upstream_repo, output_dir, mock_generator):
        references = output_dir / "s2-skill" / "references"
        references.mkdir(parents=True)
        (references / "Old.md").write_text("old")

        runner = CliRunner()
        result = runner.invoke(main, [str(upstream_repo), str(output_dir)], input="")

        assert result.exit_code == 0
        assert "Cancelled. Existing folder preserved." in result.output
        assert [p.name for p in references.iterdir()] == ["Old.md"]

    def test_ctrl_c_at_prompt_exits_130(self, upstream_repo, output_dir, mock_generator):
        (output_dir / "s2-skill" / "references").mkdir(parents=True)

        runner = CliRunner()
        with patch(
            "s2skill.modules.interaction_handler.click.prompt", side_effect=KeyboardInterrupt
        ):
            result = runner.invoke(main, [str(upstream_repo), str(output_dir)])

        assert result.exit_code == 130
        assert "Cancelled by user." in result.output
