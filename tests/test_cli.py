"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from paste_json import __version__
from paste_json.cli import main


class TestCLI:
    """Tests for the paste-json command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_read_from_file(self, temp_dir, menu_json):
        """Test generating classes from a file argument."""
        input_file = temp_dir / "menu.json"
        input_file.write_text(json.dumps(menu_json), encoding="utf-8")

        result = self.runner.invoke(main, [str(input_file)])

        assert result.exit_code == 0
        assert result.output.startswith("public class Root\n{\n")
        assert "public class Menu" in result.output
        assert "public Items[] items { get; set; }" in result.output

    def test_read_from_stdin(self, menu_json_string):
        """Test generating classes from standard input."""
        result = self.runner.invoke(main, ["--target", "typescript"], input=menu_json_string)

        assert result.exit_code == 0
        assert "export interface Menu {\n  header: string;\n  items: Items[];\n}" in result.output

    def test_invalid_json_exit_code(self):
        """Test that syntax errors exit with the data error code."""
        result = self.runner.invoke(main, [], input='{"a": ')

        assert result.exit_code == 65
        assert "Error" in result.output

    def test_unsupported_root_exit_code(self):
        """Test that a top-level array is rejected."""
        result = self.runner.invoke(main, [], input="[1, 2]")

        assert result.exit_code == 66
        assert "public class" not in result.output

    def test_max_depth_option(self):
        """Test the --max-depth option."""
        result = self.runner.invoke(main, ["--max-depth", "1"], input='{"a": {"b": 1}}')

        assert result.exit_code == 68

    def test_invalid_utf8(self, temp_dir):
        """Test that undecodable input is an input error."""
        input_file = temp_dir / "latin1.json"
        input_file.write_bytes(b'{"name": "caf\xe9"}')

        result = self.runner.invoke(main, [str(input_file)])

        assert result.exit_code == 74

    def test_missing_file(self, temp_dir):
        """Test that a missing file is a usage error."""
        result = self.runner.invoke(main, [str(temp_dir / "missing.json")])

        assert result.exit_code == 2

    def test_profile_option(self, menu_json_string):
        """Test that --profile prints a performance summary."""
        result = self.runner.invoke(main, ["--profile"], input=menu_json_string)

        assert result.exit_code == 0
        assert "Performance Summary" in result.output

    def test_version(self):
        """Test the --version option."""
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help_lists_examples(self):
        """Test that the help text ends with usage examples."""
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "cat weather.json | paste-json" in result.output
