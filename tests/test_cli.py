"""Tests for the command line interface."""

import json
from pathlib import Path

from click.testing import CliRunner

from jsdoc_serializer.cli.main import cli


class TestCompileCommand:
    """Tests for `jsdoc-serializer compile`."""

    def test_compile_file_tree(self, source_tree: Path) -> None:
        """Test the tree view lists blocks and node kinds."""
        result = CliRunner().invoke(cli, ["compile", str(source_tree / "index.js")])

        assert result.exit_code == 0
        assert "block 0" in result.stdout
        assert "ParameterDeclaration" in result.stdout

    def test_compile_directory_json(self, source_tree: Path) -> None:
        """Test --json prints one entry per file."""
        result = CliRunner().invoke(cli, ["compile", str(source_tree), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 3
        assert len(data[str(source_tree / "lib" / "ns.ts")]) == 3

    def test_compile_output_file(self, source_tree: Path, tmp_path: Path) -> None:
        """Test -o writes the JSON file."""
        target = tmp_path / "build" / "ast.json"
        result = CliRunner().invoke(cli, ["compile", str(source_tree / "index.js"), "-o", str(target)])

        assert result.exit_code == 0
        assert len(json.loads(target.read_text())) == 1

    def test_compile_no_blocks(self, source_tree: Path) -> None:
        """Test a file without blocks reports so."""
        result = CliRunner().invoke(cli, ["compile", str(source_tree / "lib" / "plain.js")])

        assert result.exit_code == 0
        assert "No documentation blocks found" in result.stdout

    def test_compile_grammar_error(self, tmp_path: Path) -> None:
        """Test a grammar violation exits with status 1."""
        path = tmp_path / "bad.js"
        path.write_text("/**\n * @access nonsense\n */\n")

        result = CliRunner().invoke(cli, ["compile", str(path)])

        assert result.exit_code == 1
        assert "nonsense" in result.stdout

    def test_compile_directory_with_non_utf8_file(self, tmp_path: Path) -> None:
        """Test an undecodable file is reported and exits with status 1."""
        (tmp_path / "a.js").write_text("/**\n * @public\n */\n")
        (tmp_path / "b.js").write_bytes(b"/**\n * caf\xe9\n */\n")

        result = CliRunner().invoke(cli, ["compile", str(tmp_path)])

        assert result.exit_code == 1
        assert not isinstance(result.exception, UnicodeDecodeError)
        assert "Could not decode" in result.stdout

    def test_verbose_after_subcommand(self, source_tree: Path) -> None:
        """Test --verbose is accepted on the compile command itself."""
        result = CliRunner().invoke(cli, ["compile", str(source_tree / "index.js"), "--verbose"])

        assert result.exit_code == 0
        assert "block 0" in result.stdout


class TestTagsCommand:
    """Tests for `jsdoc-serializer tags`."""

    def test_lists_tags(self) -> None:
        """Test the table includes core tags."""
        result = CliRunner().invoke(cli, ["tags"])

        assert result.exit_code == 0
        assert "@param" in result.stdout
        assert "@alias" in result.stdout
