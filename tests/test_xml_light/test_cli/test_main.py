"""Tests for the xml-light command line."""

import io
import json

import pytest

from xml_light import __version__
from xml_light.cli.main import (
    EXIT_OK,
    EXIT_PARSE_ERROR,
    EXIT_USAGE_ERROR,
    create_argument_parser,
    load_config,
    log_level,
    main,
)
from xml_light.shared.config import OutputFormat


def run(argv, stdin_text=""):
    """Run the CLI with captured streams."""
    stdout, stderr = io.StringIO(), io.StringIO()
    code = main(argv, stdout=stdout, stderr=stderr, stdin=io.StringIO(stdin_text))
    return code, stdout.getvalue(), stderr.getvalue()


@pytest.fixture
def document(tmp_path):
    """A small well-formed document on disk."""
    path = tmp_path / "doc.xml"
    path.write_text("<a>\n  <b>x</b>\n</a>\n", encoding="utf-8")
    return path


@pytest.fixture
def broken(tmp_path):
    """A malformed document on disk."""
    path = tmp_path / "broken.xml"
    path.write_text("<a><b></a>", encoding="utf-8")
    return path


class TestArgumentParser:
    """Test argument parsing."""

    def test_format_arguments(self):
        """Test the format subcommand."""
        args = create_argument_parser().parse_args(["format", "doc.xml", "--style", "human"])
        assert args.command == "format"
        assert args.source == "doc.xml"
        assert args.style == "human"

    def test_check_arguments(self):
        """Test the check subcommand accepts several sources."""
        args = create_argument_parser().parse_args(["check", "a.xml", "b.xml", "--json"])
        assert args.sources == ["a.xml", "b.xml"]
        assert args.json is True

    def test_verbose_and_quiet_exclusive(self):
        """Test -v and -q cannot be combined."""
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["-v", "-q", "check", "a.xml"])

    def test_version(self, capsys):
        """Test --version prints the package version."""
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["--version"])
        assert __version__ in capsys.readouterr().out


class TestLoadConfig:
    """Test effective configuration assembly."""

    def test_format_defaults_to_pretty_xml(self):
        """Test format without style or config renders pretty XML."""
        args = create_argument_parser().parse_args(["format", "d.xml"])
        config = load_config(args)
        assert config.serializer.pretty is True
        assert config.serializer.format is OutputFormat.XML

    def test_config_file_respected(self, tmp_path):
        """Test the config file's serializer is used when no style is given."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"serializer": {"pretty": True, "format": "NO_TAG"}}))
        args = create_argument_parser().parse_args(["--config", str(path), "format", "d.xml"])
        assert load_config(args).serializer.format is OutputFormat.NO_TAG

    def test_style_overrides_config_file(self, tmp_path):
        """Test --style wins over the config file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"serializer": {"pretty": True, "format": "NO_TAG"}}))
        args = create_argument_parser().parse_args(
            ["--config", str(path), "format", "d.xml", "--style", "compact"]
        )
        serializer = load_config(args).serializer
        assert serializer.pretty is False
        assert serializer.trailing_newline is True

    def test_keep_whitespace_flag(self):
        """Test --keep-whitespace reaches the parser section."""
        args = create_argument_parser().parse_args(["--keep-whitespace", "check", "d.xml"])
        assert load_config(args).parser.keep_whitespace is True


class TestFormatCommand:
    """Test the format command."""

    def test_default_style(self, document):
        """Test pretty XML output."""
        code, out, _ = run(["format", str(document)])
        assert code == EXIT_OK
        assert out == "<a>\n  <b>x</b>\n</a>\n"

    def test_compact_style(self, document):
        """Test compact output ends with a newline."""
        code, out, _ = run(["format", str(document), "--style", "compact"])
        assert code == EXIT_OK
        assert out == "<a><b>x</b></a>\n"

    def test_human_style(self, document):
        """Test tag-less output."""
        code, out, _ = run(["format", str(document), "--style", "human"])
        assert code == EXIT_OK
        assert out == "A: \n  B: x\n\n"

    def test_stdin(self):
        """Test reading the document from standard input."""
        code, out, _ = run(["format", "-", "--style", "compact"], stdin_text="<a/>")
        assert code == EXIT_OK
        assert out == "<a/>\n"

    def test_missing_file(self, tmp_path):
        """Test a missing file is a usage error."""
        code, out, err = run(["format", str(tmp_path / "nope.xml")])
        assert code == EXIT_USAGE_ERROR
        assert out == ""
        assert "File not found" in err

    def test_parse_error(self, broken):
        """Test a malformed document reports its diagnostic."""
        code, out, err = run(["format", str(broken)])
        assert code == EXIT_PARSE_ERROR
        assert out == ""
        assert str(broken) in err
        assert "line 1" in err

    def test_invalid_config_file(self, tmp_path, document):
        """Test a bad configuration file is a usage error."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"serializer": {"colour": "red"}}))
        code, _, err = run(["--config", str(path), "format", str(document)])
        assert code == EXIT_USAGE_ERROR
        assert "colour" in err


class TestCheckCommand:
    """Test the check command."""

    def test_all_valid(self, document):
        """Test text output for a valid document."""
        code, out, _ = run(["check", str(document)])
        assert code == EXIT_OK
        assert out == f"{document}: ok: a\n"

    def test_invalid_json_report(self, document, broken):
        """Test the JSON report for mixed results."""
        code, out, _ = run(["check", str(document), str(broken), "--json"])
        assert code == EXIT_PARSE_ERROR

        results = json.loads(out)
        assert results[0] == {"file": str(document), "valid": True, "root": "a"}
        failure = results[1]
        assert failure["valid"] is False
        assert failure["kind"] == "END_OF_TAG_EXPECTED"
        assert failure["line"] == 1
        assert failure["offsets"][0] <= failure["offsets"][1]

    def test_missing_file(self, document, tmp_path):
        """Test a missing file makes the whole run a usage error."""
        code, out, _ = run(["check", str(document), str(tmp_path / "nope.xml")])
        assert code == EXIT_USAGE_ERROR
        assert "nope.xml: error: File not found" in out


class TestMain:
    """Test top-level behaviour."""

    def test_no_command(self):
        """Test running without a command prints help."""
        code, _, err = run([])
        assert code == EXIT_USAGE_ERROR
        assert "usage: xml-light" in err

    def test_verbose_logs_to_stderr(self, document):
        """Test -v emits debug records on stderr."""
        code, _, err = run(["-v", "format", str(document)])
        assert code == EXIT_OK
        assert "DEBUG" in err

    def test_config_logging_level(self, tmp_path, document):
        """Test the config file's logging level applies without -v or -q."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"global_": {"logging_level": "DEBUG"}}))
        code, _, err = run(["--config", str(path), "check", str(document)])
        assert code == EXIT_OK
        assert "DEBUG" in err

    def test_quiet_overrides_config_level(self, tmp_path, document):
        """Test -q wins over the config file's logging level."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"global_": {"logging_level": "DEBUG"}}))
        code, _, err = run(["-q", "--config", str(path), "check", str(document)])
        assert code == EXIT_OK
        assert "DEBUG" not in err

    def test_mistyped_config_value(self, tmp_path, document):
        """Test a wrongly typed config value is a usage error."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"parser": {"max_input_size_bytes": "10"}}))
        code, _, err = run(["--config", str(path), "check", str(document)])
        assert code == EXIT_USAGE_ERROR
        assert "max_input_size_bytes" in err

    def test_log_level_helper(self):
        """Test log level selection from flags and default."""
        parser = create_argument_parser()
        assert log_level(parser.parse_args(["-v", "check", "a"]), "ERROR") == "DEBUG"
        assert log_level(parser.parse_args(["-q", "check", "a"]), "DEBUG") == "ERROR"
        assert log_level(parser.parse_args(["check", "a"]), "INFO") == "INFO"
