"""Unit tests for configuration loading."""

import json

import pytest

from lexifetch.cli import create_parser
from lexifetch.core import Config, load_config


def parse(argv):
    parser = create_parser()
    return parser, parser.parse_args(argv)


class TestConfigModel:
    """Defaults and validation."""

    def test_defaults(self):
        config = Config()

        assert config.jobs == 10
        assert config.base_url == "https://www.websters1913.com"
        assert config.debug_words == set()

    def test_debug_words_from_comma_separated_string(self):
        config = Config(debug=True, debug_words="Running, geese,")

        assert config.debug_words == {"running", "geese"}

    def test_debug_words_require_debug(self):
        with pytest.raises(ValueError):
            Config(debug_words=["running"])

    def test_jobs_must_be_positive(self):
        with pytest.raises(ValueError):
            Config(jobs=0)


class TestLoadConfig:
    """Merging JSON and command-line values."""

    def test_cli_values(self):
        parser, args = parse(["words.txt", "out/", "-j", "3", "-v"])

        config = load_config(args.config, args, parser)

        assert config.input == "words.txt"
        assert config.output == "out/"
        assert config.jobs == 3
        assert config.verbose is True

    def test_cli_overrides_json(self, tmp_path):
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"jobs": 4, "timeout": 2.5, "verbose": True}))
        parser, args = parse(["words.txt", "out/", "-c", str(config_file), "-j", "7"])

        config = load_config(args.config, args, parser)

        assert config.jobs == 7
        assert config.timeout == 2.5
        assert config.verbose is True  # not overridden by an absent -v

    def test_invalid_values_exit(self):
        parser, args = parse(["words.txt", "out/", "-j", "0"])

        with pytest.raises(SystemExit):
            load_config(args.config, args, parser)

    def test_unreadable_config_file_exits(self, tmp_path):
        parser, args = parse(["words.txt", "out/", "-c", str(tmp_path / "missing.json")])

        with pytest.raises(SystemExit):
            load_config(args.config, args, parser)
