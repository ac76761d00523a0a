"""Tests for configuration loading, validation and backups."""

import json
from datetime import datetime, timezone

import pytest

from csspruner.backup import backup_path, create_backup, write_stylesheet
from csspruner.config import (
    DEFAULT_WHITELIST,
    PrunerConfig,
    find_config_file,
    load_config,
    sample_config,
    write_sample_config,
)
from csspruner.errors import ConfigError, FileWriteError, PatternSyntaxError
from csspruner.patterns import LiteralPattern, RegexPattern, compile_patterns
from csspruner.scanner import DEFAULT_EXTENSIONS


# ---------------------------------------------------------------------------
# PrunerConfig
# ---------------------------------------------------------------------------


class TestDefaults:
    def test_default_values(self):
        config = PrunerConfig()
        assert config.css_files == ()
        assert config.source_directories == ("src",)
        assert config.whitelist == compile_patterns(DEFAULT_WHITELIST)
        assert config.blacklist == ()
        assert config.file_extensions == DEFAULT_EXTENSIONS
        assert config.report_format == "console"
        assert config.output_file is None

    def test_config_is_frozen(self):
        with pytest.raises(AttributeError):
            PrunerConfig().report_format = "json"

    def test_raw_pattern_entries_are_compiled(self):
        config = PrunerConfig(whitelist=("sr-only", "/^\\.is-/"), blacklist=["old-"])
        assert config.whitelist[0] == LiteralPattern("sr-only")
        assert isinstance(config.whitelist[1], RegexPattern)
        assert config.blacklist == (LiteralPattern("old-"),)

    def test_malformed_raw_regex_fails_at_construction(self):
        with pytest.raises(PatternSyntaxError):
            PrunerConfig(whitelist=("sr-only", "/(/"))

    def test_empty_whitelist_can_be_requested(self):
        assert PrunerConfig(whitelist=()).whitelist == ()


class TestFromDict:
    def test_camel_case_keys(self):
        config = PrunerConfig.from_dict(
            {
                "cssFiles": ["dist/app.css"],
                "sourceDirectories": ["src", "templates"],
                "whitelist": ["keep-me", "/^\\.is-/"],
                "blacklist": ["legacy"],
                "reportFormat": "json",
                "outputFile": "report.json",
                "fileExtensions": [".html"],
            }
        )
        assert config.css_files == ("dist/app.css",)
        assert config.source_directories == ("src", "templates")
        assert config.whitelist[0] == LiteralPattern("keep-me")
        assert isinstance(config.whitelist[1], RegexPattern)
        assert config.blacklist == (LiteralPattern("legacy"),)
        assert config.report_format == "json"
        assert config.output_file == "report.json"
        assert config.file_extensions == (".html",)

    def test_snake_case_keys(self):
        config = PrunerConfig.from_dict({"css_files": ["a.css"], "report_format": "json"})
        assert config.css_files == ("a.css",)
        assert config.report_format == "json"

    def test_dynamic_class_patterns_are_compiled(self):
        config = PrunerConfig.from_dict({"dynamicClassPatterns": ["/cx\\('([^']+)'\\)/"]})
        assert config.dynamic_class_patterns[0].pattern.pattern == "cx\\('([^']+)'\\)"

    def test_unknown_key(self):
        with pytest.raises(ConfigError, match="Unknown configuration key"):
            PrunerConfig.from_dict({"cssFile": ["a.css"]})

    def test_malformed_whitelist_regex(self):
        with pytest.raises(PatternSyntaxError):
            PrunerConfig.from_dict({"whitelist": ["/[oops/"]})

    def test_malformed_dynamic_pattern(self):
        with pytest.raises(PatternSyntaxError):
            PrunerConfig.from_dict({"dynamicClassPatterns": ["/(unclosed/"]})

    def test_list_values_must_be_lists(self):
        with pytest.raises(ConfigError, match="must be a list"):
            PrunerConfig.from_dict({"whitelist": "sr-only"})

    def test_list_entries_must_be_strings(self):
        with pytest.raises(ConfigError, match="entries must be strings"):
            PrunerConfig.from_dict({"cssFiles": ["a.css", 3]})

    def test_unknown_report_format(self):
        with pytest.raises(ConfigError, match="reportFormat"):
            PrunerConfig.from_dict({"reportFormat": "html"})

    def test_extensions_need_a_dot(self):
        with pytest.raises(ConfigError, match="fileExtensions"):
            PrunerConfig.from_dict({"fileExtensions": ["js"]})


class TestOverrides:
    def test_none_values_are_ignored(self):
        config = PrunerConfig(css_files=("a.css",))
        updated = config.with_overrides(css_files=None, report_format="json")
        assert updated.css_files == ("a.css",)
        assert updated.report_format == "json"
        assert config.report_format == "console"

    def test_overrides_are_validated(self):
        with pytest.raises(ConfigError):
            PrunerConfig().with_overrides(report_format="xml")


# ---------------------------------------------------------------------------
# Loading from disk
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_no_file_gives_defaults(self, tmp_path):
        assert load_config(directory=tmp_path) == PrunerConfig()

    def test_default_whitelist_applies_when_file_omits_it(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"blacklist": ["old-"]}), encoding="utf-8")
        assert [str(p) for p in load_config(path).whitelist] == list(DEFAULT_WHITELIST)

    def test_file_whitelist_replaces_default(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"whitelist": ["keep-me"]}), encoding="utf-8")
        assert load_config(path).whitelist == (LiteralPattern("keep-me"),)

    def test_explicit_path(self, tmp_path):
        path = tmp_path / "custom.json"
        path.write_text(json.dumps({"cssFiles": ["x.css"]}), encoding="utf-8")
        assert load_config(path).css_files == ("x.css",)

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "absent.json")

    def test_discovers_rc_file(self, tmp_path):
        (tmp_path / ".css-prunerrc").write_text('{"blacklist": ["old-"]}', encoding="utf-8")
        assert find_config_file(tmp_path) == tmp_path / ".css-prunerrc"
        assert load_config(directory=tmp_path).blacklist == (LiteralPattern("old-"),)

    def test_first_known_name_wins(self, tmp_path):
        (tmp_path / ".css-prunerrc.json").write_text('{"cssFiles": ["b.css"]}', encoding="utf-8")
        (tmp_path / "css-pruner.config.json").write_text('{"cssFiles": ["a.css"]}', encoding="utf-8")
        assert load_config(directory=tmp_path).css_files == ("a.css",)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ConfigError, match="Could not load"):
            load_config(path)

    def test_json_must_be_an_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text('["a.css"]', encoding="utf-8")
        with pytest.raises(ConfigError, match="JSON object"):
            load_config(path)


class TestSampleConfig:
    def test_sample_uses_default_whitelist(self):
        config = sample_config()
        assert [str(p) for p in config.whitelist] == list(DEFAULT_WHITELIST)
        assert config.css_files == ("dist/styles.css",)

    def test_written_sample_loads_back(self, tmp_path):
        path = write_sample_config(tmp_path / "css-pruner.config.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["cssFiles"] == ["dist/styles.css"]
        assert data["reportFormat"] == "console"
        loaded = load_config(path)
        assert [str(p) for p in loaded.whitelist] == list(DEFAULT_WHITELIST)
        assert loaded.css_files == sample_config().css_files


# ---------------------------------------------------------------------------
# Backups
# ---------------------------------------------------------------------------


class TestBackups:
    def test_backup_name_is_timestamped(self):
        now = datetime(2026, 1, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
        path = backup_path("dist/styles.css", now)
        assert path.name == "styles.css.backup.20260102T030405000006Z"
        assert path.parent.name == "dist"

    def test_create_backup_writes_content(self, tmp_path):
        source = tmp_path / "styles.css"
        backup = create_backup(source, ".a { color: red; }")
        assert backup.parent == tmp_path
        assert backup.name.startswith("styles.css.backup.")
        assert backup.read_text(encoding="utf-8") == ".a { color: red; }"

    def test_backup_failure_raises(self, tmp_path):
        with pytest.raises(FileWriteError):
            create_backup(tmp_path / "missing-dir" / "styles.css", "x")

    def test_write_stylesheet_failure_raises(self, tmp_path):
        with pytest.raises(FileWriteError) as exc_info:
            write_stylesheet(tmp_path / "missing-dir" / "styles.css", "x")
        assert exc_info.value.path.endswith("styles.css")
