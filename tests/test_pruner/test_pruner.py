"""End-to-end tests for analyze and clean."""

import logging

import pytest

from csspruner import Pruner, PrunerConfig, Verdict, analyze, clean
from csspruner.patterns import compile_patterns


@pytest.fixture
def project(tmp_path):
    """A stylesheet plus a source tree that references only ``.bar``."""
    css = tmp_path / "styles.css"
    css.write_text(".foo{color:red}\n.bar{color:blue}", encoding="utf-8")
    src = tmp_path / "src"
    src.mkdir()
    (src / "index.html").write_text('<div class="bar"></div>', encoding="utf-8")
    return css, src


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def _backups(css):
    return sorted(css.parent.glob(css.name + ".backup.*"))


# ---------------------------------------------------------------------------
# analyze
# ---------------------------------------------------------------------------


class TestAnalyze:
    def test_reference_scenario(self, project):
        css, src = project
        result = analyze([css], [src])
        assert [(s.selector, s.reason) for s in result.unused_selectors] == [
            (".foo", "Not found in source files")
        ]
        assert [s.selector for s in result.used_selectors] == [".bar"]
        assert result.potential_savings == len(".foocolor:red".encode("utf-8"))

    def test_stats(self, project):
        css, src = project
        stats = analyze([css], [src]).stats
        assert stats.total_css_files == 1
        assert stats.total_source_files == 1
        assert stats.total_selectors == 2
        assert stats.used_selectors == 1
        assert stats.unused_selectors == 1
        assert stats.total_size == len(".foocolor:red") + len(".barcolor:blue")
        assert stats.duration_ms >= 0

    def test_analyze_does_not_touch_files(self, project):
        css, src = project
        before = css.read_bytes()
        analyze([css], [src])
        assert css.read_bytes() == before
        assert _backups(css) == []

    def test_pseudo_class_kept_without_usage(self, tmp_path):
        css = _write(tmp_path / "s.css", "a:hover{color:red}")
        result = analyze([css], [tmp_path / "empty"])
        assert result.unused_selectors == []
        assert result.used_selectors[0].reason == "Special selector"

    def test_keyframe_steps_never_classified(self, tmp_path):
        css = _write(
            tmp_path / "s.css",
            "@keyframes spin { 0% { opacity: 0; } 100% { opacity: 1; } }\n.spin { animation: spin 1s; }",
        )
        _write(tmp_path / "page.html", '<i class="spin"></i>')
        result = analyze([css], [tmp_path])
        selectors = [s.selector for s in result.used_selectors + result.unused_selectors]
        assert sorted(selectors) == [".spin", "@keyframes spin"]

    def test_whitelist_wins_over_blacklist(self, tmp_path):
        css = _write(tmp_path / "s.css", ".promo{x:1}")
        patterns = compile_patterns(["promo"])
        config = PrunerConfig(whitelist=patterns, blacklist=patterns)
        result = analyze([css], [tmp_path], config=config)
        assert result.used_selectors[0].verdict is Verdict.WHITELISTED

    def test_raw_string_patterns_from_library_callers(self, project):
        css, src = project
        config = PrunerConfig(whitelist=("foo",))
        result = analyze([css], [src], config=config)
        assert result.unused_selectors == []
        assert result.used_selectors[0].verdict is Verdict.WHITELISTED

    def test_animated_keyframes_are_used(self, tmp_path):
        css = _write(
            tmp_path / "s.css",
            ".spinner{animation:spin 1s linear}\n@keyframes spin{from{opacity:0}to{opacity:1}}",
        )
        _write(tmp_path / "page.html", '<div class="spinner"></div>')
        result = analyze([css], [tmp_path])
        assert result.unused_selectors == []
        frames = [s for s in result.used_selectors if s.selector == "@keyframes spin"]
        assert frames[0].reason == "Referenced by animation"

    def test_missing_css_file_is_skipped(self, project, caplog):
        css, src = project
        with caplog.at_level(logging.WARNING):
            result = analyze([css.parent / "missing.css", css], [src])
        assert result.stats.total_css_files == 2
        assert result.stats.total_selectors == 2
        assert "missing.css" in caplog.text

    def test_defaults_come_from_config(self, project):
        css, src = project
        config = PrunerConfig(css_files=(str(css),), source_directories=(str(src),))
        result = Pruner(config).analyze()
        assert [s.selector for s in result.unused_selectors] == [".foo"]


# ---------------------------------------------------------------------------
# clean
# ---------------------------------------------------------------------------


class TestClean:
    def test_removes_unused_rule(self, project):
        css, src = project
        result = clean([css], [src])
        assert css.read_text(encoding="utf-8") == ".bar{color:blue}"
        assert [s.selector for s in result.removed_selectors] == [".foo"]
        assert result.modified_files == [str(css)]
        assert result.bytes_saved == len(".foo{color:red}\n")

    def test_backup_holds_original(self, project):
        css, src = project
        original = css.read_text(encoding="utf-8")
        result = clean([css], [src])
        backups = _backups(css)
        assert len(backups) == 1
        assert result.backup_files == [str(backups[0])]
        assert backups[0].read_text(encoding="utf-8") == original

    def test_nothing_removable_leaves_files_identical(self, tmp_path):
        css = _write(tmp_path / "s.css", ".bar{color:blue}\n")
        _write(tmp_path / "page.html", '<b class="bar"></b>')
        before = css.read_bytes()
        result = clean([css], [tmp_path])
        assert result.modified_files == []
        assert result.removed_selectors == []
        assert result.bytes_saved == 0
        assert css.read_bytes() == before
        assert _backups(css) == []

    def test_second_run_is_a_no_op(self, project):
        css, src = project
        clean([css], [src])
        after_first = css.read_bytes()
        second = clean([css], [src])
        assert second.removed_selectors == []
        assert second.bytes_saved == 0
        assert second.modified_files == []
        assert css.read_bytes() == after_first

    def test_multi_selector_rule_keeps_used_member(self, tmp_path):
        css = _write(tmp_path / "s.css", ".a, .b { color: red; }")
        _write(tmp_path / "page.html", '<p class="b"></p>')
        clean([css], [tmp_path])
        assert css.read_text(encoding="utf-8") == ".b { color: red; }"

    def test_unused_keyframes_block_is_removed_whole(self, tmp_path):
        css = _write(
            tmp_path / "s.css",
            "@keyframes fade { from { opacity: 0; } to { opacity: 1; } }\n.box { color: red; }",
        )
        _write(tmp_path / "page.html", '<div class="box"></div>')
        clean([css], [tmp_path])
        assert css.read_text(encoding="utf-8") == ".box { color: red; }"

    def test_whitelisted_keyframes_survive(self, tmp_path):
        text = "@keyframes fade { from { opacity: 0; } to { opacity: 1; } }\n.ghost { color: red; }"
        css = _write(tmp_path / "s.css", text)
        config = PrunerConfig(whitelist=compile_patterns(["@keyframes"]))
        clean([css], [tmp_path], config=config)
        assert css.read_text(encoding="utf-8") == (
            "@keyframes fade { from { opacity: 0; } to { opacity: 1; } }\n"
        )

    def test_media_block_emptied_and_dropped(self, tmp_path):
        css = _write(
            tmp_path / "s.css",
            "@media print {\n  .print-only { display: block; }\n}\n.keep { color: red; }",
        )
        _write(tmp_path / "page.html", '<div class="keep"></div>')
        clean([css], [tmp_path])
        assert css.read_text(encoding="utf-8") == ".keep { color: red; }"

    def test_keyframes_used_by_surviving_rule_are_kept(self, tmp_path):
        text = ".spinner{animation:spin 1s linear}\n@keyframes spin{from{opacity:0}to{opacity:1}}"
        css = _write(tmp_path / "s.css", text)
        _write(tmp_path / "page.html", '<div class="spinner"></div>')
        result = clean([css], [tmp_path])
        assert result.removed_selectors == []
        assert css.read_text(encoding="utf-8") == text
        assert _backups(css) == []

    def test_keyframes_go_with_the_rule_that_used_them(self, tmp_path):
        css = _write(
            tmp_path / "s.css",
            ".gone{animation:fade 1s}\n@keyframes fade{from{opacity:0}to{opacity:1}}\n.keep{color:red}",
        )
        _write(tmp_path / "page.html", '<div class="keep"></div>')
        result = clean([css], [tmp_path])
        assert sorted(s.selector for s in result.removed_selectors) == [".gone", "@keyframes fade"]
        assert css.read_text(encoding="utf-8") == ".keep{color:red}"

    def test_comment_before_selector_in_unparseable_sheet(self, tmp_path):
        css = _write(tmp_path / "s.css", "/* a */.gone{color:red} .b{color:blue} .orphan")
        _write(tmp_path / "page.html", '<div class="b"></div>')
        first = clean([css], [tmp_path])
        assert [s.selector for s in first.removed_selectors] == [".gone"]
        assert css.read_text(encoding="utf-8") == "/* a */ .b{color:blue} .orphan"
        second = clean([css], [tmp_path])
        assert second.removed_selectors == []
        assert len(_backups(css)) == 1

    def test_unparseable_stylesheet_uses_text_fallback(self, tmp_path, caplog):
        css = _write(tmp_path / "s.css", ".a{color:red} .b{color:blue} .orphan")
        _write(tmp_path / "page.html", '<div class="b"></div>')
        with caplog.at_level(logging.WARNING):
            result = clean([css], [tmp_path])
        assert css.read_text(encoding="utf-8") == ".b{color:blue} .orphan"
        assert result.modified_files == [str(css)]
        assert "falling back to text removal" in caplog.text


class TestCleanFailures:
    def test_engine_failure_leaves_file_untouched(self, project, monkeypatch, caplog):
        css, src = project
        pruner = Pruner(PrunerConfig(css_files=(str(css),), source_directories=(str(src),)))

        def boom(css_text, selectors):
            raise RuntimeError("engine bug")

        monkeypatch.setattr(pruner.engine, "remove", boom)
        before = css.read_bytes()
        with caplog.at_level(logging.ERROR):
            result = pruner.clean()
        assert css.read_bytes() == before
        assert result.modified_files == []
        assert result.removed_selectors == []
        assert result.backup_files == []
        assert "engine bug" in caplog.text

    def test_one_failing_file_does_not_abort_batch(self, tmp_path, monkeypatch):
        broken = _write(tmp_path / "broken.css", ".x{color:red}")
        good = _write(tmp_path / "good.css", ".y{color:red}")
        pruner = Pruner(
            PrunerConfig(css_files=(str(broken), str(good)), source_directories=(str(tmp_path),))
        )
        real_remove = pruner.engine.remove

        def flaky(css_text, selectors):
            if ".x" in css_text:
                raise RuntimeError("engine bug")
            return real_remove(css_text, selectors)

        monkeypatch.setattr(pruner.engine, "remove", flaky)
        result = pruner.clean()
        assert result.modified_files == [str(good)]
        assert good.read_text(encoding="utf-8") == ""
        assert broken.read_text(encoding="utf-8") == ".x{color:red}"

    def test_backup_written_even_when_content_unchanged(self, project, monkeypatch):
        css, src = project
        pruner = Pruner(PrunerConfig(css_files=(str(css),), source_directories=(str(src),)))
        monkeypatch.setattr(pruner.engine, "remove", lambda css_text, selectors: css_text)
        result = pruner.clean()
        assert result.modified_files == []
        assert len(result.backup_files) == 1
        assert len(_backups(css)) == 1
