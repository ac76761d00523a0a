"""Pruner: the ``analyze`` / ``clean`` boundary used by the CLI and build tools."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Iterable

from csspruner.backup import create_backup, write_stylesheet
from csspruner.classify import UsageClassifier
from csspruner.config import PrunerConfig
from csspruner.errors import FileReadError, FileWriteError
from csspruner.model.plan import RemovalPlan
from csspruner.model.result import AnalysisResult, AnalysisStats, CleanResult
from csspruner.removal import RemovalEngine, bytes_saved
from csspruner.scanner import ClassScanner
from csspruner.stylesheet import RuleExtractor, read_stylesheet

__all__ = ["Pruner", "analyze", "clean"]


class Pruner:
    """Find and remove unused selectors across a batch of stylesheets.

    Files are processed one at a time in the order given. A failure on one
    file is logged and never aborts the batch.
    """

    def __init__(
        self,
        config: PrunerConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.config = config or PrunerConfig()
        self.log = logger or logging.getLogger("csspruner")
        self.extractor = RuleExtractor(logger=self.log.getChild("stylesheet"))
        self.scanner = ClassScanner(
            extensions=self.config.file_extensions,
            dynamic_patterns=self.config.dynamic_class_patterns,
            logger=self.log.getChild("scanner"),
        )
        self.classifier = UsageClassifier(
            whitelist=self.config.whitelist,
            blacklist=self.config.blacklist,
            logger=self.log.getChild("classify"),
        )
        self.engine = RemovalEngine(
            whitelist=self.config.whitelist,
            logger=self.log.getChild("removal"),
        )

    def analyze(
        self,
        css_files: Iterable[str | Path] | None = None,
        source_directories: Iterable[str | Path] | None = None,
    ) -> AnalysisResult:
        """Classify every selector of *css_files* against *source_directories*.

        Arguments default to the values in the configuration.
        """
        start = time.monotonic()
        files = [str(f) for f in (css_files if css_files is not None else self.config.css_files)]
        directories = list(
            source_directories if source_directories is not None else self.config.source_directories
        )

        self.log.info("Parsing %d CSS file(s)", len(files))
        rules = self.extractor.extract_files(files)

        self.log.info("Scanning source files for class usage")
        used_classes = self.scanner.scan(directories)

        self.log.info("Analyzing usage of %d selector(s)", len(rules))
        used, unused = self.classifier.classify(rules, used_classes)

        stats = AnalysisStats(
            total_css_files=len(files),
            total_source_files=self.scanner.files_scanned,
            total_selectors=len(rules),
            used_selectors=len(used),
            unused_selectors=len(unused),
            total_size=sum(rule.size for rule in rules),
            duration_ms=int((time.monotonic() - start) * 1000),
        )
        return AnalysisResult(
            unused_selectors=unused,
            used_selectors=used,
            potential_savings=sum(s.size for s in unused),
            stats=stats,
        )

    def clean(
        self,
        css_files: Iterable[str | Path] | None = None,
        source_directories: Iterable[str | Path] | None = None,
    ) -> CleanResult:
        """Analyze, then rewrite each stylesheet without its unused selectors.

        Every stylesheet with planned removals is backed up before it is
        written. A file that fails to read, rewrite or back up is left as it
        was.
        """
        analysis = self.analyze(css_files, source_directories)
        plan = RemovalPlan.from_selectors(analysis.unused_selectors)
        result = CleanResult()

        for path, selectors in plan:
            try:
                original = read_stylesheet(path)
            except FileReadError as exc:
                self.log.warning("%s", exc)
                continue

            try:
                cleaned = self.engine.remove(original, selectors)
            except Exception:
                self.log.exception("Error cleaning %s; file left untouched", path)
                continue

            try:
                backup = create_backup(path, original)
                result.backup_files.append(str(backup))
                self.log.info("Created backup: %s", backup.name)
                if cleaned != original:
                    write_stylesheet(path, cleaned)
                    result.modified_files.append(path)
                    saved = bytes_saved(original, cleaned)
                    result.bytes_saved += saved
                    self.log.info("%s: %d bytes saved", Path(path).name, saved)
            except FileWriteError as exc:
                self.log.error("%s", exc)
                continue

            result.removed_selectors.extend(selectors)

        self.log.info(
            "Removed %d selector(s), %d bytes saved across %d file(s)",
            len(result.removed_selectors),
            result.bytes_saved,
            len(result.modified_files),
        )
        return result


def _config_for(
    css_files: Iterable[str | Path],
    source_directories: Iterable[str | Path],
    config: PrunerConfig | None,
) -> PrunerConfig:
    return (config or PrunerConfig()).with_overrides(
        css_files=tuple(str(f) for f in css_files),
        source_directories=tuple(str(d) for d in source_directories),
    )


def analyze(
    css_files: Iterable[str | Path],
    source_directories: Iterable[str | Path],
    config: PrunerConfig | None = None,
    logger: logging.Logger | None = None,
) -> AnalysisResult:
    """Classify selectors without touching any file."""
    return Pruner(_config_for(css_files, source_directories, config), logger=logger).analyze()


def clean(
    css_files: Iterable[str | Path],
    source_directories: Iterable[str | Path],
    config: PrunerConfig | None = None,
    logger: logging.Logger | None = None,
) -> CleanResult:
    """Remove unused selectors from *css_files*, backing each file up first."""
    return Pruner(_config_for(css_files, source_directories, config), logger=logger).clean()
