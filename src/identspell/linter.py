"""
JavaScript Spelling Linter

Runs the dictionary words rule over JavaScript files, playing the part of
a host checker: configure once, then check strings, files or whole
directories.

Usage:
    linter = Linter()
    linter.configure({"requireDictionaryWords": {"allowWords": ["util"]}})
    reporter = linter.check_string("var utilHelper = 1;")
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from identspell.config import rule_option
from identspell.dictionaries import WordlistLoader
from identspell.errors import ParseError
from identspell.options import OPTION_NAME
from identspell.parser import SourceFile, parse_file, parse_source
from identspell.plugin import register
from identspell.reporting import Finding, Reporter
from identspell.rule import RequireDictionaryWords

logger = logging.getLogger(__name__)

PARSE_ERROR_CODE = "E000"


class Linter:
    """Configures the spelling rule and runs it over sources."""

    def __init__(self, loader: Optional[WordlistLoader] = None, module: bool = False):
        self.loader = loader
        self.module = module
        self.rule: Optional[RequireDictionaryWords] = None
        self._configured = False
        register(self)

    def register_rule(self, rule_class) -> None:
        """Host hook: instantiate *rule_class* with this linter's word-list loader."""
        self.rule = rule_class(self.loader)

    def configure(self, config: Optional[Mapping[str, Any]] = None) -> None:
        """
        Configure from a linter config mapping.

        A mapping without a ``requireDictionaryWords`` key enables the rule
        with its defaults.
        """
        self.rule.configure(rule_option(dict(config or {})))
        self._configured = True

    def _ensure_configured(self) -> None:
        if not self._configured:
            self.configure()

    def check_source_file(self, file: SourceFile) -> Reporter:
        """Check an already parsed file."""
        self._ensure_configured()
        reporter = Reporter(file.filename, rule_id=self.rule.code, source=file.source)
        self.rule.check(file, reporter)
        return reporter

    def check_string(self, source: str, filename: str = "input") -> Reporter:
        """Check JavaScript source text."""
        try:
            file = parse_source(source, filename=filename, module=self.module)
        except ParseError as e:
            return self._parse_failure(filename, e)
        return self.check_source_file(file)

    def check_file(self, file_path: Path) -> Reporter:
        """Check a JavaScript file on disk."""
        try:
            file = parse_file(file_path, module=self.module)
        except ParseError as e:
            return self._parse_failure(str(file_path), e)
        return self.check_source_file(file)

    def check_directory(self, dir_path: Path, pattern: str = "*.js",
                        recursive: bool = True) -> Dict[str, Reporter]:
        """Check all matching files; returns reporters of files with findings."""
        results = {}

        glob_method = dir_path.rglob if recursive else dir_path.glob

        for file_path in sorted(glob_method(pattern)):
            if not file_path.is_file():
                continue

            reporter = self.check_file(file_path)
            if not reporter.is_empty():
                results[str(file_path)] = reporter

        return results

    def _parse_failure(self, filename: str, error: ParseError) -> Reporter:
        logger.warning("Skipping %s: %s", filename, error)
        reporter = Reporter(filename, rule_id=PARSE_ERROR_CODE)
        reporter.add_finding(Finding(
            rule_id=PARSE_ERROR_CODE,
            severity="ERROR",
            path=filename,
            line=error.line or 0,
            col=error.column or 0,
            message=f"Parse error: {error}",
        ))
        return reporter


def check_string(source: str, options: Any = True,
                 loader: Optional[WordlistLoader] = None) -> List[Finding]:
    """Convenience function: check *source* with the given rule option."""
    linter = Linter(loader)
    linter.configure({OPTION_NAME: options})
    return linter.check_string(source).sorted_findings()
