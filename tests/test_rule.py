"""
Tests for the requireDictionaryWords rule, end to end through the linter.
"""

from importlib.metadata import PackageNotFoundError, entry_points, version

import pytest

from conftest import MemoryWordlistLoader, count, positions
from identspell.errors import ConfigurationError, WordlistNotFoundError
from identspell.linter import Linter, check_string
from identspell.model import Location, Occurrence, Axis
from identspell.overrides import OverrideIndex
from identspell.plugin import PLUGIN_GROUP, register
from identspell.reporting import Reporter
from identspell.rule import RequireDictionaryWords


class TestRuleObject:
    """The host-facing rule contract."""

    def test_option_name(self):
        assert RequireDictionaryWords().get_option_name() == "requireDictionaryWords"

    def test_plugin_registers_rule(self):
        registered = []

        class Host:
            def register_rule(self, rule_class):
                registered.append(rule_class)

        register(Host())
        rule = registered[0]()
        assert callable(rule.configure)
        assert callable(rule.get_option_name)
        assert callable(rule.check)

    def test_linter_is_a_plugin_host(self, loader):
        linter = Linter(loader)
        assert isinstance(linter.rule, RequireDictionaryWords)
        assert linter.rule.loader is loader

    def test_published_entry_point(self):
        try:
            found = [ep for ep in entry_points(group=PLUGIN_GROUP)
                     if ep.name == "requireDictionaryWords"]
            version("identspell")
        except PackageNotFoundError:
            pytest.skip("identspell is not installed")
        assert [ep.value for ep in found] == ["identspell.plugin:register"]
        assert found[0].load() is register

    def test_check_before_configure(self):
        with pytest.raises(ConfigurationError):
            RequireDictionaryWords().check(None, Reporter())

    def test_check_occurrence_offsets(self, loader):
        rule = RequireDictionaryWords(loader)
        rule.configure(True)
        errors = Reporter()
        added = rule.check_occurrence(
            Occurrence(Axis.IDENTIFIER, "goodAsdfJkl", Location(3, 10)),
            OverrideIndex(), errors)
        assert added == 2
        assert [(f.line, f.col, f.message) for f in errors.findings] == [
            (3, 14, 'Non-dictionary word "asdf"'),
            (3, 18, 'Non-dictionary word "jkl"'),
        ]
        assert [f.word for f in errors.findings] == ["asdf", "jkl"]


class TestTrue:

    def test_reports_non_words(self, linter):
        assert count(linter, "asdf = 1;") == 1
        assert count(linter, "var asdf = 1;") == 1
        assert count(linter, "let asdf = 1;") == 1
        assert count(linter, "const asdf = 1;") == 1
        assert count(linter, "function asdf(jkl) {var asdf = 1;}") == 3
        assert count(linter, "var asdf = function asdf() {};") == 2
        assert count(linter, "for(asdf = 0; asdf<1; asdf++){asdf;}") == 1
        assert count(linter, 'object["jkl"] = 1;') == 1
        assert count(linter, "object.jkl = 1;") == 1
        assert count(linter, "object = {jkl: 1};") == 1
        assert count(linter, 'object = {"jkl": 1};') == 1
        assert count(linter, "asdf: void 0;") == 1
        assert count(linter, "JKL = 1;") == 1

    def test_reports_multiple_non_words(self, linter):
        assert count(linter, "asdfAsdf = 1;") == 2
        assert count(linter, "asdfASDF = 1;") == 2
        assert count(linter, "asdfASDFAsdf = 1;") == 3
        assert count(linter, "asdf_asdf = 1;") == 2

    @pytest.mark.parametrize("source", [
        "$asdfAsdf = 1;", "asdf$Asdf = 1;", "asdfAsdf$ = 1;",
        "asdf9Asdf = 1;", "asdfAsdf9 = 1;",
    ])
    def test_ignores_numbers_and_symbols(self, linter, source):
        assert count(linter, source) == 2

    @pytest.mark.parametrize("source", [
        "asdf",
        "asdf.jkl",
        "asdf(jkl)",
        "asdf.jkl(jkl)",
        "value = asdf",
        "var value = asdf",
        "object.property = asdf",
        "if(asdf){}",
        "object[jkl] = 1;",
    ])
    def test_ignores_references(self, linter, source):
        assert linter.check_string(source).is_empty()

    def test_defined_words(self, linter):
        assert linter.check_string("good = 1;").is_empty()
        assert linter.check_string("goodGood = 1;").is_empty()

    def test_es6_non_words(self, linter):
        assert count(linter, "object = {asdf, jkl() {}, [0 + 1]: 2};") == 2
        assert count(linter, "class Asdf { jkl() {} }") == 2

    def test_es6_defined_words(self, linter):
        assert linter.check_string("object = {good, good() {}, [0 + 1]: 2};").is_empty()
        assert linter.check_string("class Good { good() {} }").is_empty()

    def test_message_and_positions(self, linter):
        reporter = linter.check_string("goodAsdf = 1;\nobject.jklJkl = 2;")
        assert [f.message for f in reporter.sorted_findings()] == [
            'Non-dictionary word "asdf"',
            'Non-dictionary word "jkl"',
            'Non-dictionary word "jkl"',
        ]
        assert positions(linter, "goodAsdf = 1;\nobject.jklJkl = 2;") == [
            (1, 4, "asdf"), (2, 7, "jkl"), (2, 10, "jkl")]

    def test_first_word_at_node_start(self, linter):
        assert positions(linter, "  asdfGood = 1;") == [(1, 2, "asdf")]


class TestAllowWords:

    def test_not_reported(self, make_linter):
        linter = make_linter({"allowWords": ["asdf", "jkl"]})
        assert linter.check_string("asdf = 1;").is_empty()
        assert linter.check_string("object.jkl = 1;").is_empty()
        assert linter.check_string("asdfAsdf = 1;").is_empty()
        assert linter.check_string("object.jklJkl = 1;").is_empty()


class TestAllowNames:

    def test_parts_of_names_reported(self, make_linter):
        linter = make_linter({"allowNames": ["asdf", "jkl"]})
        assert count(linter, "asdfAsdf = 1;") == 2
        assert count(linter, "object.jklJkl = 1;") == 2

    def test_whole_names_not_reported(self, make_linter):
        linter = make_linter({"allowNames": ["asdf", "jkl"]})
        assert linter.check_string("asdf = 1;").is_empty()
        assert linter.check_string("object.jkl = 1;").is_empty()

    def test_names_with_symbols(self, make_linter):
        linter = make_linter({"allowNamesAsIdentifiers": ["$stateParams", "util"]})
        assert linter.check_string("var util = require('util');").is_empty()
        assert linter.check_string("function Controller($stateParams) {}").error_count == 1
        assert count(linter, "var stringUtil = {};") == 1


class TestAllowWordsInIdentifiers:

    def test_properties_reported(self, make_linter):
        linter = make_linter({"allowWordsInIdentifiers": ["asdf", "jkl"]})
        assert count(linter, "object.jkl = 1;") == 1
        assert count(linter, "object.jklJkl = 1;") == 2

    def test_identifiers_not_reported(self, make_linter):
        linter = make_linter({"allowWordsInIdentifiers": ["asdf", "jkl"]})
        assert linter.check_string("asdf = 1;").is_empty()
        assert linter.check_string("asdfAsdf = 1;").is_empty()


class TestAllowWordsInProperties:

    def test_identifiers_reported(self, make_linter):
        linter = make_linter({"allowWordsInProperties": ["asdf", "jkl"]})
        assert count(linter, "asdf = 1;") == 1
        assert count(linter, "asdfAsdf = 1;") == 2

    def test_properties_not_reported(self, make_linter):
        linter = make_linter({"allowWordsInProperties": ["asdf", "jkl"]})
        assert linter.check_string("object.jkl = 1;").is_empty()
        assert linter.check_string("object.jklJkl = 1;").is_empty()


class TestAllowNamesAsIdentifiers:

    def test_other_names_and_properties_reported(self, make_linter):
        linter = make_linter({"allowNamesAsIdentifiers": ["asdf", "jkl"]})
        assert count(linter, "asdfAsdf = 1;") == 2
        assert count(linter, "object.jkl = 1;") == 1
        assert count(linter, "object.jklJkl = 1;") == 2

    def test_identifier_names_not_reported(self, make_linter):
        linter = make_linter({"allowNamesAsIdentifiers": ["asdf", "jkl"]})
        assert linter.check_string("asdf = 1;").is_empty()


class TestAllowNamesAsProperties:

    def test_other_names_and_identifiers_reported(self, make_linter):
        linter = make_linter({"allowNamesAsProperties": ["asdf", "jkl"]})
        assert count(linter, "asdf = 1;") == 1
        assert count(linter, "asdfAsdf = 1;") == 2
        assert count(linter, "object.jklJkl = 1;") == 2

    def test_property_names_not_reported(self, make_linter):
        linter = make_linter({"allowNamesAsProperties": ["asdf", "jkl"]})
        assert linter.check_string("object.jkl = 1;").is_empty()


class TestExcludeWords:

    def test_excluded_words_reported(self, make_linter):
        linter = make_linter({"excludeWords": ["good"]})
        assert count(linter, "good = 1;") == 1
        assert count(linter, "object.good = 1;") == 1

    def test_exclude_beats_allow_words(self, make_linter):
        linter = make_linter({"allowWords": ["asdf"], "excludeWords": ["asdf"]})
        assert count(linter, "asdf = 1;") == 1

    def test_single_letter_loop_variable(self, make_linter):
        linter = make_linter({"excludeWords": ["i"]})
        assert count(linter, "for (var i = 0; i < 10; i++) {}") == 1


class TestDictionaries:

    def test_english(self, make_linter):
        assert count(make_linter({"dictionaries": ["english"]}), "color = 1;") == 1

    def test_english_american(self, make_linter):
        linter = make_linter({"dictionaries": ["english", "english/american"]})
        assert linter.check_string("color = 1;").is_empty()

    def test_british_spelling(self, make_linter):
        linter = make_linter({"dictionaries": ["english/british"]})
        assert linter.check_string("var colour = 'papayawhip';").is_empty()
        assert count(linter, "var color = 'papayawhip';") == 1

    def test_missing_dictionary(self, loader):
        linter = Linter(loader)
        with pytest.raises(WordlistNotFoundError, match="wordlist-elvish"):
            linter.configure({"requireDictionaryWords": {"dictionaries": ["elvish"]}})

    def test_missing_dictionary_default_loader(self):
        with pytest.raises(ConfigurationError, match="wordlist-elvish"):
            RequireDictionaryWords().configure({"dictionaries": ["elvish"]})

    def test_dictionaries_loaded_at_configure(self, loader):
        rule = RequireDictionaryWords(loader)
        rule.configure({"dictionaries": ["english", "english/british"]})
        assert loader.loaded == ["english", "english/british"]


class TestInlineConfiguration:

    def test_split(self, linter):
        assert count(linter, "// jscs:allowWords", "asdf = 1", "jkl = 1") == 2
        assert count(linter, "// jscs:allowWords asdf", "asdf = 1", "jkl = 1") == 1
        assert count(linter, "// jscs:allowWords asdf, jkl", "asdf = 1", "jkl = 1") == 0
        assert count(linter, "// jscs:allowWords asdf, jkl,", "asdf = 1", "jkl = 1") == 0
        assert count(linter, "/* jscs:allowWords", " asdf, jkl */", "asdf = 1", "jkl = 1") == 0
        assert count(linter, "/* jscs:allowWords", " asdf,", " jkl */", "asdf = 1", "jkl = 1") == 0

    def test_later_allow_and_later_disallow(self, linter):
        assert count(linter,
                     "asdf = 1",
                     "// jscs:allowWords asdf, jkl",
                     "asdf = 1",
                     "// jscs:disallowWords asdf, jkl",
                     "asdf = 1") == 2
        assert count(linter,
                     "asdf = 1",
                     "jkl = 1",
                     "// jscs:allowWords asdf, jkl",
                     "asdf = 1",
                     "jkl = 1",
                     "// jscs:disallowWords asdf, jkl",
                     "asdf = 1",
                     "jkl = 1") == 4

    def test_reported_lines_follow_directives(self, linter):
        source = "\n".join([
            "asdf = 1",
            "// jscs:allowWords asdf, jkl",
            "asdf = 1",
            "// jscs:disallowWords asdf, jkl",
            "asdf = 1",
        ])
        assert [line for line, _, _ in positions(linter, source)] == [1, 5]

    def test_allow_words(self, linter):
        assert count(linter,
                     "// jscs:allowWords asdf, jkl",
                     "asdf = 1",
                     "asdfAsdf = 1",
                     "object.jkl = 1",
                     "object.jklJkl = 1") == 0

    def test_allow_words_in_identifiers(self, linter):
        assert count(linter,
                     "// jscs:allowWordsInIdentifiers asdf, jkl",
                     "asdf = 1",
                     "asdfAsdf = 1") == 0
        assert count(linter,
                     "// jscs:allowWordsInIdentifiers asdf, jkl",
                     "object.jkl = 1",
                     "object.jklJkl = 1") == 3

    def test_allow_words_in_properties(self, linter):
        assert count(linter,
                     "// jscs:allowWordsInProperties asdf, jkl",
                     "object.jkl = 1",
                     "object.jklJkl = 1") == 0
        assert count(linter,
                     "// jscs:allowWordsInProperties asdf, jkl",
                     "asdf = 1",
                     "asdfAsdf = 1") == 3

    def test_allow_names(self, linter):
        assert count(linter,
                     "// jscs:allowNames asdf, jkl",
                     "asdf = 1",
                     "object.jkl = 1") == 0
        assert count(linter,
                     "// jscs:allowNames asdf, jkl",
                     "asdfAsdf = 1",
                     "object.jklJkl = 1") == 4

    def test_allow_names_as_identifiers(self, linter):
        assert count(linter,
                     "// jscs:allowNamesAsIdentifiers asdf, jkl",
                     "asdf = 1") == 0
        assert count(linter,
                     "// jscs:allowNamesAsIdentifiers asdf, jkl",
                     "asdfAsdf = 1",
                     "object.jkl = 1",
                     "object.jklJkl = 1") == 5

    def test_allow_names_as_properties(self, linter):
        assert count(linter,
                     "// jscs:allowNamesAsProperties asdf, jkl",
                     "object.jkl = 1") == 0
        assert count(linter,
                     "// jscs:allowNamesAsProperties asdf, jkl",
                     "asdf = 1",
                     "asdfAsdf = 1",
                     "object.jklJkl = 1") == 5

    def test_disallow_keeps_configured_name(self, make_linter):
        linter = make_linter({"allowNamesAsIdentifiers": ["EOL"]})
        assert count(linter,
                     "var EOL = require('os').EOL;",
                     "// jscs:disallowNamesAsIdentifiers EOL",
                     "var EOL = 1;") == 0
        assert count(linter,
                     "// jscs:allowNamesAsIdentifiers EOL",
                     "var EOL = require('os').EOL;",
                     "// jscs:disallowNamesAsIdentifiers EOL",
                     "var reachingEol = true;") == 1

    def test_index_not_shared_between_files(self, linter):
        assert count(linter, "// jscs:allowWords asdf", "asdf = 1") == 0
        assert count(linter, "asdf = 1") == 1


class TestCheckString:

    def test_convenience_function(self):
        findings = check_string("asdf = 1;", loader=MemoryWordlistLoader())
        assert [(f.line, f.col, f.word) for f in findings] == [(1, 0, "asdf")]

    def test_parse_error_reported(self, linter):
        reporter = linter.check_string("var = ;")
        assert reporter.error_count == 1
        assert reporter.findings[0].rule_id == "E000"
        assert reporter.findings[0].message.startswith("Parse error")
