"""Tests for the rule tokenizer."""

import pytest

from fieldcheck.engine.tokenizer import parse_rules, split_clause, tokenize
from fieldcheck.errors import ErrorKind, MalformedClauseError
from fieldcheck.models import Predicate, RuleClause


class TestTokenize:
    """Test splitting rule strings into clauses."""

    def test_single_clause(self):
        assert tokenize("len:5") == ["len:5"]

    def test_multiple_clauses_keep_order(self):
        assert tokenize("min:2;max:10;in:a,b") == ["min:2", "max:10", "in:a,b"]

    def test_empty_segments_are_kept(self):
        assert tokenize("len:5;") == ["len:5", ""]
        assert tokenize("len:5;;max:3") == ["len:5", "", "max:3"]

    def test_whitespace_is_not_stripped_here(self):
        assert tokenize("min:2; max:4") == ["min:2", " max:4"]


class TestSplitClause:
    """Test splitting a clause into predicate and argument."""

    def test_simple_clause(self):
        assert split_clause("len:20") == RuleClause(name="len", argument="20")

    def test_surrounding_whitespace_trimmed(self):
        clause = split_clause("  max:4 ")
        assert clause.name == "max"
        assert clause.argument == "4"

    def test_only_first_separator_splits(self):
        clause = split_clause("in:a:b,c")
        assert clause.name == "in"
        assert clause.argument == "a:b,c"

    def test_empty_argument_allowed(self):
        clause = split_clause("min:")
        assert clause.argument == ""

    def test_unknown_predicate_with_empty_argument(self):
        clause = split_clause("foo:")

        assert clause.name == "foo"
        assert clause.argument == ""
        assert clause.predicate == Predicate.UNKNOWN

    @pytest.mark.parametrize("text", ["len", "", "   ", ":5"])
    def test_malformed_clause(self, text):
        with pytest.raises(MalformedClauseError):
            split_clause(text)

    def test_malformed_clause_names_field(self):
        with pytest.raises(MalformedClauseError) as exc_info:
            split_clause("bogus", field="Foo")

        assert str(exc_info.value) == "malformed field Foo"
        assert exc_info.value.field == "Foo"
        assert exc_info.value.kind == ErrorKind.MALFORMED_CLAUSE

    def test_predicate_resolution(self):
        assert split_clause("len:1").predicate == Predicate.LEN
        assert split_clause("in:a").predicate == Predicate.IN
        assert split_clause("min:1").predicate == Predicate.MIN
        assert split_clause("max:1").predicate == Predicate.MAX
        assert split_clause("regex:^a").predicate == Predicate.UNKNOWN

    def test_predicate_names_are_case_sensitive(self):
        assert split_clause("LEN:1").predicate == Predicate.UNKNOWN


class TestParseRules:
    """Test tokenizing whole rule strings."""

    def test_malformed_clauses_kept_in_place(self):
        items = parse_rules("len:5;bogus;max:2", field="Foo")

        assert len(items) == 3
        assert items[0] == RuleClause(name="len", argument="5")
        assert isinstance(items[1], MalformedClauseError)
        assert items[2] == RuleClause(name="max", argument="2")
