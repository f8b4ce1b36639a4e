"""Tests for the ready-made parsers and their use through the readers."""

from datetime import datetime
from enum import Enum
from typing import List, Literal

import pytest
from pydantic import ValidationError

from env_option import ParseFailed, adapter, json_adapter, parse_bool, parse_flag, parse_list, require
from env_option.utils.parse_utils import PARSERS


class Level(Enum):
    LOW = "low"
    HIGH = "high"


class TestParseBool:
    """Verify the strict boolean parser."""

    def test_exact_spellings(self) -> None:
        """Only lower-case true and false are accepted."""
        assert parse_bool("true") is True
        assert parse_bool("false") is False

    @pytest.mark.parametrize("raw", ["True", "1", "yes", "", " true"])
    def test_rejects_other_spellings(self, raw: str) -> None:
        """Anything else is a ValueError."""
        with pytest.raises(ValueError):
            parse_bool(raw)


class TestParseFlag:
    """Verify the lenient on/off parser."""

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " On "])
    def test_truthy(self, raw: str) -> None:
        assert parse_flag(raw) is True

    @pytest.mark.parametrize("raw", ["0", "False", "no", "OFF"])
    def test_falsy(self, raw: str) -> None:
        assert parse_flag(raw) is False

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValueError):
            parse_flag("maybe")


class TestParseList:
    """Verify separator-based list parsing."""

    def test_strips_and_drops_blanks(self) -> None:
        """Whitespace around items and empty items are ignored."""
        assert parse_list()(" a, b ,,c ") == ["a", "b", "c"]

    def test_item_parser_and_separator(self) -> None:
        """Each item goes through the item parser."""
        assert parse_list(int, sep=":")("1:2:3") == [1, 2, 3]

    def test_bad_item_fails_whole_value(self) -> None:
        """One bad item makes the variable unparsable."""
        with pytest.raises(ParseFailed):
            require("PORTS", parse_list(int), environ={"PORTS": "80,http"})


class TestAdapters:
    """Verify the pydantic-backed parsers."""

    def test_adapter_int(self) -> None:
        assert adapter(int)("9090") == 9090

    def test_adapter_datetime(self) -> None:
        assert adapter(datetime)("2024-01-02T03:04:05") == datetime(2024, 1, 2, 3, 4, 5)

    def test_adapter_enum_and_literal(self) -> None:
        assert adapter(Level)("high") is Level.HIGH
        assert adapter(Literal["dev", "prod"])("prod") == "prod"

    def test_adapter_rejects(self) -> None:
        """Validation errors are ValueErrors, so readers report ParseFailed."""
        with pytest.raises(ValidationError):
            adapter(int)("abc")
        with pytest.raises(ParseFailed) as exc_info:
            require("PORT", adapter(int), environ={"PORT": "abc"})
        assert isinstance(exc_info.value.cause, ValidationError)

    def test_json_adapter(self) -> None:
        assert json_adapter(List[int])("[1, 2]") == [1, 2]
        assert json_adapter()('{"a": 1}') == {"a": 1}

    def test_json_adapter_rejects_bad_json(self) -> None:
        with pytest.raises(ParseFailed):
            require("HOSTS", json_adapter(List[str]), environ={"HOSTS": "[oops"})


class TestParserTable:
    """Verify the name → parser table used by declarations."""

    def test_names(self) -> None:
        assert set(PARSERS) == {"str", "int", "float", "bool", "flag", "list", "json"}

    def test_entries_parse(self) -> None:
        assert PARSERS["int"]("3") == 3
        assert PARSERS["bool"]("true") is True
        assert PARSERS["list"]("a,b") == ["a", "b"]
