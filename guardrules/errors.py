"""Error types raised while parsing and evaluating guard rules."""

from __future__ import annotations

import json
import re
from collections.abc import Iterable


class GuardError(Exception):
    """Base class for every error reported by the rules engine."""

    _template = "{}"

    def __init__(self, detail=None):
        super().__init__(detail)
        self.detail = detail

    @property
    def message(self) -> str:
        """The human-readable message, without a trailing newline."""
        return self._template.format(self.detail)

    def __str__(self) -> str:
        return self.message + "\n"


class JsonError(GuardError):
    """Incoming JSON context could not be parsed."""

    _template = "Error parsing incoming JSON context {}"


class YamlError(GuardError):
    """Incoming YAML context could not be parsed."""

    _template = "Error parsing incoming YAML context {}"


class FormatError(GuardError):
    """Writing formatted output failed."""

    _template = "Formatting error when writing {}"


class IoError(GuardError):
    """Reading input failed."""

    _template = "I/O error when reading {}"


class ParseError(GuardError):
    """A rules file could not be parsed."""

    _template = "Parser Error when parsing rules file {}"


class RegexError(GuardError):
    """A regular expression in a rules file is invalid."""

    _template = "Regex expression parse error for rules file {}"


class MissingPropertyError(GuardError):
    """A clause referred to a property absent from the incoming context."""

    _template = (
        "Could not evaluate clause for a rule with missing property "
        "for incoming context {}"
    )


class MissingValueError(GuardError):
    """There was no variable or value to resolve."""

    _template = "There was no variable or value object to resolve. Error = {}"


class RetrievalError(GuardError):
    """Data could not be retrieved from the incoming context."""

    _template = "Could not retrieve data from incoming context. Error = {}"


class MissingVariableError(GuardError):
    """A variable could not be resolved."""

    _template = (
        "Variable assignment could not be resolved in rule file "
        "or incoming context {}"
    )


class MultipleValuesError(GuardError):
    """Conflicting assignments inside one scope."""

    _template = "Conflicting rule or variable assignments inside the same scope {}"


class IncompatibleRetrievalError(GuardError):
    """Types are incompatible for retrieval."""

    _template = (
        "Types or variable assignments have incompatible types to retrieve {}"
    )


class IncompatibleError(GuardError):
    """Types or assignments are incompatible."""

    _template = "Types or variable assignments are incompatible {}"


class NotComparableError(GuardError):
    """Values could not be compared."""

    _template = (
        "Comparing incoming context with literals or dynamic results "
        "wasn't possible {}"
    )


class ConversionError(GuardError):
    """A value could not be converted into a JSON value object."""

    @property
    def message(self) -> str:
        return "Could not convert in JSON value object"


def _debug_quote(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class MultipleErrors(GuardError):
    """A collection of errors reported together."""

    def __init__(self, errors: Iterable[GuardError]):
        collected = list(errors)
        super().__init__(collected)
        self.errors = collected

    @property
    def message(self) -> str:
        return "[" + ", ".join(_debug_quote(e.message) for e in self.errors) + "]"


def from_exception(exc: BaseException) -> GuardError:
    """Wrap a standard-library exception into the matching GuardError."""
    if isinstance(exc, GuardError):
        return exc
    if isinstance(exc, json.JSONDecodeError):
        return JsonError(exc)
    if isinstance(exc, re.error):
        return RegexError(exc)
    if isinstance(exc, OSError):
        return IoError(exc)
    raise TypeError(f"cannot convert {type(exc).__name__} into a GuardError")


def parse_failure(file_name, line, column, remaining) -> ParseError:
    """Build the ParseError reported when parsing stops at a location."""
    return ParseError(
        f"Error parsing file {file_name} at line {line} at column {column}, "
        f"remaining {remaining}"
    )


def incomplete_input() -> ParseError:
    """Build the ParseError reported when the input ended too early."""
    return ParseError("More bytes required for parsing")