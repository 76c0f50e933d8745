import json
import re

import pytest

from guardrules.errors import (
    ConversionError,
    FormatError,
    GuardError,
    IncompatibleError,
    IncompatibleRetrievalError,
    IoError,
    JsonError,
    MissingPropertyError,
    MissingValueError,
    MissingVariableError,
    MultipleErrors,
    MultipleValuesError,
    NotComparableError,
    ParseError,
    RegexError,
    RetrievalError,
    YamlError,
    from_exception,
    incomplete_input,
    parse_failure,
)


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (JsonError, "Error parsing incoming JSON context "),
        (YamlError, "Error parsing incoming YAML context "),
        (FormatError, "Formatting error when writing "),
        (IoError, "I/O error when reading "),
        (ParseError, "Parser Error when parsing rules file "),
        (RegexError, "Regex expression parse error for rules file "),
        (
            MissingPropertyError,
            "Could not evaluate clause for a rule with missing property for incoming context ",
        ),
        (
            MissingVariableError,
            "Variable assignment could not be resolved in rule file or incoming context ",
        ),
        (
            MultipleValuesError,
            "Conflicting rule or variable assignments inside the same scope ",
        ),
        (
            IncompatibleRetrievalError,
            "Types or variable assignments have incompatible types to retrieve ",
        ),
        (IncompatibleError, "Types or variable assignments are incompatible "),
        (
            NotComparableError,
            "Comparing incoming context with literals or dynamic results wasn't possible ",
        ),
        (RetrievalError, "Could not retrieve data from incoming context. Error = "),
        (MissingValueError, "There was no variable or value object to resolve. Error = "),
    ],
)
def test_messages(cls, prefix):
    err = cls("detail")
    assert err.message == prefix + "detail"
    assert str(err) == prefix + "detail\n"
    assert isinstance(err, GuardError)


def test_conversion_error_message():
    err = ConversionError()
    assert str(err) == "Could not convert in JSON value object\n"


def test_multiple_errors_message():
    err = MultipleErrors([MissingValueError("x"), ParseError('a "b"')])
    assert err.message == (
        '["There was no variable or value object to resolve. Error = x", '
        '"Parser Error when parsing rules file a \\"b\\""]'
    )
    assert len(err.errors) == 2


def test_multiple_errors_empty():
    assert str(MultipleErrors([])) == "[]\n"


def test_parse_failure():
    err = parse_failure("rules.guard", 3, 7, "== 10")
    assert isinstance(err, ParseError)
    assert err.detail == "Error parsing file rules.guard at line 3 at column 7, remaining == 10"


def test_incomplete_input():
    err = incomplete_input()
    assert err.detail == "More bytes required for parsing"


def test_from_exception_json():
    with pytest.raises(json.JSONDecodeError) as info:
        json.loads("{")
    err = from_exception(info.value)
    assert isinstance(err, JsonError)
    assert err.detail is info.value


def test_from_exception_regex():
    with pytest.raises(re.error) as info:
        re.compile("(")
    err = from_exception(info.value)
    assert isinstance(err, RegexError)
    assert err.detail is info.value
    assert err.message == (
        "Regex expression parse error for rules file " + str(info.value)
    )


def test_from_exception_io():
    exc = FileNotFoundError("missing")
    err = from_exception(exc)
    assert isinstance(err, IoError)
    assert err.message.startswith("I/O error when reading ")


def test_from_exception_passthrough():
    err = ParseError("x")
    assert from_exception(err) is err


def test_from_exception_unsupported():
    with pytest.raises(TypeError):
        from_exception(KeyError("k"))


def test_errors_are_raisable():
    err = NotComparableError("a vs b")
    with pytest.raises(GuardError) as info:
        raise err
    assert info.value is err
    assert info.value.detail == "a vs b"
    assert str(info.value) == (
        "Comparing incoming context with literals or dynamic results "
        "wasn't possible a vs b\n"
    )