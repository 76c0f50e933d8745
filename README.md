# guardrules

The error hierarchy of a policy-as-code rules engine, in the module
`guardrules.errors`. Every failure the engine can report, whether it comes
from reading input, parsing a rules file or evaluating a clause, is a
subclass of `GuardError`. Each subclass turns its detail into a readable
message.

## Installation

```
pip install guardrules
```

## Error classes

| Class | Message |
| --- | --- |
| `JsonError` | `Error parsing incoming JSON context <detail>` |
| `YamlError` | `Error parsing incoming YAML context <detail>` |
| `FormatError` | `Formatting error when writing <detail>` |
| `IoError` | `I/O error when reading <detail>` |
| `ParseError` | `Parser Error when parsing rules file <detail>` |
| `RegexError` | `Regex expression parse error for rules file <detail>` |
| `MissingPropertyError` | `Could not evaluate clause for a rule with missing property for incoming context <detail>` |
| `MissingValueError` | `There was no variable or value object to resolve. Error = <detail>` |
| `RetrievalError` | `Could not retrieve data from incoming context. Error = <detail>` |
| `MissingVariableError` | `Variable assignment could not be resolved in rule file or incoming context <detail>` |
| `MultipleValuesError` | `Conflicting rule or variable assignments inside the same scope <detail>` |
| `IncompatibleRetrievalError` | `Types or variable assignments have incompatible types to retrieve <detail>` |
| `IncompatibleError` | `Types or variable assignments are incompatible <detail>` |
| `NotComparableError` | `Comparing incoming context with literals or dynamic results wasn't possible <detail>` |
| `ConversionError` | `Could not convert in JSON value object` (the detail is not shown) |
| `MultipleErrors` | the messages of the collected errors, each quoted, as a bracketed list |

Every error keeps what it was built with in `detail` and exposes its text
through the `message` property. `str()` of an error is that message
followed by a newline. `MultipleErrors` also keeps its errors, as a list,
in `errors`.

## Usage

```python
from guardrules.errors import (
    GuardError,
    MissingVariableError,
    MultipleErrors,
    from_exception,
    incomplete_input,
    parse_failure,
)

try:
    raise MissingVariableError("%engines")
except GuardError as err:
    print(err.message)
    # Variable assignment could not be resolved in rule file or incoming context %engines

errors = MultipleErrors([MissingVariableError("x"), MissingVariableError("y")])
print(errors.message)
# ["Variable assignment ... context x", "Variable assignment ... context y"]

err = parse_failure("rules.guard", 3, 7, "== 10")
print(err.message)
# Parser Error when parsing rules file Error parsing file rules.guard at line 3 at column 7, remaining == 10

print(incomplete_input().message)
# Parser Error when parsing rules file More bytes required for parsing
```

`from_exception(exc)` wraps a standard-library exception: a
`json.JSONDecodeError` becomes a `JsonError`, a `re.error` a `RegexError`
and an `OSError` an `IoError`. A `GuardError` is returned as it is. Any
other exception raises `TypeError`.

```python
try:
    open("missing.json")
except OSError as exc:
    wrapped = from_exception(exc)  # an IoError
```

## What this package does not do

It holds only the error types. It does not parse rules files, read JSON or
YAML input, or evaluate clauses.