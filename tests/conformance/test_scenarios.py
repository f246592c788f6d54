"""
Conformance: end-to-end syntax test verdicts against a scripted compiler stack.
"""
import io

import pytest

from syntaxtest import VERSION_PRAGMA, SyntaxTest, TestResult
from tests.conformance.fake_stack import diag

P = len(VERSION_PRAGMA)

# Each case: (description, test file text, scripted diagnostics, expected result)
CASES = [
    (
        "no_expectations_no_diagnostics",
        "contract C {}\n// ----\n",
        [],
        TestResult.SUCCESS,
    ),
    (
        "matching_type_error",
        "contract C { uint x = true; }\n// ----\n// TypeError: (10-20): Invalid type\n",
        [diag("TypeError", "Invalid type", P + 10, P + 20)],
        TestResult.SUCCESS,
    ),
    (
        "missing_warning",
        "uint x = 1;\n// ----\n// Warning: (0-3): unused var\n",
        [],
        TestResult.FAILURE,
    ),
    (
        "unexpected_error",
        "contract C {}\n// ----\n",
        [diag("ParserError", "Expected ';'", P + 2, P + 3)],
        TestResult.FAILURE,
    ),
    (
        "wrong_order",
        "contract C {}\n// ----\n// Warning: a\n// TypeError: b\n",
        [diag("TypeError", "b"), diag("Warning", "a")],
        TestResult.FAILURE,
    ),
    (
        "location_inside_pragma",
        "contract C {}\n// ----\n// Warning: pragma\n",
        [diag("Warning", "pragma", 5, 10)],
        TestResult.SUCCESS,
    ),
    (
        "secondary_notes_ignored",
        "contract C {}\n// ----\n// DeclarationError: (0-8): Identifier already declared.\n",
        [
            diag("DeclarationError", "Identifier already declared.", P, P + 8),
            diag("Note", "The previous declaration is here:", P + 2, P + 4, is_secondary=True),
        ],
        TestResult.SUCCESS,
    ),
    (
        "multiline_message_escaped",
        "contract C {}\n// ----\n// TypeError: first\\nsecond\n",
        [diag("TypeError", "first\nsecond")],
        TestResult.SUCCESS,
    ),
    (
        "missing_comment_is_none",
        "contract C {}\n// ----\n// SyntaxError: NONE\n",
        [diag("SyntaxError", None)],
        TestResult.SUCCESS,
    ),
]


@pytest.mark.parametrize("description,text,diagnostics,expected", CASES, ids=[c[0] for c in CASES])
def test_syntax_test_verdict(stack, error_recovery, description, text, diagnostics, expected):
    """The verdict depends only on ordered equality of expected and obtained lists."""
    stack.diagnostics = diagnostics
    test = SyntaxTest.from_string(text, parser_error_recovery=error_recovery)
    out = io.StringIO()
    result = test.run(stack, out)
    assert result is expected, out.getvalue()
    assert stack.parser_error_recovery is error_recovery
    if expected is TestResult.SUCCESS:
        assert out.getvalue() == ""
    else:
        assert "Expected result:" in out.getvalue()
        assert "Obtained result:" in out.getvalue()
