"""Splitting of a syntax test file into source, settings and expectations."""

from __future__ import annotations

from collections.abc import Iterator

from syntaxtest.errors import TestFileError

SETTINGS_DELIMITER = "// ===="
EXPECTATIONS_DELIMITER = "// ----"


def parse_source_and_settings(stream: Iterator[str]) -> tuple[str, dict[str, str]]:
    """Consume source and settings lines from *stream*.

    Reading stops right after the ``// ----`` delimiter, so the remaining lines
    of *stream* are the expectation block.  Source lines keep a trailing
    newline each; settings are ``// key: value`` lines after ``// ====``.

    Raises:
        TestFileError: If the settings block holds a line that is not a
            ``// key: value`` comment.
    """
    source_lines: list[str] = []
    settings: dict[str, str] = {}
    in_source = True
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line.startswith(EXPECTATIONS_DELIMITER):
            break
        if line.startswith(SETTINGS_DELIMITER):
            in_source = False
        elif in_source:
            source_lines.append(line + "\n")
        elif line.startswith("// "):
            key, sep, value = line[3:].partition(":")
            if not sep:
                raise TestFileError('Expected ":" inside setting.')
            settings[key.strip()] = value.strip()
        else:
            raise TestFileError(
                'Expected "//" or "// ---" to terminate settings and source.'
            )
    return "".join(source_lines), settings
