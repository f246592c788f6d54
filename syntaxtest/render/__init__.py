"""syntaxtest render subpackage (Layer 1 — depends on diagnostics)."""

from syntaxtest.render.formatting import AnsiColorized
from syntaxtest.render.printer import (
    HIGHLIGHT_STYLES,
    build_highlights,
    print_error_list,
    print_source,
)

__all__ = [
    "AnsiColorized",
    "HIGHLIGHT_STYLES",
    "build_highlights",
    "print_error_list",
    "print_source",
]
