"""syntaxtest diagnostics subpackage (Layer 0 — zero internal dependencies)."""

from syntaxtest.diagnostics.highlight import Highlight
from syntaxtest.diagnostics.record import NO_LOCATION, DiagnosticRecord

__all__ = ["NO_LOCATION", "DiagnosticRecord", "Highlight"]
