"""Mini README: Core package initializer for Pocket Ledger.

Pocket Ledger is a single-user income and expense tracker. The ``ledger``
subpackage owns the transaction collection and the period reports derived
from it, while ``interface`` exposes a thin JSON surface for clients.
Only the logging helper is re-exported here so importing the package stays
free of web framework dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
