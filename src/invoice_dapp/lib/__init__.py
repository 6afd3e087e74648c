"""
Local library modules shared across the Invoice dApp.

Modules:
    logs: Logging utilities
    objects: Strict JSON serialization for outbound messages
"""

from invoice_dapp.lib import logs, objects

__all__ = ["logs", "objects"]
