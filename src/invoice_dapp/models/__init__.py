"""
Data models for the Invoice dApp.

- invoice: Draft, line item, submission outcome and contract message
  dataclasses
- reflex_models: rx.Base projections used by Reflex components
"""

from invoice_dapp.models.invoice import (
    MSG_FAILED,
    MSG_IN_PROGRESS,
    MSG_INVALID_ADDRESS,
    MSG_MISSING_CLIENT,
    MSG_SUCCEEDED,
    CreateInvoiceMsg,
    InvoiceDraft,
    LineItem,
    SubmissionOutcome,
    SubmissionStatus,
)

__all__ = [
    "MSG_FAILED",
    "MSG_IN_PROGRESS",
    "MSG_INVALID_ADDRESS",
    "MSG_MISSING_CLIENT",
    "MSG_SUCCEEDED",
    "CreateInvoiceMsg",
    "InvoiceDraft",
    "LineItem",
    "SubmissionOutcome",
    "SubmissionStatus",
]
