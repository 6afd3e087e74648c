"""
Reflex UI components for the Invoice dApp.

- invoice_form: Invoice fields, line items, total and submit button
- status: Submission status line and download link
- wallet: Connected address and connect button
"""

from invoice_dapp.components.invoice_form import invoice_form
from invoice_dapp.components.status import submission_status
from invoice_dapp.components.wallet import wallet_bar

__all__ = ["invoice_form", "submission_status", "wallet_bar"]
