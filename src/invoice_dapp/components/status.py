"""
Submission status component.

Displays the status line of the latest submit attempt and, after a
successful one, the invoice download link.
"""

import reflex as rx

from invoice_dapp.state import InvoiceFormState


def submission_status() -> rx.Component:
    """Build the status line and conditional download link."""
    return rx.box(
        rx.cond(
            InvoiceFormState.status_message != "",
            rx.text(
                InvoiceFormState.status_message,
                class_name=f"status-line status-{InvoiceFormState.status}",
            ),
        ),
        rx.cond(
            InvoiceFormState.artifact_url != "",
            rx.el.a(
                "Download Invoice",
                href=InvoiceFormState.artifact_url,
                download=True,
                class_name="download-link",
            ),
        ),
        class_name="submission-status",
    )
