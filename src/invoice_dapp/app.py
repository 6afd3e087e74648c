"""
Reflex application entry point for the Invoice dApp.

This module initializes the Reflex app and defines the main page layout.
"""

import os

import reflex as rx

from invoice_dapp.components import invoice_form, submission_status, wallet_bar
from invoice_dapp.lib import logs
from invoice_dapp.session import CONTRACT_ADDRESS
from invoice_dapp.state import APP_TITLE, InvoiceFormState

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("INVOICE_DAPP_PORT", "8000"))
LOG.info("INVOICE_DAPP_CONTRACT_ADDRESS: %s", CONTRACT_ADDRESS)


def index() -> rx.Component:
    """
    Build the main page layout.

    Returns:
        The complete page component with wallet bar, form and status.
    """
    return rx.box(
        rx.box(
            wallet_bar(),
            invoice_form(),
            submission_status(),
            class_name="app-container",
        ),
        class_name="app-shell",
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(appearance="light", has_background=True),
    stylesheets=["/styles.css"],
)

# Add the index page
app.add_page(
    index,
    title=APP_TITLE,
    on_load=InvoiceFormState.on_load,
)


def main() -> None:
    """Run the development server (`invoice_dapp` console script)."""
    import subprocess
    import sys

    subprocess.run(
        [sys.executable, "-m", "reflex", "run", "--port", str(APP_PORT)], check=True
    )


if __name__ == "__main__":
    main()
