"""Reflex configuration for the Invoice dApp."""

import os

import reflex as rx

# Get port from environment
APP_PORT = int(os.getenv("INVOICE_DAPP_PORT", "8000"))

config = rx.Config(
    app_name="invoice_dapp",
    # Use the src directory structure
    app_module_import="invoice_dapp.app",
)
