"""
Wallet bar component.

Shows the connected address, or a connect button while no wallet is
connected.
"""

import reflex as rx

from invoice_dapp.state import InvoiceFormState


def wallet_bar() -> rx.Component:
    """
    Build the wallet connection bar.

    Returns:
        The wallet bar component.
    """
    return rx.box(
        rx.cond(
            InvoiceFormState.address != "",
            rx.text(
                "Connected Wallet: ",
                InvoiceFormState.address,
                class_name="wallet-address",
            ),
        ),
        rx.cond(
            ~InvoiceFormState.is_connected,
            rx.button(
                "Connect Wallet",
                on_click=InvoiceFormState.connect_wallet,
                class_name="connect-button",
            ),
        ),
        class_name="wallet-bar",
    )
