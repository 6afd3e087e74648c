"""
Reflex-compatible models for the Invoice dApp.

These models extend rx.Base so they can be used with rx.foreach and
other Reflex reactive components.
"""

from typing import Sequence

import reflex as rx

from invoice_dapp.models.invoice import LineItem


class LineItemModel(rx.Base):
    """Line item as rendered in the form."""

    item_name: str = ""
    item_price: str = ""


def to_line_item_models(items: Sequence[LineItem]) -> list[LineItemModel]:
    """
    Convert draft line items to LineItemModel instances.

    Args:
        items: Line items from the controller's draft.

    Returns:
        New list of LineItemModel in the same order.
    """
    return [
        LineItemModel(item_name=item.item_name, item_price=item.item_price)
        for item in items
    ]
