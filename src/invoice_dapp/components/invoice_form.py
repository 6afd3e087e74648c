"""
Invoice form component for Reflex.

Provides the invoice fields, the dynamic line item list, the computed
total and the submit button. Inputs are controlled: every change goes
through InvoiceFormState and the rendered values come back from it.
"""

import reflex as rx

from invoice_dapp.models.reflex_models import LineItemModel
from invoice_dapp.state import APP_TITLE, InvoiceFormState


def invoice_form() -> rx.Component:
    """
    Build the invoice creation form.

    Returns:
        The form component.
    """
    return rx.form(
        rx.heading(APP_TITLE, size="6", as_="h1"),
        _text_input("payer", "Payer Address", InvoiceFormState.payer),
        _text_input("recipient", "Recipient Address", InvoiceFormState.recipient),
        rx.input(
            type="date",
            name="dueDate",
            value=InvoiceFormState.due_date,
            on_change=lambda value: InvoiceFormState.set_draft_field("due_date", value),
            required=True,
            class_name="form-input",
        ),
        rx.text_area(
            name="description",
            placeholder="Description",
            value=InvoiceFormState.description,
            on_change=lambda value: InvoiceFormState.set_draft_field("description", value),
            class_name="form-input",
        ),
        _line_items(),
        rx.text(
            "Total Amount: $",
            InvoiceFormState.total_display,
            class_name="invoice-total",
        ),
        rx.button(
            "Submit",
            type="submit",
            disabled=InvoiceFormState.submit_disabled,
            class_name="submit-button",
        ),
        on_submit=InvoiceFormState.submit,
        reset_on_submit=False,
        class_name="card invoice-form",
    )


def _text_input(name: str, placeholder: str, value: rx.Var) -> rx.Component:
    return rx.input(
        type="text",
        name=name,
        placeholder=placeholder,
        value=value,
        on_change=lambda text: InvoiceFormState.set_draft_field(name, text),
        required=True,
        class_name="form-input",
    )


def _line_items() -> rx.Component:
    """Build the line item rows and the Add Item button."""
    return rx.box(
        rx.foreach(InvoiceFormState.items, _line_item),
        rx.button(
            "Add Item",
            type="button",
            on_click=InvoiceFormState.add_item,
            class_name="add-item-button",
        ),
        class_name="line-items",
    )


def _line_item(item: LineItemModel, index: int) -> rx.Component:
    """Build one name/price row; Remove only shows when more than one row exists."""
    return rx.hstack(
        rx.input(
            type="text",
            placeholder=f"Item {index + 1}",
            value=item.item_name,
            on_change=lambda value: InvoiceFormState.set_item_field(
                index, "item_name", value
            ),
            class_name="form-input item-name",
        ),
        rx.input(
            type="number",
            placeholder="Price",
            value=item.item_price,
            on_change=lambda value: InvoiceFormState.set_item_field(
                index, "item_price", value
            ),
            class_name="form-input item-price",
        ),
        rx.cond(
            InvoiceFormState.can_remove_items,
            rx.button(
                "Remove",
                type="button",
                on_click=InvoiceFormState.remove_item(index),
                class_name="remove-item-button",
            ),
        ),
        class_name="line-item",
    )
