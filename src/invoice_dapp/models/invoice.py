"""
Invoice form domain models.

The hierarchy is:

    InvoiceDraft
    └── LineItem[] (name and price text, at least one)

    SubmissionOutcome (status, message, artifact URL) per submit attempt

    CreateInvoiceMsg (the execute message sent to the invoice contract)

Draft values are kept exactly as typed; parsing happens only when a total
is derived or a message is built.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List

# User-facing status messages
MSG_IN_PROGRESS = "Creating invoice..."
MSG_MISSING_CLIENT = "Client or address missing."
MSG_INVALID_ADDRESS = "Invalid address format"
MSG_SUCCEEDED = "Invoice created successfully!"
MSG_FAILED = "Failed to create invoice."


@dataclass(slots=True)
class LineItem:
    """A single (name, price) pair on the invoice."""

    item_name: str = ""
    item_price: str = ""


def _default_items() -> List[LineItem]:
    return [LineItem()]


@dataclass(slots=True)
class InvoiceDraft:
    """In-progress invoice data, owned by one form session."""

    payer: str = ""
    recipient: str = ""
    description: str = ""
    due_date: str = ""
    items: List[LineItem] = field(default_factory=_default_items)


class SubmissionStatus(str, Enum):
    """Lifecycle of a submit attempt."""

    NONE = "none"
    IN_PROGRESS = "in_progress"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class SubmissionOutcome:
    """Result of one submit attempt as shown to the user."""

    status: SubmissionStatus = SubmissionStatus.NONE
    message: str = ""
    artifact_url: str | None = None

    @classmethod
    def in_progress(cls) -> "SubmissionOutcome":
        return cls(SubmissionStatus.IN_PROGRESS, MSG_IN_PROGRESS)

    @classmethod
    def succeeded(cls, artifact_url: str | None) -> "SubmissionOutcome":
        return cls(SubmissionStatus.SUCCEEDED, MSG_SUCCEEDED, artifact_url)

    @classmethod
    def failed(cls, message: str = MSG_FAILED) -> "SubmissionOutcome":
        return cls(SubmissionStatus.FAILED, message)

    @property
    def is_pending(self) -> bool:
        return self.status is SubmissionStatus.IN_PROGRESS


@dataclass(frozen=True, slots=True)
class CreateInvoiceMsg:
    """
    Execute message for the invoice contract.

    Field names in to_message() are fixed by the receiving contract.
    due_date is NaN when the draft's date could not be parsed.
    """

    recipient: str
    amount: str
    description: str
    due_date: int | float

    def to_message(self) -> dict[str, Any]:
        """Return the contract execute message."""
        return {
            "CreateInvoice": {
                "recipient": self.recipient,
                "amount": self.amount,
                "description": self.description,
                "due_date": self.due_date,
            }
        }
