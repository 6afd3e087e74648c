"""
Invoice dApp: a Reflex page for creating on-chain invoices.

The page collects payer, recipient, due date, description and line items,
derives a total and submits a CreateInvoice message to an invoice contract
through a chain write client.

Subpackages:
- components: Reflex UI components
- models: Draft/outcome dataclasses and Reflex projections
- services: Chain client and account provider implementations
- lib: Logging and JSON helpers

Main entry points:
- controller.InvoiceFormController: Form state and submit workflow
- app.main(): Start the development server
- app.app: The Reflex application instance
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
