"""Invoice API routes."""

from fastapi import APIRouter, status

from foodstall.core.permissions import require_permission
from foodstall.modules.invoices.schemas import (
    InvoiceCreate,
    InvoiceDateTimeUpdate,
    InvoiceEnvelope,
    InvoiceListEnvelope,
    InvoiceResponse,
)
from foodstall.modules.invoices.services import InvoiceSvc


router = APIRouter(prefix="/invoice", tags=["invoices"])


@router.get(
    "/getAllInvoices",
    response_model=InvoiceListEnvelope,
    summary="List invoices",
    dependencies=[require_permission("invoice", "read")],
)
async def get_all_invoices(service: InvoiceSvc) -> InvoiceListEnvelope:
    invoices = await service.list()
    return InvoiceListEnvelope(
        message="Invoices retrieved successfully",
        invoices=[InvoiceResponse.model_validate(invoice) for invoice in invoices],
    )


@router.get(
    "/getInvoiceById/{invoice_id}",
    response_model=InvoiceEnvelope,
    summary="Get an invoice",
    dependencies=[require_permission("invoice", "read")],
)
async def get_invoice_by_id(
    invoice_id: str,
    service: InvoiceSvc,
) -> InvoiceEnvelope:
    invoice = await service.get(invoice_id)
    return InvoiceEnvelope(
        message="Invoice retrieved successfully",
        invoice=InvoiceResponse.model_validate(invoice),
    )


@router.post(
    "/createInvoice",
    response_model=InvoiceEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create an invoice",
    description="Subtotal, discount and total are stored as supplied.",
    dependencies=[require_permission("invoice", "create")],
)
async def create_invoice(
    data: InvoiceCreate,
    service: InvoiceSvc,
) -> InvoiceEnvelope:
    invoice = await service.create(data)
    return InvoiceEnvelope(
        message="Invoice created successfully",
        invoice=InvoiceResponse.model_validate(invoice),
    )


@router.put(
    "/updateInvoiceDateTime/{invoice_id}",
    response_model=InvoiceEnvelope,
    summary="Update an invoice's date and time",
    description="Items and amounts cannot be changed.",
    dependencies=[require_permission("invoice", "update")],
)
async def update_invoice_date_time(
    invoice_id: str,
    data: InvoiceDateTimeUpdate,
    service: InvoiceSvc,
) -> InvoiceEnvelope:
    invoice = await service.update(invoice_id, data)
    return InvoiceEnvelope(
        message="Invoice updated successfully",
        invoice=InvoiceResponse.model_validate(invoice),
    )


@router.delete(
    "/deleteInvoiceById/{invoice_id}",
    response_model=InvoiceEnvelope,
    summary="Delete an invoice",
    dependencies=[require_permission("invoice", "delete")],
)
async def delete_invoice(
    invoice_id: str,
    service: InvoiceSvc,
) -> InvoiceEnvelope:
    invoice = await service.delete(invoice_id)
    return InvoiceEnvelope(
        message="Invoice deleted successfully",
        invoice=InvoiceResponse.model_validate(invoice),
    )
