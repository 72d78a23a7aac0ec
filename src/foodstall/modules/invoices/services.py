"""Invoice service."""

from typing import Annotated, Any

from fastapi import Depends
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from foodstall.core.services import CrudService
from foodstall.modules.invoices.models import Invoice
from foodstall.modules.invoices.repos import InvoiceRepo


class InvoiceService(CrudService[Invoice]):
    """Service for invoices.

    Invoices are created once with their full item list. Afterwards only
    the date and time can change.
    """

    resource = "invoice"
    label = "Invoice"

    def __init__(self, repo: InvoiceRepo) -> None:
        super().__init__(repo)

    def to_fields(self, data: BaseModel, *, partial: bool = False) -> dict[str, Any]:
        fields = super().to_fields(data, partial=partial)
        if "items" in fields:
            # JSON column: identifiers must be stored as strings
            fields["items"] = jsonable_encoder(fields["items"])
        return fields


InvoiceSvc = Annotated[InvoiceService, Depends(InvoiceService)]
