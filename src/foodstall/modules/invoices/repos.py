"""Invoice repository."""

from typing import Annotated

from fastapi import Depends

from foodstall.core.database import Repository
from foodstall.modules.invoices.models import Invoice


class InvoiceRepository(Repository[Invoice]):
    """Repository for Invoice database operations."""

    model = Invoice


InvoiceRepo = Annotated[InvoiceRepository, Depends(InvoiceRepository)]
