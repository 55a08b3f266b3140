from typing import Annotated

from fastapi import Depends

from storefront_inventory.gateway.dependencies import BackendGatewayDep
from .service import ReportService


def get_report_service(gateway: BackendGatewayDep) -> ReportService:
    """Fournit une instance du service de rapport mensuel."""
    return ReportService(gateway=gateway)


ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]
