import logging

from fastapi import APIRouter, HTTPException, Query, Response, status

from storefront_inventory.catalog.router import handle_gateway_errors
from .constants import CSV_MEDIA_TYPE
from .dependencies import ReportServiceDep
from .exceptions import ReportException
from .export import render_monthly_report_csv
from .models import MonthlyReport
from .utils import export_filename

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Inventory Reports"])


# --- Error Handling Helper ---
def handle_report_errors(e: Exception):
    if isinstance(e, ReportException):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    handle_gateway_errors(e)


@router.get("/report/monthly", response_model=MonthlyReport)
async def get_monthly_report(
    service: ReportServiceDep,
    year: int = Query(..., description="Année du rapport"),
    month: int = Query(..., description="Mois du rapport (1-12)"),
):
    """Rapport de rapprochement du mois: soldes, mouvements et valeur du stock par variante."""
    try:
        return await service.get_monthly_report(year=year, month=month)
    except Exception as e:
        handle_report_errors(e)


@router.get("/report/monthly/export")
async def export_monthly_report(
    service: ReportServiceDep,
    year: int = Query(..., description="Année du rapport"),
    month: int = Query(..., description="Mois du rapport (1-12)"),
):
    """Télécharge le rapport du mois au format CSV."""
    try:
        report = await service.get_monthly_report(year=year, month=month)
    except Exception as e:
        handle_report_errors(e)

    content = render_monthly_report_csv(report)
    headers = {"Content-Disposition": f'attachment; filename="{export_filename(month=month, year=year)}"'}
    return Response(content=content.encode("utf-8"), media_type=CSV_MEDIA_TYPE, headers=headers)
