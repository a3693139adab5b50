# =========================================================
# REPORTS ROUTER
#
# - Today's sales (store's calendar day)
# - Sales for an inclusive date range
#
# Both return revenue, transaction count and the best
# selling product (null when nothing was sold)
# =========================================================

from fastapi import APIRouter, Depends, Query, HTTPException, status
from datetime import date

from app.core.exceptions import StoreError, ValidationError
from app.core.response import success
from app.dependencies import get_report_service
from app.services.report import ReportService

router = APIRouter(prefix="/api/report", tags=["Report"])


# =========================================================
# TODAY
# =========================================================
@router.get("/today")
def daily_report(
    service: ReportService = Depends(get_report_service),
):
    try:
        report = service.get_daily_report()
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch report: {exc}",
        )

    return success("Report retrieved successfully", report)


# =========================================================
# DATE RANGE (inclusive)
# =========================================================
@router.get("")
def report_by_range(
    start_date: date = Query(..., description="First day, YYYY-MM-DD"),
    end_date: date = Query(..., description="Last day, YYYY-MM-DD"),
    service: ReportService = Depends(get_report_service),
):
    try:
        report = service.get_report(start_date, end_date)
    except ValidationError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.message,
        )
    except StoreError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch report: {exc}",
        )

    return success("Report retrieved successfully", report)
