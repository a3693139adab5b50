# app/services/report.py

from datetime import date, datetime

from app.core.exceptions import ValidationError
from app.repositories.report import ReportRepository


class ReportService:
    def __init__(self, repo: ReportRepository):
        self.repo = repo

    def get_daily_report(self):
        return self.repo.get_daily_report()

    def get_report(self, start_date: date, end_date: date):
        if start_date > end_date:
            raise ValidationError("start_date must not be after end_date")

        # Both days are included in full
        start_dt = datetime.combine(start_date, datetime.min.time())
        end_dt = datetime.combine(end_date, datetime.max.time())

        return self.repo.get_report_by_range(start_dt, end_dt)
