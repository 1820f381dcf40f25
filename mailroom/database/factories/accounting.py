from mailroom.domain.accounting.reports.models import Report
from .base import Factory


class ReportFactory(Factory):
    model = Report

    def definition(self):
        n = self.sequence()
        return {
            'title': f'Report {n}',
            'period': '2024-01',
            'total_cents': n * 100,
        }
