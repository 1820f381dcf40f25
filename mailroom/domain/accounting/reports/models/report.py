from sqlalchemy import Column, Integer, String

from mailroom.domain.shared.models.base import BaseModel


class Report(BaseModel):
    __tablename__ = 'reports'
    __fillable__ = ('title', 'period', 'total_cents')

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    period = Column(String(7), nullable=False)  # YYYY-MM
    total_cents = Column(Integer, nullable=False, default=0)
