from sqlalchemy import Column, Integer, String

from mailroom.domain.shared.models.base import BaseModel


class SampleModel(BaseModel):
    __tablename__ = 'sample_models'
    __fillable__ = ('label',)

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(255), nullable=False)
