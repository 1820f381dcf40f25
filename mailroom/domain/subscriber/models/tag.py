from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from mailroom.domain.shared.models.base import BaseModel, now_utc
from .subscriber import subscriber_tag


class Tag(BaseModel):
    __tablename__ = 'tags'
    __fillable__ = ('title', 'user_id')

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    subscribers = relationship("Subscriber", secondary=subscriber_tag, back_populates="tags")
