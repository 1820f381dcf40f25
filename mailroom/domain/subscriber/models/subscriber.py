from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Table
from sqlalchemy.orm import relationship

from mailroom.domain.shared.models.base import BaseModel, now_utc

subscriber_tag = Table(
    'subscriber_tag',
    BaseModel.metadata,
    Column('subscriber_id', Integer, ForeignKey('subscribers.id', ondelete='CASCADE'), primary_key=True),
    Column('tag_id', Integer, ForeignKey('tags.id', ondelete='CASCADE'), primary_key=True),
)


class Subscriber(BaseModel):
    __tablename__ = 'subscribers'
    __fillable__ = ('email', 'first_name', 'last_name', 'form_id', 'user_id')

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    form_id = Column(Integer, nullable=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    tags = relationship("Tag", secondary=subscriber_tag, back_populates="subscribers")

    @property
    def full_name(self):
        return " ".join(p for p in (self.first_name, self.last_name) if p)

    __table_args__ = (
        Index('idx_subscribers_user_id', 'user_id'),
        Index('idx_subscribers_email', 'email'),
    )
