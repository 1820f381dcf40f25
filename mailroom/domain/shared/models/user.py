from sqlalchemy import Column, DateTime, Integer, String

from .base import BaseModel, now_utc


class User(BaseModel):
    __tablename__ = 'users'
    __fillable__ = ('name', 'email', 'password')

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    # Stored as given; hashing belongs to the auth layer.
    password = Column(String(255), nullable=False)
    email_verified_at = Column(DateTime(timezone=True), nullable=True)
    remember_token = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)
