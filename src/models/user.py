import uuid
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from ..database.db import Base
from ..config.settings import settings

class User(Base):
    __tablename__ = "users"
    __table_args__ = {"schema": settings.DATABASE_SCHEMA}

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, server_default=func.current_timestamp())
