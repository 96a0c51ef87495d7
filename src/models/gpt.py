import uuid
from sqlalchemy import Column, String, Integer, Float, Text, Boolean, DateTime, JSON, ForeignKey, Index
from sqlalchemy.sql import func, text
from ..database.db import Base, qualified
from ..config.settings import settings

class Gpt(Base):
    __tablename__ = "gpt"
    __table_args__ = (
        # one live GPT per name and owner; soft-deleted rows free the name
        Index(
            "uq_gpt_user_id_name", "user_id", "name", unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL")
        ),
        {"schema": settings.DATABASE_SCHEMA}
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey(f"{qualified('users')}.id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    image = Column(Integer, nullable=False)
    description = Column(Text, nullable=False)
    goal = Column(String(255), nullable=False)
    temperature = Column(Float, nullable=False)
    capabilities = Column(JSON, nullable=False)
    limitations = Column(JSON, nullable=False)
    is_public = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.current_timestamp())
    updated_at = Column(DateTime, server_default=func.current_timestamp(), onupdate=func.current_timestamp())
    deleted_at = Column(DateTime)
