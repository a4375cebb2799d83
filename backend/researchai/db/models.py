from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()

class GenerationLog(Base):
    __tablename__ = "generation_logs"

    id = Column(Integer, primary_key=True)
    kind = Column(String(32), nullable=False)  # analysis | generation
    content_type = Column(String(32))
    source_excerpt = Column(Text)
    output = Column(Text)
    fallback_used = Column(Boolean, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
