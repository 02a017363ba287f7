"""键值存储模型"""
from datetime import datetime

from sqlalchemy import Column, String, DateTime, JSON

from sentilens.database import Base


class KeyValueEntry(Base):
    """JSON 键值表，历史记录以单个列表存放"""
    __tablename__ = "kv_entries"

    key = Column(String(255), primary_key=True)
    value = Column(JSON, nullable=False)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
