"""数据库模型"""
from sentilens.models.kv_entry import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]
