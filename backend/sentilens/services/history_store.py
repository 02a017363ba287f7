"""分析历史持久化（键值存储上的 JSON 列表）"""
import time
import uuid
from typing import List, Optional, Sequence

from pydantic import ValidationError
from sqlalchemy.orm import sessionmaker

from sentilens.models import KeyValueEntry
from sentilens.schemas.analysis import AnalysisResult
from sentilens.schemas.history import HistoryItem
from sentilens.utils.logger import get_logger

logger = get_logger(__name__)


class HistoryStore:
    """最近优先、最多保留 limit 条的分析历史

    读写均为尽力而为：失败只记录日志，不影响分析流程，也不覆盖已有记录。
    """

    def __init__(self, session_factory: sessionmaker, key: str = "analysisHistory", limit: int = 50):
        self.session_factory = session_factory
        self.key = key
        self.limit = limit

    def _read_history(self) -> Optional[List[HistoryItem]]:
        """读取失败返回 None，以便与空历史区分"""
        try:
            with self.session_factory() as db:
                entry = db.query(KeyValueEntry).filter(KeyValueEntry.key == self.key).first()
                raw_items = entry.value if entry is not None else []
        except Exception as e:
            logger.error(f"Failed to load history from store: {e}")
            return None

        if not isinstance(raw_items, list):
            logger.error(f"History value under {self.key!r} is not a list; ignoring it")
            return None

        items = []
        for index, raw in enumerate(raw_items):
            try:
                items.append(HistoryItem.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping invalid history item #{index}: {e.error_count()} validation errors")
        return items

    def load_history(self) -> List[HistoryItem]:
        return self._read_history() or []

    def save_history(self, items: Sequence[HistoryItem]) -> None:
        payload = [item.model_dump(mode="json", by_alias=True) for item in items[:self.limit]]
        try:
            with self.session_factory() as db:
                entry = db.query(KeyValueEntry).filter(KeyValueEntry.key == self.key).first()
                if entry is None:
                    db.add(KeyValueEntry(key=self.key, value=payload))
                else:
                    entry.value = payload
                db.commit()
        except Exception as e:
            logger.error(f"Failed to save history to store: {e}")

    def add_entry(self, text: str, result: AnalysisResult) -> HistoryItem:
        item = HistoryItem(
            id=uuid.uuid4().hex,
            timestamp=int(time.time() * 1000),
            text=text,
            result=result,
        )
        history = self._read_history()
        if history is None:
            logger.warning("History could not be read; new entry was not saved")
            return item
        self.save_history([item, *history][:self.limit])
        return item

    def clear(self) -> None:
        self.save_history([])
