"""心情日记的内存仓库。"""
import datetime as dt
from typing import Iterator, List, Optional

from care_log.mood.models import Mood, MoodKey
from care_log.records import AddResult, RecordStore


class MoodStore:
    """按插入顺序保存心情；同键（name, date, time）的心情只能有一条。"""

    def __init__(self) -> None:
        self._records: RecordStore[Mood] = RecordStore(lambda m: m.key)

    def __len__(self) -> int:
        return len(self._records)

    def add(self, mood: Mood) -> AddResult:
        return self._records.add(mood)

    def delete_mood(self, key: MoodKey) -> bool:
        """按键删除一条心情。"""
        return self._records.delete_by_key(key)

    def delete_by_date(self, date: dt.date) -> bool:
        """删除该日期的全部心情。"""
        return self._records.delete_where(lambda m: m.date == date)

    def edit_notes(self, key: MoodKey, notes: Optional[str]) -> bool:
        return self._records.edit_by_key(key, notes)

    def search_by_key(self, key: MoodKey) -> Iterator[Mood]:
        return self._records.search_by_key(key)

    def search_by_date(self, date: dt.date) -> Iterator[Mood]:
        return self._records.search(lambda m: m.date == date)

    def list_all(self) -> List[Mood]:
        return self._records.list_all()
