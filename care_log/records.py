"""内存记录仓库：按插入顺序保存记录，线性扫描查找。"""
import logging
from enum import Enum
from typing import Callable, Generic, Hashable, Iterable, Iterator, List, Optional, TypeVar

logger = logging.getLogger(__name__)

R = TypeVar("R")


class AddResult(str, Enum):
    """添加结果：成功，或因键重复被拒绝。"""
    ADDED = "added"
    DUPLICATE = "duplicate"

    @property
    def ok(self) -> bool:
        return self is AddResult.ADDED


class RecordStore(Generic[R]):
    """有序、可变的记录集合。

    key_func 从记录中取出用于判重与查找的键；unique 为 True 时
    add 拒绝键已存在的记录。多个匹配时以最早插入的为准。
    """

    def __init__(self, key_func: Callable[[R], Hashable], unique: bool = True):
        self._key_func = key_func
        self._unique = unique
        self._records: List[R] = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[R]:
        return iter(self._records)

    def key_of(self, record: R) -> Hashable:
        return self._key_func(record)

    def add(self, record: R) -> AddResult:
        """追加一条记录；键重复时拒绝，仓库不变。"""
        if self._unique and self.find_first(self.key_of(record)) is not None:
            logger.debug("rejected duplicate %r", self.key_of(record))
            return AddResult.DUPLICATE
        self._records.append(record)
        logger.debug("added %r", self.key_of(record))
        return AddResult.ADDED

    def extend(self, records: Iterable[R]) -> int:
        """按顺序追加，不判重（用于从文件恢复），返回追加条数。"""
        before = len(self._records)
        self._records.extend(records)
        return len(self._records) - before

    def find_first(self, key: Hashable) -> Optional[R]:
        for record in self._records:
            if self.key_of(record) == key:
                return record
        return None

    def search(self, predicate: Callable[[R], bool]) -> Iterator[R]:
        """惰性返回满足条件的记录（生成器，只能遍历一次）。"""
        return (r for r in self._records if predicate(r))

    def search_by_key(self, key: Hashable) -> Iterator[R]:
        return self.search(lambda r: self.key_of(r) == key)

    def delete_by_key(self, key: Hashable) -> bool:
        """删除第一条键匹配的记录。"""
        for i, record in enumerate(self._records):
            if self.key_of(record) == key:
                del self._records[i]
                logger.debug("deleted %r", key)
                return True
        return False

    def delete_where(self, predicate: Callable[[R], bool]) -> bool:
        """删除所有满足条件的记录，有删除返回 True。"""
        kept = [r for r in self._records if not predicate(r)]
        removed = len(self._records) - len(kept)
        self._records[:] = kept
        if removed:
            logger.debug("deleted %d record(s)", removed)
        return removed > 0

    def edit_by_key(self, key: Hashable, new_notes: Optional[str]) -> bool:
        """替换第一条匹配记录的 notes，其余字段不变。"""
        record = self.find_first(key)
        if record is None:
            return False
        record.notes = new_notes
        logger.debug("edited notes of %r", key)
        return True

    def list_all(self) -> List[R]:
        return list(self._records)
