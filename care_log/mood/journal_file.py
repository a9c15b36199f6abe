"""心情导出：写成便于阅读的文本文件（只写，不回读）。"""
import logging
from pathlib import Path
from typing import Iterable, Optional

from care_log.config import DATA_DIR, MOODS_FILE, ensure_dirs
from care_log.errors import RecordFileError
from care_log.mood.models import Mood

logger = logging.getLogger(__name__)


class MoodJournalWriter:
    """把全部心情整体覆盖写入 Moods.txt。"""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or DATA_DIR

    def path(self) -> Path:
        return self.base_dir / MOODS_FILE

    def write(self, moods: Iterable[Mood]) -> int:
        """写入并返回条数；无法写入时抛 RecordFileError。"""
        path = self.path()
        count = 0
        try:
            ensure_dirs(self.base_dir)
            with open(path, "w", encoding="utf-8") as f:
                for mood in moods:
                    f.write(f"{mood}\n\n\n")
                    count += 1
        except OSError as e:
            logger.warning("could not write %s: %s", path, e)
            raise RecordFileError(path, e) from e
        logger.info("wrote %d mood(s) to %s", count, path)
        return count
