"""全局配置与路径。"""
import logging
import sys
from pathlib import Path
from typing import Optional

# 项目根目录（care_log 包所在目录的上一级）
ROOT_DIR = Path(__file__).resolve().parent.parent
# 数据目录：宠物、预约、心情导出
DATA_DIR = ROOT_DIR / "data"

PETS_FILE = "pets.txt"
APPOINTMENTS_FILE = "appointments.txt"
MOODS_FILE = "Moods.txt"  # 只写，不回读

# 文本文件格式
FIELD_DELIMITER = "|"
FILE_DATE_FORMAT = "%Y-%m-%d"  # yyyy-MM-dd
FILE_TIME_FORMAT = "%H:%M"     # HH:mm

# 心情日记交互输入格式
MOOD_DATE_FORMAT = "%m/%d/%Y"  # MM/dd/yyyy
MOOD_TIME_FORMAT = "%H:%M:%S"  # HH:mm:ss

APPOINTMENT_TYPES = ("Checkup", "Vaccination", "Surgery", "Emergency", "Grooming")

# 超过多少个月没有就诊视为逾期
OVERDUE_MONTHS = 6

# 日志
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"  # 控制台菜单程序，默认只输出警告


def ensure_dirs(data_dir: Optional[Path] = None) -> None:
    """确保数据目录存在。"""
    (data_dir or DATA_DIR).mkdir(parents=True, exist_ok=True)


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """配置日志：输出到 stderr，避免和菜单文本混在一起。"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return logging.getLogger("care_log")
