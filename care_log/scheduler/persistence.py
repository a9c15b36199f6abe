"""宠物与预约的文本文件存储：一行一条记录，字段用 | 分隔。

pets.txt:          id|name|species_breed|age|owner|contact|registration_date
appointments.txt:  type|date|time|notes
"""
import datetime as dt
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

from pydantic import ValidationError

from care_log.config import (
    APPOINTMENTS_FILE,
    DATA_DIR,
    FIELD_DELIMITER,
    FILE_DATE_FORMAT,
    FILE_TIME_FORMAT,
    PETS_FILE,
    ensure_dirs,
)
from care_log.errors import MalformedRecordError, RecordFileError
from care_log.scheduler.models import Appointment, Pet
from care_log.scheduler.service import PetCareScheduler

logger = logging.getLogger(__name__)

PET_FIELD_COUNT = 7
APPOINTMENT_MIN_FIELDS = 3  # notes 为空时可省略

# strptime 接受不补零的写法，先按固定宽度校验
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_RE = re.compile(r"\d{2}:\d{2}")


@dataclass
class LoadResult:
    """加载结果。遇到坏行即停止：error 记录原因，之前解析成功的记录保留。"""
    path: Path
    records: list = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _parse_date(value: str) -> dt.date:
    try:
        if not _DATE_RE.fullmatch(value):
            raise ValueError(value)
        return dt.datetime.strptime(value, FILE_DATE_FORMAT).date()
    except ValueError:
        raise MalformedRecordError(f"invalid date {value!r}, expected yyyy-MM-dd") from None


def _parse_time(value: str) -> dt.time:
    try:
        if not _TIME_RE.fullmatch(value):
            raise ValueError(value)
        return dt.datetime.strptime(value, FILE_TIME_FORMAT).time()
    except ValueError:
        raise MalformedRecordError(f"invalid time {value!r}, expected HH:mm") from None


def pet_to_line(pet: Pet) -> str:
    return FIELD_DELIMITER.join([
        pet.pet_id,
        pet.name,
        pet.species_breed,
        str(pet.age),
        pet.owner_name,
        pet.contact_info,
        pet.registration_date.strftime(FILE_DATE_FORMAT),
    ])


def pet_from_line(line: str) -> Pet:
    parts = line.split(FIELD_DELIMITER)
    if len(parts) != PET_FIELD_COUNT:
        raise MalformedRecordError(f"expected {PET_FIELD_COUNT} fields, got {len(parts)}")
    pet_id, name, species_breed, age, owner_name, contact_info, registered = parts
    try:
        age_value = int(age)
    except ValueError:
        raise MalformedRecordError(f"invalid age {age!r}") from None
    registration_date = _parse_date(registered)
    try:
        return Pet(
            pet_id=pet_id,
            name=name,
            species_breed=species_breed,
            age=age_value,
            owner_name=owner_name,
            contact_info=contact_info,
            registration_date=registration_date,
        )
    except ValidationError as e:
        raise MalformedRecordError(f"invalid pet: {e.errors()[0]['msg']}") from None


def appointment_to_line(appointment: Appointment) -> str:
    return FIELD_DELIMITER.join([
        appointment.appointment_type,
        appointment.appointment_date.strftime(FILE_DATE_FORMAT),
        appointment.appointment_time.strftime(FILE_TIME_FORMAT),
        appointment.notes or "",
    ])


def appointment_from_line(line: str) -> Appointment:
    parts = line.split(FIELD_DELIMITER)
    if len(parts) < APPOINTMENT_MIN_FIELDS:
        raise MalformedRecordError(f"expected at least {APPOINTMENT_MIN_FIELDS} fields, got {len(parts)}")
    appointment_type, date_text, time_text = parts[:3]
    # notes 自身可能含有分隔符
    notes = FIELD_DELIMITER.join(parts[3:])
    appointment_date = _parse_date(date_text)
    appointment_time = _parse_time(time_text)
    try:
        return Appointment(
            appointment_type=appointment_type,
            appointment_date=appointment_date,
            appointment_time=appointment_time,
            notes=notes,
        )
    except ValidationError:
        raise MalformedRecordError(f"unknown appointment type {appointment_type!r}") from None


class SchedulerFiles:
    """pets.txt / appointments.txt 的读写。每次调用都整体读完或整体覆盖写入。"""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or DATA_DIR

    def pets_path(self) -> Path:
        return self.base_dir / PETS_FILE

    def appointments_path(self) -> Path:
        return self.base_dir / APPOINTMENTS_FILE

    def _save(self, path: Path, lines: Iterable[str]) -> int:
        count = 0
        try:
            ensure_dirs(self.base_dir)
            with open(path, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
                    count += 1
        except OSError as e:
            logger.warning("could not write %s: %s", path, e)
            raise RecordFileError(path, e) from e
        logger.info("saved %d record(s) to %s", count, path)
        return count

    def _load(self, path: Path, parse: Callable[[str], object]) -> LoadResult:
        result = LoadResult(path=path)
        if not path.exists():
            return result
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line_no, raw in enumerate(f, start=1):
                    line = raw.rstrip("\r\n")
                    if not line.strip():
                        continue
                    try:
                        result.records.append(parse(line))
                    except MalformedRecordError as e:
                        result.error = str(MalformedRecordError(e.reason, line_no))
                        break
        except (OSError, UnicodeDecodeError) as e:
            result.error = str(e)
        if result.error:
            logger.warning(
                "stopped loading %s after %d record(s): %s",
                path, len(result.records), result.error,
            )
        else:
            logger.info("loaded %d record(s) from %s", len(result.records), path)
        return result

    def save_pets(self, pets: Iterable[Pet]) -> int:
        return self._save(self.pets_path(), (pet_to_line(p) for p in pets))

    def save_appointments(self, appointments: Iterable[Appointment]) -> int:
        return self._save(
            self.appointments_path(), (appointment_to_line(a) for a in appointments)
        )

    def load_pets(self) -> LoadResult:
        return self._load(self.pets_path(), pet_from_line)

    def load_appointments(self) -> LoadResult:
        return self._load(self.appointments_path(), appointment_from_line)

    def save_all(self, scheduler: PetCareScheduler) -> None:
        """保存宠物与全部预约；任一文件写失败抛 RecordFileError。"""
        self.save_pets(scheduler.pets.list_all())
        self.save_appointments(scheduler.appointments)

    def load_into(self, scheduler: PetCareScheduler) -> Tuple[LoadResult, LoadResult]:
        """把两个文件加载进 scheduler，返回 (宠物结果, 预约结果)。"""
        pets = self.load_pets()
        scheduler.add_pets(pets.records)
        appointments = self.load_appointments()
        scheduler.add_appointments(appointments.records)
        return pets, appointments
