"""心情记录数据模型。"""
import datetime as dt
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from care_log.config import MOOD_DATE_FORMAT, MOOD_TIME_FORMAT

MoodKey = Tuple[str, dt.date, dt.time]


def _now_time() -> dt.time:
    # 交互输入精确到秒，默认时间也截到秒，才能按键再查回来
    return dt.datetime.now().time().replace(microsecond=0)


class Mood(BaseModel):
    """一条心情。name + date + time 构成键，notes 不参与比较。"""
    name: str = Field(..., description="心情名称")
    date: dt.date = Field(default_factory=dt.date.today, description="日期，默认今天")
    time: dt.time = Field(default_factory=_now_time, description="时间，默认现在")
    notes: Optional[str] = Field(None, description="备注")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("name")
    @classmethod
    def _name_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Mood name cannot be empty")
        return v

    @field_validator("notes")
    @classmethod
    def _trim_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @property
    def key(self) -> MoodKey:
        return (self.name, self.date, self.time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mood):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return (
            f"Mood: {self.name}\n"
            f"Date: {self.date.strftime(MOOD_DATE_FORMAT)}\n"
            f"Time: {self.time.strftime(MOOD_TIME_FORMAT)}\n"
            f"Notes: {self.notes or 'No notes'}"
        )
