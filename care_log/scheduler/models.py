"""宠物与预约数据模型。"""
import datetime as dt
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from care_log.config import FIELD_DELIMITER, FILE_DATE_FORMAT, FILE_TIME_FORMAT

AppointmentKey = Tuple[str, dt.date, dt.time]


class AppointmentType(str, Enum):
    """预约类型。"""
    CHECKUP = "Checkup"
    VACCINATION = "Vaccination"
    SURGERY = "Surgery"
    EMERGENCY = "Emergency"
    GROOMING = "Grooming"


class Appointment(BaseModel):
    """一次预约。type + date + time 构成键，notes 不参与比较。

    “不能早于当前时间”只在安排预约时检查，编辑和加载都不检查。
    """
    appointment_type: AppointmentType = Field(..., description="预约类型")
    appointment_date: dt.date = Field(..., description="日期")
    appointment_time: dt.time = Field(..., description="时间")
    notes: Optional[str] = Field(None, description="备注，可为空")

    model_config = ConfigDict(use_enum_values=True, validate_assignment=True)

    @field_validator("notes")
    @classmethod
    def _trim_notes(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        # 一条预约占 appointments.txt 的一行
        if "\n" in v or "\r" in v:
            raise ValueError("notes must not contain line breaks")
        return v

    @property
    def key(self) -> AppointmentKey:
        return (self.appointment_type, self.appointment_date, self.appointment_time)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Appointment):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        text = (
            f"{self.appointment_type} on {self.appointment_date.strftime(FILE_DATE_FORMAT)}"
            f" at {self.appointment_time.strftime(FILE_TIME_FORMAT)}"
        )
        if self.notes:
            text += f" ({self.notes})"
        return text


class Pet(BaseModel):
    """宠物档案，拥有自己的预约列表。"""
    pet_id: str = Field(..., description="宠物 ID，比较时不区分大小写")
    name: str = Field(..., description="名字")
    species_breed: str = Field(..., description="物种/品种")
    age: int = Field(..., description="年龄")
    owner_name: str = Field(..., description="主人姓名")
    contact_info: str = Field(..., description="联系方式")
    registration_date: dt.date = Field(default_factory=dt.date.today, description="登记日期")
    appointments: List[Appointment] = Field(default_factory=list, description="该宠物的预约")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("pet_id", "name", "species_breed", "owner_name", "contact_info")
    @classmethod
    def _storable_text(cls, v: str) -> str:
        # 这些字段按行、按分隔符写入 pets.txt
        v = v.strip()
        if FIELD_DELIMITER in v or "\n" in v or "\r" in v:
            raise ValueError(f"must not contain '{FIELD_DELIMITER}' or line breaks")
        return v

    @field_validator("pet_id")
    @classmethod
    def _id_required(cls, v: str) -> str:
        if not v:
            raise ValueError("Pet ID cannot be empty")
        return v

    @property
    def key(self) -> str:
        return self.pet_id.casefold()

    def summary(self) -> str:
        return (
            f"ID: {self.pet_id} | Name: {self.name} | "
            f"Species/Breed: {self.species_breed} | Owner: {self.owner_name}"
        )
