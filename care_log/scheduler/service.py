"""宠物登记与预约安排。"""
import datetime as dt
import logging
from typing import Iterable, List, Optional, Tuple

from care_log.config import APPOINTMENT_TYPES
from care_log.errors import (
    InvalidAppointmentTypeError,
    NoPetsError,
    PastAppointmentError,
    PetNotFoundError,
)
from care_log.records import AddResult, RecordStore
from care_log.scheduler.models import Appointment, Pet

logger = logging.getLogger(__name__)


class PetStore:
    """宠物仓库：按 ID（不区分大小写）判重与查找。"""

    def __init__(self) -> None:
        self._records: RecordStore[Pet] = RecordStore(lambda p: p.key)

    def __len__(self) -> int:
        return len(self._records)

    def register(self, pet: Pet) -> AddResult:
        return self._records.add(pet)

    def restore(self, pets: Iterable[Pet]) -> int:
        """从文件恢复：ID 唯一性只在登记时检查，这里原样追加。"""
        return self._records.extend(pets)

    def find(self, pet_id: str) -> Optional[Pet]:
        return self._records.find_first(pet_id.strip().casefold())

    def list_all(self) -> List[Pet]:
        return self._records.list_all()


class PetCareScheduler:
    """持有宠物与全局预约列表。

    全局列表与各宠物的 appointments 引用同一批 Appointment 对象，
    用于汇总报表；从文件加载的预约只进入全局列表。
    """

    def __init__(self) -> None:
        self.pets = PetStore()
        self._appointments: RecordStore[Appointment] = RecordStore(
            lambda a: a.key, unique=False
        )

    @property
    def appointments(self) -> List[Appointment]:
        return self._appointments.list_all()

    def find_pet(self, pet_id: str) -> Optional[Pet]:
        return self.pets.find(pet_id)

    def register_pet(
        self,
        pet_id: str,
        name: str,
        species_breed: str,
        age: int,
        owner_name: str,
        contact_info: str,
        registration_date: Optional[dt.date] = None,
    ) -> Tuple[AddResult, Optional[Pet]]:
        """登记宠物，登记日期默认今天。ID 已存在返回 (DUPLICATE, None)。"""
        if self.find_pet(pet_id) is not None:
            return AddResult.DUPLICATE, None
        pet = Pet(
            pet_id=pet_id,
            name=name,
            species_breed=species_breed,
            age=age,
            owner_name=owner_name,
            contact_info=contact_info,
            registration_date=registration_date or dt.date.today(),
        )
        result = self.pets.register(pet)
        if result.ok:
            logger.info("registered pet %s", pet.pet_id)
            return result, pet
        return result, None

    def add_pets(self, pets: Iterable[Pet]) -> int:
        """加入已有宠物（如从文件加载），不判重，返回加入数。"""
        return self.pets.restore(pets)

    def add_appointments(self, appointments: Iterable[Appointment]) -> None:
        for appointment in appointments:
            self._appointments.add(appointment)

    def check_has_pets(self) -> None:
        if not len(self.pets):
            raise NoPetsError()

    def require_pet(self, pet_id: str) -> Pet:
        """返回可预约的宠物；没有任何宠物或找不到时抛错。"""
        self.check_has_pets()
        pet = self.find_pet(pet_id)
        if pet is None:
            raise PetNotFoundError(pet_id)
        return pet

    def check_type(self, appointment_type: str) -> None:
        if appointment_type not in APPOINTMENT_TYPES:
            raise InvalidAppointmentTypeError(appointment_type, APPOINTMENT_TYPES)

    def check_not_past(
        self,
        appointment_date: dt.date,
        appointment_time: dt.time,
        now: Optional[dt.datetime] = None,
    ) -> None:
        if dt.datetime.combine(appointment_date, appointment_time) < (now or dt.datetime.now()):
            raise PastAppointmentError()

    def schedule_appointment(
        self,
        pet_id: str,
        appointment_type: str,
        appointment_date: dt.date,
        appointment_time: dt.time,
        notes: Optional[str] = None,
        now: Optional[dt.datetime] = None,
    ) -> Appointment:
        """为已登记的宠物安排预约。

        校验顺序：有宠物 → 宠物存在 → 类型合法 → 时间不早于 now。
        任一失败抛出对应的 SchedulingError 子类，数据不变。
        """
        pet = self.require_pet(pet_id)
        self.check_type(appointment_type)
        self.check_not_past(appointment_date, appointment_time, now)

        appointment = Appointment(
            appointment_type=appointment_type,
            appointment_date=appointment_date,
            appointment_time=appointment_time,
            notes=notes,
        )
        pet.appointments.append(appointment)
        self._appointments.add(appointment)
        logger.info("scheduled %s for pet %s", appointment, pet.pet_id)
        return appointment
