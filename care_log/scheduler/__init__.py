"""宠物护理预约：登记、安排预约、文件存储与报表。"""
from care_log.scheduler.models import Appointment, AppointmentType, Pet
from care_log.scheduler.persistence import LoadResult, SchedulerFiles
from care_log.scheduler.service import PetCareScheduler, PetStore

__all__ = [
    "Appointment",
    "AppointmentType",
    "Pet",
    "PetStore",
    "PetCareScheduler",
    "SchedulerFiles",
    "LoadResult",
]
