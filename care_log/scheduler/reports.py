"""报表：总数、即将到来的预约、按类型统计、逾期未就诊。"""
import datetime as dt
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from dateutil.relativedelta import relativedelta

from care_log.config import OVERDUE_MONTHS
from care_log.scheduler.models import Appointment, Pet
from care_log.scheduler.service import PetCareScheduler


@dataclass
class TotalsReport:
    pets: int
    appointments: int


def total_counts(scheduler: PetCareScheduler) -> TotalsReport:
    return TotalsReport(pets=len(scheduler.pets), appointments=len(scheduler.appointments))


def upcoming_appointments(
    appointments: Iterable[Appointment], today: Optional[dt.date] = None
) -> List[Appointment]:
    """日期不早于今天的预约，保持原有顺序（不按时间重排）。"""
    today = today or dt.date.today()
    return [a for a in appointments if a.appointment_date >= today]


def appointments_by_type(appointments: Iterable[Appointment]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for a in appointments:
        counts[a.appointment_type] = counts.get(a.appointment_type, 0) + 1
    return counts


def overdue_pets(
    pets: Iterable[Pet], today: Optional[dt.date] = None, months: int = OVERDUE_MONTHS
) -> List[Pet]:
    """有过预约、但最近 months 个月内没有任何预约的宠物。"""
    cutoff = (today or dt.date.today()) - relativedelta(months=months)
    return [
        p for p in pets
        if p.appointments and not any(a.appointment_date > cutoff for a in p.appointments)
    ]
