"""pets.txt / appointments.txt 读写测试。"""
import datetime as dt
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from care_log.errors import RecordFileError
from care_log.scheduler.models import Appointment, Pet
from care_log.scheduler.persistence import SchedulerFiles, appointment_to_line, pet_to_line
from care_log.scheduler.service import PetCareScheduler


def _pets() -> list:
    return [
        Pet(pet_id="P1", name="Rex", species_breed="Dog/Beagle", age=3, owner_name="Ann",
            contact_info="555-0100", registration_date=dt.date(2026, 1, 5)),
        Pet(pet_id="P2", name="Tom", species_breed="Cat", age=11, owner_name="Bob",
            contact_info="", registration_date=dt.date(2025, 12, 31)),
    ]


def test_pet_line_format() -> None:
    assert pet_to_line(_pets()[0]) == "P1|Rex|Dog/Beagle|3|Ann|555-0100|2026-01-05"


def test_appointment_line_format() -> None:
    appointment = Appointment(appointment_type="Vaccination", appointment_date=dt.date(2026, 2, 3),
                              appointment_time=dt.time(9, 5))
    assert appointment_to_line(appointment) == "Vaccination|2026-02-03|09:05|"


def test_load_missing_file_is_empty() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        result = files.load_pets()
        assert result.ok and result.records == []
        assert files.load_appointments().records == []


def test_pets_round_trip() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.save_pets(_pets())
        first = files.pets_path().read_text(encoding="utf-8")
        loaded = files.load_pets()
        assert loaded.ok
        assert [p.model_dump() for p in loaded.records] == [p.model_dump() for p in _pets()]
        files.save_pets(loaded.records)
        assert files.pets_path().read_text(encoding="utf-8") == first


def test_save_overwrites_existing_file() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.save_pets(_pets())
        files.save_pets(_pets()[:1])
        assert len(files.load_pets().records) == 1


def test_malformed_pet_line_stops_load_keeping_earlier_records() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.pets_path().write_text(
            "P1|Rex|Dog|3|Ann|555|2026-01-05\n"
            "P2|Tom|Cat|2|Bob|556|2026-01-06\n"
            "P3|Kiwi|Bird|old|Cy|557|2026-01-07\n"
            "P4|Zed|Fish|1|Di|558|2026-01-08\n",
            encoding="utf-8",
        )
        result = files.load_pets()
        assert [p.pet_id for p in result.records] == ["P1", "P2"]
        assert not result.ok
        assert "line 3" in result.error


@pytest.mark.parametrize("bad_line", [
    "P9|Rex|Dog|3|Ann|555",
    "P9|Rex|Dog|3|Ann|555|2026-01-05|extra",
    "P9|Rex|Dog|3|Ann|555|05/01/2026",
])
def test_pet_line_rejected(bad_line: str) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.pets_path().write_text("P1|Rex|Dog|3|Ann|555|2026-01-05\n" + bad_line + "\n", encoding="utf-8")
        result = files.load_pets()
        assert len(result.records) == 1
        assert result.error is not None


def test_appointments_load_optional_notes_and_bad_time() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.appointments_path().write_text(
            "Checkup|2026-06-01|10:30|bring records\n"
            "\n"
            "Grooming|2026-06-02|11:00\n"
            "Surgery|2026-06-03|12:00|fast | no water\n"
            "Emergency|2026-06-04|25:99|oops\n"
            "Checkup|2026-06-05|09:00|never read\n",
            encoding="utf-8",
        )
        result = files.load_appointments()
        assert [a.notes for a in result.records] == ["bring records", "", "fast | no water"]
        assert "line 5" in result.error


def test_unknown_appointment_type_is_malformed() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.appointments_path().write_text("Bath|2026-06-01|10:30|\n", encoding="utf-8")
        result = files.load_appointments()
        assert result.records == []
        assert "Bath" in result.error


def test_save_all_and_load_into() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        scheduler = PetCareScheduler()
        scheduler.register_pet("P1", "Rex", "Dog", 3, "Ann", "555")
        scheduler.schedule_appointment("P1", "Checkup", dt.date(2026, 6, 1), dt.time(10, 30),
                                       now=dt.datetime(2026, 5, 1))
        files.save_all(scheduler)

        restored = PetCareScheduler()
        pets, appointments = files.load_into(restored)
        assert pets.ok and appointments.ok
        assert restored.find_pet("p1").name == "Rex"
        assert [str(a) for a in restored.appointments] == ["Checkup on 2026-06-01 at 10:30"]


def test_save_to_unwritable_location_raises_record_file_error() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        blocker = Path(tmp) / "not_a_dir"
        blocker.write_text("", encoding="utf-8")
        files = SchedulerFiles(base_dir=blocker)
        with pytest.raises(RecordFileError):
            files.save_pets(_pets())


def test_appointment_notes_with_line_break_rejected() -> None:
    scheduler = PetCareScheduler()
    scheduler.register_pet("P1", "Rex", "Dog", 3, "Ann", "555")
    with pytest.raises(ValidationError):
        scheduler.schedule_appointment("P1", "Checkup", dt.date(2026, 6, 1), dt.time(10, 30),
                                       "line1\nline2", now=dt.datetime(2026, 5, 1))
    with pytest.raises(ValidationError):
        Appointment(appointment_type="Surgery", appointment_date=dt.date(2026, 6, 2),
                    appointment_time=dt.time(8, 0), notes="a\rb")
    assert scheduler.appointments == []


def test_all_saved_appointments_load_back() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        scheduler = PetCareScheduler()
        scheduler.register_pet("P1", "Rex", "Dog", 3, "Ann", "555")
        now = dt.datetime(2026, 5, 1)
        scheduler.schedule_appointment("P1", "Checkup", dt.date(2026, 6, 1), dt.time(10, 30),
                                       "fasting | no water\n", now=now)
        scheduler.schedule_appointment("P1", "Grooming", dt.date(2026, 6, 2), dt.time(11, 0), now=now)
        files.save_all(scheduler)
        result = files.load_appointments()
        assert result.ok
        assert [a.notes for a in result.records] == ["fasting | no water", ""]


@pytest.mark.parametrize("bad_line", [
    "Checkup|2026-6-1|10:30|",
    "Checkup|2026-06-01|9:5|",
    "Checkup|2026-06-01",
])
def test_appointment_line_rejected(bad_line: str) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.appointments_path().write_text(bad_line + "\n", encoding="utf-8")
        result = files.load_appointments()
        assert result.records == []
        assert result.error is not None


def test_field_count_message_matches_minimum() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.appointments_path().write_text("Checkup|2026-06-01\n", encoding="utf-8")
        assert files.load_appointments().error == "line 1: expected at least 3 fields, got 2"


def test_unpadded_pet_registration_date_rejected() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.pets_path().write_text("P1|Rex|Dog|3|Ann|555|2026-1-5\n", encoding="utf-8")
        result = files.load_pets()
        assert result.records == []
        assert "yyyy-MM-dd" in result.error


def test_duplicate_pet_ids_in_file_all_loaded() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        files = SchedulerFiles(base_dir=Path(tmp))
        files.pets_path().write_text(
            "P1|Rex|Dog|3|Ann|555|2026-01-05\n"
            "p1|Tom|Cat|2|Bob|556|2026-01-06\n",
            encoding="utf-8",
        )
        scheduler = PetCareScheduler()
        pets, _ = files.load_into(scheduler)
        assert len(pets.records) == len(scheduler.pets) == 2
        assert scheduler.find_pet("P1").name == "Rex"
