"""宠物护理预约命令行：数字菜单循环。"""
from typing import Optional

from pydantic import ValidationError

from care_log.config import FILE_DATE_FORMAT, FILE_TIME_FORMAT, OVERDUE_MONTHS
from care_log.errors import (
    NoPetsError,
    RecordFileError,
    SchedulingError,
    validation_message,
)
from care_log.prompts import Console
from care_log.scheduler import reports
from care_log.scheduler.persistence import LoadResult, SchedulerFiles
from care_log.scheduler.service import PetCareScheduler

MENU = (
    "\n=== Pet Care Scheduler ===\n"
    "1. Register Pet\n"
    "2. Schedule Appointment\n"
    "3. Store Data\n"
    "4. Display Records\n"
    "5. Generate Reports\n"
    "6. Exit\n"
    "=========================="
)
CHOICE = "Enter your choice: "


class PetCareApp:
    """启动时加载文件；数字/日期/时间输入格式错误时重新提示。"""

    def __init__(
        self,
        scheduler: Optional[PetCareScheduler] = None,
        files: Optional[SchedulerFiles] = None,
        console: Optional[Console] = None,
    ):
        self.scheduler = scheduler or PetCareScheduler()
        self.files = files or SchedulerFiles()
        self.console = console or Console()
        self._actions = {
            1: self.register_pet,
            2: self.schedule_appointment,
            3: self.store_data,
            4: self.display_records,
            5: self.generate_reports,
        }

    def run(self) -> int:
        say = self.console.say
        self.load_data()
        while True:
            say(MENU)
            try:
                choice = self.console.ask_int(CHOICE)
                if choice == 6:
                    say("Exiting application. Goodbye!")
                    return 0
                action = self._actions.get(choice)
                if action is None:
                    say("Invalid choice. Please try again.")
                    continue
                action()
            except EOFError:
                return 0

    def load_data(self) -> None:
        pets, appointments = self.files.load_into(self.scheduler)
        self._report_load("pets", pets)
        self._report_load("appointments", appointments)

    def _report_load(self, label: str, result: LoadResult) -> None:
        if not result.ok:
            self.console.say(f"Error loading {label}: {result.error}")
        if result.records:
            self.console.say(f"Loaded {len(result.records)} {label} from file.")

    def register_pet(self) -> None:
        say, ask = self.console.say, self.console.ask_str
        say("\n--- Register New Pet ---")
        pet_id = ask("Enter Pet ID: ")
        if self.scheduler.find_pet(pet_id) is not None:
            say(f"Error: Pet with ID {pet_id} already exists.")
            return
        name = ask("Enter Pet Name: ")
        species_breed = ask("Enter Species/Breed: ")
        age = self.console.ask_int("Enter Pet Age: ")
        owner_name = ask("Enter Owner Name: ")
        contact_info = ask("Enter Contact Info: ")
        try:
            result, _ = self.scheduler.register_pet(
                pet_id, name, species_breed, age, owner_name, contact_info
            )
        except ValidationError as e:
            say(f"Error registering pet: {validation_message(e)}")
            return
        if result.ok:
            say("Pet registered successfully!")
        else:
            say(f"Error: Pet with ID {pet_id} already exists.")

    def schedule_appointment(self) -> None:
        console, scheduler = self.console, self.scheduler
        try:
            scheduler.check_has_pets()
            console.say("\n--- Schedule Appointment ---")
            pet_id = console.ask_str("Enter Pet ID: ")
            pet = scheduler.require_pet(pet_id)
            appointment_type = console.ask_str(
                "Enter Appointment Type (e.g., Checkup, Vaccination): "
            )
            scheduler.check_type(appointment_type)
            date = console.ask_date(
                "Enter Appointment Date (yyyy-MM-dd): ", FILE_DATE_FORMAT, "yyyy-MM-dd"
            )
            time = console.ask_time(
                "Enter Appointment Time (HH:mm): ", FILE_TIME_FORMAT, "HH:mm"
            )
            scheduler.check_not_past(date, time)
            notes = console.ask_str("Enter Notes (optional): ")
            scheduler.schedule_appointment(pet_id, appointment_type, date, time, notes)
        except NoPetsError as e:
            console.say(str(e))
            return
        except SchedulingError as e:
            console.say(f"Error: {e}")
            return
        except ValidationError as e:
            console.say(f"Error scheduling appointment: {validation_message(e)}")
            return
        console.say(f"Appointment scheduled successfully for {pet.name}!")

    def store_data(self) -> None:
        try:
            self.files.save_all(self.scheduler)
        except RecordFileError as e:
            self.console.say(f"Error storing data: {e}")
            return
        self.console.say("Data stored successfully!")

    def display_records(self) -> None:
        say = self.console.say
        say("\n--- Display Records ---")
        say("1. Display All Pets")
        say("2. Display All Appointments")
        say("3. Display Pet Details")
        choice = self.console.ask_int(CHOICE)
        if choice == 1:
            self._display_all_pets()
        elif choice == 2:
            self._display_all_appointments()
        elif choice == 3:
            self._display_pet_details()
        else:
            say("Invalid choice.")

    def _display_all_pets(self) -> None:
        pets = self.scheduler.pets.list_all()
        if not pets:
            self.console.say("No pets registered.")
            return
        self.console.say("\n=== All Pets ===")
        for pet in pets:
            self.console.say(pet.summary())

    def _display_all_appointments(self) -> None:
        appointments = self.scheduler.appointments
        if not appointments:
            self.console.say("No appointments scheduled.")
            return
        self.console.say("\n=== All Appointments ===")
        for appointment in appointments:
            self.console.say(str(appointment))

    def _display_pet_details(self) -> None:
        say = self.console.say
        pet = self.scheduler.find_pet(self.console.ask_str("Enter Pet ID: "))
        if pet is None:
            say("Pet not found.")
            return
        say("\n=== Pet Details ===")
        say(f"ID: {pet.pet_id}")
        say(f"Name: {pet.name}")
        say(f"Species/Breed: {pet.species_breed}")
        say(f"Age: {pet.age}")
        say(f"Owner: {pet.owner_name}")
        say(f"Contact: {pet.contact_info}")
        say(f"Registration Date: {pet.registration_date.strftime(FILE_DATE_FORMAT)}")
        say(f"Appointments: {len(pet.appointments)}")
        if pet.appointments:
            say("\nAppointment History:")
            for appointment in pet.appointments:
                say(f"  - {appointment}")

    def generate_reports(self) -> None:
        say = self.console.say
        say("\n--- Generate Reports ---")
        say("1. Total Pets Report")
        say("2. Upcoming Appointments Report")
        say("3. Appointments by Type Report")
        say("4. Overdue Vet Visit Report")
        choice = self.console.ask_int(CHOICE)
        if choice == 1:
            totals = reports.total_counts(self.scheduler)
            say("\n=== Total Pets Report ===")
            say(f"Total Pets Registered: {totals.pets}")
            say(f"Total Appointments: {totals.appointments}")
        elif choice == 2:
            upcoming = reports.upcoming_appointments(self.scheduler.appointments)
            say("\n=== Upcoming Appointments ===")
            say(f"Total Upcoming: {len(upcoming)}")
            for appointment in upcoming:
                say(str(appointment))
        elif choice == 3:
            say("\n=== Appointments by Type ===")
            for appointment_type, count in reports.appointments_by_type(
                self.scheduler.appointments
            ).items():
                say(f"{appointment_type}: {count}")
        elif choice == 4:
            overdue = reports.overdue_pets(self.scheduler.pets.list_all())
            say("\n=== Pets Overdue for Vet Visit ===")
            say(f"Pets without a visit in the last {OVERDUE_MONTHS} months: {len(overdue)}")
            for pet in overdue:
                say(f"ID: {pet.pet_id} | Name: {pet.name}")
        else:
            say("Invalid choice.")
