"""心情日记命令行：单字符命令循环。"""
from typing import Optional

from pydantic import ValidationError

from care_log.config import MOOD_DATE_FORMAT, MOOD_TIME_FORMAT
from care_log.errors import RecordFileError, validation_message
from care_log.mood.journal_file import MoodJournalWriter
from care_log.mood.models import Mood, MoodKey
from care_log.mood.store import MoodStore
from care_log.prompts import Console, parse_date, parse_time

MENU = (
    "Press 'a' to add mood\n"
    "'d' to delete mood(s)\n"
    "'e' to edit mood\n"
    "'s' to search for moods\n"
    "'M' to get all moods\n"
    "'w' to write the moods to a file\n"
    "Type 'Exit' to exit"
)
DATE_PROMPT = "Input the date in MM/dd/yyyy format:"
TIME_PROMPT = "Input the time in HH:mm:ss format:"
NO_MATCHES = "No matching records could be found!"


class MoodTrackerApp:
    """日期/时间格式错误时放弃当前命令（不重新提示），回到菜单。"""

    def __init__(
        self,
        store: Optional[MoodStore] = None,
        writer: Optional[MoodJournalWriter] = None,
        console: Optional[Console] = None,
    ):
        self.store = store or MoodStore()
        self.writer = writer or MoodJournalWriter()
        self.console = console or Console()
        self._commands = {
            "a": self.add_mood,
            "d": self.delete_moods,
            "e": self.edit_mood,
            "s": self.search_moods,
            "M": self.list_moods,
            "w": self.write_moods,
        }

    def run(self) -> int:
        say = self.console.say
        say("This is the Mood Tracker application.")
        while True:
            say(MENU)
            try:
                option = self.console.ask()
                if option == "Exit":
                    say("Exiting Mood Tracker. Goodbye!")
                    return 0
                command = self._commands.get(option)
                if command is None:
                    say("Invalid option. Please try again.")
                    continue
                command()
            except EOFError:
                return 0

    def _ask(self, prompt: str) -> str:
        self.console.say(prompt)
        return self.console.ask()

    def _ask_key(self, action: str) -> Optional[MoodKey]:
        name = self._ask("Enter the mood name")
        try:
            date = parse_date(self._ask(DATE_PROMPT), MOOD_DATE_FORMAT)
            time = parse_time(self._ask(TIME_PROMPT), MOOD_TIME_FORMAT)
        except ValueError:
            self.console.say(f"Incorrect format of date or time. Cannot {action} mood.")
            return None
        return (name.strip(), date, time)

    def add_mood(self) -> None:
        say = self.console.say
        fields = {"name": self._ask("Enter the mood name")}
        current = self._ask("Are you tracking the mood for a current day? y/n")
        if current.strip().lower() == "n":
            try:
                fields["date"] = parse_date(self._ask(DATE_PROMPT), MOOD_DATE_FORMAT)
                fields["time"] = parse_time(self._ask(TIME_PROMPT), MOOD_TIME_FORMAT)
            except ValueError:
                say("Incorrect format of date or time. Cannot create mood.")
                return
        fields["notes"] = self._ask("Add notes about this mood")
        try:
            mood = Mood(**fields)
        except ValidationError as e:
            say(f"Unable to create the mood entry: {validation_message(e)}")
            return
        if self.store.add(mood).ok:
            say("The mood has been added to the tracker")
        else:
            say("The mood is not valid: the same mood was already tracked at this date and time")

    def delete_moods(self) -> None:
        say = self.console.say
        variant = self._ask("Enter '1' to delete all moods by date\nEnter '2' to delete a specific mood")
        if variant == "1":
            try:
                date = parse_date(self._ask(DATE_PROMPT), MOOD_DATE_FORMAT)
            except ValueError:
                say("Incorrect format of date. Cannot delete mood.")
                return
            if self.store.delete_by_date(date):
                say("The moods have been deleted")
            else:
                say("No matching moods found")
        elif variant == "2":
            key = self._ask_key("delete")
            if key is None:
                return
            if self.store.delete_mood(key):
                say("The mood has been deleted")
            else:
                say("No matching mood found")

    def edit_mood(self) -> None:
        say = self.console.say
        key = self._ask_key("edit")
        if key is None:
            return
        notes = self._ask("Add new notes about this mood")
        if not notes.strip():
            say("No notes entered")
            return
        if self.store.edit_notes(key, notes):
            say("The mood has been successfully edited")
        else:
            say("No matching mood could be found")

    def search_moods(self) -> None:
        say = self.console.say
        variant = self._ask("Enter '1' to search for all moods by date\nEnter '2' to search for a specific mood")
        if variant == "1":
            try:
                date = parse_date(self._ask(DATE_PROMPT), MOOD_DATE_FORMAT)
            except ValueError:
                say("Incorrect format of date. Cannot search mood.")
                return
            found = list(self.store.search_by_date(date))
        elif variant == "2":
            key = self._ask_key("search")
            if key is None:
                return
            found = list(self.store.search_by_key(key))
        else:
            return
        if not found:
            say(NO_MATCHES)
        for mood in found:
            say(str(mood))

    def list_moods(self) -> None:
        for mood in self.store.list_all():
            self.console.say(str(mood))

    def write_moods(self) -> None:
        try:
            self.writer.write(self.store.list_all())
        except RecordFileError as e:
            self.console.say(f"Error writing to file: {e}")
            return
        self.console.say("The entries are written to a file")
