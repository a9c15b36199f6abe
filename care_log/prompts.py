"""控制台输入输出。input/print 可替换，便于测试。"""
import datetime as dt
from typing import Callable, Optional


def parse_date(text: str, fmt: str) -> dt.date:
    return dt.datetime.strptime(text.strip(), fmt).date()


def parse_time(text: str, fmt: str) -> dt.time:
    return dt.datetime.strptime(text.strip(), fmt).time()


class Console:
    """读一行、打印一行；ask_* 在格式错误时重新提示。输入结束时抛 EOFError。"""

    def __init__(
        self,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ):
        self._input = input_func or input
        self._output = output or print

    def say(self, text: str = "") -> None:
        self._output(text)

    def ask(self, prompt: str = "") -> str:
        return self._input(prompt)

    def ask_str(self, prompt: str) -> str:
        return self.ask(prompt).strip()

    def ask_int(self, prompt: str) -> int:
        while True:
            try:
                return int(self.ask(prompt).strip())
            except ValueError:
                self.say("Invalid number. Please try again.")

    def ask_date(self, prompt: str, fmt: str, hint: str) -> dt.date:
        while True:
            try:
                return parse_date(self.ask(prompt), fmt)
            except ValueError:
                self.say(f"Invalid date format. Please use {hint}.")

    def ask_time(self, prompt: str, fmt: str, hint: str) -> dt.time:
        while True:
            try:
                return parse_time(self.ask(prompt), fmt)
            except ValueError:
                self.say(f"Invalid time format. Please use {hint}.")
