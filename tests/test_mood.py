"""心情记录与仓库测试。"""
import datetime as dt
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from care_log.mood.journal_file import MoodJournalWriter
from care_log.mood.models import Mood
from care_log.mood.store import MoodStore
from care_log.records import AddResult

DAY = dt.date(2026, 3, 14)
OTHER_DAY = dt.date(2026, 3, 15)


def _mood(name: str, date: dt.date = DAY, hour: int = 9, notes: str = None) -> Mood:
    return Mood(name=name, date=date, time=dt.time(hour, 0, 0), notes=notes)


def test_mood_defaults_to_now() -> None:
    mood = Mood(name="calm")
    assert mood.date == dt.date.today()
    assert mood.time.microsecond == 0
    assert mood.notes is None


def test_mood_validation() -> None:
    with pytest.raises(ValidationError):
        Mood(name="   ")
    mood = _mood("happy", notes="  sunny walk  ")
    assert mood.notes == "sunny walk"
    assert _mood("happy", notes="   ").notes is None
    with pytest.raises(ValidationError):
        mood.name = ""


def test_mood_equality_ignores_notes() -> None:
    assert _mood("happy", notes="a") == _mood("happy", notes="b")
    assert _mood("happy") != _mood("Happy")
    assert _mood("happy") != _mood("happy", hour=10)
    assert len({_mood("happy", notes="a"), _mood("happy", notes="b")}) == 1


def test_add_duplicate_mood_rejected() -> None:
    store = MoodStore()
    assert store.add(_mood("happy")) is AddResult.ADDED
    assert store.add(_mood("happy", notes="different notes")) is AddResult.DUPLICATE
    assert len(store) == 1


def test_delete_mood_by_key_removes_one() -> None:
    store = MoodStore()
    store.add(_mood("happy"))
    store.add(_mood("sad"))
    assert store.delete_mood(_mood("happy").key) is True
    assert [m.name for m in store.list_all()] == ["sad"]
    assert store.delete_mood(_mood("happy").key) is False
    assert len(store) == 1


def test_delete_by_date_removes_all_on_that_date() -> None:
    store = MoodStore()
    store.add(_mood("happy"))
    store.add(_mood("sad", hour=12))
    store.add(_mood("tired", date=OTHER_DAY))
    assert store.delete_by_date(DAY) is True
    assert [m.name for m in store.list_all()] == ["tired"]
    assert store.delete_by_date(DAY) is False


def test_edit_notes_changes_only_target_notes() -> None:
    store = MoodStore()
    target = _mood("happy", notes="before")
    other = _mood("sad", notes="untouched")
    store.add(target)
    store.add(other)
    assert store.edit_notes(target.key, "  after  ") is True
    assert target.notes == "after"
    assert (target.name, target.date, target.time) == ("happy", DAY, dt.time(9, 0, 0))
    assert other.notes == "untouched"
    assert store.edit_notes(_mood("angry").key, "x") is False


def test_search_by_key_and_date() -> None:
    store = MoodStore()
    store.add(_mood("happy"))
    store.add(_mood("sad", hour=12))
    store.add(_mood("tired", date=OTHER_DAY))
    assert [m.name for m in store.search_by_date(DAY)] == ["happy", "sad"]
    assert [m.name for m in store.search_by_key(_mood("sad", hour=12).key)] == ["sad"]
    assert list(store.search_by_key(_mood("angry").key)) == []


def test_journal_writer_dumps_all_moods() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        writer = MoodJournalWriter(base_dir=Path(tmp))
        count = writer.write([_mood("happy", notes="walk"), _mood("sad")])
        assert count == 2
        text = writer.path().read_text(encoding="utf-8")
        assert "Mood: happy" in text
        assert "Date: 03/14/2026" in text
        assert "Notes: walk" in text
        assert "Mood: sad" in text
