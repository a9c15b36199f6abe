"""心情日记：记录、增删改查与导出。"""
from care_log.mood.journal_file import MoodJournalWriter
from care_log.mood.models import Mood
from care_log.mood.store import MoodStore

__all__ = ["Mood", "MoodStore", "MoodJournalWriter"]
