from .resume import Entry, NormalizedResume, PersonalInfo
from .score import ScoreResult

__all__ = [
    "PersonalInfo",
    "Entry",
    "NormalizedResume",
    "ScoreResult",
]
