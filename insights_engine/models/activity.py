"""
Activity records as loaded from the dataset.
Records are immutable once parsed; extra keys in a dataset entry are kept as-is.
"""
import enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator


class ActivityType(str, enum.Enum):
    LESSON_PLAN = "Lesson Plan"
    QUIZ = "Quiz"
    QUESTION_PAPER = "Question Paper"


class RecordKey(NamedTuple):
    """Composite key used to detect duplicate records."""
    teacher_id: str
    activity_type: str
    created_at: str
    grade: int
    subject: str


class ActivityRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    teacher_id: str
    teacher_name: str
    grade: int
    subject: str
    activity_type: str
    created_at: str

    @field_validator("grade", mode="before")
    @classmethod
    def reject_boolean_grade(cls, value):
        # JSON true/false would otherwise coerce to grade 1/0
        if isinstance(value, bool):
            raise ValueError("grade must be an integer, not a boolean")
        return value

    @property
    def key(self) -> RecordKey:
        return RecordKey(self.teacher_id, self.activity_type, self.created_at, self.grade, self.subject)

    @property
    def date(self) -> str:
        """Calendar day (YYYY-MM-DD) the activity was created on."""
        return self.created_at[:10]
