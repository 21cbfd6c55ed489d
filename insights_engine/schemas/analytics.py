from typing import List

from pydantic import BaseModel, ConfigDict, Field


class TeacherAggregate(BaseModel):
    teacher_id: str
    teacher_name: str
    lessons: int = 0
    quizzes: int = 0
    question_papers: int = 0
    total: int = 0
    subjects: List[str] = []
    grades: List[int] = []


class ActivitySummary(BaseModel):
    total_activities: int = 0
    active_teachers: int = 0
    lessons: int = 0
    quizzes: int = 0
    question_papers: int = 0
    duplicates_removed: int = 0


class TrendBucket(BaseModel):
    """Activity counts for one calendar day, serialized with the activity type names as keys."""
    model_config = ConfigDict(populate_by_name=True)

    date: str
    lessons: int = Field(0, alias="Lesson Plan")
    quizzes: int = Field(0, alias="Quiz")
    question_papers: int = Field(0, alias="Question Paper")

    @property
    def total(self) -> int:
        return self.lessons + self.quizzes + self.question_papers


class Insight(BaseModel):
    icon: str
    category: str
    text: str


class TeacherOption(BaseModel):
    id: str
    name: str


class FilterOptions(BaseModel):
    teachers: List[TeacherOption] = []
    grades: List[int] = []
    subjects: List[str] = []
    activity_types: List[str] = []
