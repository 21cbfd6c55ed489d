"""
Aggregations over a (usually filtered) list of activity records.
All functions are pure; nothing here touches the record store.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set

from insights_engine.models.activity import ActivityRecord, ActivityType
from insights_engine.schemas.analytics import (
    ActivitySummary,
    FilterOptions,
    TeacherAggregate,
    TeacherOption,
    TrendBucket,
)

# activity_type value -> counter attribute on TeacherAggregate / TrendBucket
TYPE_COUNTERS = {
    ActivityType.LESSON_PLAN.value: "lessons",
    ActivityType.QUIZ.value: "quizzes",
    ActivityType.QUESTION_PAPER.value: "question_papers",
}


@dataclass
class _TeacherTally:
    teacher_id: str
    teacher_name: str
    counts: Counter = field(default_factory=Counter)
    total: int = 0
    subjects: Set[str] = field(default_factory=set)
    grades: Set[int] = field(default_factory=set)

    def add(self, record: ActivityRecord) -> None:
        counter = TYPE_COUNTERS.get(record.activity_type)
        if counter:
            self.counts[counter] += 1
        self.total += 1
        self.subjects.add(record.subject)
        self.grades.add(record.grade)

    def freeze(self) -> TeacherAggregate:
        return TeacherAggregate(
            teacher_id=self.teacher_id,
            teacher_name=self.teacher_name,
            lessons=self.counts["lessons"],
            quizzes=self.counts["quizzes"],
            question_papers=self.counts["question_papers"],
            total=self.total,
            subjects=sorted(self.subjects),
            grades=sorted(self.grades),
        )


def teacher_rollup(records: Sequence[ActivityRecord]) -> List[TeacherAggregate]:
    """Per-teacher counts, in order of each teacher's first appearance."""
    tallies: Dict[str, _TeacherTally] = {}
    for r in records:
        tally = tallies.get(r.teacher_id)
        if tally is None:
            tally = tallies[r.teacher_id] = _TeacherTally(r.teacher_id, r.teacher_name)
        tally.add(r)
    return [t.freeze() for t in tallies.values()]


def summarize(records: Sequence[ActivityRecord], duplicates_removed: int = 0) -> ActivitySummary:
    by_type = Counter(r.activity_type for r in records)
    return ActivitySummary(
        total_activities=len(records),
        active_teachers=len({r.teacher_id for r in records}),
        lessons=by_type[ActivityType.LESSON_PLAN.value],
        quizzes=by_type[ActivityType.QUIZ.value],
        question_papers=by_type[ActivityType.QUESTION_PAPER.value],
        duplicates_removed=duplicates_removed,
    )


def daily_trend(records: Sequence[ActivityRecord]) -> List[TrendBucket]:
    """Counts per known activity type for each day, oldest first."""
    buckets: Dict[str, TrendBucket] = {}
    for r in records:
        bucket = buckets.get(r.date)
        if bucket is None:
            bucket = buckets[r.date] = TrendBucket(date=r.date)
        counter = TYPE_COUNTERS.get(r.activity_type)
        if counter:
            setattr(bucket, counter, getattr(bucket, counter) + 1)
    # YYYY-MM-DD sorts chronologically as text
    return [buckets[day] for day in sorted(buckets)]


def grade_breakdown(records: Sequence[ActivityRecord]) -> Dict[str, int]:
    breakdown: Dict[str, int] = {}
    for r in records:
        label = f"Grade {r.grade}"
        breakdown[label] = breakdown.get(label, 0) + 1
    return breakdown


def filter_options(records: Sequence[ActivityRecord]) -> FilterOptions:
    """Distinct values for populating filter dropdowns."""
    teachers: Dict[str, TeacherOption] = {}
    for r in records:
        if r.teacher_id not in teachers:
            teachers[r.teacher_id] = TeacherOption(id=r.teacher_id, name=r.teacher_name)
    return FilterOptions(
        teachers=list(teachers.values()),
        grades=sorted({r.grade for r in records}),
        subjects=sorted({r.subject for r in records}),
        activity_types=sorted({r.activity_type for r in records}),
    )
