"""
Natural-language observations about teacher activity.

Rules are evaluated in a fixed order against the per-teacher rollup of the
current filtered view; each contributes at most one insight:

1. top performer       - highest total activity count
2. most quizzes        - highest quiz count
3. most lesson plans   - highest lesson plan count
4. low activity        - first teacher (rollup order) with 1-3 activities
5. activity mix        - quizzes above half of all activity

Ties in rules 1-3 go to the smallest teacher_id.
"""
import math
from typing import List, Optional, Sequence

from insights_engine.schemas.analytics import Insight, TeacherAggregate

LOW_ACTIVITY_MAX = 3
QUIZ_HEAVY_PCT = 50


def _leader(teachers: Sequence[TeacherAggregate], attr: str) -> Optional[TeacherAggregate]:
    leader = min(teachers, key=lambda t: (-getattr(t, attr), t.teacher_id))
    return leader if getattr(leader, attr) > 0 else None


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def generate_insights(teachers: Sequence[TeacherAggregate]) -> List[Insight]:
    if not teachers:
        return []

    insights = []

    top = _leader(teachers, "total")
    if top:
        insights.append(Insight(
            icon="🏆",
            category="top_performer",
            text=f"{top.teacher_name} leads with {top.total} total activities, the most productive teacher this period.",
        ))

    most_quizzes = _leader(teachers, "quizzes")
    if most_quizzes:
        insights.append(Insight(
            icon="📝",
            category="most_quizzes",
            text=f"{most_quizzes.teacher_name} created the most quizzes ({most_quizzes.quizzes}), keeping students rigorously assessed.",
        ))

    most_lessons = _leader(teachers, "lessons")
    if most_lessons:
        insights.append(Insight(
            icon="📚",
            category="most_lesson_plans",
            text=f"{most_lessons.teacher_name} has the most lesson plans ({most_lessons.lessons}), showing strong curriculum coverage.",
        ))

    low = next((t for t in teachers if 0 < t.total <= LOW_ACTIVITY_MAX), None)
    if low:
        noun = "activity" if low.total == 1 else "activities"
        insights.append(Insight(
            icon="⚠️",
            category="low_activity",
            text=f"{low.teacher_name} has only {low.total} {noun} this period. Consider a check-in.",
        ))

    total = sum(t.total for t in teachers) or 1
    quiz_pct = _round_half_up(sum(t.quizzes for t in teachers) / total * 100)
    if quiz_pct > QUIZ_HEAVY_PCT:
        insights.append(Insight(
            icon="📊",
            category="activity_mix",
            text=f"Quizzes make up {quiz_pct}% of all activity. Consider balancing with more lesson plans.",
        ))

    return insights
