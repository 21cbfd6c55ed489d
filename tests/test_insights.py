"""Tests for natural-language insight generation."""
from insights_engine.analytics.aggregations import teacher_rollup
from insights_engine.analytics.filters import ActivityFilter, apply_filters
from insights_engine.analytics.insights import generate_insights
from insights_engine.schemas.analytics import TeacherAggregate


def teacher(teacher_id, lessons=0, quizzes=0, question_papers=0, name=None):
    return TeacherAggregate(
        teacher_id=teacher_id,
        teacher_name=name or f"Teacher {teacher_id}",
        lessons=lessons,
        quizzes=quizzes,
        question_papers=question_papers,
        total=lessons + quizzes + question_papers,
    )


def categories(insights):
    return [i.category for i in insights]


class TestGenerateInsights:
    def test_no_teachers_gives_no_insights(self):
        assert generate_insights([]) == []

    def test_filter_matching_nothing_gives_no_insights(self, sample_records):
        filtered = apply_filters(sample_records, ActivityFilter(subject="History"))

        assert generate_insights(teacher_rollup(filtered)) == []

    def test_rules_emitted_in_fixed_order(self):
        teachers = [teacher("T1", lessons=4, quizzes=6), teacher("T2", quizzes=2)]

        insights = generate_insights(teachers)

        assert categories(insights) == [
            "top_performer", "most_quizzes", "most_lesson_plans", "low_activity", "activity_mix",
        ]

    def test_top_performer(self):
        teachers = [teacher("T1", lessons=2), teacher("T2", lessons=3, quizzes=2, name="Bilal")]

        top = generate_insights(teachers)[0]

        assert top.category == "top_performer"
        assert top.icon == "🏆"
        assert "Bilal leads with 5 total activities" in top.text

    def test_most_quizzes_and_lessons_name_the_leaders(self):
        teachers = [
            teacher("T1", lessons=5, quizzes=1, name="Asha"),
            teacher("T2", lessons=1, quizzes=4, name="Bilal"),
        ]

        by_category = {i.category: i.text for i in generate_insights(teachers)}

        assert "Bilal created the most quizzes (4)" in by_category["most_quizzes"]
        assert "Asha has the most lesson plans (5)" in by_category["most_lesson_plans"]

    def test_quiz_and_lesson_rules_skipped_when_counts_are_zero(self):
        insights = generate_insights([teacher("T1", question_papers=5)])

        assert categories(insights) == ["top_performer"]

    def test_ties_go_to_smallest_teacher_id(self):
        teachers = [
            teacher("T2", lessons=2, quizzes=2, name="Second"),
            teacher("T1", lessons=2, quizzes=2, name="First"),
        ]

        insights = generate_insights(teachers)

        assert all(i.text.startswith("First") for i in insights if i.category not in ("low_activity", "activity_mix"))

    def test_low_activity_picks_first_match_not_minimum(self):
        teachers = [
            teacher("T1", lessons=5),
            teacher("T2", lessons=3, name="Bilal"),
            teacher("T3", lessons=1, name="Chen"),
        ]

        low = [i for i in generate_insights(teachers) if i.category == "low_activity"]

        assert len(low) == 1
        assert "Bilal has only 3 activities" in low[0].text

    def test_low_activity_singular(self):
        teachers = [teacher("T1", lessons=6), teacher("T2", question_papers=1, name="Chen")]

        low = [i for i in generate_insights(teachers) if i.category == "low_activity"][0]

        assert "Chen has only 1 activity this period" in low.text
        assert "activities" not in low.text

    def test_low_activity_plural(self):
        teachers = [teacher("T1", lessons=6), teacher("T2", question_papers=2, name="Chen")]

        low = [i for i in generate_insights(teachers) if i.category == "low_activity"][0]

        assert "Chen has only 2 activities" in low.text

    def test_no_low_activity_above_three(self):
        insights = generate_insights([teacher("T1", lessons=4)])

        assert "low_activity" not in categories(insights)

    def test_activity_mix_rounds_percentage(self):
        # 2 of 3 activities are quizzes: 66.67% rounds to 67%
        insights = generate_insights([teacher("T1", lessons=1, quizzes=2)])

        mix = insights[-1]
        assert mix.category == "activity_mix"
        assert "Quizzes make up 67% of all activity" in mix.text

    def test_activity_mix_requires_more_than_half(self):
        insights = generate_insights([teacher("T1", lessons=1, quizzes=1)])

        assert "activity_mix" not in categories(insights)

    def test_activity_mix_half_up_rounding_crosses_threshold(self):
        # 101 of 200 is 50.5%, which rounds to 51
        insights = generate_insights([teacher("T1", lessons=99, quizzes=101)])

        assert "Quizzes make up 51%" in insights[-1].text

    def test_teacher_with_only_unknown_types(self):
        zero = TeacherAggregate(teacher_id="T1", teacher_name="Asha", total=0)

        assert generate_insights([zero]) == []
