"""
Script to check an activity dataset before deploying it.
Prints raw, unique and duplicate record counts plus the filter options it yields.

Usage: python scripts/check_dataset.py [path/to/teachers.json]
"""
import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from insights_engine.analytics.aggregations import daily_trend, filter_options, summarize
from insights_engine.core.config import settings
from insights_engine.core.dataset import DatasetLoadError, load_store


def check_dataset(path: str) -> int:
    try:
        store = load_store(path)
    except DatasetLoadError as e:
        print(f"Dataset check failed: {e}")
        return 1

    print(f"Dataset: {path}")
    print(f"  Raw records:        {store.raw_count}")
    print(f"  Unique records:     {len(store)}")
    print(f"  Duplicates removed: {store.duplicates_removed}")

    summary = summarize(store.records)
    print(f"  Lesson plans: {summary.lessons}, quizzes: {summary.quizzes}, question papers: {summary.question_papers}")

    trend = daily_trend(store.records)
    if trend:
        busiest = max(trend, key=lambda bucket: bucket.total)
        print(f"  Days covered: {trend[0].date} to {trend[-1].date} (busiest {busiest.date}: {busiest.total} activities)")

    options = filter_options(store.records)
    print(f"\nTeachers ({len(options.teachers)}):")
    for teacher in options.teachers:
        print(f"  {teacher.id} ({teacher.name})")
    print(f"Grades: {', '.join(str(g) for g in options.grades)}")
    print(f"Subjects: {', '.join(options.subjects)}")
    print(f"Activity types: {', '.join(options.activity_types)}")
    return 0


if __name__ == "__main__":
    sys.exit(check_dataset(sys.argv[1] if len(sys.argv) > 1 else settings.DATA_FILE))
