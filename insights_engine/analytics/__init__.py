from insights_engine.analytics.dedup import deduplicate
from insights_engine.analytics.filters import ActivityFilter, apply_filters
from insights_engine.analytics.aggregations import (
    daily_trend,
    filter_options,
    grade_breakdown,
    summarize,
    teacher_rollup,
)
from insights_engine.analytics.insights import generate_insights
