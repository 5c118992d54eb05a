from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import pytest

from dashboard.analytics import (
    LONGEST_STREAK_PLACEHOLDER,
    RECENT_ACHIEVEMENTS,
    StudySession,
    SubjectProgress,
    WeeklyBucket,
    _one_month_before,
    _ratio_or,
    aggregate,
    build_chart_bars,
    build_dashboard,
    build_study_sessions,
    compute_achievement_stats,
    compute_learning_streaks,
    compute_subject_progress,
    compute_weekly_data,
    format_time,
    generate_insights,
    insight_color,
    round_half_up,
)


def session(date, subject="maths", duration=30, score=80, topics=("Algebra",)):
    return StudySession(id="s", date=date, subject=subject, duration=duration, score=score,
                        companion="Neura", topics=list(topics))


def test_empty_companion_list_gives_empty_dashboard(now, rng):
    data = aggregate([], now=now, rng=rng)

    assert data.sessions == []
    assert data.subjects == []
    assert data.weekly == []
    assert data.chart == []
    assert len(data.insights) == 1
    assert data.insights[0].type == 'recommendation'
    assert data.insights[0].title == 'Start Your Learning Journey'
    assert data.achievements == RECENT_ACHIEVEMENTS


def test_empty_dashboard_stats_fall_back_without_dividing_by_zero(now, rng):
    data = aggregate([], now=now, rng=rng)

    assert data.stats.total_hours == 0
    assert data.stats.completed_sessions == 0
    assert data.stats.average_score == 1
    assert data.stats.improvement_rate == 1
    assert data.streaks.current == 0
    assert data.streaks.longest == LONGEST_STREAK_PLACEHOLDER


def test_build_study_sessions_fills_in_defaults(now, rng):
    sessions = build_study_sessions([{}], now=now, rng=rng)

    assert len(sessions) == 1
    s = sessions[0]
    assert s.id == "session-0"
    assert s.date == now
    assert s.subject == "General"
    assert s.duration == 30
    assert s.companion == "AI Companion"
    assert s.topics == [None]
    assert 80 <= s.score <= 99


def test_build_study_sessions_keeps_record_fields(now, rng):
    record = {'id': 7, 'name': "Neura", 'subject': "science", 'topic': "Cells", 'duration': 45}

    s = build_study_sessions([record], now=now, rng=rng)[0]

    assert (s.id, s.subject, s.companion, s.duration, s.topics) == ("7", "science", "Neura", 45, ["Cells"])


def test_mock_scores_stay_in_range(now, rng):
    sessions = build_study_sessions([{}] * 200, now=now, rng=rng)
    assert all(80 <= s.score <= 99 for s in sessions)


def test_subject_progress_percentages(now):
    sessions = [session(now, "maths", score=80), session(now, "maths", score=91), session(now, "science", score=70)]

    subjects = compute_subject_progress(sessions, total_companions=3)

    assert [s.subject for s in subjects] == ["maths", "science"]
    maths, science = subjects
    assert (maths.progress, maths.sessions, maths.avg_score) == (67, 2, 86)
    assert (science.progress, science.sessions, science.avg_score) == (33, 1, 70)
    assert science.remaining == 67


def test_subject_progress_is_capped_at_100(now):
    sessions = [session(now, "maths") for _ in range(3)]

    subjects = compute_subject_progress(sessions, total_companions=1)

    assert subjects[0].progress == 100


def test_subject_progress_with_no_companions_is_zero(now):
    subjects = compute_subject_progress([session(now)], total_companions=0)
    assert subjects[0].progress == 0


def test_ratio_falls_back_when_undefined_or_zero():
    assert _ratio_or(0, 0, 0) == 0
    assert _ratio_or(5, 0, 1) == 1
    assert _ratio_or(0, 4, 1) == 1
    assert _ratio_or(6, 4, 1) == 1.5


def test_rounding_is_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(66.666) == 67
    assert round_half_up(0.333) == 0


def test_weekly_buckets_collapse_same_weekday_across_weeks():
    monday = datetime(2026, 10, 12, 9, 0, tzinfo=timezone.utc)
    previous_monday = monday - timedelta(days=7)
    tuesday = monday + timedelta(days=1)
    sessions = [
        session(monday, duration=30, score=80, topics=["a"]),
        session(previous_monday, duration=45, score=90, topics=["b", "c"]),
        session(tuesday, duration=20, score=70, topics=["d"]),
    ]

    weekly = compute_weekly_data(sessions, subject_count=2)

    assert [b.day for b in weekly] == ["Mon", "Tue"]
    mon, tue = weekly
    assert (mon.time, mon.performance, mon.engagement) == (75, 85, 1)
    # engagement 1/3 rounds down to 0 rather than falling back to 1
    assert (tue.time, tue.performance, tue.engagement) == (20, 35, 0)


def test_achievement_stats(now):
    sessions = [session(now, duration=30, score=80), session(now, duration=45, score=91)]
    subjects = [SubjectProgress("maths", 50, 1, 80), SubjectProgress("science", 25, 1, 91)]

    stats = compute_achievement_stats(sessions, subjects)

    assert stats.total_hours == 75
    assert stats.completed_sessions == 2
    assert stats.average_score == 86
    assert stats.improvement_rate == 38


def test_learning_streaks(now):
    sessions = [
        session(now - timedelta(days=1, hours=1)),
        session(now - timedelta(days=2)),
        session(now - timedelta(days=10)),
        session(now - timedelta(days=40)),
    ]

    streaks = compute_learning_streaks(sessions, now=now)

    assert streaks.current == 1
    assert streaks.longest == 28
    assert streaks.this_week == 2
    assert streaks.this_month == 3


def test_one_month_before_clamps_to_month_end():
    moment = datetime(2026, 3, 31, 8, 0, tzinfo=timezone.utc)
    assert _one_month_before(moment) == datetime(2026, 2, 28, 8, 0, tzinfo=timezone.utc)
    assert _one_month_before(datetime(2026, 1, 15)) == datetime(2025, 12, 15)


def test_chart_bars_scale_to_the_tallest_day():
    weekly = [WeeklyBucket("Mon", time=60, performance=85), WeeklyBucket("Tue", time=30, performance=40)]

    bars = build_chart_bars(weekly, 'time')

    assert [(b.day, b.height, b.label) for b in bars] == [("Mon", 100, "1h 0m"), ("Tue", 50, "30m")]
    assert build_chart_bars(weekly, 'performance')[0].label == "85%"


def test_chart_bars_with_all_zero_values():
    bars = build_chart_bars([WeeklyBucket("Mon")], 'engagement')
    assert bars[0].height == 0


def test_format_time():
    assert format_time(45) == "45m"
    assert format_time(60) == "1h 0m"
    assert format_time(125) == "2h 5m"


def test_insights_pick_strength_and_improvement():
    subjects = [
        SubjectProgress("maths", progress=50, sessions=2, avg_score=90),
        SubjectProgress("science", progress=20, sessions=1, avg_score=80),
        SubjectProgress("history", progress=30, sessions=1, avg_score=85),
    ]

    insights = generate_insights(subjects, session_count=4)

    assert [i.type for i in insights] == ['strength', 'improvement', 'trend', 'recommendation']
    assert "maths" in insights[0].description
    assert "90% average score" in insights[0].description
    assert "science is at 20%" in insights[1].description
    assert "completed 4 study sessions" in insights[2].description
    # the caller's list is left in its original order
    assert [s.subject for s in subjects] == ["maths", "science", "history"]


def test_insights_may_reference_the_same_subject_twice():
    subjects = [
        SubjectProgress("maths", progress=10, sessions=1, avg_score=95),
        SubjectProgress("science", progress=90, sessions=9, avg_score=70),
    ]

    strength, improvement = generate_insights(subjects, session_count=10)[:2]

    assert "maths" in strength.description
    assert "maths" in improvement.description


def test_insight_ties_follow_score_order():
    subjects = [
        SubjectProgress("maths", progress=50, sessions=1, avg_score=80),
        SubjectProgress("science", progress=50, sessions=1, avg_score=90),
    ]

    strength, improvement = generate_insights(subjects, session_count=2)[:2]

    assert "science" in strength.description
    assert "science" in improvement.description


def test_insight_colors():
    assert insight_color('strength') == 'insight-strength'
    assert insight_color('unknown') == 'insight-default'


def test_invalid_selectors_fall_back(now, rng):
    data = aggregate([], timeframe='decade', metric='bogus', now=now, rng=rng)
    assert (data.timeframe, data.metric) == ('week', 'time')


def test_aggregate_puts_every_session_on_today(now, rng):
    companions = [
        {'id': 1, 'name': "Neura", 'subject': "maths", 'topic': "Limits", 'duration': 20},
        {'id': 2, 'name': "Codey", 'subject': "coding", 'topic': "Loops", 'duration': 40},
    ]

    data = aggregate(companions, metric='performance', now=now, rng=rng)

    assert len(data.weekly) == 1
    assert data.weekly[0].day == now.strftime('%a')
    assert data.weekly[0].time == 60
    assert [s.progress for s in data.subjects] == [50, 50]
    assert data.streaks.this_week == 2
    assert len(data.insights) == 4


def test_to_dict_serialises_dates(now, rng):
    data = aggregate([{'id': 1, 'subject': "maths"}], now=now, rng=rng).to_dict()
    assert data['sessions'][0]['date'] == now.isoformat()
    assert data['subjects'][0]['subject'] == "maths"


def test_build_dashboard_without_user_skips_fetch(now, rng):
    with patch('dashboard.analytics.get_user_companions') as companions:
        data = build_dashboard(None, now=now, rng=rng)

    companions.assert_not_called()
    assert data.subjects == []


def test_build_dashboard_logs_and_degrades_on_fetch_error(now, rng, caplog):
    with patch('dashboard.analytics.get_user_sessions', side_effect=RuntimeError("backend down")):
        data = build_dashboard(42, now=now, rng=rng)

    assert data.fetch_failed
    assert data.sessions == []
    assert data.insights[0].title == 'Start Your Learning Journey'
    assert "Error fetching analytics data for user 42" in caplog.text


@pytest.mark.django_db
def test_build_dashboard_reads_the_users_companions(learner, make_companion, now, rng):
    make_companion(subject="maths")
    make_companion(subject="maths", name="Mathy")
    make_companion(subject="science", name="Cellia")

    data = build_dashboard(learner.id, now=now, rng=rng)

    assert not data.fetch_failed
    assert len(data.sessions) == 3
    assert {s.subject: s.progress for s in data.subjects} == {"maths": 67, "science": 33}
