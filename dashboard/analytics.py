# dashboard/analytics.py
"""
Learning analytics for the student dashboard.

Every function here is a pure function of the companion records returned by
the action layer, except `build_dashboard` which performs the two fetches.
The arithmetic reproduces the dashboard as it has always behaved, including
its quirks: weekly buckets are keyed by weekday only, performance is
normalised by the number of subjects, scores are mocked and "hours" are
really minutes.
"""

import calendar
import logging
import math
import random
from collections import defaultdict
from dataclasses import dataclass, field, asdict
from datetime import timedelta
from typing import List, Optional

from django.utils import timezone

from companions.actions import get_user_companions, get_user_sessions

logger = logging.getLogger(__name__)

TIMEFRAMES = ('week', 'month', 'year')
METRICS = ('time', 'performance', 'engagement')

DEFAULT_SUBJECT = 'General'
DEFAULT_DURATION = 30
DEFAULT_COMPANION_NAME = 'AI Companion'
MOCK_SCORE_MIN = 80
MOCK_SCORE_MAX = 99
LONGEST_STREAK_PLACEHOLDER = 28

INSIGHT_COLORS = {
    'strength': 'insight-strength',
    'improvement': 'insight-improvement',
    'trend': 'insight-trend',
    'recommendation': 'insight-recommendation',
}
DEFAULT_INSIGHT_COLOR = 'insight-default'

RECENT_ACHIEVEMENTS = [
    {'title': 'Speed Learner', 'desc': 'Completed 5 sessions in one day', 'icon': '⚡'},
    {'title': 'Math Master', 'desc': 'Scored 95%+ in 10 math sessions', 'icon': '🧮'},
    {'title': 'Consistency King', 'desc': 'Maintained 14-day learning streak', 'icon': '👑'},
    {'title': 'Knowledge Seeker', 'desc': 'Explored 3 new subjects this month', 'icon': '🔍'},
]


@dataclass
class StudySession:
    id: str
    date: object
    subject: str
    duration: int
    score: int
    companion: str
    topics: list


@dataclass
class SubjectProgress:
    subject: str
    progress: int
    sessions: int
    avg_score: int

    @property
    def remaining(self):
        return 100 - self.progress


@dataclass
class LearningInsight:
    type: str
    title: str
    description: str
    icon: str
    actionable: Optional[str] = None


@dataclass
class WeeklyBucket:
    day: str
    time: int = 0
    performance: int = 0
    engagement: int = 0


@dataclass
class AchievementStats:
    total_hours: int
    completed_sessions: int
    average_score: int
    improvement_rate: int


@dataclass
class LearningStreaks:
    current: int
    longest: int
    this_week: int
    this_month: int


@dataclass
class ChartBar:
    day: str
    value: int
    height: float
    label: str


@dataclass
class DashboardData:
    timeframe: str = 'week'
    metric: str = 'time'
    sessions: List[StudySession] = field(default_factory=list)
    subjects: List[SubjectProgress] = field(default_factory=list)
    weekly: List[WeeklyBucket] = field(default_factory=list)
    chart: List[ChartBar] = field(default_factory=list)
    stats: Optional[AchievementStats] = None
    streaks: Optional[LearningStreaks] = None
    insights: List[LearningInsight] = field(default_factory=list)
    achievements: list = field(default_factory=lambda: list(RECENT_ACHIEVEMENTS))
    fetch_failed: bool = False

    def to_dict(self):
        data = asdict(self)
        for session in data['sessions']:
            session['date'] = session['date'].isoformat()
        return data


def round_half_up(value):
    """Rounds .5 upwards, the way the browser did."""
    return int(math.floor(value + 0.5))


def _ratio_or(numerator, denominator, fallback):
    """`numerator / denominator`, or `fallback` when the ratio is zero or undefined."""
    if not denominator:
        return fallback
    return (numerator / denominator) or fallback


def format_time(minutes):
    hours, mins = divmod(int(minutes), 60)
    return f"{hours}h {mins}m" if hours > 0 else f"{mins}m"


def insight_color(insight_type):
    return INSIGHT_COLORS.get(insight_type, DEFAULT_INSIGHT_COLOR)


def build_study_sessions(companions, now=None, rng=None):
    """
    Turns companion records into study sessions. Missing fields get defaults
    and the score is a mock value until real results are recorded.
    """
    now = now or timezone.now()
    rng = rng or random
    sessions = []
    for index, companion in enumerate(companions):
        sessions.append(StudySession(
            id=str(companion.get('id') or f"session-{index}"),
            date=now,
            subject=companion.get('subject') or DEFAULT_SUBJECT,
            duration=companion.get('duration') or DEFAULT_DURATION,
            score=rng.randint(MOCK_SCORE_MIN, MOCK_SCORE_MAX),
            companion=companion.get('name') or DEFAULT_COMPANION_NAME,
            topics=[companion.get('topic')],
        ))
    return sessions


def compute_subject_progress(sessions, total_companions):
    """Groups sessions by subject, in the order subjects first appear."""
    by_subject = defaultdict(list)
    for session in sessions:
        by_subject[session.subject].append(session)

    subjects = []
    for subject, subject_sessions in by_subject.items():
        count = len(subject_sessions)
        progress = round_half_up(_ratio_or(count, total_companions, 0) * 100)
        subjects.append(SubjectProgress(
            subject=subject,
            progress=max(min(progress, 100), 0),
            sessions=count,
            avg_score=round_half_up(_ratio_or(sum(s.score for s in subject_sessions), count, 0)),
        ))
    return subjects


def compute_weekly_data(sessions, subject_count):
    """
    Buckets sessions per weekday abbreviation. Sessions from different weeks
    that fall on the same weekday share one bucket.
    """
    buckets = {}
    for session in sessions:
        day = session.date.strftime('%a')
        bucket = buckets.get(day)
        if bucket is None:
            bucket = buckets[day] = WeeklyBucket(day=day)
        bucket.time += session.duration
        bucket.performance += session.score
        bucket.engagement += len(session.topics)

    for bucket in buckets.values():
        bucket.performance = round_half_up(_ratio_or(bucket.performance, subject_count, 1))
        bucket.engagement = round_half_up(_ratio_or(bucket.engagement, len(sessions), 1))
    return list(buckets.values())


def compute_achievement_stats(sessions, subjects):
    return AchievementStats(
        total_hours=sum(s.duration for s in sessions),
        completed_sessions=len(sessions),
        average_score=round_half_up(_ratio_or(sum(s.score for s in sessions), len(sessions), 1)),
        improvement_rate=round_half_up(_ratio_or(sum(s.progress for s in subjects), len(subjects), 1)),
    )


def _one_month_before(moment):
    year, month = (moment.year, moment.month - 1) if moment.month > 1 else (moment.year - 1, 12)
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def compute_learning_streaks(sessions, now=None):
    now = now or timezone.now()
    week_ago = now - timedelta(days=7)
    month_ago = _one_month_before(now)
    return LearningStreaks(
        # Approximation: sessions exactly one whole day old
        current=sum(1 for s in sessions if (now - s.date).days == 1),
        longest=LONGEST_STREAK_PLACEHOLDER,
        this_week=sum(1 for s in sessions if s.date > week_ago),
        this_month=sum(1 for s in sessions if s.date > month_ago),
    )


def build_chart_bars(weekly, metric):
    values = [getattr(bucket, metric) for bucket in weekly]
    max_value = max(values, default=0)
    bars = []
    for bucket, value in zip(weekly, values):
        bars.append(ChartBar(
            day=bucket.day,
            value=value,
            height=(value / max_value) * 100 if max_value else 0,
            label=format_time(value) if metric == 'time' else f"{value}%",
        ))
    return bars


def generate_insights(subjects, session_count):
    """
    Picks the feedback cards: the best-scoring subject is a strength and the
    least advanced one needs improvement. Both may be the same subject.
    """
    if not subjects:
        return [LearningInsight(
            type='recommendation',
            title='Start Your Learning Journey',
            description='No study sessions found. Create a companion and start learning!',
            icon='🚀',
            actionable='Create your first AI companion',
        )]

    # Stable sorts: ties keep the avg-score order for the weakest pick
    by_score = sorted(subjects, key=lambda s: s.avg_score, reverse=True)
    top_subject = by_score[0]
    weakest_subject = sorted(by_score, key=lambda s: s.progress)[0]

    return [
        LearningInsight(
            type='strength',
            title='Excellence in Top Subject',
            description=f"You're performing exceptionally well in {top_subject.subject} with {top_subject.avg_score}% average score",
            icon='🌟',
            actionable=f"Consider taking advanced {top_subject.subject} challenges",
        ),
        LearningInsight(
            type='improvement',
            title='Needs Improvement',
            description=f"Your progress in {weakest_subject.subject} is at {weakest_subject.progress}%. Focus sessions could help",
            icon='📚',
            actionable=f"Schedule 2 extra {weakest_subject.subject} sessions this week",
        ),
        LearningInsight(
            type='trend',
            title='Learning Progress',
            description=f"You've completed {session_count} study sessions with consistent improvement",
            icon='📈',
            actionable='Keep up the great work!',
        ),
        LearningInsight(
            type='recommendation',
            title='Consistency Boost',
            description='Maintain regular study sessions to maximize retention and progress',
            icon='⚡',
            actionable='Set daily study reminders',
        ),
    ]


def aggregate(companions, timeframe='week', metric='time', now=None, rng=None):
    """Runs the whole pipeline over already-fetched companion records."""
    timeframe = timeframe if timeframe in TIMEFRAMES else 'week'
    metric = metric if metric in METRICS else 'time'
    now = now or timezone.now()

    sessions = build_study_sessions(companions, now=now, rng=rng)
    subjects = compute_subject_progress(sessions, len(companions))
    weekly = compute_weekly_data(sessions, len(subjects))
    return DashboardData(
        timeframe=timeframe,
        metric=metric,
        sessions=sessions,
        subjects=subjects,
        weekly=weekly,
        chart=build_chart_bars(weekly, metric),
        stats=compute_achievement_stats(sessions, subjects),
        streaks=compute_learning_streaks(sessions, now=now),
        insights=generate_insights(subjects, len(sessions)),
    )


def build_dashboard(user_id, timeframe='week', metric='time', now=None, rng=None):
    """
    Fetches the user's data and aggregates it. A failed fetch is logged and
    the dashboard falls back to empty aggregates.
    """
    if not user_id:
        return aggregate([], timeframe, metric, now=now, rng=rng)

    try:
        # Recent sessions are fetched but the dashboard is built from companions
        get_user_sessions(user_id)
        companions = get_user_companions(user_id)
    except Exception:
        logger.exception("Error fetching analytics data for user %s", user_id)
        data = aggregate([], timeframe, metric, now=now, rng=rng)
        data.fetch_failed = True
        return data

    return aggregate(companions, timeframe, metric, now=now, rng=rng)
