from typing import List, Optional

from pydantic import BaseModel

from staffgap.models.announcement import Announcement
from staffgap.models.audit import HistoryLog
from staffgap.models.enums import UserRole
from staffgap.models.submission import Submission
from staffgap.schemas.analytics import PerformanceScores, RankGap, SubmissionStats


class DashboardView(BaseModel):
    role: UserRole
    scope_department_ids: List[int]
    features: List[str]
    unread_notifications: int = 0

    stats: Optional[SubmissionStats] = None
    current_submission: Optional[Submission] = None
    gap: Optional[List[RankGap]] = None
    pending_reviews: Optional[List[Submission]] = None
    scores: Optional[PerformanceScores] = None
    announcements: List[Announcement] = []
    recent_history: Optional[List[HistoryLog]] = None
