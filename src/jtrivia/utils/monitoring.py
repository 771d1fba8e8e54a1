import time
from datetime import datetime
from typing import Dict
import logging


class SessionMetrics:
    """Tracks what happened during one play session and logs a summary."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.session_start = time.time()
        self.session_metrics = {
            'session_id': datetime.now().strftime('%Y%m%d_%H%M%S'),
            'start_time': datetime.now().isoformat(),
            'end_time': None,
            'duration_seconds': 0,
            'questions_fetched': 0,
            'answers': {'correct': 0, 'wrong': 0},
            'points_scored': 0,
            'errors': []
        }
        self.error_counts: Dict[str, int] = {}

    def record_question_fetched(self) -> None:
        """Record a successfully fetched question."""
        self.session_metrics['questions_fetched'] += 1

    def record_answer(self, correct: bool, points: int = 0) -> None:
        """Record a checked answer and the points it earned."""
        if correct:
            self.session_metrics['answers']['correct'] += 1
            self.session_metrics['points_scored'] += points
        else:
            self.session_metrics['answers']['wrong'] += 1

    def record_error(self, error_type: str, error_message: str) -> None:
        """Record an error occurrence."""
        error_entry = {
            'timestamp': datetime.now().isoformat(),
            'type': error_type,
            'message': error_message
        }
        self.session_metrics['errors'].append(error_entry)
        self.error_counts[error_type] = self.error_counts.get(error_type, 0) + 1

    def finalize_session(self) -> None:
        """Close the session and log its summary."""
        self.session_metrics['end_time'] = datetime.now().isoformat()
        self.session_metrics['duration_seconds'] = time.time() - self.session_start

        stats = self.session_metrics
        self.logger.info(
            f"Session {stats['session_id']} finished after {stats['duration_seconds']:.1f}s: "
            f"{stats['questions_fetched']} questions, "
            f"{stats['answers']['correct']} correct, {stats['answers']['wrong']} wrong, "
            f"{stats['points_scored']} points"
        )
        for error_type, count in sorted(self.error_counts.items()):
            self.logger.info(f"  {error_type}: {count}")
