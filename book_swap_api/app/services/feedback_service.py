"""
Business logic for feedback.

Feedback is attached to a swap request by ``swap_request_id``.  The
swap request is not required to exist or to be completed.
"""

import logging
from typing import List

from ..core.storage import Table
from ..schemas.feedback import Feedback, FeedbackCreate
from .entity_factory import EntityFactory

logger = logging.getLogger(__name__)


class FeedbackService:
    """Service for leaving and listing feedback."""

    def __init__(self, table: Table[Feedback], factory: EntityFactory) -> None:
        self.table = table
        self.factory = factory

    async def create_feedback(self, data: FeedbackCreate) -> Feedback:
        feedback = self.factory.build(Feedback, data)
        self.table.insert(feedback.id, feedback)
        logger.info(
            "User %s rated swap request %s with %s (feedback %s)",
            feedback.user_id,
            feedback.swap_request_id,
            feedback.rating,
            feedback.id,
        )
        return feedback

    async def list_feedback(self) -> List[Feedback]:
        return self.table.values()
