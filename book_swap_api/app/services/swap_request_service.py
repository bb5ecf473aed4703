"""
Business logic for swap requests.

A swap request is recorded as given.  The requested book and the
requesting user are not looked up, and the book's availability is not
affected by the request's ``status``.
"""

import logging
from typing import List

from ..core.storage import Table
from ..schemas.swap_request import SwapRequest, SwapRequestCreate
from .entity_factory import EntityFactory

logger = logging.getLogger(__name__)


class SwapRequestService:
    def __init__(self, table: Table[SwapRequest], factory: EntityFactory) -> None:
        self.table = table
        self.factory = factory

    async def create_swap_request(self, data: SwapRequestCreate) -> SwapRequest:
        swap_request = self.factory.build(SwapRequest, data)
        self.table.insert(swap_request.id, swap_request)
        logger.info(
            "User %s requested book %s (swap request %s, status %r)",
            swap_request.requested_by_id,
            swap_request.book_id,
            swap_request.id,
            swap_request.status,
        )
        return swap_request

    async def list_swap_requests(self) -> List[SwapRequest]:
        return self.table.values()
