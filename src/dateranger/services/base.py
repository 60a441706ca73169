"""BaseService — shared foundation for dateranger services.

Every service receives the frozen :class:`DateRangerSettings` at
construction time and reads its defaults (enumeration limits, resolver
order) from there rather than from module globals.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from dateranger.services._helpers import parse_moment

if TYPE_CHECKING:
    from dateranger.config.settings import DateRangerSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class RangeService(BaseService):
            def parse(self, text: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: DateRangerSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> DateRangerSettings:
        return self._settings

    def _moment(self, text: str | None) -> datetime | None:
        """Parse a moment argument, logging the failure at debug level."""
        if text is None:
            return None
        moment = parse_moment(text)
        if moment is None:
            logger.debug("Could not parse moment %r", text)
        return moment
