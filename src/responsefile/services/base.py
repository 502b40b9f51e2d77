"""BaseService — shared foundation for CLI-facing services.

Every service receives the resolved :class:`ResponseFileSettings` at
construction time and turns library exceptions into failed
:class:`ServiceResult` values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from responsefile.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from responsefile.config.settings import ResponseFileSettings
    from responsefile.domain.errors import ResponseFileError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ResponseFileService(BaseService):
            def expand(self, args: list[str]) -> ServiceResult:
                try:
                    ...
                except ResponseFileError as exc:
                    return self._fail("expand", exc)
    """

    def __init__(self, settings: ResponseFileSettings) -> None:
        self._settings = settings

    def _fail(self, op: str, exc: ResponseFileError) -> ServiceResult:
        logger.debug("%s failed: %s", op, exc, exc_info=True)
        return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))
