"""BaseService — shared plumbing for rangepick services.

Services are constructed from the resolved settings and are otherwise
stateless: the caller passes the current selection in and receives the
next one back.  Optional hooks let the caller observe changes
synchronously without polling the result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rangepick.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from rangepick.config.settings import RangepickSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class PickerService(BaseService):
            def validate(self, state, constraints) -> ServiceResult:
                ...
    """

    def __init__(self, settings: RangepickSettings) -> None:
        self._settings = settings

    def _notify(
        self,
        hook_name: str,
        hook: Callable[[Any], None] | None,
        payload: Any,
        warnings: list[str],
    ) -> None:
        """Invoke a caller hook. No-op if none was supplied.

        INVARIANT: Hook failures are warnings, never errors.
        """
        if hook is None:
            return
        try:
            hook(payload)
        except Exception:
            logger.debug("Hook %s raised", hook_name, exc_info=True)
            warnings.append(f"{hook_name} hook failed")

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.debug("%s failed: %s", op, message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
