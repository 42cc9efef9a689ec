"""BaseService — foundation for utilkit services.

Every service receives the unified :class:`UtilSettings` at construction
time and reads its section defaults from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utilkit.config.settings import UtilSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ToolkitService(BaseService):
            def square(self, n: float) -> ServiceResult:
                delay = self._settings.square.delay_seconds
                ...
    """

    def __init__(self, settings: UtilSettings) -> None:
        self._settings = settings
