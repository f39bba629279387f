"""BaseService — shared foundation for finset services.

Every service receives the resolved :class:`FinsetSettings` at
construction time. Services never print; they return ServiceResult and
leave rendering to the output layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from finset.domain.types import Domain
from finset.services.codec import parse_domain

if TYPE_CHECKING:
    from finset.config.settings import FinsetSettings


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class AlgebraService(BaseService):
            def apply(self, operation: str, left: str, right: str) -> ServiceResult:
                a, b = self._domains(left, right)
                ...
    """

    def __init__(self, settings: FinsetSettings) -> None:
        self._settings = settings

    @property
    def max_materialize(self) -> int:
        return self._settings.engine.max_materialize

    @staticmethod
    def _domains(*literals: str | Domain) -> list[Domain]:
        """Decode JSON literals; Domain instances pass through.

        Raises:
            CodecError: If any literal is malformed.
        """
        return [lit if isinstance(lit, Domain) else parse_domain(lit) for lit in literals]
