# apps/core/services/base.py
from typing import Optional

from apps.core.events import MaintenanceEventPublisher, event_publisher
from apps.core.repositories import DjangoUnitOfWork, UnitOfWork


class UseCase:
    """
    Base for application use-cases.

    The unit of work and event publisher are injected; the defaults are the
    Django ORM unit of work and the module-level publisher.
    """

    def __init__(
        self,
        uow: Optional[UnitOfWork] = None,
        publisher: Optional[MaintenanceEventPublisher] = None,
    ):
        self.uow = uow or DjangoUnitOfWork()
        self.publisher = publisher or event_publisher
