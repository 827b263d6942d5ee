from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DriverLifecycle


class DriverRepository(Protocol):
    """Repository interface for driver lifecycle rows.

    Note (DIP): services depend on this interface, never on a concrete DB.
    """

    def get_by_id(self, driver_id: str) -> Optional[DriverLifecycle]:
        raise NotImplementedError

    def list_all(self, *, online_only: bool = False) -> Sequence[DriverLifecycle]:
        raise NotImplementedError
