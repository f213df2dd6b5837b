from typing import Iterable, Optional

from app.models.carrier import Carrier


def _norm(value: Optional[str]) -> str:
    return (value or "").strip()


class CarrierDirectory:
    """
    Read-only set of carrier records, built once at startup and shared by
    every request. Lookups return the first matching record in source order.
    """

    def __init__(self, carriers: Iterable[Carrier]):
        self._carriers: tuple[Carrier, ...] = tuple(carriers)

    def __len__(self) -> int:
        return len(self._carriers)

    def __iter__(self):
        return iter(self._carriers)

    def find_by_pair(
        self,
        mc_number: Optional[str] = None,
        dot_number: Optional[str] = None,
    ) -> Optional[Carrier]:
        """Match on whichever of mc_number / dot_number is provided."""
        mc = _norm(mc_number)
        dot = _norm(dot_number)
        if not mc and not dot:
            raise ValueError("mc_number or dot_number is required")
        for c in self._carriers:
            if mc and _norm(c.mc_number) != mc:
                continue
            if dot and _norm(c.dot_number) != dot:
                continue
            return c
        return None

    def find_by_id(self, identifier: str) -> Optional[Carrier]:
        """Match an identifier against either mc_number or dot_number."""
        ident = _norm(identifier)
        if not ident:
            return None
        for c in self._carriers:
            if ident in (_norm(c.mc_number), _norm(c.dot_number)):
                return c
        return None

    def find_by_mc(self, mc_number: str) -> Optional[Carrier]:
        mc = _norm(mc_number)
        if not mc:
            return None
        return next((c for c in self._carriers if _norm(c.mc_number) == mc), None)

    def find_by_dot(self, dot_number: str) -> Optional[Carrier]:
        dot = _norm(dot_number)
        if not dot:
            return None
        return next(
            (c for c in self._carriers if _norm(c.dot_number) == dot), None
        )

    def filter(
        self,
        status: Optional[str] = None,
        city: Optional[str] = None,
        zip: Optional[str] = None,
        name: Optional[str] = None,
        mc_number: Optional[str] = None,
        dot_number: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> tuple[list[Carrier], int]:
        """
        Return (results, total). Filters combine with AND; status and city
        are case-insensitive exact matches, name is a case-insensitive
        substring of carrier_name. `total` counts matches before `limit`.
        """
        status_q = _norm(status).lower()
        city_q = _norm(city).lower()
        zip_q = _norm(zip)
        name_q = _norm(name).lower()
        mc_q = _norm(mc_number)
        dot_q = _norm(dot_number)

        matches: list[Carrier] = []
        for c in self._carriers:
            if status_q and _norm(c.status).lower() != status_q:
                continue
            if city_q and _norm(c.city).lower() != city_q:
                continue
            if zip_q and _norm(c.zip) != zip_q:
                continue
            if name_q and name_q not in _norm(c.carrier_name).lower():
                continue
            if mc_q and _norm(c.mc_number) != mc_q:
                continue
            if dot_q and _norm(c.dot_number) != dot_q:
                continue
            matches.append(c)

        total = len(matches)
        if limit is not None and limit > 0:
            matches = matches[:limit]
        return matches, total
