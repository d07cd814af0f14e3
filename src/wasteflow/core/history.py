"""
Per-country history for the stacked bar chart.

Each country gets one bar per reported year, split into incinerated,
residual and recycled segments. The residual of each country's latest year
feeds the shared "total unprocessed waste" pile.
"""

from typing import Dict, Iterable, List

from pydantic import BaseModel, Field

from .types import WasteRecord


class HistoryEntry(BaseModel):
    year: int
    generated: float
    incinerated: float
    recycled: float
    residual: float

    @classmethod
    def from_record(cls, record: WasteRecord) -> "HistoryEntry":
        return cls(
            year=record.year,
            generated=record.generated,
            incinerated=record.incinerated,
            recycled=record.recycled,
            residual=record.residual,
        )

    def share(self, amount: float) -> float:
        """Fraction of generated waste, 0.0 when nothing was generated."""
        return amount / self.generated if self.generated else 0.0

    @property
    def incinerated_share(self) -> float:
        return self.share(self.incinerated)

    @property
    def recycled_share(self) -> float:
        return self.share(self.recycled)

    @property
    def residual_share(self) -> float:
        return self.share(self.residual)


class CountryHistory(BaseModel):
    country: str
    entries: List[HistoryEntry] = Field(default_factory=list)

    @property
    def latest(self) -> HistoryEntry | None:
        return self.entries[-1] if self.entries else None

    def to_dict(self) -> dict:
        return {
            "country": self.country,
            "entries": [
                {
                    **e.model_dump(),
                    "incinerated_share": e.incinerated_share,
                    "recycled_share": e.recycled_share,
                    "residual_share": e.residual_share,
                }
                for e in self.entries
            ],
        }


def country_histories(records: Iterable[WasteRecord]) -> List[CountryHistory]:
    """
    Group records by country (first-seen order), entries sorted by year.
    """
    grouped: Dict[str, List[WasteRecord]] = {}
    for record in records:
        if not record.country:
            continue
        grouped.setdefault(record.country, []).append(record)

    return [
        CountryHistory(
            country=country,
            entries=[HistoryEntry.from_record(r) for r in sorted(rows, key=lambda r: r.year)],
        )
        for country, rows in grouped.items()
    ]


def total_unprocessed(histories: Iterable[CountryHistory]) -> float:
    """Sum of each country's latest-year residual."""
    return sum(h.latest.residual for h in histories if h.latest is not None)
