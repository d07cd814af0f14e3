"""Unit tests for the per-country history used by the bar chart."""

import pytest

from wasteflow.core.history import CountryHistory, HistoryEntry, country_histories, total_unprocessed
from wasteflow.core.types import WasteRecord


class TestCountryHistories:
    @pytest.fixture
    def records(self):
        return [
            WasteRecord(country="Italy", year=2016, generated=100, incinerated=20, recycled=30),
            WasteRecord(country="Germany", year=2004, generated=200, incinerated=50),
            WasteRecord(country="Italy", year=2004, generated=80, incinerated=40),
            WasteRecord(country="", year=2004, generated=10, incinerated=1),
        ]

    def test_grouped_in_first_seen_order(self, records):
        histories = country_histories(records)
        assert [h.country for h in histories] == ["Italy", "Germany"]

    def test_entries_sorted_by_year(self, records):
        italy = country_histories(records)[0]

        assert [e.year for e in italy.entries] == [2004, 2016]
        assert italy.latest.year == 2016

    def test_shares(self, records):
        latest = country_histories(records)[0].latest

        assert latest.incinerated_share == pytest.approx(0.2)
        assert latest.recycled_share == pytest.approx(0.3)
        assert latest.residual_share == pytest.approx(0.5)

    def test_total_unprocessed_uses_latest_year(self, records):
        # Italy 2016: 50, Germany 2004: 150
        assert total_unprocessed(country_histories(records)) == 200

    def test_to_dict_includes_shares(self, records):
        data = country_histories(records)[1].to_dict()

        assert data["country"] == "Germany"
        assert data["entries"][0]["residual_share"] == pytest.approx(0.75)


class TestHistoryEntry:
    def test_zero_generated_share(self):
        entry = HistoryEntry(year=2004, generated=0, incinerated=0, recycled=0, residual=0)
        assert entry.incinerated_share == 0.0

    def test_empty_history(self):
        history = CountryHistory(country="Malta")
        assert history.latest is None
        assert total_unprocessed([history]) == 0
