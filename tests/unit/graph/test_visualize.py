"""
Unit tests for the visualization module.

Ensures that:
1. The Sankey page embeds one graph per year plus tooltip details.
2. The selected year falls back sensibly.
3. The bar page embeds country histories and the unprocessed pile.
"""

import json
from unittest.mock import patch

import pytest

from wasteflow.config import Settings
from wasteflow.core.builder import build_flow_graphs
from wasteflow.core.history import country_histories
from wasteflow.core.summary import describe_graph
from wasteflow.core.types import WasteRecord
from wasteflow.graph.visualize import (
    generate_bar_html,
    generate_html,
    sankey_payload,
    write_visualization,
)


class TestVisualize:
    @pytest.fixture
    def records(self):
        return [
            WasteRecord(country="Germany", year=2016, generated=1000, incinerated=300, recycled=200),
            WasteRecord(country="Italy", year=2014, generated=500, incinerated=100),
        ]

    @pytest.fixture
    def settings(self):
        return Settings(timeline_years=[2014, 2016])

    @pytest.fixture
    def graphs(self, records):
        return build_flow_graphs(records, [2014, 2016])

    @pytest.fixture
    def details(self, graphs, records):
        return {g.year: describe_graph(g, records, "tonnes") for g in graphs}

    def test_generate_html_structure(self, graphs, settings, details):
        html = generate_html(graphs, settings, details)

        assert "<!DOCTYPE html>" in html
        assert "d3-sankey" in html
        assert "__WASTEFLOW_DATA__" not in html
        assert "__BACKGROUND__" not in html
        assert '"Germany_generated"' in html
        assert '"Environmental Load"' in html

    def test_payload_per_year(self, graphs, settings, details):
        payload = sankey_payload(graphs, settings, details)

        assert payload["years"] == [2014, 2016]
        assert payload["selected_year"] == 2016
        assert set(payload["graphs"]) == {"2014", "2016"}
        graph_2016 = payload["graphs"]["2016"]
        assert graph_2016["graph"]["year"] == 2016
        assert graph_2016["details"]["Incinerated"]["label"] == "300 tonnes"
        assert graph_2016["height"] == settings.height

    def test_selected_year_override(self, graphs, settings, details):
        payload = sankey_payload(graphs, settings, details, selected_year=2014)
        assert payload["selected_year"] == 2014

    def test_selected_year_falls_back_to_last(self, graphs, details):
        settings = Settings(selected_year=1990)
        payload = sankey_payload(graphs, settings, details)
        assert payload["selected_year"] == 2016

    def test_payload_is_json(self, graphs, settings, details):
        payload = sankey_payload(graphs, settings, details)
        assert json.loads(json.dumps(payload)) == payload

    def test_script_tag_escaped(self, settings):
        records = [WasteRecord(country="</script>", year=2016, generated=1, incinerated=0)]
        graphs = build_flow_graphs(records, [2016])

        html = generate_html(graphs, settings, {})

        assert '"<\\/script>"' in html

    def test_no_graphs(self, settings):
        with pytest.raises(ValueError):
            generate_html([], settings, {})

    def test_bar_html(self, records, settings):
        html = generate_bar_html(country_histories(records), settings)

        assert "<!DOCTYPE html>" in html
        assert '"country": "Germany"' in html
        assert '"total_unprocessed": 900.0' in html
        assert "Total unprocessed waste" in html


class TestWriteVisualization:
    def test_writes_file(self, tmp_path):
        out = write_visualization("<html></html>", tmp_path / "out" / "page.html")

        assert out.read_text(encoding="utf-8") == "<html></html>"

    @patch("wasteflow.graph.visualize.webbrowser.open")
    def test_opens_browser(self, mock_open, tmp_path):
        out = write_visualization("<html></html>", tmp_path / "page.html", open_browser=True)

        mock_open.assert_called_once_with(out.resolve().as_uri())

    @patch("wasteflow.graph.visualize.webbrowser.open")
    def test_does_not_open_by_default(self, mock_open, tmp_path):
        write_visualization("<html></html>", tmp_path / "page.html")
        mock_open.assert_not_called()
