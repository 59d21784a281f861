import pytest
from pydantic import ValidationError

from html_toc.observability import names
from html_toc.parsers.html_parser import parse
from html_toc.rendering.toc import TocEntry, render_toc, toc_entries


class CountingMetricsHook:
    def __init__(self) -> None:
        self.counters: list[str] = []

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self.counters.append(name)

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class TestTocEntries:
    def test_one_entry_per_heading(self) -> None:
        result = parse("<h2>Intro</h2><h2>Liché &amp; <em>Čísla</em></h2>")

        assert toc_entries(result) == [
            TocEntry(id="intro", text="Intro", href="#intro"),
            TocEntry(id="liche-cisla", text="Liché & Čísla", href="#liche-cisla"),
        ]

    def test_duplicates_are_kept(self) -> None:
        entries = toc_entries(parse("<h2>A</h2><h2>A</h2>"))
        assert [e.href for e in entries] == ["#a", "#a"]

    def test_no_headings(self) -> None:
        assert toc_entries(parse("<p>Nothing</p>")) == []

    def test_entry_is_frozen(self) -> None:
        entry = TocEntry(id="a", text="A", href="#a")
        with pytest.raises(ValidationError):
            entry.text = "B"  # type: ignore

    def test_entry_config_is_frozen_and_strict(self) -> None:
        assert TocEntry.model_config["frozen"] is True
        assert TocEntry.model_config["extra"] == "forbid"

    def test_entry_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            TocEntry(id="a", text="A", href="#a", level=2)  # type: ignore

    def test_entry_serializes(self) -> None:
        entry = TocEntry(id="a", text="A", href="#a")
        assert entry.model_dump() == {"id": "a", "text": "A", "href": "#a"}


class TestRenderToc:
    def test_renders_links_to_anchors(self) -> None:
        result = parse("<h1>T</h1><h2>Intro</h2><h2>Liché &amp; <em>Čísla</em></h2>")

        assert render_toc(result) == (
            '<ul class="content-toc">\n'
            '<li><a href="#intro">Intro</a></li>\n'
            '<li><a href="#liche-cisla">Liché &amp; Čísla</a></li>\n'
            "</ul>"
        )

    def test_link_text_is_escaped(self) -> None:
        result = parse("<h2>&lt;script&gt; &quot;x&quot;</h2>")
        assert '<a href="#script-x">&lt;script&gt; &quot;x&quot;</a>' in render_toc(
            result
        )

    def test_empty_when_no_headings(self) -> None:
        assert render_toc(parse("<h1>T</h1><p>P</p>")) == ""

    def test_records_render_metric(self) -> None:
        hook = CountingMetricsHook()
        render_toc(parse("<h2>A</h2>"), metrics_hook=hook)
        assert hook.counters == [names.TOC_RENDER_TOTAL]

    def test_no_metric_when_nothing_rendered(self) -> None:
        hook = CountingMetricsHook()
        render_toc(parse(""), metrics_hook=hook)
        assert hook.counters == []
