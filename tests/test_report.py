"""Tests for the HTML and plain-text report renderers."""

from __future__ import annotations

from linkwatch.pipeline import RunResult
from linkwatch.report import NO_NEW_LINKS, render_html, render_text
from linkwatch.scraper.models import Link


def _results() -> list[RunResult]:
    return [
        RunResult(
            source="https://one.test/",
            new_links=[
                Link("https://x.com/a", "Alpha"),
                Link("https://x.com/b", "https://x.com/b"),
            ],
        ),
        RunResult(source="https://two.test/"),
        RunResult(source="https://three.test/", error="HTTP 500"),
    ]


class TestRenderHtml:
    def test_sections_in_declaration_order(self) -> None:
        page = "".join(render_html(_results()))
        one = page.index("<h3>https://one.test/</h3>")
        two = page.index("<h3>https://two.test/</h3>")
        three = page.index("<h3>https://three.test/</h3>")
        assert one < two < three

    def test_new_links_are_listed(self) -> None:
        page = "".join(render_html(_results()))
        assert '<p><a href="https://x.com/a">Alpha</a></p>' in page
        assert '<p><a href="https://x.com/b">https://x.com/b</a></p>' in page

    def test_empty_and_failed_sources_show_notice(self) -> None:
        page = "".join(render_html(_results()))
        assert page.count(f"<p>{NO_NEW_LINKS}</p>") == 2

    def test_page_is_well_framed(self) -> None:
        chunks = list(render_html([]))
        assert chunks[0].startswith("<html>")
        assert chunks[-1].strip() == "</body></html>"

    def test_values_are_escaped(self) -> None:
        result = RunResult(
            source="https://s.test/?a=1&b=2",
            new_links=[Link('https://x.com/"q"', "<script>alert(1)</script>")],
        )
        page = "".join(render_html([result]))
        assert "<script>" not in page
        assert "&lt;script&gt;" in page
        assert "https://s.test/?a=1&amp;b=2" in page
        assert 'href="https://x.com/&quot;q&quot;"' in page

    def test_renders_lazily(self) -> None:
        consumed: list[str] = []

        def results():
            for r in _results():
                consumed.append(r.source)
                yield r

        chunks = render_html(results())
        next(chunks)
        assert consumed == []
        next(chunks)
        assert consumed == ["https://one.test/"]


class TestRenderText:
    def test_plain_text_layout(self) -> None:
        text = "".join(render_text(_results()))
        assert text.splitlines() == [
            "https://one.test/",
            "  Alpha  <https://x.com/a>",
            "  https://x.com/b",
            "https://two.test/",
            f"  {NO_NEW_LINKS}",
            "https://three.test/",
            f"  {NO_NEW_LINKS}",
        ]
