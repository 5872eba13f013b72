"""Report building and output for the novel catalog.

``build_report`` turns catalog queries into ordered sections of plain values;
a ``ReportSink`` decides how those values are shown.
"""

from abc import ABC, abstractmethod
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional

from rich.console import Console

from .domain import Catalog, Novel, ShopView
from .models.config import ReportConfig


@dataclass
class ReportSection:
    """A heading and the values listed under it."""
    heading: str
    values: List[Any] = field(default_factory=list)


class ReportSink(ABC):
    """Destination for report output: one value per line, in order."""

    @abstractmethod
    def heading(self, text: str) -> None:
        """Start a new section."""
        ...

    @abstractmethod
    def line(self, text: str) -> None:
        """Write a single line verbatim."""
        ...

    def emit(self, value: Any) -> None:
        """Write a value, expanding sequences into one line per item."""
        if isinstance(value, (str, bool, int, float, Novel)):
            self.line(str(value))
        elif isinstance(value, abc.Iterable):
            for item in value:
                self.emit(item)
        else:
            self.line(str(value))


class ConsoleReportSink(ReportSink):
    """Writes the report to a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(soft_wrap=True)
        self._sections = 0

    def heading(self, text: str) -> None:
        if self._sections:
            self.console.print()
        self._sections += 1
        self.console.print(
            text, style="bold cyan", markup=False, highlight=False, emoji=False, soft_wrap=True
        )

    def line(self, text: str) -> None:
        self.console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


class MemoryReportSink(ReportSink):
    """Collects report output in memory."""

    def __init__(self):
        self.headings: List[str] = []
        self.lines: List[str] = []

    def heading(self, text: str) -> None:
        self.headings.append(text)

    def line(self, text: str) -> None:
        self.lines.append(text)


def build_report(catalog: Catalog, config: Optional[ReportConfig] = None) -> Iterator[ReportSection]:
    """Yield the standard report sections for a catalog."""
    config = config or ReportConfig.default()
    first, last = config.percent_range.first, config.percent_range.last

    yield ReportSection("All Titles in UPPERCASE:", list(catalog.titles_uppercased()))

    yield ReportSection(
        f"Book Titles Containing '{config.search_substring}':",
        catalog.titles_containing(config.search_substring),
    )

    yield ReportSection("All Titles in Alphabetical Order:", catalog.titles_alphabetical())

    yield ReportSection(f"Books from the {config.decade}s:", catalog.titles_in_decade(config.decade))

    yield ReportSection("Longest Book Title:", [catalog.longest_title()])

    yield ReportSection(
        f"Is there a book written in {config.lookup_year}?",
        [catalog.has_book_published_in(config.lookup_year)],
    )

    yield ReportSection(
        f"How many books contain '{config.count_word}'?",
        [catalog.count_titles_containing(config.count_word)],
    )

    yield ReportSection(
        f"Percentage of books written between {first} and {last}:",
        [f"{catalog.percent_published_between(first, last)}%"],
    )

    oldest = catalog.oldest_novel()
    yield ReportSection("Oldest book:", [oldest.display_name] if oldest else [])

    yield ReportSection(
        f"Books with titles {config.title_length} characters long:",
        [novel.title for novel in catalog.novels_with_title_length(config.title_length)],
    )

    yield from shop_sections(ShopView(catalog.all_novels(), exclude=config.shop_exclude))


def shop_sections(shop: ShopView) -> Iterator[ReportSection]:
    """Yield the shop listing: every title, then the filtered novels."""
    yield ReportSection("All titles:", list(shop.all_titles))
    yield ReportSection("Sorted titles:", shop.filtered_sorted_novels())


def write_report(sections: Iterable[ReportSection], sink: ReportSink) -> None:
    """Send report sections to a sink."""
    for section in sections:
        sink.heading(section.heading)
        for value in section.values:
            sink.emit(value)
