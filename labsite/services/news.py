"""
News aggregation: merges dated records from several sources into one
"latest updates" feed ranked by date.
"""
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

DEFAULT_NEWS_LIMIT = 6


@dataclass(frozen=True)
class NewsCategory:
    """A source contributing to the feed and how its items are tagged."""
    key: str
    type_label: str
    category: str


# Concatenation order; also the tie-break order for equal dates
NEWS_CATEGORIES: Tuple[NewsCategory, ...] = (
    NewsCategory("honors", "Honor", "honor"),
    NewsCategory("patents", "Patent", "patent"),
    NewsCategory("conference_intl", "Intl Conference", "conf_intl"),
    NewsCategory("conference_dom", "Domestic Conference", "conf_dom"),
    NewsCategory("projects", "Project", "project"),
)


@dataclass(frozen=True)
class NewsItem:
    """A dated record tagged with the category it came from."""
    type: str
    category: str
    date: str
    title: str
    fields: Dict[str, str] = field(default_factory=dict)
    published: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Original fields plus the tags, as served to the presentation layer."""
        data = dict(self.fields)
        data.update(
            type=self.type,
            category=self.category,
            date=self.date,
            title=self.title,
        )
        return data


# Accepted date layouts besides ISO 8601
DATE_FORMATS: Tuple[str, ...] = (
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%Y-%m",
    "%Y/%m",
    "%Y",
)

# YYYY-MM-DD, optionally followed by [T ]HH:MM[:SS[.ffffff]] and Z or ±HH:MM
ISO_DATE = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[T ](?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d{1,6}))?)?"
    r"(?P<offset>Z|[+-]\d{2}:\d{2})?)?"
)


def parse_news_date(text: str) -> Optional[datetime]:
    """
    Parse a record date string as a calendar date.

    Accepts YYYY-MM-DD with an optional [T ]HH:MM[:SS[.ffffff]] time and a Z
    or ±HH:MM offset, as well as YYYY/MM/DD, YYYY.MM.DD, YYYY-MM,
    YYYY/MM and YYYY. Partial dates resolve to the first day of the period.
    Timezone-aware values are converted to naive UTC.

    Returns:
        The parsed datetime, or None if the text is not a recognised date
    """
    text = text.strip()
    if not text:
        return None

    match = ISO_DATE.fullmatch(text)
    if match:
        try:
            return _from_iso_match(match)
        except (ValueError, OverflowError):
            return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _from_iso_match(match: "re.Match[str]") -> datetime:
    parts = match.groupdict()
    parsed = datetime(
        int(parts["year"]),
        int(parts["month"]),
        int(parts["day"]),
        int(parts["hour"] or 0),
        int(parts["minute"] or 0),
        int(parts["second"] or 0),
        int((parts["fraction"] or "0").ljust(6, "0")),
    )
    offset = parts["offset"]
    if offset and offset != "Z":
        sign = -1 if offset[0] == "-" else 1
        delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
        parsed = parsed.replace(tzinfo=timezone(sign * delta))
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _sort_key(item: NewsItem) -> Tuple[bool, datetime]:
    # Unparsable dates rank below every parsable one
    if item.published is None:
        return (False, datetime.min)
    return (True, item.published)


class NewsAggregator:
    """
    Builds the ranked feed from a snapshot.

    Items without a date are left out. Items whose date cannot be parsed are
    kept and ranked after all parsable dates, in concatenation order.
    """

    def __init__(self, categories: Sequence[NewsCategory] = NEWS_CATEGORIES):
        self.categories = tuple(categories)

    def collect(self, snapshot: Mapping[str, Any]) -> List[NewsItem]:
        """Tag and concatenate every dated record, in category order."""
        items = []
        for category in self.categories:
            records = snapshot.get(category.key) or ()
            if isinstance(records, Mapping):
                continue
            for record in records:
                date = (record.get("date") or "").strip()
                if not date:
                    continue
                items.append(
                    NewsItem(
                        type=category.type_label,
                        category=category.category,
                        date=date,
                        title=record.get("title") or "",
                        fields=dict(record),
                        published=parse_news_date(date),
                    )
                )
        return items

    def latest(self, snapshot: Mapping[str, Any], limit: int = DEFAULT_NEWS_LIMIT) -> List[NewsItem]:
        """
        Most recent dated items, newest first.

        Args:
            snapshot: Mapping of source key to dataset
            limit: Maximum number of items to return

        Returns:
            Up to `limit` news items sorted by date descending
        """
        if limit <= 0:
            return []
        items = self.collect(snapshot)
        # sorted() is stable with reverse=True, so ties keep category order
        ranked = sorted(items, key=_sort_key, reverse=True)
        return ranked[:limit]


_default_aggregator = NewsAggregator()


def latest_news(snapshot: Mapping[str, Any], limit: int = DEFAULT_NEWS_LIMIT) -> List[NewsItem]:
    """Ranked feed using the default categories."""
    return _default_aggregator.latest(snapshot, limit)
