from labsite.services.news import (
    DEFAULT_NEWS_LIMIT,
    NEWS_CATEGORIES,
    NewsAggregator,
    NewsCategory,
    NewsItem,
    latest_news,
    parse_news_date,
)
from labsite.services.site import LoadStatus, SiteService

__all__ = [
    "DEFAULT_NEWS_LIMIT",
    "NEWS_CATEGORIES",
    "NewsAggregator",
    "NewsCategory",
    "NewsItem",
    "latest_news",
    "parse_news_date",
    "LoadStatus",
    "SiteService",
]
