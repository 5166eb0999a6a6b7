"""
Unit tests for the site service load phase.
"""
import logging
from unittest.mock import AsyncMock, patch

import pytest

from labsite.core.errors import LoadOrchestrationError, SiteNotReadyError
from labsite.ingest.catalog import SourceDescriptor
from labsite.services.site import LOAD_ERROR_MESSAGE, LoadStatus, SiteService


class TestSiteService:
    """Tests for SiteService."""

    def test_initial_state_is_loading(self, make_fetcher, settings):
        service = SiteService(make_fetcher(), settings)

        assert service.status is LoadStatus.LOADING
        assert service.failed_sources() == []
        with pytest.raises(SiteNotReadyError, match="loading"):
            _ = service.snapshot

    @pytest.mark.asyncio
    async def test_successful_load(self, make_fetcher, settings):
        """Test a load derives image paths and freezes the snapshot."""
        service = SiteService(make_fetcher(), settings)

        status = await service.load()

        assert status is LoadStatus.READY
        assert service.error_message is None
        snapshot = service.snapshot
        assert snapshot.frozen
        assert snapshot["professor"]["image"] == "photos/prof/chen.jpg"
        assert snapshot["activity_photos"][1]["url"] == "photos/activity/demo.png"
        assert service.lab_data.professor.image == "photos/prof/chen.jpg"

    @pytest.mark.asyncio
    async def test_partial_load_is_ready(self, sample_files, make_fetcher, settings):
        del sample_files["data/professor.csv"]
        del sample_files["data/activity_photos.csv"]
        service = SiteService(make_fetcher(sample_files), settings)

        status = await service.load()

        assert status is LoadStatus.READY
        assert service.snapshot["professor"]["image"] == "/api/placeholder/400/400"
        assert service.snapshot["activity_photos"] == ()
        assert sorted(service.failed_sources()) == ["activity_photos", "professor"]

    @pytest.mark.asyncio
    async def test_orchestration_failure_sets_error(self, make_fetcher, settings, caplog):
        """Test a failed load phase exposes only the generic error."""
        sources = [
            SourceDescriptor("honors", "data/honors.csv"),
            SourceDescriptor("honors", "data/honors.csv"),
        ]
        service = SiteService(make_fetcher(), settings, sources=sources)

        with caplog.at_level(logging.ERROR, logger="labsite.services.site"):
            status = await service.load()

        assert status is LoadStatus.ERROR
        assert service.error_message == LOAD_ERROR_MESSAGE
        assert "Lab data load failed" in caplog.text
        with pytest.raises(SiteNotReadyError, match="Unable to read lab data"):
            _ = service.snapshot
        with pytest.raises(SiteNotReadyError):
            service.latest_news()

    @pytest.mark.asyncio
    async def test_unexpected_failure_sets_error(self, make_fetcher, settings):
        service = SiteService(make_fetcher(), settings)

        with patch(
            "labsite.services.site.derive", side_effect=RuntimeError("boom")
        ):
            status = await service.load()

        assert status is LoadStatus.ERROR
        with pytest.raises(SiteNotReadyError):
            _ = service.lab_data

    @pytest.mark.asyncio
    async def test_error_discards_previous_snapshot(self, make_fetcher, settings):
        service = SiteService(make_fetcher(), settings)
        await service.load()

        service._loader.load_all = AsyncMock(side_effect=LoadOrchestrationError("gone"))
        status = await service.load()

        assert status is LoadStatus.ERROR
        assert service.failed_sources() == []

    @pytest.mark.asyncio
    async def test_latest_news_uses_configured_limit(self, make_fetcher, settings):
        settings.NEWS_LIMIT = 2
        service = SiteService(make_fetcher(), settings)
        await service.load()

        items = service.latest_news()

        assert [item.category for item in items] == ["patent", "conf_intl"]
        assert len(service.latest_news(10)) == 4

    @pytest.mark.asyncio
    async def test_latest_news_from_sample_data(self, make_fetcher, settings):
        service = SiteService(make_fetcher(), settings)
        await service.load()

        items = service.latest_news()

        assert [item.date for item in items] == [
            "2023-06-01",
            "2022-05-23",
            "2021-11-18",
            "2020-01-01",
        ]
        assert items[1].title == "Learning to Grasp, Fast"
