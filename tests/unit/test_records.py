"""
Unit tests for typed source records.
"""
import pytest
from pydantic import ValidationError

from labsite.models.records import (
    ActivityPhoto,
    Honor,
    LabData,
    LabInfo,
    Patent,
    Professor,
)
from labsite.models.snapshot import Snapshot


class TestSourceRecords:
    """Tests for per-source record models."""

    def test_missing_columns_default_to_empty(self):
        patent = Patent.from_fields({"title": "Gripper"})

        assert patent.title == "Gripper"
        assert patent.region == ""
        assert patent.number == ""
        assert patent.date == ""

    def test_extra_columns_are_passed_through(self):
        honor = Honor.from_fields({"title": "Award", "date": "2020-01-01", "link": "https://x"})

        assert honor.model_extra == {"link": "https://x"}
        assert honor.model_dump()["link"] == "https://x"

    def test_lab_info_camel_case_column(self):
        info = LabInfo.from_fields({"name": "實驗室", "englishName": "Vision Lab"})

        assert info.english_name == "Vision Lab"
        assert info.model_dump(by_alias=True)["englishName"] == "Vision Lab"

    def test_records_are_immutable(self):
        honor = Honor.from_fields({"title": "Award"})

        with pytest.raises(ValidationError):
            honor.title = "Other"

    def test_from_records(self):
        photos = ActivityPhoto.from_records(
            [{"id": "1", "filename": "a.jpg", "url": "photos/activity/a.jpg"}]
        )

        assert photos[0].url == "photos/activity/a.jpg"


class TestLabData:
    """Tests for the typed snapshot view."""

    def test_from_snapshot(self):
        snapshot = Snapshot(
            {
                "info": {"name": "Lab", "englishName": "Lab EN"},
                "professor": {"name": "Dr. Chen", "image": "photos/prof/chen.jpg"},
                "honors": [{"title": "Award", "date": "2020-01-01"}],
                "activity_photos": [{"filename": "a.jpg", "url": "photos/activity/a.jpg"}],
            }
        ).freeze()

        data = LabData.from_snapshot(snapshot)

        assert data.info.english_name == "Lab EN"
        assert isinstance(data.professor, Professor)
        assert data.professor.image == "photos/prof/chen.jpg"
        assert data.honors[0].date == "2020-01-01"
        assert data.activity_photos[0].url == "photos/activity/a.jpg"
        assert data.patents == []
        assert data.education == []

    def test_from_empty_snapshot(self):
        data = LabData.from_snapshot(Snapshot({}))

        assert data.info.name == ""
        assert data.professor.image == ""
        assert data.projects == []
