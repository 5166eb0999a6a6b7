"""
Shared fixtures: sample lab data files and an in-memory fetcher.
"""
import asyncio
from typing import Dict, Optional

import pytest

from labsite.core.config import Settings
from labsite.core.errors import ResourceFetchError
from labsite.ingest.fetcher import ResourceFetcher

SAMPLE_FILES: Dict[str, str] = {
    "data/info.csv": (
        "name,englishName,description,location,email,phone\n"
        '智慧系統實驗室,Intelligent Systems Lab,"Robotics, vision and learning",'
        "EE Building 501,lab@example.edu,02-1234-5678\n"
    ),
    "data/professor.csv": "name,title,image_filename\nDr. Chen,Professor,chen.jpg\n",
    "data/education.csv": (
        "year,degree,school\n"
        "2005,Ph.D.,Stanford University\n"
        "2000,B.S.,National Taiwan University\n"
    ),
    "data/experience_main.csv": "period,title,org\n2015-now,Professor,NTU EE\n",
    "data/experience_related.csv": "period,title,org\n2018-2020,Advisor,\"Acme, Inc.\"\n",
    "data/honors.csv": (
        "year,title,date\n"
        "2020,Outstanding Teaching Award,2020-01-01\n"
        "2019,Young Scholar Fellowship,\n"
    ),
    "data/patents.csv": (
        "year,title,region,number,date\n"
        "2023,Adaptive Gripper,TW,I123456,2023-06-01\n"
    ),
    "data/conference_intl.csv": (
        "year,title,conference,location,date\r\n"
        "2022,\"Learning to Grasp, Fast\",ICRA,Philadelphia,2022-05-23\r\n"
    ),
    "data/conference_dom.csv": (
        "year,title,conference,location,date\n"
        "2021,Edge Inference,TAAI,Taipei,2021-11-18\n"
    ),
    "data/projects.csv": (
        "year,title,agency,role,date\n"
        "2024,Smart Factory Robotics,NSTC,PI,\n"
    ),
    "data/activity_photos.csv": (
        "id,filename,caption\n"
        "1,retreat.jpg,Lab retreat\n"
        "2,demo.png,\"Demo day, 2023\"\n"
    ),
}


class InMemoryFetcher(ResourceFetcher):
    """Fetcher serving resources from a dict; missing locators raise."""

    def __init__(self, files: Dict[str, str], delay: float = 0.0):
        super().__init__()
        self.files = dict(files)
        self.delay = delay
        self.requested = []

    async def _fetch_bytes(self, locator: str) -> bytes:
        self.requested.append(locator)
        if self.delay:
            await asyncio.sleep(self.delay)
        if locator not in self.files:
            raise ResourceFetchError(locator, "Resource not found", status_code=404)
        return self.files[locator].encode("utf-8")


@pytest.fixture
def sample_files() -> Dict[str, str]:
    return dict(SAMPLE_FILES)


@pytest.fixture
def make_fetcher():
    """Factory for in-memory fetchers."""
    def _make(files: Optional[Dict[str, str]] = None, delay: float = 0.0) -> InMemoryFetcher:
        return InMemoryFetcher(SAMPLE_FILES if files is None else files, delay=delay)
    return _make


@pytest.fixture
def settings() -> Settings:
    return Settings(
        DATA_BASE_URL=None,
        PROFESSOR_PHOTO_BASE="photos/prof",
        ACTIVITY_PHOTO_BASE="photos/activity",
        PLACEHOLDER_IMAGE="/api/placeholder/400/400",
        NEWS_LIMIT=6,
    )
