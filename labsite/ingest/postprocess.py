"""
Post-processing of a freshly loaded snapshot: derived image URLs.
"""
import logging
from typing import Optional

from labsite.core.config import Settings, get_settings
from labsite.models.snapshot import Snapshot

logger = logging.getLogger(__name__)

PROFESSOR_KEY = "professor"
ACTIVITY_PHOTOS_KEY = "activity_photos"


def join_path(base: str, filename: str) -> str:
    """Join a base path and a filename with exactly one slash between them."""
    if not base:
        return filename
    return f"{base.rstrip('/')}/{filename.lstrip('/')}"


def derive(snapshot: Snapshot, settings: Optional[Settings] = None) -> Snapshot:
    """
    Set derived image fields on the snapshot in place.

    The professor record always gets an `image` field: the photo path when
    `image_filename` is set, otherwise the placeholder. Every activity photo
    gets a `url` built from its `filename`. Both are computed from the stored
    filenames, so repeated calls produce the same values. Keys missing from
    the snapshot are left out rather than created.

    Args:
        snapshot: Mutable snapshot produced by the loader
        settings: Path settings; defaults to the application settings

    Returns:
        The same snapshot
    """
    settings = settings or get_settings()

    # Sources that were not configured stay absent
    if PROFESSOR_KEY in snapshot:
        professor = snapshot.mutable_single(PROFESSOR_KEY)
        filename = professor.get("image_filename", "").strip()
        if filename:
            professor["image"] = join_path(settings.PROFESSOR_PHOTO_BASE, filename)
        else:
            professor["image"] = settings.PLACEHOLDER_IMAGE

    photos = []
    if ACTIVITY_PHOTOS_KEY in snapshot:
        photos = snapshot.mutable_records(ACTIVITY_PHOTOS_KEY)
    for photo in photos:
        photo["url"] = join_path(settings.ACTIVITY_PHOTO_BASE, photo.get("filename", ""))

    logger.debug(f"Derived image paths for professor and {len(photos)} activity photos")
    return snapshot
