"""
Data models for the lab site: the loaded snapshot and typed source records.
"""
from labsite.models.records import (
    ActivityPhoto,
    ConferencePaper,
    EducationEntry,
    ExperienceEntry,
    Honor,
    LabData,
    LabInfo,
    Patent,
    Professor,
    Project,
    SourceRecord,
)
from labsite.models.snapshot import Snapshot
from labsite.models.types import Dataset, FieldMapping

__all__ = [
    # Snapshot
    "Snapshot",
    "Dataset",
    "FieldMapping",
    # Records
    "SourceRecord",
    "LabInfo",
    "Professor",
    "EducationEntry",
    "ExperienceEntry",
    "Honor",
    "Patent",
    "ConferencePaper",
    "Project",
    "ActivityPhoto",
    "LabData",
]
