"""
Typed record models, one per logical data source.

Every column is a string defaulting to "" and extra columns are passed
through untouched. Only column presence is modelled; values are not
validated.
"""
from typing import Any, List, Mapping, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from labsite.models.snapshot import Snapshot

RecordT = TypeVar("RecordT", bound="SourceRecord")


class SourceRecord(BaseModel):
    """Base model for a parsed data row."""

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    @classmethod
    def from_fields(cls: Type[RecordT], fields: Mapping[str, Any]) -> RecordT:
        """Build a record from a raw field mapping."""
        return cls.model_validate(dict(fields))

    @classmethod
    def from_records(cls: Type[RecordT], records: Sequence[Mapping[str, Any]]) -> List[RecordT]:
        return [cls.from_fields(record) for record in records]


class LabInfo(SourceRecord):
    """Lab name, description and contact details."""
    name: str = ""
    english_name: str = Field(default="", alias="englishName")
    description: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""


class Professor(SourceRecord):
    """Principal investigator biography."""
    name: str = ""
    title: str = ""
    image_filename: str = ""
    image: str = ""


class EducationEntry(SourceRecord):
    year: str = ""
    degree: str = ""
    school: str = ""


class ExperienceEntry(SourceRecord):
    period: str = ""
    title: str = ""
    org: str = ""


class Honor(SourceRecord):
    year: str = ""
    title: str = ""
    date: str = ""


class Patent(SourceRecord):
    year: str = ""
    title: str = ""
    region: str = ""
    number: str = ""
    date: str = ""


class ConferencePaper(SourceRecord):
    """Paper presented at an international or domestic conference."""
    year: str = ""
    title: str = ""
    conference: str = ""
    location: str = ""
    date: str = ""


class Project(SourceRecord):
    """Funded research project."""
    year: str = ""
    title: str = ""
    agency: str = ""
    role: str = ""
    date: str = ""


class ActivityPhoto(SourceRecord):
    id: str = ""
    filename: str = ""
    caption: str = ""
    url: str = ""


class LabData(BaseModel):
    """
    Typed view over a post-processed snapshot.

    Built after derived fields are set, so `professor.image` and every
    `activity_photos[].url` are populated.
    """

    model_config = ConfigDict(frozen=True)

    info: LabInfo = Field(default_factory=LabInfo)
    professor: Professor = Field(default_factory=Professor)
    education: List[EducationEntry] = Field(default_factory=list)
    experience_main: List[ExperienceEntry] = Field(default_factory=list)
    experience_related: List[ExperienceEntry] = Field(default_factory=list)
    honors: List[Honor] = Field(default_factory=list)
    patents: List[Patent] = Field(default_factory=list)
    conference_intl: List[ConferencePaper] = Field(default_factory=list)
    conference_dom: List[ConferencePaper] = Field(default_factory=list)
    projects: List[Project] = Field(default_factory=list)
    activity_photos: List[ActivityPhoto] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "LabData":
        """Build typed records for every known source in the snapshot."""
        return cls(
            info=LabInfo.from_fields(snapshot.single("info")),
            professor=Professor.from_fields(snapshot.single("professor")),
            education=EducationEntry.from_records(snapshot.records("education")),
            experience_main=ExperienceEntry.from_records(snapshot.records("experience_main")),
            experience_related=ExperienceEntry.from_records(snapshot.records("experience_related")),
            honors=Honor.from_records(snapshot.records("honors")),
            patents=Patent.from_records(snapshot.records("patents")),
            conference_intl=ConferencePaper.from_records(snapshot.records("conference_intl")),
            conference_dom=ConferencePaper.from_records(snapshot.records("conference_dom")),
            projects=Project.from_records(snapshot.records("projects")),
            activity_photos=ActivityPhoto.from_records(snapshot.records("activity_photos")),
        )
