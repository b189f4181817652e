"""Pydantic schema for the canonical structured report.

Only the parts the converter and the default parsers rely on are constrained.
Every model accepts extra keys so lab-specific fields pass through untouched.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _SchemaModel(BaseModel):
    model_config = ConfigDict(extra="allow")


class ReportReferenceSchema(_SchemaModel):
    ReportID: str | None = None
    FileDescription: str | None = None


class LabMetaDataSchema(_SchemaModel):
    LabName: str | None = None
    LabEventID: str | None = None
    Reports: list[ReportReferenceSchema] = Field(default_factory=list)


class EventMetaDataSchema(_SchemaModel):
    EventDate: str | None = None
    EventCode: str | None = None
    EventType: dict[str, Any] = Field(default_factory=dict)


class NutrientResultSchema(_SchemaModel):
    Element: str
    Value: float | str | None = None
    ValueUnit: str | None = None


class DepthSchema(_SchemaModel):
    DepthID: str | None = None
    NutrientResults: list[NutrientResultSchema] = Field(default_factory=list)


class SoilSampleSchema(_SchemaModel):
    SampleMetaData: dict[str, Any]
    Depths: list[DepthSchema] = Field(default_factory=list)


class SoilSamplesSchema(_SchemaModel):
    SoilSamples: list[SoilSampleSchema] = Field(default_factory=list)


class EventSamplesSchema(_SchemaModel):
    Soil: SoilSamplesSchema | None = None


class EventSchema(_SchemaModel):
    EventMetaData: EventMetaDataSchema
    LabMetaData: LabMetaDataSchema | None = None
    EventSamples: EventSamplesSchema | None = None


class StructuredReportSchema(_SchemaModel):
    Events: list[EventSchema]
