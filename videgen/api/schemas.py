"""
Pydantic schemas for API requests and responses.

Field names on the wire are camelCase; the Python side stays snake_case.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from videgen.models import AssetKind, TimedAsset

DEFAULT_DURATION = 60


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimedAssetSchema(CamelModel):
    """One image on the narration timeline."""
    image_url: str = Field(..., min_length=1)
    image_prompt: str = ""
    timestamp: float = Field(0.0, ge=0)
    duration: float = Field(0.0, ge=0)
    order: int = Field(..., ge=1)
    kind: AssetKind = AssetKind.RESOLVED

    @classmethod
    def from_asset(cls, asset: TimedAsset) -> "TimedAssetSchema":
        return cls(
            image_url=asset.reference,
            image_prompt=asset.prompt,
            timestamp=asset.start_offset,
            duration=asset.span,
            order=asset.order,
            kind=asset.kind,
        )

    def to_asset(self) -> TimedAsset:
        return TimedAsset(
            reference=self.image_url,
            prompt=self.image_prompt,
            start_offset=self.timestamp,
            span=self.duration,
            order=self.order,
            kind=self.kind,
        )


# Required fields are Optional here so that a missing value reaches the
# stage and is rejected with the stage's own message.

class GenerateScriptRequest(CamelModel):
    topic: Optional[str] = None
    language: Optional[str] = "english"
    model: Optional[str] = None


class GenerateAudioRequest(CamelModel):
    script: Optional[str] = None
    voice: Optional[str] = None


class RecommendImagesRequest(CamelModel):
    script: Optional[str] = None
    duration: Optional[float] = Field(DEFAULT_DURATION, allow_inf_nan=False)
    project_id: Optional[str] = None


class GenerateVideoRequest(CamelModel):
    audio_url: Optional[str] = None
    images: Optional[List[TimedAssetSchema]] = None


class ScriptResponse(CamelModel):
    script: str


class AudioResponse(CamelModel):
    audio_url: str
    project_id: str
    duration: int


class ImagesResponse(CamelModel):
    images: List[TimedAssetSchema]


class VideoResponse(CamelModel):
    video_url: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    timestamp: datetime
