"""
Pipeline data model.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class Language(str, Enum):
    """Narration languages with a dedicated prompt template."""
    ENGLISH = "english"
    INDONESIAN = "indonesian"


SUPPORTED_MODELS = (
    "gemini-2.0-flash-exp",
    "gemini-1.5-flash",
    "gemini-1.5-pro",
    "gpt-4o-mini",
    "gpt-4o",
    "gpt-4",
)


class AssetKind(str, Enum):
    """Whether a timeline entry points at stored bytes or a fallback."""
    RESOLVED = "resolved"
    PLACEHOLDER = "placeholder"


@dataclass
class TimedAsset:
    """One image on the narration timeline."""
    reference: str
    prompt: str
    start_offset: float
    span: float
    order: int
    kind: AssetKind = AssetKind.RESOLVED

    @property
    def is_placeholder(self) -> bool:
        return self.kind == AssetKind.PLACEHOLDER

    @property
    def end_offset(self) -> float:
        return self.start_offset + self.span

    def to_dict(self) -> Dict[str, Any]:
        return {
            "imageUrl": self.reference,
            "imagePrompt": self.prompt,
            "timestamp": self.start_offset,
            "duration": self.span,
            "order": self.order,
            "kind": self.kind.value,
        }


@dataclass
class AudioResult:
    """Stored narration audio and the project it opened."""
    reference: str
    project_id: str
    duration: int
    mime_type: str = "audio/mpeg"
    filename: str = ""


@dataclass
class PipelineResult:
    """Everything one end-to-end run produced."""
    topic: str
    script: str
    audio: AudioResult
    images: List[TimedAsset] = field(default_factory=list)
    video_url: str = ""

    @property
    def project_id(self) -> str:
        return self.audio.project_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "topic": self.topic,
            "script": self.script,
            "audioUrl": self.audio.reference,
            "projectId": self.audio.project_id,
            "duration": self.audio.duration,
            "images": [asset.to_dict() for asset in self.images],
            "videoUrl": self.video_url,
        }
