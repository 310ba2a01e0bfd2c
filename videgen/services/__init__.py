"""
Pipeline stages.
"""
from videgen.models import (
    AssetKind,
    AudioResult,
    Language,
    PipelineResult,
    SUPPORTED_MODELS,
    TimedAsset,
)
from .script_service import ScriptService
from .audio_service import AudioService, estimate_duration
from .timeline_service import TimelineService
from .assembly_service import AssemblyService
from .pipeline import Pipeline, build_pipeline

__all__ = [
    "AssetKind",
    "AudioResult",
    "Language",
    "PipelineResult",
    "SUPPORTED_MODELS",
    "TimedAsset",
    "ScriptService",
    "AudioService",
    "estimate_duration",
    "TimelineService",
    "AssemblyService",
    "Pipeline",
    "build_pipeline",
]
