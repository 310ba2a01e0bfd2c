"""
Videgen - topic to narrated explainer video pipeline.

Script (LLM) -> Narration (TTS) -> Timed images -> Video assembly.
"""

__version__ = "1.0.0"
