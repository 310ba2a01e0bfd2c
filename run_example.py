"""
Working example: run the whole pipeline without the HTTP server.

    python run_example.py "Photosynthesis" [english|indonesian] [model] [voice]

Backends are picked from .env exactly as the API does it.
"""
import asyncio
import json
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)

from videgen.config import load_config
from videgen.exceptions import PipelineError
from videgen.services import build_pipeline


async def run(topic: str, language: str, model=None, voice=None):
    config = load_config()
    config.log_status()

    pipeline = build_pipeline(config)
    return await pipeline.run(topic, language, model, voice)


def main():
    """Run example generation."""
    args = sys.argv[1:]
    topic = args[0] if args else "Photosynthesis"
    language = args[1] if len(args) > 1 else "english"
    model = args[2] if len(args) > 2 else None
    voice = args[3] if len(args) > 3 else None

    print("=" * 60)
    print("EXPLAINER VIDEO PIPELINE - EXAMPLE RUN")
    print("=" * 60)
    print(f"\nTopic: {topic}")
    print(f"Language: {language}")
    print()

    try:
        result = asyncio.run(run(topic, language, model, voice))
    except PipelineError as e:
        print(f"\nFAILED: {e.message}" + (f" ({e.detail})" if e.detail else ""))
        sys.exit(1)

    print("-" * 60)
    print("\nSUCCESS!")
    print(f"Project: {result.project_id}")
    print(f"Audio: {result.audio.reference} ({result.audio.duration}s)")
    placeholders = sum(1 for img in result.images if img.is_placeholder)
    print(f"Images: {len(result.images)} ({placeholders} placeholders)")
    print(f"Video: {result.video_url}")
    print()
    print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))

    return result


if __name__ == "__main__":
    main()
