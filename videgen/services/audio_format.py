"""
Audio container helpers.

Backends that stream bare PCM samples (e.g. audio/L16;rate=24000) produce
files no browser can play. Those samples get a canonical 44-byte WAV header
before they are stored.
"""
import mimetypes
import struct
from dataclasses import dataclass
from typing import Dict, Optional

WAV_HEADER_SIZE = 44

AUDIO_EXTENSIONS = {
    "audio/mpeg": ".mp3",
    "audio/mp3": ".mp3",
    "audio/wav": ".wav",
    "audio/wave": ".wav",
    "audio/x-wav": ".wav",
    "audio/ogg": ".ogg",
    "audio/opus": ".opus",
    "audio/webm": ".webm",
    "audio/aac": ".aac",
    "audio/mp4": ".m4a",
    "audio/flac": ".flac",
}

# Raw sample formats that never map to a playable container
RAW_PCM_TYPES = {"audio/l16", "audio/l24", "audio/l8", "audio/pcm", "audio/raw"}


@dataclass
class PcmFormat:
    """Sample layout of a raw PCM stream."""
    sample_rate: int = 24000
    channels: int = 1
    bits_per_sample: int = 16


def split_mime(mime_type: str) -> tuple:
    """'audio/L16;codec=pcm;rate=24000' -> ('audio/l16', {'codec': 'pcm', 'rate': '24000'})"""
    pieces = [p.strip() for p in (mime_type or "").split(";")]
    params: Dict[str, str] = {}
    for piece in pieces[1:]:
        if "=" in piece:
            key, value = piece.split("=", 1)
            params[key.strip().lower()] = value.strip()
    return pieces[0].lower(), params


def extension_for(mime_type: str) -> Optional[str]:
    """File extension for a playable audio container, None for raw samples."""
    base, _ = split_mime(mime_type)
    if not base or base in RAW_PCM_TYPES:
        return None
    if base in AUDIO_EXTENSIONS:
        return AUDIO_EXTENSIONS[base]
    if not base.startswith("audio/"):
        return None
    return mimetypes.guess_extension(base)


def pcm_format_from_mime(mime_type: str) -> PcmFormat:
    base, params = split_mime(mime_type)
    fmt = PcmFormat()
    if base == "audio/l8":
        fmt.bits_per_sample = 8
    elif base == "audio/l24":
        fmt.bits_per_sample = 24
    if params.get("rate", "").isdigit():
        fmt.sample_rate = int(params["rate"])
    if params.get("channels", "").isdigit():
        fmt.channels = int(params["channels"])
    return fmt


def build_wav_header(data_size: int, fmt: PcmFormat) -> bytes:
    """Canonical RIFF/WAVE header for little-endian integer PCM."""
    bytes_per_sample = fmt.bits_per_sample // 8
    byte_rate = fmt.sample_rate * fmt.channels * bytes_per_sample
    block_align = fmt.channels * bytes_per_sample

    return b"".join([
        b"RIFF",
        struct.pack("<I", 36 + data_size),
        b"WAVE",
        b"fmt ",
        struct.pack("<I", 16),
        struct.pack("<H", 1),
        struct.pack("<H", fmt.channels),
        struct.pack("<I", fmt.sample_rate),
        struct.pack("<I", byte_rate),
        struct.pack("<H", block_align),
        struct.pack("<H", fmt.bits_per_sample),
        b"data",
        struct.pack("<I", data_size),
    ])


def wrap_pcm_as_wav(samples: bytes, fmt: PcmFormat) -> bytes:
    return build_wav_header(len(samples), fmt) + samples
