"""
Device fingerprint used for submission rate limiting.

The fingerprint is a best-effort abuse deterrent, not an identity: it changes
with browser updates, collides across private sessions and is never shown to
anyone. It is sent with each score only so the server can enforce the
per-device submission window.
"""
from __future__ import annotations

import hashlib
import locale
import logging
import os
import platform
import re
import shutil
import time
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SEPARATOR = "|"

# Sentinels recorded when a browser-only signal cannot be produced.
CANVAS_UNAVAILABLE = "canvas-disabled"
WEBGL_UNAVAILABLE = "no-webgl"
AUDIO_UNAVAILABLE = "audio-disabled"


@dataclass(frozen=True)
class EnvironmentSignals:
    user_agent: str
    screen_resolution: str
    timezone: str
    language: str
    platform: str
    hardware_concurrency: int = 0
    heap_size_limit: int | None = None
    canvas_signature: str = CANVAS_UNAVAILABLE
    webgl_signature: str = WEBGL_UNAVAILABLE
    audio_signature: str = AUDIO_UNAVAILABLE

    def components(self) -> list[str]:
        """Signals in fingerprint order; heap size only when known."""
        parts = [
            self.user_agent,
            self.screen_resolution,
            self.timezone,
            self.language,
            self.platform,
            str(self.hardware_concurrency or 0),
        ]
        if self.heap_size_limit is not None:
            parts.append(str(self.heap_size_limit))
        parts.extend([self.canvas_signature, self.webgl_signature, self.audio_signature])
        return parts


def collect_signals() -> EnvironmentSignals:
    """Gather the signals available to the running Python process."""
    from brainmark import __version__

    size = shutil.get_terminal_size()
    return EnvironmentSignals(
        user_agent=f"brainmark-client/{__version__} Python/{platform.python_version()} ({platform.system()})",
        screen_resolution=f"{size.columns}x{size.lines}",
        timezone=os.environ.get("TZ") or time.tzname[0],
        language=locale.getlocale()[0] or "C",
        platform=platform.platform(),
        hardware_concurrency=os.cpu_count() or 0,
    )


def generate_fingerprint(signals: EnvironmentSignals | None = None) -> str:
    """Return the hex digest of the joined environment signals."""
    if signals is None:
        signals = collect_signals()
    return hash_string(SEPARATOR.join(signals.components()))


def hash_string(value: str) -> str:
    """
    SHA-256 hex digest of *value*.

    Falls back to simple_hash when SHA-256 is unavailable (e.g. a restricted
    crypto policy). Fallback fingerprints are much weaker and collide easily;
    they only keep rate limiting working in degraded environments.
    """
    try:
        digest = hashlib.new("sha256", value.encode("utf-8"))
    except ValueError:
        logger.warning("SHA-256 unavailable; using weak fallback fingerprint hash")
        return simple_hash(value)
    return digest.hexdigest()


def simple_hash(value: str) -> str:
    """32-bit shift-and-subtract string hash over UTF-16 code units, as hex."""
    if not value:
        return "0"
    data = value.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = ((h << 5) - h + code_unit) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return format(abs(h), "x")


def is_same_device(fingerprint1: str, fingerprint2: str) -> bool:
    return fingerprint1 == fingerprint2


def get_device_info(user_agent: str) -> dict:
    """Coarse browser / OS / device classification of a user agent, for display."""
    if "Edg" in user_agent:
        browser = "Edge"
    elif "Chrome" in user_agent:
        browser = "Chrome"
    elif "Firefox" in user_agent:
        browser = "Firefox"
    elif "Safari" in user_agent:
        browser = "Safari"
    else:
        browser = "Unknown"

    if "Windows" in user_agent:
        os_name = "Windows"
    elif "Android" in user_agent:
        os_name = "Android"
    elif re.search(r"iPhone|iPad|iPod", user_agent):
        os_name = "iOS"
    elif "Mac" in user_agent:
        os_name = "macOS"
    elif "Linux" in user_agent:
        os_name = "Linux"
    else:
        os_name = "Unknown"

    if re.search(r"Tablet|iPad", user_agent, re.IGNORECASE):
        device = "Tablet"
    elif re.search(r"Mobi|Android", user_agent, re.IGNORECASE):
        device = "Mobile"
    else:
        device = "Desktop"

    return {"browser": browser, "os": os_name, "device": device}
