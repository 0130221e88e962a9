import hashlib
from unittest.mock import patch

import pytest

from brainmark.client.fingerprint import (
    AUDIO_UNAVAILABLE,
    CANVAS_UNAVAILABLE,
    WEBGL_UNAVAILABLE,
    EnvironmentSignals,
    collect_signals,
    generate_fingerprint,
    get_device_info,
    hash_string,
    is_same_device,
    simple_hash,
)


def _signals(**overrides):
    values = dict(
        user_agent="Mozilla/5.0 (X11; Linux x86_64) Firefox/120.0",
        screen_resolution="1920x1080",
        timezone="Europe/London",
        language="en-GB",
        platform="Linux x86_64",
        hardware_concurrency=8,
    )
    values.update(overrides)
    return EnvironmentSignals(**values)


# ─────────────────────────────────────────────────────────────────────────────
# Components / fingerprint
# ─────────────────────────────────────────────────────────────────────────────

class TestComponents:
    def test_order_without_heap_size(self):
        assert _signals().components() == [
            "Mozilla/5.0 (X11; Linux x86_64) Firefox/120.0",
            "1920x1080",
            "Europe/London",
            "en-GB",
            "Linux x86_64",
            "8",
            CANVAS_UNAVAILABLE,
            WEBGL_UNAVAILABLE,
            AUDIO_UNAVAILABLE,
        ]

    def test_heap_size_included_when_known(self):
        parts = _signals(heap_size_limit=4_294_705_152).components()
        assert parts[6] == "4294705152"
        assert len(parts) == 10

    def test_unknown_concurrency_is_zero(self):
        assert _signals(hardware_concurrency=0).components()[5] == "0"


class TestGenerateFingerprint:
    def test_is_sha256_of_joined_components(self):
        signals = _signals()
        expected = hashlib.sha256("|".join(signals.components()).encode("utf-8")).hexdigest()
        assert generate_fingerprint(signals) == expected

    def test_stable_for_same_signals(self):
        assert generate_fingerprint(_signals()) == generate_fingerprint(_signals())

    def test_changes_with_signals(self):
        assert generate_fingerprint(_signals()) != generate_fingerprint(_signals(timezone="UTC"))

    def test_collects_environment_when_no_signals_given(self):
        fingerprint = generate_fingerprint()
        assert len(fingerprint) == 64
        assert fingerprint == generate_fingerprint(collect_signals())

    def test_is_same_device(self):
        assert is_same_device("abc", "abc")
        assert not is_same_device("abc", "abd")


# ─────────────────────────────────────────────────────────────────────────────
# Hashing
# ─────────────────────────────────────────────────────────────────────────────

class TestHashing:
    @pytest.mark.parametrize("value, expected", [("", "0"), ("a", "61"), ("ab", "c21")])
    def test_simple_hash_values(self, value, expected):
        assert simple_hash(value) == expected

    def test_simple_hash_wraps_to_32_bits(self):
        assert int(simple_hash("x" * 200), 16) <= 0x80000000

    def test_falls_back_when_sha256_unavailable(self):
        with patch("brainmark.client.fingerprint.hashlib.new", side_effect=ValueError("unsupported")):
            assert hash_string("ab") == "c21"

    def test_sha256_used_normally(self):
        assert hash_string("ab") == hashlib.sha256(b"ab").hexdigest()


# ─────────────────────────────────────────────────────────────────────────────
# Device info
# ─────────────────────────────────────────────────────────────────────────────

class TestDeviceInfo:
    @pytest.mark.parametrize(
        "user_agent, expected",
        [
            (
                "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120.0 Safari/537.36 Edg/120.0",
                {"browser": "Edge", "os": "Windows", "device": "Desktop"},
            ),
            (
                "Mozilla/5.0 (Linux; Android 14; Pixel 8) AppleWebKit/537.36 Chrome/120.0 Mobile Safari/537.36",
                {"browser": "Chrome", "os": "Android", "device": "Mobile"},
            ),
            (
                "Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) AppleWebKit/605.1.15 Version/17.0 Safari/604.1",
                {"browser": "Safari", "os": "iOS", "device": "Tablet"},
            ),
            (
                "Mozilla/5.0 (Macintosh; Intel Mac OS X 14.0; rv:120.0) Gecko/20100101 Firefox/120.0",
                {"browser": "Firefox", "os": "macOS", "device": "Desktop"},
            ),
            ("curl/8.0", {"browser": "Unknown", "os": "Unknown", "device": "Desktop"}),
        ],
    )
    def test_classification(self, user_agent, expected):
        assert get_device_info(user_agent) == expected
