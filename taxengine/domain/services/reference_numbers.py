# taxengine/domain/services/reference_numbers.py
"""
Unique transaction numbers for TDS certificates.

Format: <epoch milliseconds><4-digit sequence><6 random characters>.
The sequence increases per call within the process and the suffix comes
from ``secrets``, so two numbers issued in the same millisecond differ.
"""

from __future__ import annotations

import secrets
import string
import threading
import time

_ALPHABET = string.ascii_uppercase + string.digits
_SUFFIX_LENGTH = 6


class ReferenceNumberGenerator:
    def __init__(self, clock=time.time_ns):
        self._clock = clock
        self._lock = threading.Lock()
        self._sequence = 0

    def __call__(self) -> str:
        with self._lock:
            self._sequence = (self._sequence + 1) % 10_000
            millis = self._clock() // 1_000_000
            sequence = self._sequence
        suffix = "".join(secrets.choice(_ALPHABET) for _ in range(_SUFFIX_LENGTH))
        return f"{millis}{sequence:04d}{suffix}"


generate_utn = ReferenceNumberGenerator()
