from __future__ import annotations

import itertools
from typing import Callable

import pytest

from agewrap.core.secret import FileKey
from agewrap.crypto.ecc import load_private_key
from agewrap.recipients import X25519Identity


def _counter_rng(seed: int = 0) -> Callable[[int], bytes]:
    counter = itertools.count(seed)

    def rng(size: int) -> bytes:
        value = next(counter)
        return bytes((value + i) % 256 for i in range(size))

    return rng


@pytest.fixture
def deterministic_rng() -> Callable[[int], bytes]:
    """A reproducible stand-in for ``os.urandom``."""
    return _counter_rng(1)


@pytest.fixture
def file_key() -> FileKey:
    return FileKey(bytes([7] * 16))


@pytest.fixture
def identity() -> X25519Identity:
    return X25519Identity.generate()


@pytest.fixture
def second_identity() -> X25519Identity:
    return X25519Identity.generate()


@pytest.fixture
def scenario_secret():
    """Static secret with all-zero bytes except S[0] = 1."""
    raw = bytearray(32)
    raw[0] = 1
    return load_private_key(raw)
