"""Guarded buffers for key material.

``SecretBytes`` owns a mutable buffer that is overwritten with zeros when the
holder is done with it. It refuses to be printed, copied or pickled so that
key material cannot leak into logs or serialized state by accident.
"""
from __future__ import annotations

import os
import secrets
from typing import Callable, Final

from .exceptions import InvalidLengthError

FILE_KEY_SIZE: Final[int] = 16

RandomSource = Callable[[int], bytes]


def wipe(buf: bytearray) -> None:
    """Overwrite ``buf`` in place with zeros."""
    for i in range(len(buf)):
        buf[i] = 0


class SecretBytes:
    """Exclusively owned secret byte string that zeroizes on release."""

    __slots__ = ("_buf", "__weakref__")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._buf = bytearray(data)

    def expose_secret(self) -> memoryview:
        """Read-only view of the secret; valid until :meth:`wipe` is called."""
        return memoryview(self._buf).toreadonly()

    def wipe(self) -> None:
        wipe(self._buf)

    @property
    def is_wiped(self) -> bool:
        return not any(self._buf)

    def __len__(self) -> int:
        return len(self._buf)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SecretBytes):
            return NotImplemented
        return secrets.compare_digest(self._buf, other._buf)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<redacted {len(self._buf)} bytes>)"

    __str__ = __repr__

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __reduce__(self):
        raise TypeError(f"{type(self).__name__} cannot be pickled")

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.wipe()

    def __del__(self) -> None:
        buf = getattr(self, "_buf", None)
        if buf is not None:
            wipe(buf)


class FileKey(SecretBytes):
    """The 16-byte symmetric key protecting a file's payload."""

    __slots__ = ()

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        if len(data) != FILE_KEY_SIZE:
            raise InvalidLengthError("file key", FILE_KEY_SIZE, len(data))
        super().__init__(data)

    @classmethod
    def generate(cls, rng: RandomSource | None = None) -> "FileKey":
        raw = bytearray((rng or os.urandom)(FILE_KEY_SIZE))
        try:
            return cls(raw)
        finally:
            wipe(raw)


__all__ = ["FILE_KEY_SIZE", "FileKey", "RandomSource", "SecretBytes", "wipe"]
