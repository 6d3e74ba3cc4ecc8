import base64
import binascii


def b64d(value: str) -> bytes:
    """Strict unpadded standard base64 decode.

    Padding characters, characters outside the standard alphabet and
    encodings with non-zero trailing bits are all rejected with ValueError.
    """
    if "=" in value:
        raise ValueError("base64 value must not be padded")
    pad = "=" * (-len(value) % 4)
    try:
        raw = base64.b64decode((value + pad).encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError("invalid base64 value") from exc
    if base64.b64encode(raw).decode("ascii").rstrip("=") != value:
        raise ValueError("non-canonical base64 value")
    return raw
