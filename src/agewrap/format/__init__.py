"""age v1 header stanzas owned by this package."""

from .stanza import ParseOutcome, ParseStatus, Stanza
from .x25519 import (
    WRAPPED_KEY_SIZE,
    EPK_SIZE,
    RecipientLine,
    X25519_KEY_LABEL,
    X25519_RECIPIENT_TAG,
    parse_stanza,
)

__all__ = [
    "WRAPPED_KEY_SIZE",
    "EPK_SIZE",
    "ParseOutcome",
    "ParseStatus",
    "RecipientLine",
    "Stanza",
    "X25519_KEY_LABEL",
    "X25519_RECIPIENT_TAG",
    "parse_stanza",
]
