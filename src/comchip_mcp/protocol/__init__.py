"""Protocol layer: frame validation, checksum, variants and status decoding."""

from .errors import (
    BadCommandId,
    BadSync,
    ChecksumMismatch,
    FrameError,
    LengthMismatch,
)
from .framing import Frame, parse_hex, validate_frame
from .parser import decode, decode_frame
from .variants import DEFAULT_VARIANT, VARIANTS, ProtocolVariant, get_variant
