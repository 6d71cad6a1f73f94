from bigcommerce.utils.date_helpers import (
    DateFormatError,
    DecodeOutcome,
    DecodeResult,
    OMIT_SENTINEL,
    RFC2822_FORMAT,
    format_rfc2822,
    marshal_epoch,
    unmarshal_rfc2822,
)

__all__ = [
    "DateFormatError",
    "DecodeOutcome",
    "DecodeResult",
    "OMIT_SENTINEL",
    "RFC2822_FORMAT",
    "format_rfc2822",
    "marshal_epoch",
    "unmarshal_rfc2822",
]
