#!/usr/bin/env python3

"""Errors raised while decoding property attribute strings."""


class MalformedAttributesError(ValueError):
    """Raised when an attribute string has no usable type token.

    This is the only failure mode of the decoder. Unknown attribute letters
    and empty optional fields never raise.

    Attributes:
        raw: The attribute string exactly as it was passed to the decoder
        reason: Short description of what was wrong with it
    """

    def __init__(self, raw: bytes | str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Malformed property attributes {raw!r}: {reason}")
