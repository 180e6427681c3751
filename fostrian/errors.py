# SPDX-License-Identifier: MIT
# Copyright (c) 2026 The Fostrian Authors

"""
Exceptions raised by the Fostrian codec.

Every error aborts the decode/encode call that raised it; no partial
tree is ever returned.
"""


class FostrianError(Exception):
    """Base exception for Fostrian errors."""
    pass


class StreamCapabilityError(FostrianError):
    """Stream cannot seek, read or write as the operation requires."""
    pass


class FormatError(FostrianError, ValueError):
    """Structural violation of the wire format."""
    pass


class UnsupportedEncoding(FormatError):
    """Encoding code outside the fixed table, or a text encoding without a code."""
    pass


class ArgumentError(FostrianError, TypeError):
    """Invalid argument passed to a codec or tree operation."""
    pass


class DetachedNodeError(FostrianError, LookupError):
    """Tree-wide parameter requested from a node that has no root."""
    pass
