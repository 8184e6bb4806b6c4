"""Pydantic models for storable."""

from storable.models.model_codecs import (
    CodecOverrides,
    JsonDecoder,
    JsonEncoder,
    PlistDecoder,
    PlistEncoder,
)
from storable.models.model_options import BaseDirectory, FileFormat, StoreOptions

__all__ = [
    # Option models
    "BaseDirectory",
    "FileFormat",
    "StoreOptions",
    # Codec models
    "CodecOverrides",
    "JsonDecoder",
    "JsonEncoder",
    "PlistDecoder",
    "PlistEncoder",
]
