"""Format dispatch for encoding and decoding stored values.

- JSON: pydantic JSON, default ``JsonEncoder``/``JsonDecoder`` unless overridden
- PLIST: property list over pydantic's JSON-mode dump, overridable the same way
- ARCHIVE: pickled object graph with a restricted unpickler, never overridable
"""

import dataclasses
import io
import logging
import pickle
import sys
from enum import Enum
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from pydantic import BaseModel

from storable.consts import ARCHIVE_PROTOCOL
from storable.errors import DecodeFailed, EncodeFailed
from storable.models.model_codecs import (
    CodecOverrides,
    JsonDecoder,
    JsonEncoder,
    PlistDecoder,
    PlistEncoder,
)
from storable.models.model_options import FileFormat

logger = logging.getLogger(__name__)

_ENCODE_ERRORS = (TypeError, ValueError, OverflowError, AttributeError, pickle.PicklingError)
_DECODE_ERRORS = (
    TypeError,
    ValueError,
    AttributeError,
    ImportError,
    IndexError,
    KeyError,
    OverflowError,
    MemoryError,
    EOFError,
    ExpatError,
    pickle.UnpicklingError,
)

# Globals the archive unpickler may reconstruct regardless of the target type
_SAFE_GLOBALS = frozenset(
    [("builtins", name) for name in (
        "bool", "bytearray", "bytes", "complex", "dict", "float",
        "frozenset", "int", "list", "range", "set", "slice", "str", "tuple",
    )]
    + [("datetime", name) for name in ("date", "datetime", "time", "timedelta", "timezone")]
    + [
        ("collections", "OrderedDict"),
        ("collections", "defaultdict"),
        ("collections", "deque"),
        ("decimal", "Decimal"),
        ("fractions", "Fraction"),
        ("uuid", "UUID"),
    ]
)


def _is_model_type(obj: type) -> bool:
    return issubclass(obj, (BaseModel, Enum)) or dataclasses.is_dataclass(obj)


class _RestrictedUnpickler(pickle.Unpickler):
    """Unpickler that only resolves safe globals and data classes.

    Classes are allowed when they are defined in the target type's module, or
    when they are already-imported pydantic models, enums or dataclasses. A
    class must be defined in the module the archive names, so names re-exported
    through another module and dotted attribute paths are refused. Modules are
    never imported as a side effect of decoding.
    """

    def __init__(self, file: io.BytesIO, target: Any):
        super().__init__(file)
        self._target_module = getattr(target, "__module__", None)

    def find_class(self, module: str, name: str) -> Any:
        if (module, name) in _SAFE_GLOBALS:
            return super().find_class(module, name)

        if "." in name or module not in sys.modules:
            raise pickle.UnpicklingError(f"Global '{module}.{name}' is not allowed in archives")

        obj = getattr(sys.modules[module], name, None)
        if (
            isinstance(obj, type)
            and obj.__module__ == module
            and obj.__qualname__ == name
            and (module == self._target_module or _is_model_type(obj))
        ):
            return obj
        raise pickle.UnpicklingError(f"Global '{module}.{name}' is not allowed in archives")


def archive(value: Any) -> bytes:
    """Pickle a value at the archive protocol."""
    return pickle.dumps(value, protocol=ARCHIVE_PROTOCOL)


def unarchive(data: bytes, target: Any) -> Any:
    """Unpickle archived data and check that it is an instance of ``target``."""
    obj = _RestrictedUnpickler(io.BytesIO(data), target).load()
    if isinstance(target, type) and not isinstance(obj, target):
        raise TypeError(f"Archived {type(obj).__name__} is not a {target.__name__}")
    return obj


def _warn_ignored(coders: CodecOverrides | None) -> None:
    if coders is not None and coders.model_dump(exclude_none=True):
        logger.debug("Codec overrides do not apply to the archive format; ignoring them")


def encode(
    value: Any,
    fmt: FileFormat,
    coders: CodecOverrides | None = None,
    path: Path | None = None,
) -> bytes:
    """Encode a value with the codec for ``fmt``.

    Args:
        value: Value to encode.
        fmt: File format selecting the codec.
        coders: Replacement coders. Ignored for the archive format.
        path: Destination, only used in error messages.

    Returns:
        Encoded bytes.

    Raises:
        EncodeFailed: If the codec rejects the value.
    """
    try:
        if fmt is FileFormat.JSON:
            encoder = (coders.json_encoder if coders else None) or JsonEncoder()
            return encoder.encode(value)
        if fmt is FileFormat.PLIST:
            encoder = (coders.plist_encoder if coders else None) or PlistEncoder()
            return encoder.encode(value)
        _warn_ignored(coders)
        return archive(value)
    except _ENCODE_ERRORS as e:
        raise EncodeFailed(
            f"Failed to encode {type(value).__name__} as {fmt.value}: {e}", path
        ) from e


def decode(
    data: bytes,
    target: Any,
    fmt: FileFormat,
    coders: CodecOverrides | None = None,
    path: Path | None = None,
) -> Any:
    """Decode bytes into ``target`` with the codec for ``fmt``.

    Raises:
        DecodeFailed: If the bytes are malformed or do not fit ``target``.
    """
    try:
        if fmt is FileFormat.JSON:
            decoder = (coders.json_decoder if coders else None) or JsonDecoder()
            return decoder.decode(data, target)
        if fmt is FileFormat.PLIST:
            decoder = (coders.plist_decoder if coders else None) or PlistDecoder()
            return decoder.decode(data, target)
        _warn_ignored(coders)
        return unarchive(data, target)
    except _DECODE_ERRORS as e:
        source = path if path is not None else "data"
        raise DecodeFailed(f"Failed to decode {source} as {fmt.value}: {e}", path) from e
