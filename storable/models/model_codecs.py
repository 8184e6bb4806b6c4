"""Configurable JSON and property list coders.

Instances are passed through ``CodecOverrides`` to replace the default coder
for a single call. The archive format has no configurable coder.
"""

import dataclasses
import plistlib
import types
import typing
from typing import Any, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from storable.consts import JSON_DEFAULT_INDENT


def _adapter(value_type: Any) -> TypeAdapter:
    return TypeAdapter(value_type)


def _accepts_none(annotation: Any) -> bool:
    if annotation is Any or annotation is None or annotation is type(None):
        return True
    if get_origin(annotation) in (Union, types.UnionType):
        return type(None) in get_args(annotation)
    return False


def _field_specs(annotation: Any) -> list[tuple[str, str, Any]] | None:
    """Get (name, key, annotation) for each field of a model or dataclass type."""
    if not isinstance(annotation, type):
        return None
    if issubclass(annotation, BaseModel):
        return [
            (name, info.alias or name, info.annotation)
            for name, info in annotation.model_fields.items()
        ]
    if dataclasses.is_dataclass(annotation):
        hints = typing.get_type_hints(annotation)
        return [(f.name, f.name, hints.get(f.name, Any)) for f in dataclasses.fields(annotation)]
    return None


def _restore_nulls(primitive: Any, annotation: Any) -> Any:
    """Put back None for nullable fields, which property lists cannot store.

    Walks nested models, dataclasses, lists and dicts so that a value saved
    with None fields decodes to an equal value.
    """
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin in (Union, types.UnionType):
        non_null = [arg for arg in args if arg is not type(None)]
        if len(non_null) == 1:
            return _restore_nulls(primitive, non_null[0])
        return primitive

    if isinstance(primitive, list) and origin in (list, set, frozenset) and args:
        return [_restore_nulls(item, args[0]) for item in primitive]

    if isinstance(primitive, dict):
        if origin is dict and len(args) == 2:
            return {key: _restore_nulls(item, args[1]) for key, item in primitive.items()}

        specs = _field_specs(annotation)
        if specs is None:
            return primitive
        restored = dict(primitive)
        for name, key, field_annotation in specs:
            present = key if key in restored else name if name in restored else None
            if present is not None:
                restored[present] = _restore_nulls(restored[present], field_annotation)
            elif _accepts_none(field_annotation):
                restored[key] = None
        return restored

    return primitive


class JsonEncoder(BaseModel):
    """JSON encoder settings. Defaults give pretty output with field names as keys."""

    model_config = ConfigDict(frozen=True)

    indent: int | None = Field(default=JSON_DEFAULT_INDENT, ge=0)
    by_alias: bool = False
    exclude_none: bool = False

    def encode(self, value: Any, value_type: Any = None) -> bytes:
        adapter = _adapter(value_type if value_type is not None else type(value))
        return adapter.dump_json(
            value,
            indent=self.indent,
            by_alias=self.by_alias,
            exclude_none=self.exclude_none,
        )


class JsonDecoder(BaseModel):
    """JSON decoder settings."""

    model_config = ConfigDict(frozen=True)

    strict: bool | None = None

    def decode(self, data: bytes, target: Any) -> Any:
        return _adapter(target).validate_json(data, strict=self.strict)


class PlistEncoder(BaseModel):
    """Property list encoder settings.

    Values are dumped in JSON mode first so dates, enums and UUIDs become
    plist-compatible primitives. ``None`` fields are always omitted since
    property lists have no null.
    """

    model_config = ConfigDict(frozen=True)

    binary: bool = True
    sort_keys: bool = True
    by_alias: bool = False

    def encode(self, value: Any, value_type: Any = None) -> bytes:
        adapter = _adapter(value_type if value_type is not None else type(value))
        primitive = adapter.dump_python(
            value, mode="json", by_alias=self.by_alias, exclude_none=True
        )
        fmt = plistlib.FMT_BINARY if self.binary else plistlib.FMT_XML
        return plistlib.dumps(primitive, fmt=fmt, sort_keys=self.sort_keys)


class PlistDecoder(BaseModel):
    """Property list decoder settings. Binary and XML plists are both accepted."""

    model_config = ConfigDict(frozen=True)

    strict: bool | None = None

    def decode(self, data: bytes, target: Any) -> Any:
        primitive = _restore_nulls(plistlib.loads(data), target)
        return _adapter(target).validate_python(primitive, strict=self.strict)


class CodecOverrides(BaseModel):
    """Replacement coders for the JSON and property list formats."""

    model_config = ConfigDict(frozen=True)

    json_encoder: JsonEncoder | None = None
    json_decoder: JsonDecoder | None = None
    plist_encoder: PlistEncoder | None = None
    plist_decoder: PlistDecoder | None = None
