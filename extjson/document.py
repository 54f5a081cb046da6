# Copyright 2026-present MongoDB, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Document traversal for Extended JSON generators.

:class:`Document` writes the braces, keys and separators of a BSON document
and hands every value to a :class:`~extjson.interfaces.Generator`.
:func:`write_value` maps a single Python value to the generator operation
for its BSON type.
"""
from __future__ import annotations

import datetime
import logging
import re
import uuid
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Type

from bson.binary import Binary
from bson.code import Code
from bson.datetime_ms import DatetimeMS
from bson.dbref import DBRef
from bson.decimal128 import Decimal128
from bson.errors import InvalidDocument
from bson.int64 import Int64
from bson.max_key import MaxKey
from bson.min_key import MinKey
from bson.objectid import ObjectId
from bson.regex import Regex
from bson.son import RE_TYPE
from bson.timestamp import Timestamp

from extjson.interfaces import Buffer, Generator
from extjson.options import DEFAULT_CANONICAL_JSON_OPTIONS, CanonicalJSONOptions
from extjson.types import Symbol, Undefined

_LOGGER = logging.getLogger(__name__)

_INT32_MAX = 2**31
_INT64_MAX = 2**63

_INDENT = "  "


class _Context:
    """State of one traversal: where to write and how."""

    __slots__ = ("generator", "buffer", "pretty", "json_options", "markers")

    def __init__(
        self,
        generator: Generator,
        buffer: Buffer,
        pretty: bool,
        json_options: CanonicalJSONOptions,
        markers: Optional[Dict[int, Any]],
    ) -> None:
        self.generator = generator
        self.buffer = buffer
        self.pretty = pretty
        self.json_options = json_options
        self.markers = markers


class Document:
    """A BSON document that prints itself as Extended JSON.

    Implements :class:`~extjson.interfaces.PrintableDocument`.

    :param document: Any :class:`~collections.abc.Mapping` with string keys,
        e.g. :class:`dict`, :class:`~bson.son.SON` or
        :class:`~bson.raw_bson.RawBSONDocument`.
    :param json_options: A :class:`~extjson.options.CanonicalJSONOptions`.
    """

    __slots__ = ("__document", "__json_options", "__markers")

    def __init__(
        self,
        document: Mapping[str, Any],
        json_options: CanonicalJSONOptions = DEFAULT_CANONICAL_JSON_OPTIONS,
        _markers: Optional[Dict[int, Any]] = None,
    ) -> None:
        if not isinstance(document, Mapping):
            raise TypeError(
                "document must be an instance of a Mapping type, not %s" % (type(document),)
            )
        self.__document = document
        self.__json_options = json_options
        self.__markers = _markers

    @property
    def document(self) -> Mapping[str, Any]:
        return self.__document

    @property
    def json_options(self) -> CanonicalJSONOptions:
        return self.__json_options

    def json_string_generator(
        self, generator: Generator, depth: int, pretty: bool, buffer: Buffer
    ) -> None:
        markers = self.__markers
        if markers is None and self.__json_options.check_circular:
            markers = {}
        ctx = _Context(generator, buffer, pretty, self.__json_options, markers)
        _write_mapping(ctx, self.__document, depth)

    def __repr__(self) -> str:
        return f"Document({self.__document!r})"


def write_value(
    generator: Generator,
    buffer: Buffer,
    value: Any,
    depth: int = 0,
    pretty: bool = False,
    json_options: CanonicalJSONOptions = DEFAULT_CANONICAL_JSON_OPTIONS,
) -> None:
    """Write one Python value to `buffer` with `generator`.

    Mappings and lists are written as documents and arrays, recursively.

    :param generator: A :class:`~extjson.interfaces.Generator`.
    :param buffer: A :class:`~extjson.interfaces.Buffer`.
    :param value: The value to write.
    :param depth: Nesting depth of `value`.
    :param pretty: Whether to put each member of a document or array on its
        own line.
    :param json_options: A :class:`~extjson.options.CanonicalJSONOptions`.
    """
    markers: Optional[Dict[int, Any]] = {} if json_options.check_circular else None
    _write(_Context(generator, buffer, pretty, json_options, markers), value, depth)


def _enter(ctx: _Context, value: Any) -> None:
    if ctx.markers is not None:
        marker_id = id(value)
        if marker_id in ctx.markers:
            raise ValueError("Circular reference detected")
        ctx.markers[marker_id] = value


def _leave(ctx: _Context, value: Any) -> None:
    if ctx.markers is not None:
        del ctx.markers[id(value)]


def _newline(ctx: _Context, depth: int) -> None:
    if ctx.pretty:
        ctx.buffer.write("\n" + _INDENT * depth)


def _write_mapping(ctx: _Context, value: Mapping[str, Any], depth: int) -> None:
    generator, buffer = ctx.generator, ctx.buffer
    _enter(ctx, value)
    buffer.write("{")
    first = True
    for key, val in value.items():
        if not isinstance(key, str):
            raise InvalidDocument(f"documents must have only string keys, key was {key!r}")
        if not first:
            buffer.write(",")
        first = False
        _newline(ctx, depth + 1)
        generator.write_string(buffer, key)
        buffer.write(":")
        generator.write_padding(buffer)
        _write(ctx, val, depth + 1)
    if not first:
        _newline(ctx, depth)
    buffer.write("}")
    _leave(ctx, value)


def _write_array(ctx: _Context, value: Sequence[Any], depth: int) -> None:
    buffer = ctx.buffer
    _enter(ctx, value)
    buffer.write("[")
    first = True
    for val in value:
        if not first:
            buffer.write(",")
        first = False
        _newline(ctx, depth + 1)
        _write(ctx, val, depth + 1)
    if not first:
        _newline(ctx, depth)
    buffer.write("]")
    _leave(ctx, value)


def _write_none(ctx: _Context, dummy0: Any, dummy1: int) -> None:
    ctx.generator.write_null(ctx.buffer)


def _write_undefined(ctx: _Context, dummy0: Any, dummy1: int) -> None:
    ctx.generator.write_undefined(ctx.buffer)


def _write_bool(ctx: _Context, value: bool, dummy0: int) -> None:
    ctx.generator.write_bool(ctx.buffer, value)


def _write_int(ctx: _Context, value: int, dummy0: int) -> None:
    if -_INT32_MAX <= value < _INT32_MAX:
        ctx.generator.write_int32(ctx.buffer, value)
    elif -_INT64_MAX <= value < _INT64_MAX:
        ctx.generator.write_int64(ctx.buffer, value)
    else:
        raise OverflowError("BSON can only handle up to 8-byte ints")


def _write_int64(ctx: _Context, value: Int64, dummy0: int) -> None:
    ctx.generator.write_int64(ctx.buffer, value)


def _write_float(ctx: _Context, value: float, dummy0: int) -> None:
    ctx.generator.write_double(ctx.buffer, value)


def _write_decimal128(ctx: _Context, value: Decimal128, dummy0: int) -> None:
    ctx.generator.write_decimal128(ctx.buffer, value)


def _write_str(ctx: _Context, value: str, dummy0: int) -> None:
    ctx.generator.write_string(ctx.buffer, value)


def _write_symbol(ctx: _Context, value: Symbol, dummy0: int) -> None:
    ctx.generator.write_symbol(ctx.buffer, value)


def _write_datetime(ctx: _Context, value: datetime.datetime, dummy0: int) -> None:
    ctx.generator.write_date(ctx.buffer, int(DatetimeMS(value)))


def _write_datetimems(ctx: _Context, value: DatetimeMS, dummy0: int) -> None:
    ctx.generator.write_date(ctx.buffer, int(value))


def _write_objectid(ctx: _Context, value: ObjectId, dummy0: int) -> None:
    ctx.generator.write_oid(ctx.buffer, value)


def _write_dbref(ctx: _Context, value: DBRef, depth: int) -> None:
    doc = value.as_doc()
    # Only {$ref, $id: ObjectId} has the compact DBPointer form.
    if len(doc) == 2 and isinstance(value.id, ObjectId):
        ctx.generator.write_dbref(ctx.buffer, value.collection, value.id)
    else:
        _LOGGER.debug("Writing %r as a document", value)
        _write_mapping(ctx, doc, depth)


def _write_timestamp(ctx: _Context, value: Timestamp, dummy0: int) -> None:
    ctx.generator.write_timestamp(ctx.buffer, value)


def _write_binary(ctx: _Context, value: Binary, dummy0: int) -> None:
    ctx.generator.write_bin_data(ctx.buffer, bytes(value), value.subtype)


def _write_bytes(ctx: _Context, value: bytes, dummy0: int) -> None:
    ctx.generator.write_bin_data(ctx.buffer, value, 0)


def _write_uuid(ctx: _Context, value: uuid.UUID, dummy0: int) -> None:
    binval = Binary.from_uuid(value, uuid_representation=ctx.json_options.uuid_representation)
    ctx.generator.write_bin_data(ctx.buffer, bytes(binval), binval.subtype)


def _write_regex(ctx: _Context, value: Any, dummy0: int) -> None:
    flags = ""
    if value.flags & re.IGNORECASE:
        flags += "i"
    if value.flags & re.LOCALE:
        flags += "l"
    if value.flags & re.MULTILINE:
        flags += "m"
    if value.flags & re.DOTALL:
        flags += "s"
    if value.flags & re.UNICODE:
        flags += "u"
    if value.flags & re.VERBOSE:
        flags += "x"
    # bytes patterns are decoded by the generator.
    ctx.generator.write_regex(ctx.buffer, value.pattern, flags)


def _write_code(ctx: _Context, value: Code, depth: int) -> None:
    if value.scope is None:
        ctx.generator.write_code(ctx.buffer, str(value))
    else:
        scope = Document(value.scope, ctx.json_options, _markers=ctx.markers)
        ctx.generator.write_code_with_scope(ctx.buffer, str(value), scope, depth)


def _write_min_key(ctx: _Context, dummy0: Any, dummy1: int) -> None:
    ctx.generator.write_min_key(ctx.buffer)


def _write_max_key(ctx: _Context, dummy0: Any, dummy1: int) -> None:
    ctx.generator.write_max_key(ctx.buffer)


# Writers for BSON types
# Each writer function's signature is:
#   - ctx: the _Context of the current traversal
#   - value: a Python value, e.g. a Python int for _write_int
#   - depth: the nesting depth of value
_WRITERS: Dict[Type, Callable[[_Context, Any, int], None]] = {
    bool: _write_bool,
    bytes: _write_bytes,
    datetime.datetime: _write_datetime,
    DatetimeMS: _write_datetimems,
    float: _write_float,
    int: _write_int,
    str: _write_str,
    type(None): _write_none,
    uuid.UUID: _write_uuid,
    Binary: _write_binary,
    Int64: _write_int64,
    Code: _write_code,
    DBRef: _write_dbref,
    MaxKey: _write_max_key,
    MinKey: _write_min_key,
    ObjectId: _write_objectid,
    Regex: _write_regex,
    RE_TYPE: _write_regex,
    Timestamp: _write_timestamp,
    Decimal128: _write_decimal128,
    Symbol: _write_symbol,
    Undefined: _write_undefined,
    dict: _write_mapping,
    list: _write_array,
    tuple: _write_array,
}

# Map each _type_marker to its writer for faster lookup.
_MARKERS: Dict[int, Callable[[_Context, Any, int], None]] = {}
for _typ in _WRITERS:
    if hasattr(_typ, "_type_marker"):
        _MARKERS[_typ._type_marker] = _WRITERS[_typ]

_BUILT_IN_TYPES = tuple(t for t in _WRITERS)


def _find_writer(value: Any) -> Callable[[_Context, Any, int], None]:
    # Custom types that subclass a Python built-in (e.g. Binary) are
    # matched by _type_marker before the isinstance checks below.
    marker = getattr(value, "_type_marker", None)
    if marker in _MARKERS:
        func = _MARKERS[marker]
        _WRITERS[type(value)] = func
        return func

    for base in _BUILT_IN_TYPES:
        if isinstance(value, base):
            func = _WRITERS[base]
            _WRITERS[type(value)] = func
            return func

    if isinstance(value, Mapping):
        _WRITERS[type(value)] = _write_mapping
        return _write_mapping

    raise TypeError("%r is not JSON serializable" % (value,))


def _write(ctx: _Context, value: Any, depth: int) -> None:
    try:
        func = _WRITERS[type(value)]
    except KeyError:
        func = _find_writer(value)
    func(ctx, value, depth)
