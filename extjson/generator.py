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

"""Canonical Extended JSON 2.0.0 value generator.

Example usage:

.. doctest::

   >>> import io
   >>> from bson.int64 import Int64
   >>> from extjson.generator import CanonicalGenerator
   >>> buf = io.StringIO()
   >>> CanonicalGenerator().write_int64(buf, Int64(42))
   >>> buf.getvalue()
   '{"$numberLong":"42"}'

.. seealso:: The documentation for the `Extended JSON Specification
   <https://github.com/mongodb/specifications/blob/master/source/extended-json.rst>`_.
"""
from __future__ import annotations

import datetime
from typing import TYPE_CHECKING, Any, Union

from bson.datetime_ms import DatetimeMS
from bson.timestamp import Timestamp

from extjson._primitives import (
    b64encode,
    check_int32,
    check_int64,
    check_uint32,
    format_decimal128,
    format_double,
    format_oid,
    format_subtype,
    quote_string,
)

if TYPE_CHECKING:
    from extjson.interfaces import Buffer, PrintableDocument


class CanonicalGenerator:
    """Writes BSON values as canonical Extended JSON, version 2.0.0.

    Canonical mode is type preserving: every value that is not native to
    JSON is wrapped in a type tagged object such as ``{"$numberLong":"42"}``.

    Instances hold no state. Each ``write_*`` method appends exactly one
    value to the `buffer` it is given, so one generator may be shared by
    any number of threads as long as each uses its own buffer.

    :param unicode_decode_error_handler: The error handler used to decode
        :class:`bytes` strings, see :meth:`bytes.decode`. Defaults to
        ``"strict"``.
    """

    __slots__ = ("__unicode_decode_error_handler",)

    def __init__(self, unicode_decode_error_handler: str = "strict") -> None:
        self.__unicode_decode_error_handler = unicode_decode_error_handler

    @property
    def unicode_decode_error_handler(self) -> str:
        return self.__unicode_decode_error_handler

    def _quote(self, value: Union[str, bytes]) -> str:
        return quote_string(value, self.__unicode_decode_error_handler)

    def write_null(self, buffer: Buffer) -> None:
        buffer.write("null")

    def write_undefined(self, buffer: Buffer) -> None:
        buffer.write('{"$undefined":true}')

    def write_string(self, buffer: Buffer, value: Union[str, bytes]) -> None:
        buffer.write(self._quote(value))

    def write_bool(self, buffer: Buffer, value: bool) -> None:
        buffer.write("true" if value else "false")

    def write_int32(self, buffer: Buffer, value: int) -> None:
        buffer.write('{"$numberInt":"%d"}' % check_int32(value))

    def write_int64(self, buffer: Buffer, value: int) -> None:
        buffer.write('{"$numberLong":"%d"}' % check_int64(value))

    def write_double(self, buffer: Buffer, value: float) -> None:
        buffer.write('{"$numberDouble":"%s"}' % format_double(value))

    def write_decimal128(self, buffer: Buffer, value: Any) -> None:
        buffer.write('{"$numberDecimal":"%s"}' % format_decimal128(value))

    def write_date(self, buffer: Buffer, value: Any) -> None:
        """Write a UTC datetime.

        :param value: Milliseconds since the Unix epoch, as an :class:`int`
            or :class:`~bson.datetime_ms.DatetimeMS`. A
            :class:`datetime.datetime` is also accepted; naive values are
            taken to be UTC.
        """
        if isinstance(value, datetime.datetime):
            value = DatetimeMS(value)
        buffer.write('{"$date":{"$numberLong":"%d"}}' % check_int64(int(value)))

    def write_dbref(self, buffer: Buffer, ref: Union[str, bytes], oid: Any) -> None:
        # Collection names may contain control characters. The ObjectId is
        # hex text and is written unescaped.
        buffer.write('{"$ref":%s,"$id":"%s"}' % (self._quote(ref), format_oid(oid)))

    def write_oid(self, buffer: Buffer, value: Any) -> None:
        buffer.write('{"$oid":"%s"}' % format_oid(value))

    def write_timestamp(self, buffer: Buffer, value: Timestamp) -> None:
        buffer.write(
            '{"$timestamp":{"t":%d,"i":%d}}'
            % (check_uint32(value.time), check_uint32(value.inc))
        )

    def write_bin_data(self, buffer: Buffer, data: bytes, subtype: int) -> None:
        buffer.write(
            '{"$binary":{"base64":"%s","subType":"%s"}}'
            % (b64encode(data), format_subtype(subtype))
        )

    def write_regex(
        self, buffer: Buffer, pattern: Union[str, bytes], options: Union[str, bytes]
    ) -> None:
        buffer.write(
            '{"$regularExpression":{"pattern":%s,"options":%s}}'
            % (self._quote(pattern), self._quote(options))
        )

    def write_symbol(self, buffer: Buffer, value: Union[str, bytes]) -> None:
        buffer.write('{"$symbol":%s}' % self._quote(value))

    def write_code(self, buffer: Buffer, code: Union[str, bytes]) -> None:
        buffer.write('{"$code":%s}' % self._quote(code))

    def write_code_with_scope(
        self,
        buffer: Buffer,
        code: Union[str, bytes],
        scope: PrintableDocument,
        depth: int = 0,
    ) -> None:
        """Write JavaScript code together with its scope document.

        The scope prints itself through
        :meth:`~extjson.interfaces.PrintableDocument.json_string_generator`
        one level deeper than `depth`, always in compact form.
        """
        buffer.write('{"$code":%s,"$scope":' % self._quote(code))
        scope.json_string_generator(self, depth + 1, False, buffer)
        buffer.write("}")

    def write_min_key(self, buffer: Buffer) -> None:
        buffer.write('{"$minKey":1}')

    def write_max_key(self, buffer: Buffer) -> None:
        buffer.write('{"$maxKey":1}')

    def write_padding(self, buffer: Buffer) -> None:
        """Canonical output has no whitespace between tokens."""

    def __repr__(self) -> str:
        return "%s(unicode_decode_error_handler=%r)" % (
            self.__class__.__name__,
            self.__unicode_decode_error_handler,
        )
