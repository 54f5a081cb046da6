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

"""Interfaces between Extended JSON generators and the documents they print.

A :class:`Generator` writes one value at a time. A :class:`PrintableDocument`
writes its own braces, keys and separators and calls back into a generator
for each value. The two are mutually recursive: a generator prints the
scope of a code-with-scope value by calling
:meth:`PrintableDocument.json_string_generator`.
"""
from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from bson.timestamp import Timestamp


@runtime_checkable
class Buffer(Protocol):
    """An append-only text sink, e.g. :class:`io.StringIO`."""

    def write(self, s: str) -> Any:
        ...


@runtime_checkable
class PrintableDocument(Protocol):
    def json_string_generator(
        self, generator: Generator, depth: int, pretty: bool, buffer: Buffer
    ) -> None:
        """Write this document to `buffer`, using `generator` for each value.

        :param generator: The :class:`Generator` to write values with.
        :param depth: Nesting depth of this document, 0 for a top level
            document.
        :param pretty: Whether to put each member on its own line.
        :param buffer: The :class:`Buffer` to append to.
        """
        ...


class Generator(Protocol):
    """One write operation per BSON value kind.

    Every operation appends the complete text of one value to `buffer` and
    nothing else: no separators or brackets belonging to the enclosing
    document.
    """

    def write_null(self, buffer: Buffer) -> None:
        ...

    def write_undefined(self, buffer: Buffer) -> None:
        ...

    def write_string(self, buffer: Buffer, value: Union[str, bytes]) -> None:
        ...

    def write_bool(self, buffer: Buffer, value: bool) -> None:
        ...

    def write_int32(self, buffer: Buffer, value: int) -> None:
        ...

    def write_int64(self, buffer: Buffer, value: int) -> None:
        ...

    def write_double(self, buffer: Buffer, value: float) -> None:
        ...

    def write_decimal128(self, buffer: Buffer, value: Any) -> None:
        ...

    def write_date(self, buffer: Buffer, value: Any) -> None:
        ...

    def write_dbref(self, buffer: Buffer, ref: Union[str, bytes], oid: Any) -> None:
        ...

    def write_oid(self, buffer: Buffer, value: Any) -> None:
        ...

    def write_timestamp(self, buffer: Buffer, value: Timestamp) -> None:
        ...

    def write_bin_data(self, buffer: Buffer, data: bytes, subtype: int) -> None:
        ...

    def write_regex(
        self, buffer: Buffer, pattern: Union[str, bytes], options: Union[str, bytes]
    ) -> None:
        ...

    def write_symbol(self, buffer: Buffer, value: Union[str, bytes]) -> None:
        ...

    def write_code(self, buffer: Buffer, code: Union[str, bytes]) -> None:
        ...

    def write_code_with_scope(
        self,
        buffer: Buffer,
        code: Union[str, bytes],
        scope: PrintableDocument,
        depth: int = 0,
    ) -> None:
        ...

    def write_min_key(self, buffer: Buffer) -> None:
        ...

    def write_max_key(self, buffer: Buffer) -> None:
        ...

    def write_padding(self, buffer: Buffer) -> None:
        ...
