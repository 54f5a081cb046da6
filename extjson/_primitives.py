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

"""Text primitives shared by the Extended JSON generators."""
from __future__ import annotations

import base64
import json.encoder
import logging
import math
import sys
from typing import Any, Union

from bson.decimal128 import Decimal128
from bson.objectid import ObjectId

from extjson.errors import UnrepresentableValueError

_LOGGER = logging.getLogger(__name__)

# The C accelerated encoder when available. Escapes '"', '\' and every
# character below 0x20, and returns the text with its surrounding quotes.
_encode_basestring = json.encoder.encode_basestring

_DOUBLE_MAX = sys.float_info.max

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT32_MAX = 2**32 - 1


def quote_string(value: Union[str, bytes], unicode_decode_error_handler: str = "strict") -> str:
    """Return `value` as a quoted and escaped JSON string literal.

    :param value: A :class:`str`, or UTF-8 encoded :class:`bytes`.
    :param unicode_decode_error_handler: The error handler used when
        decoding `bytes`, as accepted by :meth:`bytes.decode`.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", unicode_decode_error_handler)
    return _encode_basestring(value)


def b64encode(data: bytes) -> str:
    return base64.b64encode(data).decode()


def format_oid(oid: Any) -> str:
    """Return the 24 lowercase hex characters of an ObjectId.

    `oid` may be an :class:`~bson.objectid.ObjectId`, 12 bytes, or a
    24 character hex string.
    """
    if not isinstance(oid, ObjectId):
        oid = ObjectId(oid)
    return oid.binary.hex()


def format_subtype(subtype: int) -> str:
    if not 0 <= subtype < 256:
        raise ValueError("subtype must be contained in [0, 256)")
    return "%02x" % subtype


def check_int32(value: int) -> int:
    value = int(value)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"{value!r} does not fit in a 32-bit integer")
    return value


def check_int64(value: int) -> int:
    value = int(value)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise OverflowError(f"{value!r} does not fit in a 64-bit integer")
    return value


def check_uint32(value: int) -> int:
    value = int(value)
    if not 0 <= value <= _UINT32_MAX:
        raise OverflowError(f"{value!r} does not fit in an unsigned 32-bit integer")
    return value


def format_double(value: float) -> str:
    """Return the text of a double: ``NaN``, ``Infinity``, ``-Infinity`` or
    the shortest string that round trips through :func:`float`.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # Every finite double lies in this range.
    if not -_DOUBLE_MAX <= value <= _DOUBLE_MAX:
        _LOGGER.error("Refusing to encode double %r", value)
        raise UnrepresentableValueError(value)
    return repr(value)


def format_decimal128(value: Any) -> str:
    """Return the IEEE 754-2008 canonical string of a Decimal128.

    `value` may be anything :class:`~bson.decimal128.Decimal128` accepts.
    """
    if not isinstance(value, Decimal128):
        value = Decimal128(value)
    dec = value.to_decimal()
    if dec.is_nan():
        return "NaN"
    if dec.is_infinite():
        return "-Infinity" if dec.is_signed() else "Infinity"
    return str(value)
