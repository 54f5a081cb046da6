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

"""Tools for writing BSON documents as `canonical extended JSON`_.

This module provides two helper methods, `dumps` and `dump`, that render
any BSON document, array or single value. Canonical extended JSON is type
preserving: an :class:`int` that fits in 32 bits becomes
``{"$numberInt": ...}``, a :class:`~bson.int64.Int64` becomes
``{"$numberLong": ...}``, and so on, so that a canonical parser such as
:func:`bson.json_util.loads` recovers the original BSON types.

.. _canonical extended JSON: https://github.com/mongodb/specifications/blob/master/source/extended-json.rst

Example usage:

.. doctest::

   >>> from bson import Binary, Code
   >>> from extjson.json_util import dumps
   >>> dumps([{'foo': [1, 2]},
   ...        {'bar': {'hello': 'world'}},
   ...        {'code': Code("function x() { return 1; }")},
   ...        {'bin': Binary(b"\x01\x02\x03\x04")}])
   '[{"foo":[{"$numberInt":"1"},{"$numberInt":"2"}]},{"bar":{"hello":"world"}},{"code":{"$code":"function x() { return 1; }"}},{"bin":{"$binary":{"base64":"AQIDBA==","subType":"00"}}}]'

Example usage (with a :class:`~extjson.options.CanonicalJSONOptions` given):

.. doctest::

   >>> from extjson.json_util import dumps
   >>> from extjson.options import PRETTY_CANONICAL_JSON_OPTIONS
   >>> print(dumps({'a': 1, 'b': [True]}, json_options=PRETTY_CANONICAL_JSON_OPTIONS))
   {
     "a":{"$numberInt":"1"},
     "b":[
       true
     ]
   }

.. note::
   Relaxed and legacy extended JSON, and decoding, are provided by
   :mod:`bson.json_util`.
"""
from __future__ import annotations

import io
from typing import IO, Any, Optional

from extjson.document import write_value
from extjson.generator import CanonicalGenerator
from extjson.interfaces import Generator
from extjson.options import DEFAULT_CANONICAL_JSON_OPTIONS, CanonicalJSONOptions


def dumps(
    obj: Any,
    json_options: CanonicalJSONOptions = DEFAULT_CANONICAL_JSON_OPTIONS,
    pretty: Optional[bool] = None,
    generator: Optional[Generator] = None,
) -> str:
    """Return `obj` as canonical extended JSON text.

    :param obj: A document (any :class:`~collections.abc.Mapping`), a
        :class:`list` or :class:`tuple`, or a single BSON value.
    :param json_options: A :class:`~extjson.options.CanonicalJSONOptions`
        instance. Defaults to
        :const:`~extjson.options.DEFAULT_CANONICAL_JSON_OPTIONS`.
    :param pretty: Overrides `json_options.pretty` when not ``None``.
    :param generator: The :class:`~extjson.interfaces.Generator` used for
        each value. Defaults to a
        :class:`~extjson.generator.CanonicalGenerator` using
        `json_options.unicode_decode_error_handler`.

    Raises :exc:`TypeError` for values with no BSON type and
    :exc:`~extjson.errors.UnrepresentableValueError` for values with no
    textual form. Nothing is returned when an error is raised.
    """
    if pretty is None:
        pretty = json_options.pretty
    if generator is None:
        generator = CanonicalGenerator(json_options.unicode_decode_error_handler)
    buffer = io.StringIO()
    write_value(generator, buffer, obj, pretty=pretty, json_options=json_options)
    return buffer.getvalue()


def dump(
    obj: Any,
    fp: IO[str],
    json_options: CanonicalJSONOptions = DEFAULT_CANONICAL_JSON_OPTIONS,
    pretty: Optional[bool] = None,
    generator: Optional[Generator] = None,
) -> None:
    """Write `obj` as canonical extended JSON text to the text stream `fp`.

    Takes the same arguments as :func:`dumps`. `fp` is only written to once
    the whole of `obj` has been encoded.
    """
    fp.write(dumps(obj, json_options=json_options, pretty=pretty, generator=generator))
