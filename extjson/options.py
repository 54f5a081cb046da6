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

"""Options for canonical Extended JSON encoding."""
from __future__ import annotations

from typing import Any, Type, cast

from bson.binary import UuidRepresentation
from bson.codec_options import CodecOptions
from pymongo.errors import ConfigurationError


class CanonicalJSONOptions(CodecOptions):
    """Encapsulates options for :func:`~extjson.json_util.dumps`.

    :param pretty: If ``True``, documents and arrays are written with one
        member per line, indented by two spaces per nesting level. Scope
        documents of :class:`~bson.code.Code` values are always compact.
        Defaults to ``False``.
    :param check_circular: If ``True``, a document or array that contains
        itself raises :exc:`ValueError` instead of recursing forever.
        Defaults to ``True``.
    :param args: arguments to :class:`~bson.codec_options.CodecOptions`
    :param kwargs: arguments to :class:`~bson.codec_options.CodecOptions`

    Of the :class:`~bson.codec_options.CodecOptions` arguments,
    `uuid_representation` selects how :class:`uuid.UUID` values are
    converted to Binary and defaults to
    :data:`~bson.binary.UuidRepresentation.STANDARD`, and
    `unicode_decode_error_handler` is used when a string is given as
    UTF-8 :class:`bytes`.

    Two instances compare equal only when `pretty` and `check_circular`
    match as well as every :class:`~bson.codec_options.CodecOptions` field.
    """

    pretty: bool
    check_circular: bool

    def __new__(
        cls: Type[CanonicalJSONOptions],
        pretty: bool = False,
        check_circular: bool = True,
        *args: Any,
        **kwargs: Any,
    ) -> CanonicalJSONOptions:
        kwargs["uuid_representation"] = kwargs.get(
            "uuid_representation", UuidRepresentation.STANDARD
        )
        if not isinstance(pretty, bool):
            raise ConfigurationError("CanonicalJSONOptions.pretty must be True or False.")
        if not isinstance(check_circular, bool):
            raise ConfigurationError(
                "CanonicalJSONOptions.check_circular must be True or False."
            )
        self = cast(CanonicalJSONOptions, super().__new__(cls, *args, **kwargs))
        self.pretty = pretty
        self.check_circular = check_circular
        return self

    def _arguments_repr(self) -> str:
        return "pretty={!r}, check_circular={!r}, {}".format(
            self.pretty,
            self.check_circular,
            super()._arguments_repr(),
        )

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, CanonicalJSONOptions):
            return (self.pretty, self.check_circular, tuple(self)) == (
                other.pretty,
                other.check_circular,
                tuple(other),
            )
        return super().__eq__(other)

    def __ne__(self, other: Any) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self) -> int:
        return hash((super().__hash__(), self.pretty, self.check_circular))

    def with_options(self, **kwargs: Any) -> CanonicalJSONOptions:
        """Make a copy of this CanonicalJSONOptions, overriding some options::

            >>> from extjson.options import DEFAULT_CANONICAL_JSON_OPTIONS
            >>> DEFAULT_CANONICAL_JSON_OPTIONS.pretty
            False
            >>> DEFAULT_CANONICAL_JSON_OPTIONS.with_options(pretty=True).pretty
            True
        """
        opts = self._asdict()
        opts["pretty"] = kwargs.get("pretty", self.pretty)
        opts["check_circular"] = kwargs.get("check_circular", self.check_circular)
        opts.update(kwargs)
        return CanonicalJSONOptions(**opts)


DEFAULT_CANONICAL_JSON_OPTIONS: CanonicalJSONOptions = CanonicalJSONOptions()
"""The default :class:`CanonicalJSONOptions`: compact output."""

PRETTY_CANONICAL_JSON_OPTIONS: CanonicalJSONOptions = CanonicalJSONOptions(pretty=True)
""":class:`CanonicalJSONOptions` for indented output."""
