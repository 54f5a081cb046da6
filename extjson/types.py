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

"""Python representations of the deprecated BSON types that :mod:`bson`
decodes to plain Python values.

PyMongo decodes BSON symbols to :class:`str` and BSON undefined to ``None``,
so the original type is lost. These wrappers let callers ask for the
``$symbol`` and ``$undefined`` renderings explicitly.
"""
from __future__ import annotations

from typing import Any


class Symbol(str):
    """BSON symbol (type 0x0E), a deprecated alias of string."""

    __slots__ = ()

    _type_marker = 14

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"


class Undefined:
    """BSON undefined (type 0x06)."""

    __slots__ = ()

    _type_marker = 6

    def __getstate__(self) -> Any:
        return {}

    def __setstate__(self, state: Any) -> None:
        pass

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Undefined)

    def __hash__(self) -> int:
        return hash(self._type_marker)

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __repr__(self) -> str:
        return "Undefined()"


UNDEFINED = Undefined()
