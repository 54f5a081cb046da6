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

"""Exceptions raised by the :mod:`extjson` package."""
from __future__ import annotations

from typing import Any

from bson.errors import BSONError


class ExtendedJSONError(BSONError):
    """Base class for all Extended JSON encoding exceptions."""


class UnrepresentableValueError(ExtendedJSONError):
    """Raised when a value has no textual form in Extended JSON.

    Encoding is aborted when this is raised; no partial output is returned
    by :func:`~extjson.json_util.dumps`.

    :param value: The offending value.
    """

    code = 51757

    def __init__(self, value: Any) -> None:
        super().__init__(f"Number {value!r} cannot be represented in JSON")
        self.value = value
