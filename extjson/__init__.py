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

"""Canonical MongoDB Extended JSON (version 2.0.0) for BSON values."""
from __future__ import annotations

from extjson.document import Document, write_value
from extjson.errors import ExtendedJSONError, UnrepresentableValueError
from extjson.generator import CanonicalGenerator
from extjson.json_util import dump, dumps
from extjson.options import (
    DEFAULT_CANONICAL_JSON_OPTIONS,
    PRETTY_CANONICAL_JSON_OPTIONS,
    CanonicalJSONOptions,
)
from extjson.types import UNDEFINED, Symbol, Undefined

__all__ = [
    "CanonicalGenerator",
    "CanonicalJSONOptions",
    "DEFAULT_CANONICAL_JSON_OPTIONS",
    "Document",
    "ExtendedJSONError",
    "PRETTY_CANONICAL_JSON_OPTIONS",
    "Symbol",
    "UNDEFINED",
    "Undefined",
    "UnrepresentableValueError",
    "dump",
    "dumps",
    "write_value",
]

__version__ = "1.0.0.dev0"
