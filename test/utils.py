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

"""Utilities for testing extjson."""

from extjson.generator import CanonicalGenerator


class PaddedGenerator(CanonicalGenerator):
    """Writes a space wherever padding is requested."""

    def write_padding(self, buffer):
        buffer.write(" ")


class RecordingDocument:
    """A PrintableDocument that records how it was called."""

    def __init__(self):
        self.calls = []

    def json_string_generator(self, generator, depth, pretty, buffer):
        self.calls.append((generator, depth, pretty))
        buffer.write("{}")
