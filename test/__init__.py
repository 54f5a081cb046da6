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

"""Test suite for extjson."""

import io
import logging
import unittest

from extjson.generator import CanonicalGenerator

_LOGGER = logging.getLogger("extjson")
_saved_level = None


def setup():
    global _saved_level
    _saved_level = _LOGGER.level
    # Exercise the debug logging paths.
    _LOGGER.setLevel(logging.DEBUG)


def teardown():
    _LOGGER.setLevel(_saved_level or logging.NOTSET)


class GeneratorTestCase(unittest.TestCase):
    """Base class for tests that drive a generator directly."""

    def setUp(self):
        self.generator = CanonicalGenerator()

    def render(self, method, *args, **kwargs):
        """Return the text written by ``self.generator.<method>(buf, ...)``."""
        buf = io.StringIO()
        getattr(self.generator, method)(buf, *args, **kwargs)
        return buf.getvalue()
