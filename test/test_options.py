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

"""Test the options module."""

import sys
import unittest

sys.path[0:0] = [""]

from bson.binary import UuidRepresentation
from bson.codec_options import CodecOptions
from pymongo.errors import ConfigurationError

from extjson.options import (
    DEFAULT_CANONICAL_JSON_OPTIONS,
    PRETTY_CANONICAL_JSON_OPTIONS,
    CanonicalJSONOptions,
)


class TestCanonicalJSONOptions(unittest.TestCase):
    def test_defaults(self):
        opts = DEFAULT_CANONICAL_JSON_OPTIONS
        self.assertIsInstance(opts, CodecOptions)
        self.assertFalse(opts.pretty)
        self.assertTrue(opts.check_circular)
        self.assertEqual(UuidRepresentation.STANDARD, opts.uuid_representation)
        self.assertEqual("strict", opts.unicode_decode_error_handler)
        self.assertTrue(PRETTY_CANONICAL_JSON_OPTIONS.pretty)

    def test_codec_options_arguments(self):
        opts = CanonicalJSONOptions(
            uuid_representation=UuidRepresentation.JAVA_LEGACY,
            unicode_decode_error_handler="ignore",
        )
        self.assertEqual(UuidRepresentation.JAVA_LEGACY, opts.uuid_representation)
        self.assertEqual("ignore", opts.unicode_decode_error_handler)

    def test_invalid(self):
        with self.assertRaises(ConfigurationError):
            CanonicalJSONOptions(pretty=1)
        with self.assertRaises(ConfigurationError):
            CanonicalJSONOptions(check_circular="yes")
        with self.assertRaises(ValueError):
            CanonicalJSONOptions(uuid_representation=42)

    def test_with_options(self):
        opts = DEFAULT_CANONICAL_JSON_OPTIONS.with_options(pretty=True)
        self.assertIsInstance(opts, CanonicalJSONOptions)
        self.assertTrue(opts.pretty)
        self.assertTrue(opts.check_circular)
        self.assertEqual(UuidRepresentation.STANDARD, opts.uuid_representation)
        self.assertFalse(DEFAULT_CANONICAL_JSON_OPTIONS.pretty)

        opts = opts.with_options(uuid_representation=UuidRepresentation.PYTHON_LEGACY)
        self.assertTrue(opts.pretty)
        self.assertEqual(UuidRepresentation.PYTHON_LEGACY, opts.uuid_representation)

        opts = DEFAULT_CANONICAL_JSON_OPTIONS.with_options(check_circular=False)
        self.assertFalse(opts.check_circular)
        self.assertFalse(opts.with_options(pretty=True).check_circular)

    def test_equality(self):
        self.assertEqual(DEFAULT_CANONICAL_JSON_OPTIONS, CanonicalJSONOptions())
        self.assertEqual(PRETTY_CANONICAL_JSON_OPTIONS, CanonicalJSONOptions(pretty=True))
        self.assertNotEqual(PRETTY_CANONICAL_JSON_OPTIONS, DEFAULT_CANONICAL_JSON_OPTIONS)
        self.assertNotEqual(
            CanonicalJSONOptions(check_circular=False), DEFAULT_CANONICAL_JSON_OPTIONS
        )
        self.assertEqual(
            DEFAULT_CANONICAL_JSON_OPTIONS,
            PRETTY_CANONICAL_JSON_OPTIONS.with_options(pretty=False),
        )
        self.assertFalse(PRETTY_CANONICAL_JSON_OPTIONS == DEFAULT_CANONICAL_JSON_OPTIONS)

    def test_repr(self):
        text = repr(CanonicalJSONOptions(pretty=True, check_circular=False))
        self.assertTrue(text.startswith("CanonicalJSONOptions(pretty=True, check_circular=False, "))
        self.assertIn("uuid_representation=", text)


if __name__ == "__main__":
    unittest.main()
