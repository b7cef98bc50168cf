"""
Licensed to the Apache Software Foundation (ASF) under one
or more contributor license agreements.  See the NOTICE file
distributed with this work for additional information
regarding copyright ownership.  The ASF licenses this file
to you under the Apache License, Version 2.0 (the
"License"); you may not use this file except in compliance
with the License.  You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""
import unittest

from pygraviton.common.identifier import NameIdentifier, Namespace


class IdentifierTest(unittest.TestCase):

    def test_namespace(self):
        namespace = Namespace.of("metalake", "catalog", "db")
        self.assertEqual(("metalake", "catalog", "db"), namespace.levels())
        self.assertEqual("catalog", namespace.level(1))
        self.assertEqual(3, namespace.length())
        self.assertFalse(namespace.is_empty())
        self.assertEqual("metalake.catalog.db", str(namespace))
        self.assertTrue(Namespace.empty().is_empty())
        with self.assertRaises(IndexError):
            namespace.level(3)
        with self.assertRaises(ValueError):
            Namespace.of("metalake", "")

    def test_name_identifier(self):
        identifier = NameIdentifier.of("metalake", "catalog", "db", "t1")
        self.assertEqual("t1", identifier.name())
        self.assertEqual(Namespace.of("metalake", "catalog", "db"), identifier.namespace())
        self.assertTrue(identifier.has_namespace())
        self.assertEqual("metalake.catalog.db.t1", str(identifier))
        self.assertEqual(identifier, NameIdentifier.parse("metalake.catalog.db.t1"))

        single = NameIdentifier.of("metalake")
        self.assertFalse(single.has_namespace())
        self.assertEqual("metalake", str(single))

    def test_invalid_name_identifier(self):
        with self.assertRaises(ValueError):
            NameIdentifier.of()
        with self.assertRaises(ValueError):
            NameIdentifier.parse("")
        with self.assertRaises(ValueError):
            NameIdentifier.parse("db.")


if __name__ == '__main__':
    unittest.main()
