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

from parameterized import parameterized

from pygraviton.catalog.catalog_exception import UnsupportedTableTypeException
from pygraviton.catalog.hive.table_type import SUPPORT_TABLE_TYPES, TableType


class TableTypeTest(unittest.TestCase):

    @parameterized.expand([
        ("MANAGED_TABLE", TableType.MANAGED_TABLE),
        ("EXTERNAL_TABLE", TableType.EXTERNAL_TABLE),
    ])
    def test_parse(self, value, expected):
        self.assertEqual(expected, TableType.parse(value))

    @parameterized.expand([
        ("VIRTUAL_VIEW",),
        ("MATERIALIZED_VIEW",),
        ("INDEX_TABLE",),
        ("TEMPORARY_TABLE",),
        ("managed_table",),
        ("external_table",),
        (" MANAGED_TABLE ",),
        ("",),
        (None,),
    ])
    def test_parse_unsupported(self, value):
        with self.assertRaises(UnsupportedTableTypeException) as context:
            TableType.parse(value)
        self.assertEqual(value, context.exception.table_type)

    def test_supported_types(self):
        self.assertEqual({TableType.MANAGED_TABLE, TableType.EXTERNAL_TABLE}, set(SUPPORT_TABLE_TYPES))
        self.assertTrue(TableType.MANAGED_TABLE.is_supported())
        self.assertFalse(TableType.VIRTUAL_VIEW.is_supported())

    def test_str(self):
        self.assertEqual("MANAGED_TABLE", str(TableType.MANAGED_TABLE))
        self.assertEqual("EXTERNAL_TABLE", str(TableType.EXTERNAL_TABLE))


if __name__ == '__main__':
    unittest.main()
