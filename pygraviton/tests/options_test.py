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

from pygraviton.catalog.hive.hive_table_options import HiveTableOptions
from pygraviton.catalog.hive.table_type import TableType
from pygraviton.common.options import ConfigOptions, Options


class OptionsTest(unittest.TestCase):

    def test_typed_get(self):
        enabled = ConfigOptions.key("cache.enabled").boolean_type().default_value(False)
        size = ConfigOptions.key("cache.size").int_type().default_value(16)
        options = Options({"cache.enabled": "true", "cache.size": " 32 "})

        self.assertTrue(options.get(enabled))
        self.assertEqual(32, options.get(size))
        self.assertEqual(16, Options.from_none().get(size))
        self.assertEqual(64, Options.from_none().get(size, 64))

    def test_set_and_copy(self):
        options = Options.from_none()
        options.set(HiveTableOptions.TABLE_TYPE, TableType.EXTERNAL_TABLE)
        self.assertEqual({"table-type": "EXTERNAL_TABLE"}, options.to_map())
        self.assertTrue(options.contains(HiveTableOptions.TABLE_TYPE))

        copied = options.copy()
        copied.set(HiveTableOptions.LOCATION, "/tmp/t1")
        self.assertFalse(options.contains(HiveTableOptions.LOCATION))
        self.assertEqual(TableType.EXTERNAL_TABLE, copied.get(HiveTableOptions.TABLE_TYPE))

    def test_hive_table_option_defaults(self):
        options = Options.from_none()
        self.assertEqual(TableType.MANAGED_TABLE, options.get(HiveTableOptions.TABLE_TYPE))
        self.assertIsNone(options.get(HiveTableOptions.LOCATION))
        self.assertFalse(HiveTableOptions.LOCATION.has_default_value())
        self.assertEqual("org.apache.hadoop.mapred.TextInputFormat", options.get(HiveTableOptions.INPUT_FORMAT))
        self.assertTrue(HiveTableOptions.SERDE_LIB.description())

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            Options({"table-type": "NOT_A_TYPE"}).get(HiveTableOptions.TABLE_TYPE)
        with self.assertRaises(ValueError):
            Options({"flag": "maybe"}).get(ConfigOptions.key("flag").boolean_type().no_default_value())
        with self.assertRaises(ValueError):
            ConfigOptions.key("")


if __name__ == '__main__':
    unittest.main()
