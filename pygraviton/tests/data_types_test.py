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

import pyarrow
from parameterized import parameterized

from pygraviton.schema.data_types import (ArrayType, AtomicType, DataField, MapType,
                                          MultisetType, PyarrowFieldParser, RowType)


class DataTypesTest(unittest.TestCase):
    def test_atomic_type(self):
        self.assertEqual(str(AtomicType("TINYINT", nullable=False)), "TINYINT NOT NULL")
        self.assertEqual(str(AtomicType("DECIMAL(10, 6)")), "DECIMAL(10, 6)")
        self.assertEqual(str(AtomicType("VARCHAR(20)")), "VARCHAR(20)")

    @parameterized.expand([
        (ArrayType, AtomicType("TIMESTAMP(6)"), "ARRAY<TIMESTAMP(6)>"),
        (MultisetType, AtomicType("STRING"), "MULTISET<STRING>"),
    ])
    def test_collection_types(self, data_type_class, element_type, expected):
        self.assertEqual(str(data_type_class(True, element_type)), expected)
        self.assertEqual(str(data_type_class(False, element_type)), expected + " NOT NULL")

    def test_map_type(self):
        self.assertEqual(str(MapType(True, AtomicType("STRING"), AtomicType("TIMESTAMP(6)"))),
                         "MAP<STRING, TIMESTAMP(6)>")

    def test_row_type(self):
        row_type = RowType(True, [DataField(0, "a", AtomicType("STRING"), "Someone's desc."),
                                  DataField(1, "b", AtomicType("TIMESTAMP(6)"))])
        self.assertEqual(str(row_type), "ROW<a: STRING COMMENT Someone's desc., b: TIMESTAMP(6)>")

    @parameterized.expand([
        (AtomicType("TINYINT"), pyarrow.int8()),
        (AtomicType("INT"), pyarrow.int32()),
        (AtomicType("BIGINT"), pyarrow.int64()),
        (AtomicType("DOUBLE"), pyarrow.float64()),
        (AtomicType("VARCHAR(10)"), pyarrow.string()),
        (AtomicType("BINARY(12)"), pyarrow.binary(12)),
        (AtomicType("DECIMAL(10, 6)"), pyarrow.decimal128(10, 6)),
        (AtomicType("DATE"), pyarrow.date32()),
        (AtomicType("TIME(3)"), pyarrow.time32('ms')),
        (AtomicType("TIMESTAMP(9)"), pyarrow.timestamp('ns')),
        (AtomicType("TIMESTAMP"), pyarrow.timestamp('us')),
        (ArrayType(True, AtomicType("INT")), pyarrow.list_(pyarrow.int32())),
    ])
    def test_from_data_type(self, data_type, pa_type):
        self.assertEqual(pa_type, PyarrowFieldParser.from_data_type(data_type))

    def test_from_data_type_unsupported(self):
        with self.assertRaises(ValueError):
            PyarrowFieldParser.from_data_type(MultisetType(True, AtomicType("INT")))

    def test_pyarrow_round_trip(self):
        fields = [
            DataField(0, "f0", AtomicType("SMALLINT", False), "desc"),
            DataField(1, "f1", AtomicType("DECIMAL(10, 6)")),
            DataField(2, "f2", AtomicType("TIMESTAMP(3)")),
            DataField(3, "f3", MapType(True, AtomicType("STRING", False), AtomicType("INT"))),
            DataField(4, "f4", RowType(True, [DataField(0, "x", AtomicType("DOUBLE"))])),
        ]
        restored = [PyarrowFieldParser.to_data_field(f.id, PyarrowFieldParser.from_data_field(f)) for f in fields]
        self.assertEqual(fields, restored)
        self.assertEqual([str(f.type) for f in fields], [str(f.type) for f in restored])


if __name__ == '__main__':
    unittest.main()
