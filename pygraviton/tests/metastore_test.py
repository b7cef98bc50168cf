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
import json
import unittest

from pygraviton.catalog.hive.metastore import (FieldSchema, HiveTableRecord, SerDeInfo,
                                               StorageDescriptor)


class HiveTableRecordTest(unittest.TestCase):

    def setUp(self):
        self.record = HiveTableRecord(
            table_name="t1",
            db_name="db1",
            owner="graviton",
            table_type="MANAGED_TABLE",
            parameters={"comment": "hello"},
            create_time=1000,
            sd=StorageDescriptor(
                cols=[FieldSchema("id", "int", None), FieldSchema("name", "string", "user name")],
                location="/warehouse/t1",
                input_format="TextInputFormat",
                output_format="TextOutputFormat",
                serde_info=SerDeInfo("t1", "LazySimpleSerDe"),
            ),
        )

    def test_to_json(self):
        data = json.loads(self.record.to_json())
        self.assertEqual({
            "name": "t1",
            "databaseName": "db1",
            "owner": "graviton",
            "tableType": "MANAGED_TABLE",
            "parameters": {"comment": "hello"},
            "createTime": 1000,
            "storageDescriptor": {
                "columns": [
                    {"name": "id", "type": "int", "comment": None},
                    {"name": "name", "type": "string", "comment": "user name"},
                ],
                "location": "/warehouse/t1",
                "inputFormat": "TextInputFormat",
                "outputFormat": "TextOutputFormat",
                "serdeInfo": {"name": "t1", "serializationLib": "LazySimpleSerDe"},
            },
            "partitionKeys": [],
        }, data)

    def test_from_json(self):
        self.assertEqual(self.record, HiveTableRecord.from_json(self.record.to_json()))

    def test_from_json_partial(self):
        record = HiveTableRecord.from_json('{"name": "t2", "tableType": "EXTERNAL_TABLE", "extra": 1}')
        self.assertEqual("t2", record.table_name)
        self.assertEqual("EXTERNAL_TABLE", record.table_type)
        self.assertIsNone(record.sd)
        self.assertEqual({}, record.parameters)
        self.assertEqual([], record.partition_keys)


if __name__ == '__main__':
    unittest.main()
