################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
# limitations under the License.
################################################################################
from dataclasses import dataclass
from typing import Dict, List, Optional

from pygraviton.common.json_util import JSON, json_field


@dataclass
class FieldSchema:
    FIELD_NAME = "name"
    FIELD_TYPE = "type"
    FIELD_COMMENT = "comment"

    name: str = json_field(FIELD_NAME, default=None)
    type: str = json_field(FIELD_TYPE, default=None)
    comment: Optional[str] = json_field(FIELD_COMMENT, default=None)


@dataclass
class SerDeInfo:
    FIELD_NAME = "name"
    FIELD_SERIALIZATION_LIB = "serializationLib"

    name: Optional[str] = json_field(FIELD_NAME, default=None)
    serialization_lib: Optional[str] = json_field(FIELD_SERIALIZATION_LIB, default=None)


@dataclass
class StorageDescriptor:
    FIELD_COLS = "columns"
    FIELD_LOCATION = "location"
    FIELD_INPUT_FORMAT = "inputFormat"
    FIELD_OUTPUT_FORMAT = "outputFormat"
    FIELD_SERDE_INFO = "serdeInfo"

    cols: List[FieldSchema] = json_field(FIELD_COLS, default_factory=list)
    location: Optional[str] = json_field(FIELD_LOCATION, default=None)
    input_format: Optional[str] = json_field(FIELD_INPUT_FORMAT, default=None)
    output_format: Optional[str] = json_field(FIELD_OUTPUT_FORMAT, default=None)
    serde_info: Optional[SerDeInfo] = json_field(FIELD_SERDE_INFO, default=None)


@dataclass
class HiveTableRecord:
    """A table as the Hive Metastore stores and transmits it."""

    FIELD_TABLE_NAME = "name"
    FIELD_DB_NAME = "databaseName"
    FIELD_OWNER = "owner"
    FIELD_TABLE_TYPE = "tableType"
    FIELD_PARAMETERS = "parameters"
    FIELD_CREATE_TIME = "createTime"
    FIELD_SD = "storageDescriptor"
    FIELD_PARTITION_KEYS = "partitionKeys"

    table_name: str = json_field(FIELD_TABLE_NAME, default=None)
    db_name: Optional[str] = json_field(FIELD_DB_NAME, default=None)
    owner: Optional[str] = json_field(FIELD_OWNER, default=None)
    table_type: Optional[str] = json_field(FIELD_TABLE_TYPE, default=None)
    parameters: Dict[str, Optional[str]] = json_field(FIELD_PARAMETERS, default_factory=dict)
    create_time: int = json_field(FIELD_CREATE_TIME, default=0)
    sd: Optional[StorageDescriptor] = json_field(FIELD_SD, default=None)
    partition_keys: List[FieldSchema] = json_field(FIELD_PARTITION_KEYS, default_factory=list)

    def to_json(self, **kwargs) -> str:
        return JSON.to_json(self, **kwargs)

    @staticmethod
    def from_json(json_str: str) -> "HiveTableRecord":
        return JSON.from_json(json_str, HiveTableRecord)
