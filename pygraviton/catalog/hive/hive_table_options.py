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

from pygraviton.catalog.hive.table_type import TableType
from pygraviton.common.options.config_options import ConfigOptions


class HiveTableOptions:
    """Table-creation properties that control a Hive table's storage."""

    TABLE_TYPE = (
        ConfigOptions.key("table-type")
        .enum_type(TableType)
        .default_value(TableType.MANAGED_TABLE)
        .with_description("Hive table type, MANAGED_TABLE or EXTERNAL_TABLE.")
    )

    LOCATION = (
        ConfigOptions.key("location")
        .string_type()
        .no_default_value()
        .with_description("Storage location of the table data. Left to the metastore when unset.")
    )

    INPUT_FORMAT = (
        ConfigOptions.key("input-format")
        .string_type()
        .default_value("org.apache.hadoop.mapred.TextInputFormat")
        .with_description("Class name of the record reader's input format.")
    )

    OUTPUT_FORMAT = (
        ConfigOptions.key("output-format")
        .string_type()
        .default_value("org.apache.hadoop.hive.ql.io.HiveIgnoreKeyTextOutputFormat")
        .with_description("Class name of the record writer's output format.")
    )

    SERDE_LIB = (
        ConfigOptions.key("serde-lib")
        .string_type()
        .default_value("org.apache.hadoop.hive.serde2.lazy.LazySimpleSerDe")
        .with_description("Class name of the serialization library.")
    )
