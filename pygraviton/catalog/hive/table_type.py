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

from enum import Enum

from pygraviton.catalog.catalog_exception import UnsupportedTableTypeException


class TableType(Enum):
    """Table types known to the Hive Metastore."""

    MANAGED_TABLE = "MANAGED_TABLE"
    EXTERNAL_TABLE = "EXTERNAL_TABLE"
    VIRTUAL_VIEW = "VIRTUAL_VIEW"
    INDEX_TABLE = "INDEX_TABLE"
    MATERIALIZED_VIEW = "MATERIALIZED_VIEW"

    @classmethod
    def parse(cls, value: str) -> "TableType":
        """Parse a metastore table type name, exactly as spelled, accepting only the supported subset."""
        try:
            table_type = cls(value)
        except ValueError:
            raise UnsupportedTableTypeException(value)
        if not table_type.is_supported():
            raise UnsupportedTableTypeException(value)
        return table_type

    def is_supported(self) -> bool:
        return self in SUPPORT_TABLE_TYPES

    def __str__(self) -> str:
        return self.value


# The Hive table types this catalog can represent.
SUPPORT_TABLE_TYPES = frozenset({TableType.MANAGED_TABLE, TableType.EXTERNAL_TABLE})
