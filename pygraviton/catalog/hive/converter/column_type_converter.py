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

from abc import ABC, abstractmethod

from pygraviton.schema.data_types import DataType


class ColumnTypeConverter(ABC):
    """
    Translates column types between the catalog's internal type system and the
    type names of an external metastore.

    Both directions raise ``TypeConversionException`` for types without a
    counterpart on the other side.
    """

    @abstractmethod
    def to_external_type(self, data_type: DataType) -> str:
        """Return the fully qualified external type name for ``data_type``."""

    @abstractmethod
    def from_external_type(self, type_name: str) -> DataType:
        """Parse an external type name into an internal type."""
