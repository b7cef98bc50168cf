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


class CatalogException(Exception):
    """Base catalog exception"""


class UnsupportedTableTypeException(CatalogException):
    """The metastore reports a table type this catalog cannot represent"""

    def __init__(self, table_type: str):
        self.table_type = table_type
        super().__init__(f"Unsupported table type: {table_type}")


class TypeConversionException(CatalogException):
    """A column type has no counterpart in the target type system"""

    def __init__(self, type_text: str, reason: str = None):
        self.type_text = type_text
        message = f"Cannot convert type {type_text}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
