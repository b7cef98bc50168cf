#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing,
#  software distributed under the License is distributed on an
#  "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY
#  KIND, either express or implied.  See the License for the
#  specific language governing permissions and limitations
#  under the License.

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

import pyarrow
from pyarrow import types


def _null_suffix(nullable: bool) -> str:
    return "" if nullable else " NOT NULL"


class DataType(ABC):
    """A column type of the catalog's engine-agnostic type system."""

    def __init__(self, nullable: bool = True):
        self.nullable = nullable

    @abstractmethod
    def __str__(self) -> str:
        pass


@dataclass
class AtomicType(DataType):
    """A type without children, named by its SQL spelling such as ``INT`` or ``DECIMAL(10, 2)``."""

    type: str

    def __init__(self, type: str, nullable: bool = True):
        super().__init__(nullable)
        self.type = type

    def __str__(self) -> str:
        return self.type + _null_suffix(self.nullable)


@dataclass
class ArrayType(DataType):
    element: DataType

    def __init__(self, nullable: bool, element_type: DataType):
        super().__init__(nullable)
        self.element = element_type

    def __str__(self) -> str:
        return "ARRAY<{}>{}".format(self.element, _null_suffix(self.nullable))


@dataclass
class MultisetType(DataType):
    element: DataType

    def __init__(self, nullable: bool, element_type: DataType):
        super().__init__(nullable)
        self.element = element_type

    def __str__(self) -> str:
        return "MULTISET<{}>{}".format(self.element, _null_suffix(self.nullable))


@dataclass
class MapType(DataType):
    key: DataType
    value: DataType

    def __init__(self, nullable: bool, key_type: DataType, value_type: DataType):
        super().__init__(nullable)
        self.key = key_type
        self.value = value_type

    def __str__(self) -> str:
        return "MAP<{}, {}>{}".format(self.key, self.value, _null_suffix(self.nullable))


@dataclass
class DataField:
    """A named, positioned child of a ROW type."""

    id: int
    name: str
    type: DataType
    description: Optional[str] = None


@dataclass
class RowType(DataType):
    fields: List[DataField]

    def __init__(self, nullable: bool, fields: List[DataField]):
        super().__init__(nullable)
        self.fields = fields or []

    def __str__(self) -> str:
        field_strs = []
        for field in self.fields:
            description = " COMMENT {}".format(field.description) if field.description else ""
            field_strs.append("{}: {}{}".format(field.name, field.type, description))
        return "ROW<{}>{}".format(', '.join(field_strs), _null_suffix(self.nullable))


class PyarrowFieldParser:

    @staticmethod
    def from_data_type(data_type: DataType) -> pyarrow.DataType:
        if isinstance(data_type, AtomicType):
            type_name = data_type.type.upper()
            if type_name == 'TINYINT':
                return pyarrow.int8()
            elif type_name == 'SMALLINT':
                return pyarrow.int16()
            elif type_name in ('INT', 'INTEGER'):
                return pyarrow.int32()
            elif type_name == 'BIGINT':
                return pyarrow.int64()
            elif type_name == 'FLOAT':
                return pyarrow.float32()
            elif type_name == 'DOUBLE':
                return pyarrow.float64()
            elif type_name == 'BOOLEAN':
                return pyarrow.bool_()
            elif type_name == 'STRING' or type_name.startswith('CHAR') or type_name.startswith('VARCHAR'):
                return pyarrow.string()
            elif type_name == 'BYTES' or type_name.startswith('VARBINARY'):
                return pyarrow.binary()
            elif type_name.startswith('BINARY'):
                if type_name == 'BINARY':
                    return pyarrow.binary(1)
                match = re.fullmatch(r'BINARY\((\d+)\)', type_name)
                if match and int(match.group(1)) > 0:
                    return pyarrow.binary(int(match.group(1)))
            elif type_name.startswith('DECIMAL'):
                if type_name == 'DECIMAL':
                    return pyarrow.decimal128(10, 0)
                match = re.fullmatch(r'DECIMAL\((\d+)(?:,\s*(\d+))?\)', type_name)
                if match:
                    return pyarrow.decimal128(int(match.group(1)), int(match.group(2) or 0))
            elif type_name == 'DATE':
                return pyarrow.date32()
            elif type_name.startswith('TIMESTAMP') and not type_name.startswith('TIMESTAMP_LTZ'):
                if type_name == 'TIMESTAMP':
                    return pyarrow.timestamp('us', tz=None)
                match = re.fullmatch(r'TIMESTAMP\((\d)\)', type_name)
                if match:
                    return pyarrow.timestamp(PyarrowFieldParser._time_unit(int(match.group(1))), tz=None)
            elif type_name.startswith('TIME'):
                if type_name == 'TIME':
                    return pyarrow.time64('us')
                match = re.fullmatch(r'TIME\((\d)\)', type_name)
                if match:
                    unit = PyarrowFieldParser._time_unit(int(match.group(1)))
                    return pyarrow.time32(unit) if unit in ('s', 'ms') else pyarrow.time64(unit)
        elif isinstance(data_type, ArrayType):
            return pyarrow.list_(PyarrowFieldParser.from_data_type(data_type.element))
        elif isinstance(data_type, MapType):
            return pyarrow.map_(PyarrowFieldParser.from_data_type(data_type.key),
                                PyarrowFieldParser.from_data_type(data_type.value))
        elif isinstance(data_type, RowType):
            return pyarrow.struct([PyarrowFieldParser.from_data_field(f) for f in data_type.fields])
        raise ValueError("Unsupported data type: {}".format(data_type))

    @staticmethod
    def _time_unit(precision: int) -> str:
        if precision == 0:
            return 's'
        elif precision <= 3:
            return 'ms'
        elif precision <= 6:
            return 'us'
        return 'ns'

    @staticmethod
    def from_data_field(data_field: DataField) -> pyarrow.Field:
        pa_field_type = PyarrowFieldParser.from_data_type(data_field.type)
        metadata = {}
        if data_field.description:
            metadata[b'description'] = data_field.description.encode('utf-8')
        return pyarrow.field(data_field.name, pa_field_type, nullable=data_field.type.nullable, metadata=metadata)

    @staticmethod
    def to_data_type(pa_type: pyarrow.DataType, nullable: bool) -> DataType:
        # Only mappings without loss of precision are supported
        type_name = None
        if types.is_int8(pa_type):
            type_name = 'TINYINT'
        elif types.is_int16(pa_type):
            type_name = 'SMALLINT'
        elif types.is_int32(pa_type):
            type_name = 'INT'
        elif types.is_int64(pa_type):
            type_name = 'BIGINT'
        elif types.is_float32(pa_type):
            type_name = 'FLOAT'
        elif types.is_float64(pa_type):
            type_name = 'DOUBLE'
        elif types.is_boolean(pa_type):
            type_name = 'BOOLEAN'
        elif types.is_string(pa_type) or types.is_large_string(pa_type):
            type_name = 'STRING'
        elif types.is_fixed_size_binary(pa_type):
            type_name = f'BINARY({pa_type.byte_width})'
        elif types.is_binary(pa_type):
            type_name = 'BYTES'
        elif types.is_decimal(pa_type):
            type_name = f'DECIMAL({pa_type.precision}, {pa_type.scale})'
        elif types.is_timestamp(pa_type) and pa_type.tz is None:
            precision_mapping = {'s': 0, 'ms': 3, 'us': 6, 'ns': 9}
            type_name = f'TIMESTAMP({precision_mapping[pa_type.unit]})'
        elif types.is_date32(pa_type):
            type_name = 'DATE'
        elif types.is_time(pa_type):
            precision_mapping = {'s': 0, 'ms': 3, 'us': 6, 'ns': 9}
            type_name = f'TIME({precision_mapping[pa_type.unit]})'
        elif types.is_list(pa_type) or types.is_large_list(pa_type):
            return ArrayType(nullable, PyarrowFieldParser.to_data_type(pa_type.value_type, True))
        elif types.is_map(pa_type):
            key_type = PyarrowFieldParser.to_data_type(pa_type.key_type, False)
            value_type = PyarrowFieldParser.to_data_type(pa_type.item_type, True)
            return MapType(nullable, key_type, value_type)
        elif types.is_struct(pa_type):
            fields = [PyarrowFieldParser.to_data_field(i, f) for i, f in enumerate(pa_type)]
            return RowType(nullable, fields)
        if type_name is not None:
            return AtomicType(type_name, nullable)
        raise ValueError("Unsupported pyarrow type: {}".format(pa_type))

    @staticmethod
    def to_data_field(field_idx: int, pa_field: pyarrow.Field) -> DataField:
        data_type = PyarrowFieldParser.to_data_type(pa_field.type, pa_field.nullable)
        description = None
        if pa_field.metadata and b'description' in pa_field.metadata:
            description = pa_field.metadata[b'description'].decode('utf-8')
        return DataField(id=field_idx, name=pa_field.name, type=data_type, description=description)
