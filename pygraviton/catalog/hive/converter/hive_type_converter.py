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

import re
from typing import List, Optional, Tuple

from pygraviton.catalog.catalog_exception import TypeConversionException
from pygraviton.catalog.hive.converter.column_type_converter import ColumnTypeConverter
from pygraviton.schema.data_types import (ArrayType, AtomicType, DataField, DataType,
                                          MapType, MultisetType, RowType)

# Precision and scale Hive assumes for an unqualified ``decimal``.
DEFAULT_DECIMAL_PRECISION = 10
DEFAULT_DECIMAL_SCALE = 0

_ATOMIC_PATTERN = re.compile(r'^([A-Z_]+)\s*(?:\(\s*(\d+)\s*(?:,\s*(\d+)\s*)?\))?$')
_IDENTIFIER_PATTERN = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')

_TO_HIVE_PRIMITIVES = {
    'BOOLEAN': 'boolean',
    'TINYINT': 'tinyint',
    'SMALLINT': 'smallint',
    'INT': 'int',
    'INTEGER': 'int',
    'BIGINT': 'bigint',
    'FLOAT': 'float',
    'DOUBLE': 'double',
    'STRING': 'string',
    'BYTES': 'binary',
    'BINARY': 'binary',
    'VARBINARY': 'binary',
    'DATE': 'date',
    'TIMESTAMP': 'timestamp',
}

_FROM_HIVE_PRIMITIVES = {
    'boolean': 'BOOLEAN',
    'tinyint': 'TINYINT',
    'smallint': 'SMALLINT',
    'int': 'INT',
    'integer': 'INT',
    'bigint': 'BIGINT',
    'float': 'FLOAT',
    'double': 'DOUBLE',
    'string': 'STRING',
    'binary': 'BYTES',
    'date': 'DATE',
    'timestamp': 'TIMESTAMP',
}


class ToHiveType:
    """
    Renders internal types as qualified Hive type names.

    Hive has one spelling per type, so aliases collapse on the way out and come
    back in their canonical internal form: INTEGER becomes INT, NUMERIC and DEC
    become DECIMAL, VARBINARY and BINARY(n) become BYTES, TIMESTAMP(p) becomes
    TIMESTAMP, and decimals are written as DECIMAL(p, s).
    """

    @staticmethod
    def convert(data_type: DataType) -> str:
        if isinstance(data_type, AtomicType):
            return ToHiveType._convert_atomic(data_type)
        elif isinstance(data_type, ArrayType):
            return "array<{}>".format(ToHiveType.convert(data_type.element))
        elif isinstance(data_type, MapType):
            return "map<{},{}>".format(ToHiveType.convert(data_type.key), ToHiveType.convert(data_type.value))
        elif isinstance(data_type, RowType):
            fields = ["{}:{}".format(ToHiveType._field_name(f.name), ToHiveType.convert(f.type))
                      for f in data_type.fields]
            return "struct<{}>".format(",".join(fields))
        elif isinstance(data_type, MultisetType):
            raise TypeConversionException(str(data_type), "Hive has no multiset type")
        raise TypeConversionException(str(data_type), "unknown data type")

    @staticmethod
    def _field_name(name: str) -> str:
        if _IDENTIFIER_PATTERN.match(name):
            return name
        if "`" in name:
            raise TypeConversionException(name, "struct field names cannot contain backticks")
        return "`{}`".format(name)

    @staticmethod
    def _convert_atomic(data_type: AtomicType) -> str:
        match = _ATOMIC_PATTERN.match(data_type.type.upper().strip())
        if not match:
            raise TypeConversionException(data_type.type, "unsupported by Hive")
        base, first, second = match.groups()

        if base in ('CHAR', 'VARCHAR'):
            if first is None or second is not None:
                raise TypeConversionException(data_type.type, "Hive requires an explicit length")
            return "{}({})".format(base.lower(), first)
        if base in ('DECIMAL', 'NUMERIC', 'DEC'):
            precision = int(first) if first is not None else DEFAULT_DECIMAL_PRECISION
            scale = int(second) if second is not None else DEFAULT_DECIMAL_SCALE
            return "decimal({},{})".format(precision, scale)
        if base == 'TIMESTAMP':
            # Hive timestamps carry no precision.
            return 'timestamp'
        if base in _TO_HIVE_PRIMITIVES and (first is None or base in ('BINARY', 'VARBINARY')):
            return _TO_HIVE_PRIMITIVES[base]
        raise TypeConversionException(data_type.type, "unsupported by Hive")


class FromHiveType:
    """Recursive-descent parser for Hive type names such as ``map<string,array<int>>``."""

    _TOKEN_PATTERN = re.compile(r"\s*(?:(`[^`]*`)|('(?:[^'\\]|\\.)*')|([A-Za-z_][A-Za-z0-9_]*)|(\d+)|([<>(),:]))")

    def __init__(self, type_name: str):
        self._type_name = type_name
        self._tokens = self._tokenize(type_name)
        self._pos = 0

    @staticmethod
    def convert(type_name: str) -> DataType:
        if not type_name or not type_name.strip():
            raise TypeConversionException(type_name, "empty type name")
        parser = FromHiveType(type_name)
        data_type = parser._parse_type()
        if parser._peek() is not None:
            parser._fail("unexpected trailing '{}'".format(parser._peek()))
        return data_type

    def _tokenize(self, text: str) -> List[str]:
        tokens = []
        pos = 0
        stripped = text.rstrip()
        while pos < len(stripped):
            match = self._TOKEN_PATTERN.match(stripped, pos)
            if not match:
                raise TypeConversionException(text, "invalid character at position {}".format(pos))
            tokens.append(next(group for group in match.groups() if group is not None))
            pos = match.end()
        return tokens

    def _peek(self) -> Optional[str]:
        return self._tokens[self._pos] if self._pos < len(self._tokens) else None

    def _next(self) -> str:
        token = self._peek()
        if token is None:
            self._fail("unexpected end of type")
        self._pos += 1
        return token

    def _expect(self, expected: str):
        token = self._next()
        if token != expected:
            self._fail("expected '{}' but found '{}'".format(expected, token))

    def _fail(self, reason: str):
        raise TypeConversionException(self._type_name, reason)

    def _parse_type(self) -> DataType:
        name = self._next().lower()

        if name == 'array':
            self._expect('<')
            element = self._parse_type()
            self._expect('>')
            return ArrayType(True, element)
        if name == 'map':
            self._expect('<')
            key = self._parse_type()
            self._expect(',')
            value = self._parse_type()
            self._expect('>')
            return MapType(True, key, value)
        if name == 'struct':
            return RowType(True, self._parse_struct_fields())
        if name in ('char', 'varchar'):
            (length,) = self._parse_params(1, 1)
            return AtomicType("{}({})".format(name.upper(), length))
        if name in ('decimal', 'numeric'):
            params = self._parse_params(0, 2)
            precision = params[0] if len(params) > 0 else DEFAULT_DECIMAL_PRECISION
            scale = params[1] if len(params) > 1 else DEFAULT_DECIMAL_SCALE
            return AtomicType("DECIMAL({}, {})".format(precision, scale))
        if name in _FROM_HIVE_PRIMITIVES:
            return AtomicType(_FROM_HIVE_PRIMITIVES[name])
        self._fail("unsupported Hive type '{}'".format(name))

    def _parse_params(self, min_count: int, max_count: int) -> Tuple[int, ...]:
        params = []
        if self._peek() == '(':
            self._next()
            params.append(self._parse_int())
            while self._peek() == ',':
                self._next()
                params.append(self._parse_int())
            self._expect(')')
        if not min_count <= len(params) <= max_count:
            self._fail("expected between {} and {} type parameters".format(min_count, max_count))
        return tuple(params)

    def _parse_int(self) -> int:
        token = self._next()
        if not token.isdigit():
            self._fail("expected a number but found '{}'".format(token))
        return int(token)

    def _parse_struct_fields(self) -> List[DataField]:
        self._expect('<')
        fields = []
        if self._peek() == '>':
            self._next()
            return fields
        while True:
            name = self._next()
            if name.startswith('`'):
                name = name[1:-1]
            elif not re.match(r'^[A-Za-z_0-9]+$', name):
                self._fail("invalid struct field name '{}'".format(name))
            self._expect(':')
            field_type = self._parse_type()
            description = None
            if self._peek() is not None and self._peek().lower() == 'comment':
                self._next()
                literal = self._next()
                if not literal.startswith("'"):
                    self._fail("expected a quoted comment but found '{}'".format(literal))
                description = literal[1:-1].replace("\\'", "'")
            fields.append(DataField(len(fields), name, field_type, description))
            token = self._next()
            if token == '>':
                return fields
            if token != ',':
                self._fail("expected ',' or '>' but found '{}'".format(token))


class HiveTypeConverter(ColumnTypeConverter):
    """Column type mapping between the internal type system and Hive."""

    def to_external_type(self, data_type: DataType) -> str:
        return ToHiveType.convert(data_type)

    def from_external_type(self, type_name: str) -> DataType:
        return FromHiveType.convert(type_name)


INSTANCE = HiveTypeConverter()
