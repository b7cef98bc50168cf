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

import logging
from dataclasses import dataclass
from typing import List, Optional

import pyarrow

from pygraviton.catalog.catalog_exception import UnsupportedTableTypeException
from pygraviton.catalog.hive.converter.column_type_converter import ColumnTypeConverter
from pygraviton.catalog.hive.converter.hive_type_converter import INSTANCE as HIVE_TYPE_CONVERTER
from pygraviton.catalog.hive.hive_table_options import HiveTableOptions
from pygraviton.catalog.hive.metastore import (FieldSchema, HiveTableRecord, SerDeInfo,
                                               StorageDescriptor)
from pygraviton.catalog.hive.table_type import SUPPORT_TABLE_TYPES, TableType
from pygraviton.common.identifier import NameIdentifier
from pygraviton.common.options.config_option import ConfigOption
from pygraviton.common.options.options import Options
from pygraviton.meta.base_table import BaseTable, BaseTableBuilder, TableAttributes
from pygraviton.meta.column import Column
from pygraviton.schema.data_types import DataField, PyarrowFieldParser

logger = logging.getLogger(__name__)

# The key to store the Hive table comment in the parameters map.
HMS_TABLE_COMMENT = "comment"


@dataclass(frozen=True)
class HiveColumn(Column):

    @staticmethod
    def from_pyarrow_schema(pa_schema: pyarrow.Schema) -> List["HiveColumn"]:
        columns = []
        for i, pa_field in enumerate(pa_schema):
            data_field = PyarrowFieldParser.to_data_field(i, pa_field)
            columns.append(HiveColumn(data_field.name, data_field.type, data_field.description))
        return columns


class HiveTable(BaseTable):
    """A table registered in the Hive Metastore."""

    def __init__(self, attributes: TableAttributes, input_format: Optional[str], output_format: Optional[str],
                 ser_lib: Optional[str], table_type: TableType, location: Optional[str], create_time: int):
        super().__init__(attributes)
        self._input_format = input_format
        self._output_format = output_format
        self._ser_lib = ser_lib
        self._table_type = table_type
        self._location = location
        self._create_time = create_time

    @property
    def input_format(self) -> Optional[str]:
        return self._input_format

    @property
    def output_format(self) -> Optional[str]:
        return self._output_format

    @property
    def ser_lib(self) -> Optional[str]:
        return self._ser_lib

    @property
    def table_type(self) -> TableType:
        return self._table_type

    @property
    def location(self) -> Optional[str]:
        return self._location

    @property
    def create_time(self) -> int:
        return self._create_time

    @staticmethod
    def from_inner_table(table: HiveTableRecord, builder: "HiveTable.Builder",
                         type_converter: Optional[ColumnTypeConverter] = None) -> "HiveTable":
        """
        Creates a HiveTable from a metastore table record.

        Args:
            table: The metastore record to translate.
            builder: Builder carrying the attributes the record does not hold,
                such as id, namespace and audit info.
            type_converter: Column type mapping, Hive's by default.

        Raises:
            UnsupportedTableTypeException: If the record is neither managed nor external.
            TypeConversionException: If a column type has no internal counterpart.
        """
        converter = type_converter or HIVE_TYPE_CONVERTER
        if table.sd is None:
            raise ValueError("Hive table {} has no storage descriptor".format(table.table_name))
        parameters = dict(table.parameters or {})
        sd = table.sd

        columns = [
            HiveColumn(f.name, converter.from_external_type(f.type), f.comment)
            for f in sd.cols or []
        ]
        hive_table = (builder
                      .with_comment(parameters.get(HMS_TABLE_COMMENT))
                      .with_properties(parameters)
                      .with_table_type(TableType.parse(table.table_type))
                      .with_columns(columns)
                      .with_output_format(sd.output_format)
                      .with_input_format(sd.input_format)
                      .with_ser_lib(sd.serde_info.serialization_lib if sd.serde_info else None)
                      .with_location(sd.location)
                      .with_create_time(table.create_time)
                      .build())
        logger.debug("Loaded Hive table %s with %d columns", hive_table.name, len(columns))
        return hive_table

    def to_inner_table(self, type_converter: Optional[ColumnTypeConverter] = None) -> HiveTableRecord:
        """Converts this HiveTable to its record in the Hive Metastore."""
        converter = type_converter or HIVE_TYPE_CONVERTER
        record = HiveTableRecord(
            table_name=self.name,
            db_name=self.schema_identifier().name(),
            owner=self.audit_info.creator if self.audit_info else None,
            table_type=str(self._table_type),
            parameters=dict(self.properties),
            create_time=self._create_time,
            sd=self._build_storage_descriptor(converter),
            # TODO: carry partition keys once the table model has partitioning
            partition_keys=[],
        )
        logger.debug("Converted table %s to Hive table %s.%s", self.name_identifier(),
                     record.db_name, record.table_name)
        return record

    def _build_storage_descriptor(self, converter: ColumnTypeConverter) -> StorageDescriptor:
        return StorageDescriptor(
            cols=[FieldSchema(c.name, converter.to_external_type(c.data_type), c.comment) for c in self.columns],
            location=self._location,
            input_format=self._input_format,
            output_format=self._output_format,
            serde_info=self._build_serde_info(),
        )

    def _build_serde_info(self) -> SerDeInfo:
        return SerDeInfo(name=self.name, serialization_lib=self._ser_lib)

    def schema_identifier(self) -> NameIdentifier:
        """The identifier of the schema (Hive database) owning this table."""
        return NameIdentifier.of(*self.namespace.levels())

    def to_pyarrow_schema(self) -> pyarrow.Schema:
        return pyarrow.schema([
            PyarrowFieldParser.from_data_field(DataField(i, c.name, c.data_type, c.comment))
            for i, c in enumerate(self.columns)
        ])

    def __repr__(self) -> str:
        return ("HiveTable(name={!r}, namespace={!r}, table_type={}, location={!r}, columns={!r}, "
                "properties={!r})").format(self.name, str(self.namespace), self._table_type, self._location,
                                           self.columns, self.properties)

    class Builder(BaseTableBuilder["HiveTable"]):
        """A builder class for constructing HiveTable instances."""

        def __init__(self):
            super().__init__()
            self._input_format = None
            self._output_format = None
            self._ser_lib = None
            self._table_type = None
            self._location = None
            self._create_time = 0

        def with_input_format(self, input_format: Optional[str]) -> "HiveTable.Builder":
            self._input_format = input_format
            return self

        def with_output_format(self, output_format: Optional[str]) -> "HiveTable.Builder":
            self._output_format = output_format
            return self

        def with_ser_lib(self, ser_lib: Optional[str]) -> "HiveTable.Builder":
            self._ser_lib = ser_lib
            return self

        def with_table_type(self, table_type: Optional[TableType]) -> "HiveTable.Builder":
            self._table_type = table_type
            return self

        def with_location(self, location: Optional[str]) -> "HiveTable.Builder":
            self._location = location
            return self

        def with_create_time(self, create_time: int) -> "HiveTable.Builder":
            self._create_time = create_time
            return self

        def with_storage_options(self, options: Options) -> "HiveTable.Builder":
            """
            Applies the storage settings present in table-creation options. Settings
            absent from the options keep the value already set on the builder, or
            fall back to the option default when the builder has none.

            Raises:
                UnsupportedTableTypeException: If the table-type option names no Hive table type.
            """
            if options.contains(HiveTableOptions.TABLE_TYPE):
                try:
                    self._table_type = options.get(HiveTableOptions.TABLE_TYPE)
                except ValueError:
                    raise UnsupportedTableTypeException(options.to_map()[HiveTableOptions.TABLE_TYPE.key()])
            self._location = self._storage_option(options, HiveTableOptions.LOCATION, self._location)
            self._input_format = self._storage_option(options, HiveTableOptions.INPUT_FORMAT, self._input_format)
            self._output_format = self._storage_option(options, HiveTableOptions.OUTPUT_FORMAT, self._output_format)
            self._ser_lib = self._storage_option(options, HiveTableOptions.SERDE_LIB, self._ser_lib)
            logger.debug("Applied storage options to table %s: type=%s, input=%s, output=%s, serde=%s",
                         self._name, self._table_type, self._input_format, self._output_format, self._ser_lib)
            return self

        @staticmethod
        def _storage_option(options: Options, option: ConfigOption, current: Optional[str]) -> Optional[str]:
            if options.contains(option):
                return options.get(option)
            return current if current is not None else option.default_value()

        def _internal_build(self) -> "HiveTable":
            table_type = TableType.MANAGED_TABLE if self._table_type is None else self._table_type
            if table_type not in SUPPORT_TABLE_TYPES:
                raise UnsupportedTableTypeException(str(table_type))

            attributes = self._table_attributes()
            # HMS puts the table comment in parameters
            attributes.properties[HMS_TABLE_COMMENT] = self._comment

            return HiveTable(
                attributes,
                input_format=self._input_format,
                output_format=self._output_format,
                ser_lib=self._ser_lib,
                table_type=table_type,
                location=self._location,
                create_time=self._create_time,
            )
