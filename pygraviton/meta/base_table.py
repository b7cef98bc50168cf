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
from dataclasses import dataclass
from typing import Dict, Generic, Optional, Sequence, Tuple, TypeVar

from pygraviton.common.identifier import NameIdentifier, Namespace
from pygraviton.meta.audit_info import AuditInfo
from pygraviton.meta.column import Column


@dataclass(frozen=True)
class TableAttributes:
    """The attributes shared by every table entity, whatever its catalog."""

    id: Optional[int]
    schema_id: Optional[int]
    namespace: Namespace
    name: str
    comment: Optional[str]
    properties: Dict[str, Optional[str]]
    audit_info: Optional[AuditInfo]
    columns: Tuple[Column, ...]


class BaseTable:
    """Read-only view over the common attributes of a table entity."""

    def __init__(self, attributes: TableAttributes):
        self._attributes = attributes

    @property
    def id(self) -> Optional[int]:
        return self._attributes.id

    @property
    def schema_id(self) -> Optional[int]:
        return self._attributes.schema_id

    @property
    def namespace(self) -> Namespace:
        return self._attributes.namespace

    @property
    def name(self) -> str:
        return self._attributes.name

    @property
    def comment(self) -> Optional[str]:
        return self._attributes.comment

    @property
    def properties(self) -> Dict[str, Optional[str]]:
        return self._attributes.properties

    @property
    def audit_info(self) -> Optional[AuditInfo]:
        return self._attributes.audit_info

    @property
    def columns(self) -> Tuple[Column, ...]:
        return self._attributes.columns

    def name_identifier(self) -> NameIdentifier:
        return NameIdentifier.of_namespace(self.namespace, self.name)


T = TypeVar('T', bound=BaseTable)


class BaseTableBuilder(ABC, Generic[T]):
    """
    Accumulates the common table attributes. Setters only record values;
    all validation happens in ``build``.
    """

    def __init__(self):
        self._id = None
        self._schema_id = None
        self._namespace = Namespace.empty()
        self._name = None
        self._comment = None
        self._properties = None
        self._audit_info = None
        self._columns = ()

    def with_id(self, id: int):
        self._id = id
        return self

    def with_schema_id(self, schema_id: int):
        self._schema_id = schema_id
        return self

    def with_namespace(self, namespace: Namespace):
        self._namespace = namespace
        return self

    def with_name(self, name: str):
        self._name = name
        return self

    def with_comment(self, comment: Optional[str]):
        self._comment = comment
        return self

    def with_properties(self, properties: Dict[str, Optional[str]]):
        self._properties = properties
        return self

    def with_audit_info(self, audit_info: AuditInfo):
        self._audit_info = audit_info
        return self

    def with_columns(self, columns: Sequence[Column]):
        self._columns = tuple(columns)
        return self

    def build(self) -> T:
        return self._internal_build()

    def _table_attributes(self) -> TableAttributes:
        if self._properties is None:
            raise ValueError("Table properties must be set before building table {}".format(self._name))
        return TableAttributes(
            id=self._id,
            schema_id=self._schema_id,
            namespace=self._namespace,
            name=self._name,
            comment=self._comment,
            properties=self._properties,
            audit_info=self._audit_info,
            columns=self._columns,
        )

    @abstractmethod
    def _internal_build(self) -> T:
        pass
