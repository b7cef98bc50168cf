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
from typing import Tuple

LEVEL_SEPARATOR = '.'


@dataclass(frozen=True)
class Namespace:
    """An ordered path of levels, e.g. ``metalake.catalog.schema``."""

    _levels: Tuple[str, ...] = ()

    def __post_init__(self):
        for level in self._levels:
            if not isinstance(level, str) or not level:
                raise ValueError("Cannot create a namespace with null or empty level: {}"
                                 .format(self._levels))

    @classmethod
    def of(cls, *levels: str) -> "Namespace":
        return cls(tuple(levels))

    @classmethod
    def empty(cls) -> "Namespace":
        return cls(())

    def levels(self) -> Tuple[str, ...]:
        return self._levels

    def level(self, pos: int) -> str:
        if pos < 0 or pos >= len(self._levels):
            raise IndexError("Invalid level position {} for namespace {}".format(pos, self))
        return self._levels[pos]

    def length(self) -> int:
        return len(self._levels)

    def is_empty(self) -> bool:
        return len(self._levels) == 0

    def __str__(self) -> str:
        return LEVEL_SEPARATOR.join(self._levels)


@dataclass(frozen=True)
class NameIdentifier:
    """A name qualified by the namespace it lives in."""

    _namespace: Namespace
    _name: str

    def __post_init__(self):
        if not self._name:
            raise ValueError("Cannot create a NameIdentifier with null or empty name")

    @classmethod
    def of(cls, *names: str) -> "NameIdentifier":
        if not names:
            raise ValueError("Cannot create a NameIdentifier with no names")
        return cls(Namespace.of(*names[:-1]), names[-1])

    @classmethod
    def of_namespace(cls, namespace: Namespace, name: str) -> "NameIdentifier":
        return cls(namespace, name)

    @classmethod
    def parse(cls, identifier: str) -> "NameIdentifier":
        if not identifier:
            raise ValueError("Cannot parse a null or empty identifier")
        return cls.of(*identifier.split(LEVEL_SEPARATOR))

    def has_namespace(self) -> bool:
        return not self._namespace.is_empty()

    def namespace(self) -> Namespace:
        return self._namespace

    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        if self.has_namespace():
            return "{}{}{}".format(self._namespace, LEVEL_SEPARATOR, self._name)
        return self._name
