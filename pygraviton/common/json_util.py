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

import json
from dataclasses import field, fields, is_dataclass
from typing import Any, Dict, List, Type, TypeVar, Union

T = TypeVar("T")


def json_field(json_name: str, **kwargs):
    """Create a dataclass field serialized under a custom JSON name."""
    return field(metadata={"json_name": json_name}, **kwargs)


def _unwrap_optional(tp):
    origin = getattr(tp, '__origin__', None)
    args = getattr(tp, '__args__', None)
    if origin is Union and len(args) == 2 and type(None) in args:
        return args[0] if args[1] is type(None) else args[1]
    return tp


class JSON:
    """Maps dataclasses to JSON objects keyed by their ``json_name`` metadata."""

    @staticmethod
    def to_json(obj: Any, **kwargs) -> str:
        return json.dumps(JSON.to_dict(obj), ensure_ascii=False, **kwargs)

    @staticmethod
    def from_json(json_str: str, target_class: Type[T]) -> T:
        return JSON.from_dict(json.loads(json_str), target_class)

    @staticmethod
    def to_dict(obj: Any) -> Dict[str, Any]:
        result = {}
        for field_info in fields(obj):
            value = getattr(obj, field_info.name)
            json_name = field_info.metadata.get("json_name", field_info.name)
            result[json_name] = JSON._to_json_value(value)
        return result

    @staticmethod
    def _to_json_value(value: Any) -> Any:
        if is_dataclass(value):
            return JSON.to_dict(value)
        if isinstance(value, (list, tuple)):
            return [JSON._to_json_value(item) for item in value]
        if isinstance(value, dict):
            return {k: JSON._to_json_value(v) for k, v in value.items()}
        return value

    @staticmethod
    def from_dict(data: Dict[str, Any], target_class: Type[T]) -> T:
        if not isinstance(data, dict):
            raise ValueError("Expected a JSON object for {}, got: {}".format(target_class.__name__, data))

        kwargs = {}
        for field_info in fields(target_class):
            json_name = field_info.metadata.get("json_name", field_info.name)
            if json_name not in data:
                continue
            value = data[json_name]
            field_type = _unwrap_optional(field_info.type)
            origin = getattr(field_type, '__origin__', None)
            if value is None:
                kwargs[field_info.name] = None
            elif is_dataclass(field_type):
                kwargs[field_info.name] = JSON.from_dict(value, field_type)
            elif origin in (list, List) and is_dataclass(field_type.__args__[0]):
                item_type = field_type.__args__[0]
                kwargs[field_info.name] = [JSON.from_dict(item, item_type) for item in value]
            else:
                kwargs[field_info.name] = value

        return target_class(**kwargs)
