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

from typing import Dict, Optional

from pygraviton.common.options.config_option import ConfigOption
from pygraviton.common.options.options_utils import OptionsUtils


class Options:
    """String-keyed option map read through typed ConfigOptions."""

    def __init__(self, data: Optional[Dict[str, str]] = None):
        self.data = data if data is not None else {}

    @classmethod
    def from_none(cls):
        return cls({})

    def to_map(self) -> Dict[str, str]:
        return self.data

    def get(self, key: ConfigOption, default=None):
        """
        Get the value for the given ConfigOption converted to the option's type,
        falling back to ``default`` and then to the option's default value.
        """
        main_key = key.key()
        if main_key in self.data:
            raw_value = self.data[main_key]
            if raw_value is not None:
                return OptionsUtils.convert_value(raw_value, key.get_clazz())

        return default if default is not None else key.default_value()

    def set(self, key: ConfigOption, value):
        self.data[key.key()] = OptionsUtils.convert_to_string(value)

    def contains(self, key: ConfigOption) -> bool:
        return key.key() in self.data

    def copy(self) -> 'Options':
        return Options(dict(self.data))
