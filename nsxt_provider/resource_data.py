# Copyright 2017 VMware, Inc.
# All Rights Reserved
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import copy

from nsxt_provider.common import exceptions
from nsxt_provider import schema


class ResourceData(object):
    """Declared and observed values of a single resource.

    The declared configuration is what the user asked for; the observed
    state is what was last read from the backend. Operations read
    attributes with get() and record what the backend returned with
    set(); get() falls back to the observed value only for computed
    attributes. An empty id means the resource does not exist (yet).
    """

    def __init__(self, attr_map, config=None, state=None, resource_id='',
                 resource_name='resource'):
        self._attr_map = attr_map
        self._resource_name = resource_name
        self._config = copy.deepcopy(config or {})
        self._state = copy.deepcopy(state or {})
        self._id = resource_id or ''
        for name in list(self._config) + list(self._state):
            self._check_attribute(name)

    def _check_attribute(self, name):
        if name not in self._attr_map:
            raise exceptions.InvalidAttribute(attribute=name,
                                              resource=self._resource_name)
        return self._attr_map[name]

    @property
    def id(self):
        return self._id

    def set_id(self, resource_id):
        self._id = resource_id or ''

    def is_new_resource(self):
        return not self._id

    @property
    def config(self):
        return copy.deepcopy(self._config)

    @property
    def state(self):
        return copy.deepcopy(self._state)

    def get(self, name):
        attr = self._check_attribute(name)
        if self._config.get(name) is not None:
            return copy.deepcopy(self._config[name])
        # Only the backend may fill in attributes the user left out
        if attr.get('computed') and self._state.get(name) is not None:
            return copy.deepcopy(self._state[name])
        return schema.zero_value(attr)

    def get_observed(self, name):
        attr = self._check_attribute(name)
        if self._state.get(name) is not None:
            return copy.deepcopy(self._state[name])
        return schema.zero_value(attr)

    def set(self, name, value):
        self._check_attribute(name)
        self._state[name] = copy.deepcopy(value)

    def get_change(self, name):
        """Return the (observed, declared) values of an attribute."""
        return self.get_observed(name), self.get(name)

    def has_change(self, name):
        attr = self._check_attribute(name)
        old, new = self.get_change(name)
        return not schema.values_equal(attr, old, new)
