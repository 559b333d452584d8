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

import abc

from nsxt_provider.common import exceptions
from nsxt_provider import resource_data
from nsxt_provider import schema


class ResourceBase(object, metaclass=abc.ABCMeta):
    """Lifecycle operations of one NSX resource type.

    Concrete resources define 'resource_name' and 'attribute_map' and
    implement the four operations. Each operation receives the resource
    data and the API client to act on; the id of the data is set on create
    and cleared once the backend object is known to be gone.
    """

    resource_name = None
    attribute_map = None

    def new_data(self, config=None, state=None, resource_id=''):
        return resource_data.ResourceData(self.attribute_map,
                                          config=config, state=state,
                                          resource_id=resource_id,
                                          resource_name=self.resource_name)

    def validate(self, data):
        schema.validate_config(self.attribute_map, data.config)

    def get_id(self, data):
        if not data.id:
            raise exceptions.MissingResourceId(resource=self.resource_name)
        return data.id

    def check_immutable_attributes(self, data):
        """Refuse in place changes of attributes which force a new resource.

        :raise ImmutableAttributeChanged: if any of them was changed.
        """
        changed = [name for name in
                   schema.force_new_attributes(self.attribute_map)
                   if data.has_change(name)]
        if changed:
            raise exceptions.ImmutableAttributeChanged(
                attributes=', '.join(changed),
                resource=self.resource_name,
                resource_id=data.id)

    @abc.abstractmethod
    def create(self, data, client):
        """Create the backend object and return its id."""

    @abc.abstractmethod
    def read(self, data, client):
        """Refresh the observed state; return it, or None if gone."""

    @abc.abstractmethod
    def update(self, data, client):
        """Replace the backend object and return the observed state."""

    @abc.abstractmethod
    def delete(self, data, client):
        """Delete the backend object."""
