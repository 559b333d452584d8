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

from oslo_log import log as logging

from nsxt_provider._i18n import _
from nsxt_provider.api_client import exception as api_exc
from nsxt_provider.common import exceptions
from nsxt_provider.common import utils
from nsxt_provider.nsxlib import logical_routing
from nsxt_provider.resources import base
from nsxt_provider import schema

LOG = logging.getLogger(__name__)

RESOURCE_NAME = 'nsxt_logical_router_link_port_on_tier1'
API_TYPE = 'LogicalRouterLinkPortOnTier1'
LINKED_PORT_TARGET_TYPE = 'LogicalPort'
SERVICE_BINDING_TARGET_TYPES = ['LogicalService']

HTTP_CREATED = 201

RESOURCE_ATTRIBUTE_MAP = {
    'revision': schema.revision_schema(),
    'description': {
        'type': schema.TYPE_STRING,
        'optional': True,
        'description': _("Description of this resource"),
    },
    'display_name': {
        'type': schema.TYPE_STRING,
        'optional': True,
        'computed': True,
        'description': _("The display name of this resource. Defaults to "
                         "ID if not set"),
    },
    'tag': schema.tags_schema(),
    'logical_router_id': {
        'type': schema.TYPE_STRING,
        'required': True,
        'force_new': True,
        'description': _("Identifier for logical router on which this "
                         "port is created"),
    },
    'linked_logical_router_port_id': {
        'type': schema.TYPE_STRING,
        'required': True,
        'force_new': True,
        'description': _("Identifier for port on logical router to "
                         "connect to"),
    },
    'service_binding': schema.resource_references_schema(
        False, False, SERVICE_BINDING_TARGET_TYPES, _("Service Bindings")),
}


class LogicalRouterLinkPortOnTier1(base.ResourceBase):
    """Link port connecting a tier-1 logical router to a tier-0 router."""

    resource_name = RESOURCE_NAME
    attribute_map = RESOURCE_ATTRIBUTE_MAP

    def _api(self, client):
        return logical_routing.LogicalRoutingAndServicesApi(client)

    def _build_port(self, data):
        port = {
            'tags': utils.get_tags_from_schema(data),
            'logical_router_id': data.get('logical_router_id'),
            'linked_logical_router_port_id': utils.make_resource_reference(
                LINKED_PORT_TARGET_TYPE,
                data.get('linked_logical_router_port_id')),
            'service_bindings': utils.get_service_bindings_from_schema(
                data, 'service_binding'),
        }
        # Leave unset strings out so that the manager applies its defaults
        for name in ('description', 'display_name'):
            value = data.get(name)
            if value:
                port[name] = value
        return port

    def _operation_error(self, operation, resource_id, error):
        return exceptions.ResourceOperationError(resource=API_TYPE,
                                                 operation=operation,
                                                 resource_id=resource_id,
                                                 details=error)

    def create(self, data, client):
        self.validate(data)
        port = self._build_port(data)
        try:
            port, status = self._api(
                client).create_logical_router_link_port_on_tier1(port)
        except api_exc.NsxApiException as e:
            raise self._operation_error('create', '', e) from e

        if status != HTTP_CREATED:
            raise exceptions.UnexpectedResponseStatus(resource=API_TYPE,
                                                      operation='create',
                                                      status=status)
        data.set_id(port['id'])
        LOG.debug("%(type)s %(id)s created",
                  {'type': API_TYPE, 'id': data.id})
        self.read(data, client)
        return data.id

    def read(self, data, client):
        port_id = self.get_id(data)
        try:
            port = self._api(
                client).read_logical_router_link_port_on_tier1(port_id)[0]
        except api_exc.ResourceNotFound:
            LOG.debug("%(type)s %(id)s not found",
                      {'type': API_TYPE, 'id': port_id})
            data.set_id('')
            return None
        except api_exc.NsxApiException as e:
            raise self._operation_error('read', port_id, e) from e

        data.set('revision', port.get('_revision', 0))
        data.set('description', port.get('description', ''))
        data.set('display_name', port.get('display_name', ''))
        utils.set_tags_in_schema(data, port.get('tags'))
        data.set('logical_router_id', port.get('logical_router_id', ''))
        data.set('linked_logical_router_port_id',
                 utils.get_reference_target_id(
                     port.get('linked_logical_router_port_id')))
        utils.set_service_bindings_in_schema(
            data, port.get('service_bindings'), 'service_binding')
        return data.state

    def update(self, data, client):
        port_id = self.get_id(data)
        self.validate(data)
        self.check_immutable_attributes(data)
        port = self._build_port(data)
        port['_revision'] = data.get('revision')
        try:
            self._api(client).update_logical_router_link_port_on_tier1(
                port_id, port)
        except api_exc.NsxApiException as e:
            raise self._operation_error('update', port_id, e) from e

        return self.read(data, client)

    def delete(self, data, client):
        port_id = self.get_id(data)
        try:
            self._api(client).delete_logical_router_port(port_id)
        except api_exc.ResourceNotFound:
            LOG.debug("%(type)s %(id)s not found",
                      {'type': API_TYPE, 'id': port_id})
        except api_exc.NsxApiException as e:
            raise self._operation_error('delete', port_id, e) from e
        data.set_id('')
