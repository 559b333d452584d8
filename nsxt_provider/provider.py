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

from oslo_config import cfg
from oslo_log import log as logging

from nsxt_provider.api_client import client as api_client
from nsxt_provider.common import exceptions
from nsxt_provider.conf import nsxt as nsxt_conf
from nsxt_provider.resources import logical_router_link_port_on_tier1

LOG = logging.getLogger(__name__)

nsxt_conf.register_nsxt_opts()

RESOURCES = {
    logical_router_link_port_on_tier1.RESOURCE_NAME:
        logical_router_link_port_on_tier1.LogicalRouterLinkPortOnTier1,
}


def create_api_client(conf):
    """Build an NSX-T API client from the [nsxt] configuration section."""
    opts = conf.nsxt
    if not opts.nsx_manager:
        raise exceptions.InvalidConfiguration(
            reason="nsx_manager must be specified")
    LOG.debug("Creating NSX-T API client for manager %s", opts.nsx_manager)
    return api_client.NsxtApiClient(
        opts.nsx_manager,
        username=opts.username,
        password=opts.password,
        insecure=opts.insecure,
        ca_file=opts.ca_file,
        client_auth_cert_file=opts.client_auth_cert_file,
        client_auth_key_file=opts.client_auth_key_file,
        http_timeout=opts.http_timeout)


class Provider(object):
    """Entry point of the NSX-T resource plugin.

    Holds the API client shared by every operation and the resource
    types the plugin manages. The API client is built from configuration
    unless one is passed in.
    """

    def __init__(self, conf=None, api_client=None):
        self.conf = conf or cfg.CONF
        self._api_client = api_client
        self.resources = dict((name, resource_cls())
                              for name, resource_cls in RESOURCES.items())

    @property
    def api_client(self):
        if self._api_client is None:
            self._api_client = create_api_client(self.conf)
        return self._api_client

    def get_resource(self, resource_type):
        try:
            return self.resources[resource_type]
        except KeyError:
            raise exceptions.ResourceTypeNotFound(resource_type=resource_type)

    def resource_data(self, resource_type, config=None, state=None,
                      resource_id=''):
        return self.get_resource(resource_type).new_data(
            config=config, state=state, resource_id=resource_id)

    def create(self, resource_type, data):
        return self.get_resource(resource_type).create(data, self.api_client)

    def read(self, resource_type, data):
        return self.get_resource(resource_type).read(data, self.api_client)

    def update(self, resource_type, data):
        return self.get_resource(resource_type).update(data, self.api_client)

    def delete(self, resource_type, data):
        return self.get_resource(resource_type).delete(data, self.api_client)
