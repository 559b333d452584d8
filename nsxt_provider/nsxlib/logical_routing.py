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

from oslo_log import log

from nsxt_provider import nsxlib

LROUTERPORT_RESOURCE = "logical-router-ports"
LINK_PORT_ON_TIER1_TYPE = "LogicalRouterLinkPortOnTIER1"

LOG = log.getLogger(__name__)


class LogicalRoutingAndServicesApi(object):
    """Logical router port calls of the NSX-T management API."""

    def __init__(self, client):
        self.client = client

    def _request(self, method, resource_id=None, body=None, filters=None):
        path = nsxlib._build_uri_path(LROUTERPORT_RESOURCE,
                                      resource_id=resource_id,
                                      filters=filters)
        return nsxlib.do_request(method, path, body, client=self.client)

    def create_logical_router_link_port_on_tier1(self, port):
        """Create a link port on a tier-1 logical router.

        :param port: the LogicalRouterLinkPortOnTIER1 document.
        :returns: a (port, status) tuple.
        :raise NsxApiException: if there is a problem while communicating
            with the NSX manager.
        """
        body = dict(port, resource_type=LINK_PORT_ON_TIER1_TYPE)
        return self._request(nsxlib.HTTP_POST, body=body)

    def read_logical_router_link_port_on_tier1(self, port_id):
        return self._request(nsxlib.HTTP_GET, resource_id=port_id)

    def update_logical_router_link_port_on_tier1(self, port_id, port):
        """Replace a link port on a tier-1 logical router.

        The document must carry the '_revision' last read from the
        manager, otherwise the manager rejects the update.
        """
        body = dict(port, resource_type=LINK_PORT_ON_TIER1_TYPE)
        return self._request(nsxlib.HTTP_PUT, resource_id=port_id, body=body)

    def delete_logical_router_port(self, port_id, force=None):
        """Delete a logical router port of any type.

        :returns: the HTTP status of the response.
        """
        filters = None
        if force is not None:
            filters = {'force': str(bool(force)).lower()}
        LOG.debug("Deleting logical router port %s", port_id)
        status = self._request(nsxlib.HTTP_DELETE, resource_id=port_id,
                               filters=filters)[1]
        return status
