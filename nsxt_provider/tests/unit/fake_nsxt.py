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
from urllib import parse
import uuid

from oslo_log import log as logging
from oslo_serialization import jsonutils

LOG = logging.getLogger(__name__)

API_PREFIX = '/api/v1/'
LROUTERPORT_RESOURCE = 'logical-router-ports'
PRODUCT_VERSION = '2.1.0.0.0.7395503'


class FakeResponse(object):

    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self.text = jsonutils.dumps(body) if body is not None else ''
        self.content = self.text.encode('utf-8')

    def json(self):
        return jsonutils.loads(self.text)


def _error(status_code, message):
    return FakeResponse(status_code, {'httpStatus': status_code,
                                      'error_code': status_code,
                                      'error_message': message})


class FakeNsxtManager(object):
    """In-memory stand-in for the HTTP session talking to an NSX manager.

    Logical router ports are stored in a dict keyed by id. Revisions are
    checked and bumped on update the way the manager does.
    """

    def __init__(self):
        self.headers = {}
        self.auth = None
        self.cert = None
        self.verify = True
        self.ports = {}
        self.create_status = 201
        self.requests = []

    def _split(self, url):
        parsed = parse.urlparse(url)
        path = parsed.path.split(API_PREFIX, 1)[-1].strip('/')
        return path.split('/'), dict(parse.parse_qsl(parsed.query))

    def request(self, method, url, data=None, timeout=None):
        LOG.debug("Fake request: %(method)s %(url)s %(data)s",
                  {'method': method, 'url': url, 'data': data})
        self.requests.append((method, url, data))
        body = jsonutils.loads(data) if data else None
        parts, params = self._split(url)
        if parts == ['node'] and method == 'GET':
            return FakeResponse(200, {'product_version': PRODUCT_VERSION})
        if parts[0] != LROUTERPORT_RESOURCE or len(parts) > 2:
            return _error(404, "The requested URI: %s could not be found."
                          % url)
        port_id = parts[1] if len(parts) == 2 else None
        if port_id is None:
            if method == 'POST':
                return self._create_port(body)
            return _error(405, "Method %s not supported" % method)
        if port_id not in self.ports:
            return _error(404, "The requested object: %s could not be "
                          "found. Object identifiers are case sensitive."
                          % port_id)
        if method == 'GET':
            return FakeResponse(200, self.ports[port_id])
        if method == 'PUT':
            return self._update_port(port_id, body)
        if method == 'DELETE':
            del self.ports[port_id]
            return FakeResponse(200)
        return _error(405, "Method %s not supported" % method)

    def _check_port(self, body):
        for field in ('logical_router_id', 'linked_logical_router_port_id'):
            if not body.get(field):
                return _error(400, "Field %s is required" % field)
        if body.get('resource_type') != 'LogicalRouterLinkPortOnTIER1':
            return _error(400, "Invalid resource_type %s"
                          % body.get('resource_type'))

    def _expand_reference(self, reference):
        reference = dict(reference)
        reference['is_valid'] = True
        reference.setdefault('target_display_name',
                             reference.get('target_id', ''))
        return reference

    def _store_port(self, port_id, body, revision):
        port = copy.deepcopy(body)
        port['id'] = port_id
        port['_revision'] = revision
        port.setdefault('display_name', port_id)
        port['linked_logical_router_port_id'] = self._expand_reference(
            port['linked_logical_router_port_id'])
        port['service_bindings'] = [
            {'service_id': self._expand_reference(binding['service_id'])}
            for binding in port.get('service_bindings', [])]
        self.ports[port_id] = port
        return port

    def _create_port(self, body):
        error = self._check_port(body)
        if error:
            return error
        port = self._store_port(str(uuid.uuid4()), body, 0)
        return FakeResponse(self.create_status, port)

    def _update_port(self, port_id, body):
        error = self._check_port(body)
        if error:
            return error
        current = self.ports[port_id]
        if body.get('_revision') != current['_revision']:
            return _error(412, "Object was modified by somebody else")
        port = self._store_port(port_id, body, current['_revision'] + 1)
        return FakeResponse(200, port)
