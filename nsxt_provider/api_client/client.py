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

import time

from oslo_log import log as logging
from oslo_serialization import jsonutils
import requests
from requests import exceptions as r_exc

from nsxt_provider.api_client import exception

LOG = logging.getLogger(__name__)

DEFAULT_HTTP_TIMEOUT = 75
URL_BASE = 'https://%(manager)s/api/v1'
HEADERS = {'Content-Type': 'application/json',
           'Accept': 'application/json'}


class NsxtApiClient(object):
    """The NSX-T management API client.

    Issues a single HTTP request per call against one NSX manager. Error
    statuses are turned into exceptions from the api_client.exception
    module; nothing is retried.
    """

    def __init__(self, nsx_manager, username=None, password=None,
                 insecure=False, ca_file=None, client_auth_cert_file=None,
                 client_auth_key_file=None,
                 http_timeout=DEFAULT_HTTP_TIMEOUT, session=None):
        '''Constructor.

        :param nsx_manager: host name or address of the manager, optionally
            followed by ':<port>'.
        :param insecure: do not verify the manager certificate.
        :param ca_file: CA bundle used to verify the manager certificate.
        :param client_auth_cert_file: client certificate; when set it is
            used instead of basic authentication.
        :param http_timeout: how long to wait before aborting an
            unresponsive manager.
        :param session: an existing requests.Session to use.
        '''
        self.nsx_manager = nsx_manager
        self.base_url = URL_BASE % {'manager': nsx_manager}
        self._http_timeout = http_timeout
        self.session = session or requests.Session()
        self.session.headers.update(HEADERS)
        if client_auth_cert_file:
            if client_auth_key_file:
                self.session.cert = (client_auth_cert_file,
                                     client_auth_key_file)
            else:
                self.session.cert = client_auth_cert_file
        elif username:
            self.session.auth = (username, password)
        if insecure:
            self.session.verify = False
        elif ca_file:
            self.session.verify = ca_file

    def _url(self, uri):
        if uri.startswith('http://') or uri.startswith('https://'):
            return uri
        return '%s/%s' % (self.base_url, uri.lstrip('/'))

    def request(self, method, uri, body=None):
        '''Issues request to the manager.

        :returns: a (status, body) tuple, where body is the decoded JSON
            document or None for empty responses.
        '''
        url = self._url(uri)
        data = jsonutils.dumps(body) if body is not None else None
        LOG.debug("%(method)s: Request for %(url)s payload: %(payload)s",
                  {'method': method, 'url': url, 'payload': data})
        start_time = time.time()
        try:
            response = self.session.request(method, url, data=data,
                                            timeout=self._http_timeout)
        except r_exc.Timeout:
            LOG.error('Request timed out: %(method)s to %(url)s',
                      {'method': method, 'url': url})
            raise exception.RequestTimeout()
        except r_exc.ConnectionError as e:
            LOG.error("%(method)s: Unable to connect to NSX manager "
                      "%(manager)s: %(error)s",
                      {'method': method, 'manager': self.nsx_manager,
                       'error': e})
            raise exception.ServiceUnavailable(details=str(e))
        LOG.debug("%(method)s %(url)s: Completed [%(status)s] in "
                  "%(time).2f seconds",
                  {'method': method, 'url': url,
                   'status': response.status_code,
                   'time': time.time() - start_time})

        status = response.status_code
        # Fail-fast: Check for exception conditions and raise the
        # appropriate exceptions for known error codes.
        if status in exception.ERROR_MAPPINGS:
            LOG.error("Received error code: %s", status)
            LOG.error("Server Error Message: %s", response.text)
            exception.ERROR_MAPPINGS[status](response)
        if status >= 400:
            LOG.error("%(method)s to %(url)s, unexpected response code: "
                      "%(status)d (content = '%(body)s')",
                      {'method': method, 'url': url,
                       'status': status, 'body': response.text})
            exception.zero(response)

        if not response.content:
            return status, None
        return status, jsonutils.loads(response.text)
