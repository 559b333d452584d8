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

HTTP_GET = "GET"
HTTP_POST = "POST"
HTTP_DELETE = "DELETE"
HTTP_PUT = "PUT"


def _build_uri_path(resource, resource_id=None, filters=None):
    uri_path = resource
    if resource_id:
        uri_path += "/%s" % resource_id
    if filters:
        sorted_filters = [
            '%s=%s' % (k, filters[k]) for k in sorted(filters.keys())
            if filters[k] is not None
        ]
        if sorted_filters:
            uri_path += "?%s" % '&'.join(sorted_filters)
    return uri_path


def do_request(method, path, body=None, client=None):
    """Issue a request through the specified API client.

    :returns: a (body, status) tuple; body is the decoded response
        document or None.
    """
    status, res = client.request(method, path, body)
    return res, status
