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

import sys

from oslo_config import cfg

from nsxt_provider.api_client import exception as api_exc
from nsxt_provider.common import config
from nsxt_provider import nsxlib
from nsxt_provider import provider


def help(name):
    print("Usage: %s path/to/nsxt/provider/config/file" % name)
    sys.exit(1)


def get_manager_version(client):
    node = nsxlib.do_request(nsxlib.HTTP_GET, 'node', client=client)[0]
    return (node or {}).get('product_version')


def main():
    if len(sys.argv) != 2:
        help(sys.argv[0])
    config.init(['--config-file', sys.argv[1]])
    config.setup_logging()
    opts = cfg.CONF.nsxt
    print("-----------------------   NSX-T Options  -----------------------")
    print("\tnsx_manager: %s" % opts.nsx_manager)
    print("\tusername: %s" % opts.username)
    print("\tpassword: %s" % ('****' if opts.password else ''))
    print("\tinsecure: %s" % opts.insecure)
    print("\tca_file: %s" % opts.ca_file)
    print("\tclient_auth_cert_file: %s" % opts.client_auth_cert_file)
    print("\thttp_timeout: %s" % opts.http_timeout)
    if not opts.nsx_manager:
        print("You must specify the NSX manager!")
        sys.exit(1)

    client = provider.create_api_client(cfg.CONF)
    try:
        version = get_manager_version(client)
    except api_exc.NsxApiException as e:
        print("\nError '%(err)s' when connecting to NSX manager: "
              "%(manager)s." % {'err': e, 'manager': opts.nsx_manager})
        sys.exit(10)
    print("\tNSX manager version: %s" % version)
    print("Done.")
