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

from nsxt_provider._i18n import _


NSXT_GROUP = 'nsxt'

connection_opts = [
    cfg.StrOpt('nsx_manager',
               help=_("Host name or IP address of the NSX manager, "
                      "optionally followed by ':<port>'")),
    cfg.StrOpt('username',
               default='admin',
               help=_('User name for the NSX manager')),
    cfg.StrOpt('password',
               default='admin',
               secret=True,
               help=_('Password for the NSX manager')),
    cfg.BoolOpt('insecure',
                default=False,
                help=_('Skip verification of the NSX manager certificate')),
    cfg.StrOpt('ca_file',
               help=_('CA bundle used to verify the NSX manager '
                      'certificate')),
    cfg.StrOpt('client_auth_cert_file',
               help=_('Client certificate used for certificate based '
                      'authentication')),
    cfg.StrOpt('client_auth_key_file',
               help=_('Private key of the client certificate')),
    cfg.IntOpt('http_timeout',
               default=75,
               help=_('Time in seconds before aborting a request to the '
                      'NSX manager')),
]


def register_nsxt_opts(cfg=cfg.CONF):
    cfg.register_opts(connection_opts, group=NSXT_GROUP)
