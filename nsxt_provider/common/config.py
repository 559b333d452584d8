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

"""
Routines for configuring the NSX-T provider
"""

import sys

from oslo_config import cfg
from oslo_log import log as logging

from nsxt_provider.conf import nsxt as nsxt_conf
from nsxt_provider import version


LOG = logging.getLogger(__name__)

PRODUCT_NAME = 'nsxt-provider'

EXTRA_LOG_LEVEL_DEFAULTS = [
    'requests=WARN',
    'urllib3=WARN',
]

nsxt_conf.register_nsxt_opts()
logging.register_options(cfg.CONF)


def init(args, default_config_files=None, **kwargs):
    cfg.CONF(args=args, project=PRODUCT_NAME,
             version='%%(prog)s %s' % version.VERSION,
             default_config_files=default_config_files,
             **kwargs)


def setup_logging():
    """Sets up the logging options for a log with supplied name."""
    logging.set_defaults(default_log_levels=logging.get_default_log_levels() +
                         EXTRA_LOG_LEVEL_DEFAULTS)
    logging.setup(cfg.CONF, PRODUCT_NAME)
    LOG.info("Logging enabled!")
    LOG.info("%(prog)s version %(version)s",
             {'prog': sys.argv[0], 'version': version.VERSION})
    LOG.debug("command line: %s", " ".join(sys.argv))
