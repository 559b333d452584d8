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

"""Base test cases for all nsxt_provider tests.
"""

import logging
from unittest import mock

from oslo_config import cfg
from oslo_config import fixture as config_fixture
from oslotest import base

from nsxt_provider.conf import nsxt as nsxt_conf


CONF = cfg.CONF


class BaseTestCase(base.BaseTestCase):

    def setUp(self):
        super(BaseTestCase, self).setUp()
        nsxt_conf.register_nsxt_opts()
        self.config_fixture = self.useFixture(config_fixture.Config(CONF))
        self.addCleanup(mock.patch.stopall)
        for suppress_log in ('nsxt_provider', 'requests', 'urllib3'):
            logging.getLogger(suppress_log).setLevel(logging.ERROR)

    def config(self, **kw):
        """Override some configuration values in the [nsxt] group."""
        self.config_fixture.config(group=nsxt_conf.NSXT_GROUP, **kw)

    def assertDictSupersetOf(self, expected_subset, actual_superset):
        """Checks that actual dict contains the expected dict."""
        if not isinstance(expected_subset, dict):
            self.fail("expected_subset (%s) is not an instance of dict" %
                      type(expected_subset))
        if not isinstance(actual_superset, dict):
            self.fail("actual_superset (%s) is not an instance of dict" %
                      type(actual_superset))
        for k, v in expected_subset.items():
            self.assertIn(k, actual_superset)
            self.assertEqual(v, actual_superset[k],
                             "Key %(key)s expected: %(exp)r, actual %(act)r" %
                             {'key': k, 'exp': v, 'act': actual_superset[k]})
