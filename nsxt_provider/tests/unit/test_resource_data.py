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

from nsxt_provider.common import exceptions
from nsxt_provider import resource_data
from nsxt_provider import schema
from nsxt_provider.tests import base


ATTRIBUTE_MAP = {
    'revision': schema.revision_schema(),
    'display_name': {'type': schema.TYPE_STRING, 'optional': True,
                     'computed': True},
    'router_id': {'type': schema.TYPE_STRING, 'required': True,
                  'force_new': True},
    'tag': schema.tags_schema(),
}


class ResourceDataTestCase(base.BaseTestCase):

    def _data(self, config=None, state=None, resource_id=''):
        return resource_data.ResourceData(ATTRIBUTE_MAP, config=config,
                                          state=state,
                                          resource_id=resource_id,
                                          resource_name='fake_resource')

    def test_id(self):
        data = self._data()
        self.assertEqual('', data.id)
        self.assertTrue(data.is_new_resource())
        data.set_id('fake-id')
        self.assertEqual('fake-id', data.id)
        data.set_id(None)
        self.assertEqual('', data.id)

    def test_get_prefers_declared_value(self):
        data = self._data(config={'display_name': 'declared'},
                          state={'display_name': 'observed', 'revision': 4})
        self.assertEqual('declared', data.get('display_name'))
        self.assertEqual(4, data.get('revision'))

    def test_get_falls_back_to_zero_value(self):
        data = self._data()
        self.assertEqual('', data.get('display_name'))
        self.assertEqual(0, data.get('revision'))
        self.assertEqual([], data.get('tag'))

    def test_get_returns_copies(self):
        data = self._data(config={'tag': [{'scope': 's', 'tag': 't'}]})
        data.get('tag').append({'scope': 'x', 'tag': 'y'})
        self.assertEqual([{'scope': 's', 'tag': 't'}], data.get('tag'))

    def test_set_writes_observed_state(self):
        data = self._data(config={'display_name': 'declared'})
        data.set('display_name', 'observed')
        self.assertEqual({'display_name': 'observed'}, data.state)
        self.assertEqual({'display_name': 'declared'}, data.config)

    def test_unknown_attribute(self):
        data = self._data()
        self.assertRaises(exceptions.InvalidAttribute, data.get, 'color')
        self.assertRaises(exceptions.InvalidAttribute,
                          data.set, 'color', 'red')
        self.assertRaises(exceptions.InvalidAttribute,
                          self._data, config={'color': 'red'})

    def test_has_change(self):
        data = self._data(config={'router_id': 'new'},
                          state={'router_id': 'old'})
        self.assertTrue(data.has_change('router_id'))
        self.assertEqual(('old', 'new'), data.get_change('router_id'))

    def test_undeclared_attribute_has_no_change(self):
        data = self._data(state={'display_name': 'observed'})
        self.assertFalse(data.has_change('display_name'))

    def test_tag_order_is_not_a_change(self):
        tags = [{'scope': 'a', 'tag': '1'}, {'scope': 'b', 'tag': '2'}]
        data = self._data(config={'tag': tags}, state={'tag': tags[::-1]})
        self.assertFalse(data.has_change('tag'))

    def test_undeclared_attribute_reverts_to_zero_value(self):
        data = self._data(state={'tag': [{'scope': 'a', 'tag': '1'}]})
        self.assertEqual([], data.get('tag'))
        self.assertEqual([{'scope': 'a', 'tag': '1'}],
                         data.get_observed('tag'))
        self.assertTrue(data.has_change('tag'))
