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

"""Attribute maps describing the fields a resource exposes.

An attribute map is a dict keyed by attribute name. Each attribute is
described by a dict which may hold:

  type         one of the TYPE_* constants below
  required     the attribute must be declared
  optional     the attribute may be declared
  computed     the value may be supplied by the backend
  force_new    the attribute cannot be changed in place
  default      value returned when neither declared nor observed
  validate     {'type:<validator>': argument}
  elem         attribute map of list/set elements
  description  free text
"""

import copy

from oslo_log import log as logging
from oslo_serialization import jsonutils

from nsxt_provider._i18n import _
from nsxt_provider.common import exceptions

LOG = logging.getLogger(__name__)

TYPE_STRING = 'string'
TYPE_INT = 'int'
TYPE_BOOL = 'bool'
TYPE_LIST = 'list'
TYPE_SET = 'set'

_ZERO_VALUES = {
    TYPE_STRING: '',
    TYPE_INT: 0,
    TYPE_BOOL: False,
    TYPE_LIST: [],
    TYPE_SET: [],
}


def _validate_string(data, max_len=None):
    if not isinstance(data, str):
        msg = _("'%s' is not a valid string") % data
        LOG.debug("validate_string: %s", msg)
        return msg

    if max_len is not None and len(data) > max_len:
        msg = (_("'%(data)s' exceeds maximum length of %(max_len)s") %
               {'data': data, 'max_len': max_len})
        LOG.debug("validate_string: %s", msg)
        return msg


def _validate_non_negative(data, valid_values=None):
    if isinstance(data, bool) or not isinstance(data, int):
        msg = _("'%s' is not an integer") % data
        LOG.debug("validate_non_negative: %s", msg)
        return msg

    if data < 0:
        msg = _("'%s' should be non-negative") % data
        LOG.debug("validate_non_negative: %s", msg)
        return msg


def _validate_boolean(data, valid_values=None):
    if not isinstance(data, bool):
        msg = _("'%s' is not a valid boolean value") % data
        LOG.debug("validate_boolean: %s", msg)
        return msg


def _validate_values(data, valid_values=None):
    if data not in valid_values:
        msg = (_("'%(data)s' is not in %(valid_values)s") %
               {'data': data, 'valid_values': valid_values})
        LOG.debug("validate_values: %s", msg)
        return msg


def _validate_list(data, valid_values=None):
    if not isinstance(data, (list, tuple)):
        msg = _("'%s' is not a list") % data
        LOG.debug("validate_list: %s", msg)
        return msg


validators = {'type:string': _validate_string,
              'type:non_negative': _validate_non_negative,
              'type:boolean': _validate_boolean,
              'type:values': _validate_values,
              'type:list': _validate_list}

_TYPE_VALIDATORS = {
    TYPE_STRING: 'type:string',
    TYPE_INT: 'type:non_negative',
    TYPE_BOOL: 'type:boolean',
    TYPE_LIST: 'type:list',
    TYPE_SET: 'type:list',
}


def zero_value(attr):
    if 'default' in attr:
        return copy.deepcopy(attr['default'])
    return copy.deepcopy(_ZERO_VALUES[attr['type']])


def _set_key(value):
    return jsonutils.dumps(value, sort_keys=True)


def normalize(attr, value):
    """Return a canonical form of value suitable for comparisons."""
    if value is None:
        value = zero_value(attr)
    if attr['type'] == TYPE_SET:
        # Sets ignore ordering and duplicated members
        return sorted(set(_set_key(member) for member in value))
    return value


def values_equal(attr, first, second):
    return normalize(attr, first) == normalize(attr, second)


def _validate_attribute(name, attr, value):
    validator = _TYPE_VALIDATORS[attr['type']]
    msg = validators[validator](value, None)
    if msg:
        return "%s: %s" % (name, msg)
    for rule, arg in attr.get('validate', {}).items():
        msg = validators[rule](value, arg)
        if msg:
            return "%s: %s" % (name, msg)
    if attr.get('elem') and attr['type'] in (TYPE_LIST, TYPE_SET):
        for index, member in enumerate(value):
            if not isinstance(member, dict):
                return (_("%(name)s.%(index)s: '%(member)s' is not a "
                          "valid object") %
                        {'name': name, 'index': index, 'member': member})
            msg = _validate_attributes(attr['elem'], member,
                                       prefix='%s.%s.' % (name, index))
            if msg:
                return msg


def _validate_attributes(attr_map, config, prefix=''):
    unknown = sorted(set(config) - set(attr_map))
    if unknown:
        return (_("Unrecognized attribute(s) '%s'") %
                ', '.join(prefix + name for name in unknown))
    for name, attr in sorted(attr_map.items()):
        value = config.get(name)
        if value is None or (attr.get('required') and value == ''):
            if attr.get('required'):
                return _("Missing required attribute '%s'") % (prefix + name)
            continue
        if (attr.get('computed') and not attr.get('optional') and
                not attr.get('required')):
            return (_("Attribute '%s' is computed and cannot be set") %
                    (prefix + name))
        msg = _validate_attribute(prefix + name, attr, value)
        if msg:
            return msg


def validate_config(attr_map, config):
    """Validate a declared configuration against an attribute map.

    :raise InvalidInput: if the configuration does not match the map.
    """
    msg = _validate_attributes(attr_map, config)
    if msg:
        raise exceptions.InvalidInput(error_message=msg)


def force_new_attributes(attr_map):
    return sorted(name for name, attr in attr_map.items()
                  if attr.get('force_new'))


def revision_schema():
    return {
        'type': TYPE_INT,
        'optional': True,
        'computed': True,
        'description': _("The _revision property describes the current "
                         "revision of the resource. To prevent clients from "
                         "overwriting each other's changes, PUT operations "
                         "must include the current _revision of the "
                         "resource"),
    }


def tags_schema():
    return {
        'type': TYPE_SET,
        'optional': True,
        'description': _("Set of opaque identifiers meaningful to the user"),
        'elem': {
            'scope': {'type': TYPE_STRING, 'optional': True},
            'tag': {'type': TYPE_STRING, 'optional': True},
        },
    }


def resource_references_schema(required, computed, valid_target_types,
                               description):
    target_type = {
        'type': TYPE_STRING,
        'optional': True,
        'description': _("Type of the NSX resource"),
    }
    if valid_target_types:
        target_type['validate'] = {'type:values': valid_target_types}
    return {
        'type': TYPE_LIST,
        'required': required,
        'optional': not required,
        'computed': computed,
        'description': description,
        'elem': {
            'is_valid': {
                'type': TYPE_BOOL,
                'computed': True,
                'description': _("A boolean flag which will be set to false "
                                 "if the referenced NSX resource has been "
                                 "deleted"),
            },
            'target_display_name': {
                'type': TYPE_STRING,
                'computed': True,
                'description': _("Display name of the NSX resource"),
            },
            'target_id': {
                'type': TYPE_STRING,
                'optional': True,
                'description': _("Identifier of the NSX resource"),
            },
            'target_type': target_type,
        },
    }
