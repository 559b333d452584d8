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

TAG_ATTR = 'tag'


def get_tags_from_schema(data, attr_name=TAG_ATTR):
    tags = []
    for tag in data.get(attr_name):
        elem = {'scope': tag.get('scope', ''), 'tag': tag.get('tag', '')}
        # The backend rejects duplicated tags
        if elem not in tags:
            tags.append(elem)
    return tags


def set_tags_in_schema(data, tags, attr_name=TAG_ATTR):
    data.set(attr_name, [{'scope': tag.get('scope', ''),
                          'tag': tag.get('tag', '')}
                         for tag in tags or []])


def make_resource_reference(resource_type, resource_id):
    return {'target_type': resource_type, 'target_id': resource_id}


def get_reference_target_id(reference):
    if not reference:
        return ''
    return reference.get('target_id', '')


def _reference_to_schema(reference):
    return {'is_valid': reference.get('is_valid', False),
            'target_display_name': reference.get('target_display_name', ''),
            'target_id': reference.get('target_id', ''),
            'target_type': reference.get('target_type', '')}


def get_service_bindings_from_schema(data, attr_name):
    bindings = []
    for reference in data.get(attr_name):
        bindings.append({'service_id': make_resource_reference(
            reference.get('target_type', ''),
            reference.get('target_id', ''))})
    return bindings


def set_service_bindings_in_schema(data, service_bindings, attr_name):
    data.set(attr_name, [_reference_to_schema(binding.get('service_id', {}))
                         for binding in service_bindings or []])
