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

from nsxt_provider._i18n import _


class NsxtProviderException(Exception):
    """Base NSX-T provider exception.

    To correctly use this class, inherit from it and define
    a 'message' property. That message will get printf'd
    with the keyword arguments provided to the constructor.
    """
    message = _("An unknown exception occurred.")

    def __init__(self, **kwargs):
        try:
            self.msg = self.message % kwargs
        except (KeyError, TypeError, ValueError):
            # at least get the core message out if something happened
            self.msg = self.message
        super(NsxtProviderException, self).__init__(self.msg)
        self.kwargs = kwargs

    def __str__(self):
        return self.msg


class MissingResourceId(NsxtProviderException):
    message = _("Error obtaining %(resource)s id")


class ResourceOperationError(NsxtProviderException):
    message = _("Error during %(resource)s %(operation)s "
                "(id=%(resource_id)s): %(details)s")

    def __init__(self, **kwargs):
        kwargs.setdefault('resource_id', '')
        super(ResourceOperationError, self).__init__(**kwargs)


class UnexpectedResponseStatus(NsxtProviderException):
    message = _("Unexpected status returned during %(resource)s "
                "%(operation)s: %(status)s")


class ImmutableAttributeChanged(NsxtProviderException):
    message = _("Attribute(s) %(attributes)s of %(resource)s %(resource_id)s "
                "cannot be changed in place; the resource must be replaced")


class InvalidInput(NsxtProviderException):
    message = _("Invalid input for operation: %(error_message)s.")


class InvalidAttribute(NsxtProviderException):
    message = _("Attribute '%(attribute)s' is not defined for "
                "%(resource)s")


class InvalidConfiguration(NsxtProviderException):
    message = _("Invalid NSX-T configuration: %(reason)s")


class ResourceTypeNotFound(NsxtProviderException):
    message = _("Resource type %(resource_type)s is not supported")
