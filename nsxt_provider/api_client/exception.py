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


class NsxApiException(Exception):
    """Base NSX API Client Exception.

    To correctly use this class, inherit from it and define
    a 'message' property. That message will get printf'd
    with the keyword arguments provided to the constructor.
    'status_code' is the HTTP status which triggered the exception, if any.
    """
    message = _("An unknown exception occurred.")
    status_code = None

    def __init__(self, **kwargs):
        self.details = kwargs.get('details')
        if kwargs.get('status_code') is not None:
            self.status_code = kwargs['status_code']
        try:
            self._error_string = self.message % kwargs
        except Exception:
            # at least get the core message out if something happened
            self._error_string = self.message
        if self.details:
            self._error_string = "%s %s" % (self._error_string, self.details)
        super(NsxApiException, self).__init__(self._error_string)

    def __str__(self):
        return self._error_string


class UnAuthorizedRequest(NsxApiException):
    message = _("Server denied session's authentication credentials.")
    status_code = 401


class ResourceNotFound(NsxApiException):
    message = _("An entity referenced in the request was not found.")
    status_code = 404


class Conflict(NsxApiException):
    message = _("Request conflicts with configuration on a different "
                "entity.")
    status_code = 409


class PreconditionFailed(NsxApiException):
    message = _("The object was modified by somebody else since it was "
                "last read; refresh the revision and try again.")
    status_code = 412


class ServiceUnavailable(NsxApiException):
    message = _("Request could not completed because the associated "
                "resource could not be reached.")
    status_code = 503


class Forbidden(NsxApiException):
    message = _("The request is forbidden from accessing the "
                "referenced resource.")
    status_code = 403


class RequestTimeout(NsxApiException):
    message = _("The request has timed out.")


class BadRequest(NsxApiException):
    message = _("The server is unable to fulfill the request due "
                "to a bad syntax")
    status_code = 400


class ServerError(NsxApiException):
    message = _("The server returned an unexpected error (%(status_code)s).")
    status_code = 500


def _error_details(response):
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        return body.get('error_message') or None
    return None


def fourZeroZero(response):
    raise BadRequest(details=_error_details(response))


def fourZeroOne(response):
    raise UnAuthorizedRequest(details=_error_details(response))


def fourZeroThree(response):
    raise Forbidden(details=_error_details(response))


def fourZeroFour(response):
    raise ResourceNotFound(details=_error_details(response))


def fourZeroNine(response):
    raise Conflict(details=_error_details(response))


def fourOneTwo(response):
    raise PreconditionFailed(details=_error_details(response))


def fiveZeroThree(response):
    raise ServiceUnavailable(details=_error_details(response))


def zero(response):
    raise ServerError(status_code=response.status_code,
                      details=_error_details(response))


ERROR_MAPPINGS = {
    400: fourZeroZero,
    401: fourZeroOne,
    403: fourZeroThree,
    404: fourZeroFour,
    405: zero,
    409: fourZeroNine,
    412: fourOneTwo,
    500: zero,
    501: zero,
    503: fiveZeroThree,
}
