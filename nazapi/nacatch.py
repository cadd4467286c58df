#
# Copyright (c) 2019 - 2026  StorPool
# All rights reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
""" Error classes and partially-constructed result handling.

The ZAPI records returned by different ONTAP releases may lack some
attributes or carry values this version of the bindings does not know
how to validate. The na_catch() and na_caught() functions are used as
a wrapper around the record building routines. If the handler raises
InvalidArgumentError, the partially-constructed objects will still be
present in the exception object's "partial" member.

The rest of the module holds the exceptions raised while talking to
the management interface: TransportError for the HTTP layer,
ProtocolDecodeError for responses that cannot be understood,
ApiError for failures reported by the server itself, and
PaginationLimitError for listings that never seem to end. """

import sys


class InvalidArgumentError(Exception):
    """ An exception object containing the partially-parsed response. """

    def __init__(self, fmt, partial=None, **kwargs):
        """ Store the partially-parsed response and an error message. """
        super(InvalidArgumentError, self).__init__()
        self.partial = partial
        self.__dict__.update(**kwargs)
        self.message = fmt.format(**kwargs)

    def __str__(self):
        """ Return a human-readable error message. """
        return self.message


def error(fmt, partial=None, **kwargs):
    """ Raise an error with the specified partial response and message. """
    raise InvalidArgumentError(fmt, partial, **kwargs)


def na_catch(handle, func, exc):
    """ Invoke a handler and return an exception object if needed. """
    try:
        handle(func())
    except InvalidArgumentError as err:
        if err.partial is not None:
            handle(err.partial)
        if exc is None or not isinstance(exc[1], InvalidArgumentError):
            return sys.exc_info()
    except Exception:  # pylint: disable=broad-except
        if exc is None:
            return sys.exc_info()

    return exc


def na_caught(exc, name, partial):
    """ Reraise a "partially processed data" error if needed. """
    if exc is None:
        return

    if isinstance(exc[1], InvalidArgumentError):
        exc[1].message = '{name}: {msg}'.format(name=name, msg=exc[1].message)
        exc[1].partial = partial
        raise exc[1].with_traceback(exc[2])

    raise InvalidArgumentError(
        fmt='{name}: {msg}', name=name, msg=str(exc[1]), partial=partial)


class TransportError(Exception):
    """ The HTTP round trip failed or returned a non-200 status. """

    def __init__(self, status, reason):
        super(TransportError, self).__init__()
        self.status = status
        self.reason = reason

    def __str__(self):
        if self.status is None:
            return "transport error: {0}".format(self.reason)
        return "{0} ({1})".format(self.status, self.reason)


class ProtocolDecodeError(Exception):
    """ The response body could not be decoded into the expected shape. """

    def __init__(self, message, body=None):
        super(ProtocolDecodeError, self).__init__()
        self.message = message
        self.body = body

    def __str__(self):
        return self.message


class ApiError(Exception):
    """ The server reported a failed status for a command. """

    def __init__(self, status, reason, errno):
        super(ApiError, self).__init__()
        self.status = status
        self.reason = reason
        self.errno = errno

    def isPrivilegeError(self):
        return self.errno == EAPIPRIVILEGE

    def isScopeError(self):
        return self.errno in (EAPIPRIVILEGE, EAPINOTFOUND)

    def __str__(self):
        return "API status: {0}, Reason: {1}, Code: {2}".format(
            self.status, self.reason, self.errno)


class PaginationLimitError(Exception):
    """ A listing exceeded the page count or time bounds set on the Api. """

    def __init__(self, command, pages, reason):
        super(PaginationLimitError, self).__init__()
        self.command = command
        self.pages = pages
        self.reason = reason

    def __str__(self):
        return "{0}: gave up after {1} pages: {2}".format(
            self.command, self.pages, self.reason)


# The errno values the rest of the bindings care about.
EONTAPI_EEXIST = "17"
EVDISK_ERROR_NO_SUCH_INITGROUP = "9003"
EVDISK_ERROR_INITGROUP_EXISTS = "9004"
EVDISK_ERROR_VDISK_EXISTS = "9012"
EVDISK_ERROR_VDISK_EXPORTED = "9013"
EVDISK_ERROR_NO_SUCH_LUNMAP = "9016"
EVDISK_ERROR_INITGROUP_MAPS_EXIST = "9029"
EAPIERROR = "13001"
EAPIPRIVILEGE = "13003"
EAPINOTFOUND = "13005"
EVOLUMEDOESNOTEXIST = "13040"
EINVALIDINPUTERROR = "13115"
EOBJECTNOTFOUND = "15661"
