#
# Copyright (c) 2014 - 2026  StorPool.
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
""" Classes for accessing the ONTAP management API over HTTP(S).

The Api class provides methods corresponding to the ZAPI commands.
The most common way to initialize it is to use the Api.fromConfig()
class method that will parse the /etc/nazapi.conf configuration and set
up the connection parameters:

    >>> from nazapi import naapi, natypes as na
    >>> api = naapi.Api.fromConfig()
    >>> api.lunGetIter(query=na.LunInfo(path='/vol/docker_*/*'),
    ...                desiredAttributes=na.LunInfo(path='', size=0))

Each method accepts either a ready-made command record or the keyword
arguments to build one. The *-iter listing methods send the command as
many times as needed to fetch all the pages and return a single merged
result; see the naiter module.
"""

import collections
import functools
import logging

from . import nahttp
from . import naiter
from . import naxml
from . import natypes as na

from .nacatch import (
    ApiError,
    InvalidArgumentError,
    PaginationLimitError,
    ProtocolDecodeError,
    TransportError,
)
from .naconfig import NAConfig
from .nautils import sec


VERSION = '1.0.0'


log = logging.getLogger(__name__)


__all__ = [
    'VERSION',
    'Api',
    'ApiError',
    'InvalidArgumentError',
    'PaginationLimitError',
    'ProtocolDecodeError',
    'TransportError',
]


ApiCallDoc = collections.namedtuple('ApiCallDoc', [
    'name',
    'desc',
    'command',
    'request',
    'returns',
    'paged',
])


class _API_METHOD(object):
    def __init__(self, request, returns, paged):
        self.request = request
        self.returns = returns
        self.paged = paged
        self.naDoc = None

    def doc(self, name, desc):
        self.naDoc = ApiCallDoc(name, desc, self.request.xmlTag,
                                self.request.__name__, self.returns.__name__,
                                self.paged)
        return self

    def compile(self):
        requestType, returns, paged = self.request, self.returns, self.paged

        def func(self, request=None, **kwargs):
            request = requestType(request, **kwargs)
            if paged:
                return self.iterate(request, returns)
            return self(request, returns)

        doc = "ZAPI: {command}\n\n".format(command=requestType.xmlTag)
        if self.naDoc is not None:
            doc += "    {name}\n\n".format(name=self.naDoc.name)
        doc += "    Arguments: {req}\n".format(req=requestType.__name__)
        if paged:
            doc += "    Returns: {res}, all the pages merged\n".format(
                res=returns.__name__)
        else:
            doc += "    Returns: {res}\n".format(res=returns.__name__)

        func.__doc__ = doc
        func.naDoc = self.naDoc

        return func


def ZAPI(request, returns=na.ApiResult):
    return _API_METHOD(request, returns, False)


def ITER(request, returns):
    assert returns.lists, \
        '{0} does not name its list attributes'.format(returns.__name__)
    return _API_METHOD(request, returns, True)


class ApiMeta(type):
    def __setattr__(cls, name, func):
        func = func.compile()
        func.__name__ = name
        func.__module__ = __name__
        type.__setattr__(cls, name, func)


class Api(object, metaclass=ApiMeta):
    '''ONTAP management API abstraction'''

    def __init__(self, host, vserver='', username='', password='', secure=True, timeout=300 * sec, failFast=True, maxPages=naiter.MAX_PAGES, deadline=None):
        self._endpoint = nahttp.Endpoint(host, vserver, username, password, secure, timeout)
        self._failFast = failFast
        self._maxPages = maxPages
        self._deadline = deadline

        if secure:
            log.warning("The TLS certificate of %s will not be validated", host)

    @classmethod
    def fromConfig(klass, cfg=None, **kwargs):
        if cfg is None:
            cfg = NAConfig()
        args = dict(
            host=cfg['NAZAPI_MANAGEMENT_LIF'],
            vserver=cfg['NAZAPI_SVM'],
            username=cfg['NAZAPI_USERNAME'],
            password=cfg['NAZAPI_PASSWORD'],
            secure=cfg.get_bool('NAZAPI_SECURE'),
            timeout=cfg.get_int('NAZAPI_TIMEOUT') * sec,
            maxPages=cfg.get_int('NAZAPI_MAX_PAGES'),
        )
        args.update(kwargs)
        return klass(**args)

    @property
    def endpoint(self):
        return self._endpoint

    @property
    def vserver(self):
        return self._endpoint.vserver

    def _roundTrip(self, request):
        body = naxml.encode(self._endpoint.vserver, request)
        log.debug("Request:> %s", body)
        data = nahttp.send(self._endpoint, body)
        log.debug("Response:> %s", data)
        status, results = naxml.decode(data)
        return status, results, data

    def _decode(self, returns, results, body):
        try:
            return returns.from_xml(results)
        except InvalidArgumentError as err:
            raise ProtocolDecodeError(
                'Could not decode a {name} response: {err}'.format(
                    name=returns.__name__, err=err),
                body)

    def __call__(self, request, returns=na.ApiResult):
        """ Send a single command and return its decoded result.

        Raise ApiError if the server reports anything but "passed". """
        status, results, body = self._roundTrip(request)
        if not status.passed:
            raise ApiError(status.status, status.reason, status.errno)
        return self._decode(returns, results, body)

    def fetchPage(self, request, returns, cursor=None):
        """ Send one page request of a listing, whatever its status. """
        if cursor is not None:
            request = request.__class__(request.to_json(), tag=cursor)
        status, results, body = self._roundTrip(request)
        return self._decode(returns, results, body)

    def iterate(self, request, returns):
        """ Fetch all the pages of a listing command and merge them. """
        iterator = naiter.ZapiIterator(
            request.xmlTag,
            functools.partial(self.fetchPage, request, returns),
            returns.lists,
            failFast=self._failFast,
            maxPages=self._maxPages,
            deadline=self._deadline)
        return iterator.run()


Api.igroupCreate = ZAPI(na.IgroupCreate).doc("Create an initiator group",
    """ Create a new, empty initiator group. """)
Api.igroupAdd = ZAPI(na.IgroupAdd).doc("Add an initiator to an initiator group", """ """)
Api.igroupRemove = ZAPI(na.IgroupRemove).doc("Remove an initiator from an initiator group", """ """)
Api.igroupDestroy = ZAPI(na.IgroupDestroy).doc("Destroy an initiator group",
    """ The group must not have any LUNs mapped to it unless force is set. """)

Api.lunCreateBySize = ZAPI(na.LunCreateBySize, returns=na.LunCreateBySizeResult).doc("Create a LUN of the specified size", """ """)
Api.lunDestroy = ZAPI(na.LunDestroy).doc("Destroy a LUN", """ """)
Api.lunGetSerialNumber = ZAPI(na.LunGetSerialNumber, returns=na.LunGetSerialNumberResult).doc("Get the serial number of a LUN", """ """)
Api.lunMap = ZAPI(na.LunMap, returns=na.LunMapResult).doc("Map a LUN to an initiator group",
    """
    If no LUN ID is specified, ONTAP picks the lowest free one and
    returns it in lunIdAssigned.
    """)
Api.lunMapListInfo = ZAPI(na.LunMapListInfo, returns=na.LunMapListInfoResult).doc("List the initiator groups a LUN is mapped to", """ """)
Api.lunOffline = ZAPI(na.LunOffline).doc("Take a LUN offline", """ """)
Api.lunOnline = ZAPI(na.LunOnline).doc("Bring a LUN online", """ """)
Api.lunGetIter = ITER(na.LunGetIter, returns=na.LunGetIterResult).doc("List LUNs",
    """
    Only the LUNs matching the query are returned; only the attributes
    present in desiredAttributes are filled in.
    """)

Api.exportRuleGetIter = ITER(na.ExportRuleGetIter, returns=na.ExportRuleGetIterResult).doc("List export policy rules", """ """)
Api.netInterfaceGetIter = ITER(na.NetInterfaceGetIter, returns=na.NetInterfaceGetIterResult).doc("List logical network interfaces", """ """)

Api.snapshotDelete = ZAPI(na.SnapshotDelete).doc("Delete a snapshot", """ """)
Api.snapshotGetIter = ITER(na.SnapshotGetIter, returns=na.SnapshotGetIterResult).doc("List snapshots",
    """
    The volumes that could not be examined are reported in volumeErrors
    instead of failing the whole listing.
    """)

Api.systemGetOntapiVersion = ZAPI(na.SystemGetOntapiVersion, returns=na.SystemGetOntapiVersionResult).doc("Get the ONTAPI version", """ """)
Api.systemGetVersion = ZAPI(na.SystemGetVersion, returns=na.SystemGetVersionResult).doc("Get the ONTAP release", """ """)

Api.volumeCloneCreate = ZAPI(na.VolumeCloneCreate).doc("Create a FlexClone volume", """ """)
Api.volumeCloneGet = ZAPI(na.VolumeCloneGet, returns=na.VolumeCloneGetResult).doc("Describe a FlexClone volume", """ """)
Api.volumeCreate = ZAPI(na.VolumeCreate).doc("Create a FlexVol volume", """ """)
Api.volumeDestroy = ZAPI(na.VolumeDestroy).doc("Destroy a volume",
    """ The volume must be offline unless unmountAndOffline is set. """)
Api.volumeMount = ZAPI(na.VolumeMount).doc("Mount a volume at a junction path", """ """)
Api.volumeOffline = ZAPI(na.VolumeOffline).doc("Take a volume offline", """ """)
Api.volumeSize = ZAPI(na.VolumeSize, returns=na.VolumeSizeResult).doc("Get or set the size of a volume", """ """)
Api.volumeUnmount = ZAPI(na.VolumeUnmount).doc("Unmount a volume", """ """)
Api.volumeGetIter = ITER(na.VolumeGetIter, returns=na.VolumeGetIterResult).doc("List volumes", """ """)
Api.volumeModifyIter = ITER(na.VolumeModifyIter, returns=na.VolumeModifyIterResult).doc("Modify all the volumes matching a query",
    """
    The modified volumes are reported in successList and the rest in
    failureList; both lists are merged across all the pages.
    """)

Api.vserverGetIter = ITER(na.VserverGetIter, returns=na.VserverGetIterResult).doc("List vservers", """ """)
