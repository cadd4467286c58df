#
# Copyright (c) 2026  StorPool.
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
""" Resource-level helpers for a storage driver built on the ZAPI bindings.

The Driver class wraps an Api object and exposes the operations a volume
plugin needs: creating and mapping LUNs, finding volumes by name or name
prefix, listing the data interfaces of a vserver, and checking whether the
ONTAPI version of the cluster supports a feature.
"""

import logging
import threading

from . import nacatch
from . import natypes as na
from . import nautils
from .naapi import Api
from .naconfig import NAConfig


log = logging.getLogger(__name__)


DEFAULT_ZAPI_RECORDS = 100

MINIMUM_ONTAPI_VERSION = 'MINIMUM_ONTAPI_VERSION'
VSERVER_SHOW_AGGR = 'VSERVER_SHOW_AGGR'
FLEX_GROUPS = 'FLEX_GROUPS'
NETAPP_VOLUME_ENCRYPTION = 'NETAPP_VOLUME_ENCRYPTION'

# The minimum (major, minor) ONTAPI version for each feature.
API_FEATURES = {
    MINIMUM_ONTAPI_VERSION: (1, 30),
    VSERVER_SHOW_AGGR: (1, 100),
    FLEX_GROUPS: (1, 100),
    NETAPP_VOLUME_ENCRYPTION: (1, 110),
}


class DriverError(Exception):
    """ A lookup that expected exactly one object found none or several. """


def parseOntapiVersion(version):
    """ Turn a "1.110" style version string into a (1, 110) tuple. """
    try:
        major, minor = version.split('.')
        return int(major), int(minor)
    except ValueError:
        raise DriverError(
            'Invalid ONTAPI version "{0}"'.format(version))


class Driver(object):
    """ The operations of a storage driver on a single vserver. """

    def __init__(self, api, vserver=None, maxRecords=DEFAULT_ZAPI_RECORDS):
        self.api = api
        self.vserver = api.vserver if vserver is None else vserver
        self.maxRecords = maxRecords
        self._ontapiVersion = None
        self._versionLock = threading.Lock()

    @classmethod
    def fromConfig(klass, cfg=None, **kwargs):
        if cfg is None:
            cfg = NAConfig()
        return klass(Api.fromConfig(cfg=cfg, **kwargs),
                     maxRecords=cfg.get_int('NAZAPI_MAX_RECORDS'))

    # Features

    def systemGetOntapiVersion(self):
        """ Return the ONTAPI version as a "major.minor" string.

        The version is only queried once per Driver object. """
        with self._versionLock:
            if self._ontapiVersion is None:
                res = self.api.systemGetOntapiVersion()
                self._ontapiVersion = '{0}.{1}'.format(
                    res.majorVersion, res.minorVersion)
            return self._ontapiVersion

    def supportsApiFeature(self, feature):
        try:
            version = parseOntapiVersion(self.systemGetOntapiVersion())
        except (nacatch.ApiError, nacatch.TransportError,
                nacatch.ProtocolDecodeError, DriverError) as err:
            log.warning("Could not determine the ONTAPI version: %s", err)
            return False

        minVersion = API_FEATURES.get(feature)
        if minVersion is None:
            return False
        return version >= minVersion

    def systemGetVersion(self):
        return self.api.systemGetVersion()

    # Initiator groups

    def igroupCreate(self, initiatorGroupName, initiatorGroupType, osType):
        return self.api.igroupCreate(
            initiatorGroupName=initiatorGroupName,
            initiatorGroupType=initiatorGroupType,
            osType=osType)

    def igroupAdd(self, initiatorGroupName, initiator):
        return self.api.igroupAdd(
            initiatorGroupName=initiatorGroupName, initiator=initiator)

    def igroupRemove(self, initiatorGroupName, initiator, force=False):
        return self.api.igroupRemove(
            initiatorGroupName=initiatorGroupName, initiator=initiator,
            force=force)

    def igroupDestroy(self, initiatorGroupName):
        return self.api.igroupDestroy(initiatorGroupName=initiatorGroupName)

    # LUNs

    def lunCreate(self, lunPath, size, osType, spaceReserved):
        """ Create a LUN; size is a byte count or a "1g" style string. """
        return self.api.lunCreateBySize(
            path=lunPath,
            size=nautils.sizeToBytes(size),
            ostype=osType,
            spaceReservationEnabled=spaceReserved)

    def lunGetSerialNumber(self, lunPath):
        return self.api.lunGetSerialNumber(path=lunPath).serialNumber

    def lunMap(self, initiatorGroupName, lunPath, lunId):
        return self.api.lunMap(
            initiatorGroup=initiatorGroupName, path=lunPath, lunId=lunId)

    def lunMapAutoID(self, initiatorGroupName, lunPath):
        return self.api.lunMap(initiatorGroup=initiatorGroupName, path=lunPath)

    def lunMapIfNotMapped(self, initiatorGroupName, lunPath):
        """ Map a LUN to an initiator group unless it is already mapped there.

        Return the LUN ID the LUN is visible at in that group. """
        for igroup in self.lunMapListInfo(lunPath).initiatorGroups:
            if igroup.initiatorGroupName == initiatorGroupName:
                log.debug("LUN %s already mapped to %s at %s",
                          lunPath, initiatorGroupName, igroup.lunId)
                return igroup.lunId

        lunId = self.lunMapAutoID(initiatorGroupName, lunPath).lunIdAssigned
        log.debug("LUN %s mapped to %s at %s", lunPath, initiatorGroupName, lunId)
        return lunId

    def lunMapListInfo(self, lunPath):
        return self.api.lunMapListInfo(path=lunPath)

    def lunOffline(self, lunPath):
        return self.api.lunOffline(path=lunPath)

    def lunOnline(self, lunPath):
        return self.api.lunOnline(path=lunPath)

    def lunDestroy(self, lunPath):
        return self.api.lunDestroy(path=lunPath)

    def lunGetAll(self, pathPattern):
        """ List the path, volume and size of the LUNs matching a pattern. """
        return self.api.lunGetIter(
            maxRecords=self.maxRecords,
            query=na.LunInfo(path=pathPattern),
            desiredAttributes=na.LunInfo(path='', volume='', size=0))

    def lunGet(self, path):
        luns = self.lunGetAll(path).attributesList
        if not luns:
            raise DriverError('LUN {0} not found'.format(path))
        if len(luns) > 1:
            raise DriverError('More than one LUN {0} found'.format(path))
        return luns[0]

    # Volumes

    def volumeCreate(self, name, aggregateName, size, spaceReserve,
                     snapshotPolicy, unixPermissions, exportPolicy,
                     securityStyle, encrypt=None):
        """ Create a FlexVol volume.

        encrypt is only sent when set; older ONTAP releases reject it. """
        return self.api.volumeCreate(
            volume=name,
            containingAggrName=aggregateName,
            size=size,
            spaceReserve=spaceReserve,
            snapshotPolicy=snapshotPolicy,
            unixPermissions=unixPermissions,
            exportPolicy=exportPolicy,
            volumeSecurityStyle=securityStyle,
            encrypt=encrypt)

    def volumeCloneCreate(self, name, source, snapshot):
        return self.api.volumeCloneCreate(
            volume=name, parentVolume=source, parentSnapshot=snapshot)

    def volumeCloneGet(self, name):
        return self.api.volumeCloneGet(volume=name).attributes

    def volumeDisableSnapshotDirectoryAccess(self, name):
        return self.api.volumeModifyIter(
            query=na.VolumeAttributes(
                volumeIdAttributes=na.VolumeIdAttributes(name=name)),
            attributes=na.VolumeAttributes(
                volumeSnapshotAttributes=na.VolumeSnapshotAttributes(
                    snapdirAccessEnabled=False)))

    def volumeExists(self, name):
        try:
            self.api.volumeSize(volume=name)
        except nacatch.ApiError as err:
            if err.errno in (nacatch.EOBJECTNOTFOUND,
                             nacatch.EVOLUMEDOESNOTEXIST):
                return False
            raise
        return True

    def volumeSize(self, name):
        return self.api.volumeSize(volume=name).volumeSize

    def setVolumeSize(self, name, newSize):
        return self.api.volumeSize(volume=name, newSize=newSize)

    def volumeMount(self, name, junctionPath):
        return self.api.volumeMount(volumeName=name, junctionPath=junctionPath)

    def volumeUnmount(self, name, force=False):
        return self.api.volumeUnmount(volumeName=name, force=force)

    def volumeOffline(self, name):
        return self.api.volumeOffline(name=name)

    def volumeDestroy(self, name, force=False):
        return self.api.volumeDestroy(name=name, unmountAndOffline=force)

    def _volumeQuery(self, name):
        idAttrs = na.VolumeIdAttributes(name=name)
        if self.supportsApiFeature(FLEX_GROUPS):
            idAttrs.styleExtended = 'flexvol'
        return na.VolumeAttributes(volumeIdAttributes=idAttrs)

    def volumeGet(self, name):
        volumes = self.api.volumeGetIter(
            maxRecords=self.maxRecords,
            query=self._volumeQuery(name)).attributesList
        if not volumes:
            raise DriverError('Flexvol {0} not found'.format(name))
        if len(volumes) > 1:
            raise DriverError('More than one Flexvol {0} found'.format(name))
        return volumes[0]

    def volumeGetAll(self, prefix):
        """ Return the details of the FlexVol volumes starting with a prefix
        that matter when the volumes are used as containers: the export
        policy, the aggregate, the Unix permissions, the size and
        the snapshot settings. """
        res = self.api.volumeGetIter(
            maxRecords=self.maxRecords,
            query=self._volumeQuery(prefix + '*'),
            desiredAttributes=na.VolumeAttributes(
                volumeExportAttributes=na.VolumeExportAttributes(policy=''),
                volumeIdAttributes=na.VolumeIdAttributes(
                    name='', containingAggregateName=''),
                volumeSecurityAttributes=na.VolumeSecurityAttributes(
                    volumeSecurityUnixAttributes=na.VolumeSecurityUnixAttributes(
                        permissions='')),
                volumeSpaceAttributes=na.VolumeSpaceAttributes(size=0),
                volumeSnapshotAttributes=na.VolumeSnapshotAttributes(
                    snapdirAccessEnabled=True, snapshotPolicy='')))
        return res.attributesList

    def volumeList(self, prefix):
        """ Return the names of the FlexVol volumes starting with a prefix. """
        res = self.api.volumeGetIter(
            maxRecords=self.maxRecords,
            query=self._volumeQuery(prefix + '*'),
            desiredAttributes=na.VolumeAttributes(
                volumeIdAttributes=na.VolumeIdAttributes(name='')))
        return [vol.volumeIdAttributes.name for vol in res.attributesList
                if vol.volumeIdAttributes is not None]

    # Export policies, snapshots, vservers

    def exportRuleGetIter(self, policy):
        return self.api.exportRuleGetIter(
            maxRecords=self.maxRecords,
            query=na.ExportRuleInfo(policyName=policy))

    def snapshotGetByVolume(self, volumeName):
        return self.api.snapshotGetIter(
            maxRecords=self.maxRecords,
            query=na.SnapshotInfo(volume=volumeName))

    def snapshotDelete(self, name, volumeName):
        return self.api.snapshotDelete(snapshot=name, volume=volumeName)

    def vserverGetIter(self):
        return self.api.vserverGetIter(maxRecords=self.maxRecords)

    def getVserverAggregateNames(self):
        """ Return the names of the aggregates assigned to our vserver. """
        res = self.api.vserverGetIter(
            maxRecords=self.maxRecords,
            query=na.VserverInfo(vserverName=self.vserver))
        if res.numRecords != 1:
            raise DriverError('Could not find SVM {0}'.format(self.vserver))

        return [
            aggr.aggrName
            for vserver in res.attributesList
            for aggr in vserver.vserverAggrInfoList or []
        ]

    # Network interfaces

    def netInterfaceGet(self):
        return self.api.netInterfaceGetIter(maxRecords=self.maxRecords)

    def netInterfaceGetDataLIFs(self, protocol):
        """ Return the addresses of the interfaces serving a data protocol. """
        dataLIFs = [
            lif.address
            for lif in self.netInterfaceGet().attributesList
            if protocol in (lif.dataProtocols or [])
        ]
        log.debug("Data LIFs for %s: %s", protocol, dataLIFs)
        return dataLIFs
