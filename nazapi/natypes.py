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
""" Record, command and result type definitions for the ZAPI bindings.

Every attribute of a record is optional unless it is a required command
parameter: an attribute left as None is not sent at all, while an empty
string, a zero or False is sent as an element. This is what makes the
query and desired-attributes templates of the *-iter commands work:

    LunGetIter(query=LunInfo(path='/vol/docker_*/lun0'),
               desiredAttributes=LunInfo(path='', size=0))
"""

import re

from .nacatch import error
from .natype import XmlObject, naTypeFun, maybe, wrapped, xmlList


# Simple validator functions
def regex(argName, regex):
    _regex = re.compile(regex)

    def validator(string):
        if string is None:
            error('No {argName} specified', argName=argName)

        string = str(string)
        if not _regex.match(string):
            error('Invalid {argName} "{argVal}". Must match {regex}', argName=argName, argVal=string, regex=regex)

        return string

    return naTypeFun(argName, validator)


def oneOf(argName, *accepted):
    accepted = list(accepted)
    _accepted = frozenset(accepted)

    def validator(value):
        if value not in _accepted:
            error("Invalid {argName}: {value}. Must be one of {accepted}", argName=argName, value=value, accepted=accepted)
        else:
            return value

    return naTypeFun(argName, validator)


def intRange(argName, min, max):
    def validator(i):
        try:
            i = int(i)

            if i < min or i > max:
                error('Invalid {argName}. Must be between {min} and {max}', argName=argName, min=min, max=max)

            return i
        except (TypeError, ValueError):
            error('Invalid {argName}. Must be an integer', argName=argName)

    return naTypeFun(argName, validator)


# Common constants
VOLUME_NAME_SIZE = 203
VOLUME_NAME_REGEX = r'^[A-Za-z_][A-Za-z0-9_]*$'
LUN_PATH_REGEX = r'^/vol/[^/]+/.+$'
UNIX_PERMISSIONS_REGEX = r'^([0-7]{3,4}|[-rwxsStTdl]{9,12})$'

MAX_LUN_ID = 4095
MAX_RECORDS_LIMIT = 2 ** 31 - 1

# Simple type validators
MaxRecords = intRange('MaxRecords', 1, MAX_RECORDS_LIMIT)
LunId = intRange('LunId', 0, MAX_LUN_ID)
LunPath = regex('LunPath', LUN_PATH_REGEX)
VolumeName = regex('VolumeName', VOLUME_NAME_REGEX)
UnixPermissions = regex('UnixPermissions', UNIX_PERMISSIONS_REGEX)

IgroupType = oneOf('IgroupType', 'fcp', 'iscsi', 'mixed')
IgroupOsType = oneOf('IgroupOsType', 'default', 'aix', 'hpux', 'hyper_v', 'linux', 'netware', 'openvms', 'solaris', 'vmware', 'windows', 'xen')
LunOsType = oneOf('LunOsType', 'aix', 'hpux', 'hyper_v', 'linux', 'netware', 'openvms', 'solaris', 'solaris_efi', 'vmware', 'windows', 'windows_2008', 'windows_gpt', 'xen')
SpaceReserve = oneOf('SpaceReserve', 'none', 'file', 'volume')
SecurityStyle = oneOf('SecurityStyle', 'unix', 'ntfs', 'mixed', 'unified')
DataProtocol = oneOf('DataProtocol', 'nfs', 'cifs', 'iscsi', 'fcp', 'fcache', 'none', 'fc-nvme')


# Attribute records
@XmlObject(
    path=maybe(str),
    volume=maybe(str),
    qtree=maybe(str),
    lun=maybe(str),
    vserver=maybe(str),
    size=maybe(int),
    sizeUsed=maybe(int),
    online=maybe(bool),
    mapped=maybe(bool),
    readOnly=maybe(bool),
    state=maybe(str),
    serialNumber=maybe(str),
    uuid=maybe(str),
    lunClass=maybe(str),
    comment=maybe(str),
    multiprotocolType=maybe(str),
    prefixSize=maybe(int),
    isSpaceReservationEnabled=maybe(bool),
    isSpaceAllocEnabled=maybe(bool),
    node=maybe(str),
)
class LunInfo(object):
    '''
    path: The LUN path, e.g. /vol/docker_vol0/lun0.
    volume: The name of the volume holding the LUN.
    qtree: The qtree holding the LUN, empty for the volume root.
    lun: The name of the LUN itself.
    size: The LUN size in bytes.
    sizeUsed: The number of bytes used by the LUN.
    online: Whether the LUN is online.
    mapped: Whether the LUN is mapped to any initiator group.
    serialNumber: The serial number reported to the SCSI initiators.
    lunClass: The LUN class: regular, protocol_endpoint or vvol.
    multiprotocolType: The OS type of the LUN.
    '''

    xmlTag = 'lun-info'
    xmlTags = {'lunClass': 'class'}


@XmlObject(
    policyName=maybe(str),
    ruleIndex=maybe(int),
    clientMatch=maybe(str),
    protocol=maybe(xmlList(str, 'access-protocol')),
    roRule=maybe(xmlList(str, 'security-flavor')),
    rwRule=maybe(xmlList(str, 'security-flavor')),
    superUserSecurity=maybe(xmlList(str, 'security-flavor')),
    anonymousUserId=maybe(str),
    isAllowDevIsEnabled=maybe(bool),
    isAllowSetUidEnabled=maybe(bool),
    exportChownMode=maybe(str),
    vserverName=maybe(str),
)
class ExportRuleInfo(object):
    '''
    policyName: The export policy the rule belongs to.
    ruleIndex: The position of the rule within the policy.
    clientMatch: The client specification: a host name, a netgroup or an IP address or network.
    protocol: The access protocols the rule applies to.
    roRule: The security flavors granting read-only access.
    rwRule: The security flavors granting read-write access.
    superUserSecurity: The security flavors granting superuser access.
    '''

    xmlTag = 'export-rule-info'


@XmlObject(owner=maybe(str))
class SnapshotOwner(object):
    xmlTag = 'snapshot-owner'


@XmlObject(
    accessTime=maybe(int),
    busy=maybe(bool),
    containsLunClones=maybe(bool),
    cumulativePercentageOfTotalBlocks=maybe(int),
    cumulativePercentageOfUsedBlocks=maybe(int),
    cumulativeTotal=maybe(int),
    dependency=maybe(str),
    is7ModeSnapshot=maybe(bool),
    isConstituentSnapshot=maybe(bool),
    name=maybe(str),
    percentageOfTotalBlocks=maybe(int),
    percentageOfUsedBlocks=maybe(int),
    snapmirrorLabel=maybe(str),
    snapshotInstanceUuid=maybe(str),
    snapshotOwnersList=maybe([SnapshotOwner]),
    snapshotVersionUuid=maybe(str),
    state=maybe(str),
    total=maybe(int),
    volume=maybe(str),
    volumeProvenanceUuid=maybe(str),
    vserver=maybe(str),
)
class SnapshotInfo(object):
    '''
    accessTime: The creation time of the snapshot, seconds since the epoch.
    busy: Whether the snapshot is in use and may not be deleted.
    dependency: The applications the snapshot is busy for.
    name: The name of the snapshot.
    total: The number of 1 KB blocks held by the snapshot.
    volume: The volume the snapshot belongs to.
    '''

    xmlTag = 'snapshot-info'
    xmlTags = {'is7ModeSnapshot': 'is-7-mode-snapshot'}


@XmlObject(errno=maybe(int), name=maybe(str), reason=maybe(str), vserver=maybe(str))
class VolumeError(object):
    '''
    errno: The error code for the volume that could not be read.
    name: The volume name.
    reason: The human-readable reason.
    '''

    xmlTag = 'volume-error'


@XmlObject(
    address=maybe(str),
    addressFamily=maybe(str),
    administrativeStatus=maybe(str),
    comment=maybe(str),
    currentNode=maybe(str),
    currentPort=maybe(str),
    dataProtocols=maybe(xmlList(str, 'data-protocol')),
    dnsDomainName=maybe(str),
    failoverGroup=maybe(str),
    failoverPolicy=maybe(str),
    firewallPolicy=maybe(str),
    homeNode=maybe(str),
    homePort=maybe(str),
    interfaceName=maybe(str),
    isAutoRevert=maybe(bool),
    isHome=maybe(bool),
    lifUuid=maybe(str),
    netmask=maybe(str),
    netmaskLength=maybe(int),
    operationalStatus=maybe(str),
    role=maybe(str),
    subnetName=maybe(str),
    vserver=maybe(str),
    wwpn=maybe(str),
)
class NetInterfaceInfo(object):
    '''
    address: The IP address of the logical interface.
    dataProtocols: The data protocols served over the interface, e.g. nfs or iscsi.
    interfaceName: The name of the logical interface.
    role: The interface role: data, cluster, node_mgmt, intercluster or cluster_mgmt.
    vserver: The vserver the interface belongs to.
    '''

    xmlTag = 'net-interface-info'


@XmlObject(aggrAvailsize=maybe(int), aggrName=maybe(str))
class VserverAggrInfo(object):
    xmlTag = 'vserver-aggr-info'


@XmlObject(
    aggrList=maybe(xmlList(str, 'aggr-name')),
    allowedProtocols=maybe(xmlList(str, 'protocol')),
    disallowedProtocols=maybe(xmlList(str, 'protocol')),
    comment=maybe(str),
    ipspace=maybe(str),
    language=maybe(str),
    maxVolumes=maybe(str),
    operationalState=maybe(str),
    quotaPolicy=maybe(str),
    rootVolume=maybe(str),
    rootVolumeAggregate=maybe(str),
    rootVolumeSecurityStyle=maybe(str),
    snapshotPolicy=maybe(str),
    state=maybe(str),
    uuid=maybe(str),
    vserverAggrInfoList=maybe([VserverAggrInfo]),
    vserverName=maybe(str),
    vserverSubtype=maybe(str),
    vserverType=maybe(str),
)
class VserverInfo(object):
    '''
    aggrList: The aggregates the vserver may create volumes on.
    allowedProtocols: The protocols the vserver may serve.
    vserverAggrInfoList: The assigned aggregates along with their free space.
    vserverName: The name of the vserver.
    vserverType: The vserver type: admin, node, system or data.
    '''

    xmlTag = 'vserver-info'


@XmlObject(initiatorName=maybe(str))
class InitiatorInfo(object):
    xmlTag = 'initiator-info'


@XmlObject(
    initiatorGroupAluaEnabled=maybe(bool),
    initiatorGroupName=maybe(str),
    initiatorGroupOsType=maybe(str),
    initiatorGroupPortsetName=maybe(str),
    initiatorGroupType=maybe(str),
    initiatorGroupUuid=maybe(str),
    initiators=maybe([InitiatorInfo]),
    lunId=maybe(int),
    vserver=maybe(str),
)
class InitiatorGroupInfo(object):
    '''
    initiatorGroupName: The name of the initiator group.
    initiatorGroupType: The protocol of the group: fcp, iscsi or mixed.
    initiators: The initiators in the group.
    lunId: The LUN ID the LUN is mapped at in this group.
    '''

    xmlTag = 'initiator-group-info'


@XmlObject(
    aggregate=maybe(str),
    blockPercentageComplete=maybe(int),
    blocksScanned=maybe(int),
    blocksUpdated=maybe(int),
    flexcloneUsedPercent=maybe(int),
    junctionActive=maybe(bool),
    junctionPath=maybe(str),
    parentSnapshot=maybe(str),
    parentVolume=maybe(str),
    parentVserver=maybe(str),
    qosPolicyGroupName=maybe(str),
    size=maybe(int),
    spaceGuaranteeEnabled=maybe(bool),
    spaceReserve=maybe(str),
    splitEstimate=maybe(int),
    state=maybe(str),
    used=maybe(int),
    volume=maybe(str),
    volumeType=maybe(str),
    vserver=maybe(str),
)
class VolumeCloneInfo(object):
    '''
    parentSnapshot: The snapshot the clone was created from.
    parentVolume: The volume the clone was created from.
    volume: The name of the clone.
    '''

    xmlTag = 'volume-clone-info'


@XmlObject(
    comment=maybe(str),
    containingAggregateName=maybe(str),
    containingAggregateUuid=maybe(str),
    creationTime=maybe(int),
    dsid=maybe(int),
    fsid=maybe(str),
    instanceUuid=maybe(str),
    junctionParentName=maybe(str),
    junctionPath=maybe(str),
    msid=maybe(int),
    name=maybe(str),
    node=maybe(str),
    owningVserverName=maybe(str),
    owningVserverUuid=maybe(str),
    provenanceUuid=maybe(str),
    style=maybe(str),
    styleExtended=maybe(str),
    type=maybe(str),
    uuid=maybe(str),
)
class VolumeIdAttributes(object):
    '''
    containingAggregateName: The aggregate the volume lives on.
    name: The volume name; queries accept wildcards, e.g. docker_*.
    styleExtended: flexvol or flexgroup; only known to ONTAPI 1.100 and later.
    type: The volume type: rw, ls, dp or dc.
    '''

    xmlTag = 'volume-id-attributes'


@XmlObject(
    filesystemSize=maybe(int),
    isFilesysSizeFixed=maybe(bool),
    isSpaceGuaranteeEnabled=maybe(bool),
    percentageFractionalReserve=maybe(int),
    percentageSizeUsed=maybe(int),
    percentageSnapshotReserve=maybe(int),
    percentageSnapshotReserveUsed=maybe(int),
    physicalUsed=maybe(int),
    size=maybe(int),
    sizeAvailable=maybe(int),
    sizeAvailableForSnapshots=maybe(int),
    sizeTotal=maybe(int),
    sizeUsed=maybe(int),
    sizeUsedBySnapshots=maybe(int),
    snapshotReserveSize=maybe(int),
    spaceGuarantee=maybe(str),
)
class VolumeSpaceAttributes(object):
    xmlTag = 'volume-space-attributes'


@XmlObject(
    autoSnapshotsEnabled=maybe(bool),
    snapdirAccessEnabled=maybe(bool),
    snapshotCloneDependencyEnabled=maybe(bool),
    snapshotCount=maybe(int),
    snapshotPolicy=maybe(str),
)
class VolumeSnapshotAttributes(object):
    xmlTag = 'volume-snapshot-attributes'


@XmlObject(policy=maybe(str))
class VolumeExportAttributes(object):
    xmlTag = 'volume-export-attributes'


@XmlObject(groupId=maybe(int), permissions=maybe(str), userId=maybe(int))
class VolumeSecurityUnixAttributes(object):
    xmlTag = 'volume-security-unix-attributes'


@XmlObject(style=maybe(str), volumeSecurityUnixAttributes=maybe(VolumeSecurityUnixAttributes))
class VolumeSecurityAttributes(object):
    xmlTag = 'volume-security-attributes'


@XmlObject(
    isClusterVolume=maybe(bool),
    isConstituent=maybe(bool),
    isInconsistent=maybe(bool),
    isInvalid=maybe(bool),
    isJunctionActive=maybe(bool),
    isMoving=maybe(bool),
    isNodeRoot=maybe(bool),
    isVserverRoot=maybe(bool),
    state=maybe(str),
)
class VolumeStateAttributes(object):
    xmlTag = 'volume-state-attributes'


@XmlObject(policyGroupName=maybe(str))
class VolumeQosAttributes(object):
    xmlTag = 'volume-qos-attributes'


@XmlObject(
    dsid=maybe(int),
    msid=maybe(int),
    name=maybe(str),
    snapshotId=maybe(int),
    snapshotName=maybe(str),
    uuid=maybe(str),
)
class VolumeCloneParentAttributes(object):
    xmlTag = 'volume-clone-parent-attributes'


@XmlObject(cloneChildCount=maybe(int), volumeCloneParentAttributes=maybe(VolumeCloneParentAttributes))
class VolumeCloneAttributes(object):
    xmlTag = 'volume-clone-attributes'


@XmlObject(
    growThresholdPercent=maybe(int),
    incrementPercent=maybe(int),
    incrementSize=maybe(int),
    isEnabled=maybe(bool),
    maximumSize=maybe(int),
    minimumSize=maybe(int),
    mode=maybe(str),
    shrinkThresholdPercent=maybe(int),
)
class VolumeAutosizeAttributes(object):
    xmlTag = 'volume-autosize-attributes'


@XmlObject(
    encrypt=maybe(bool),
    volumeAutosizeAttributes=maybe(VolumeAutosizeAttributes),
    volumeCloneAttributes=maybe(VolumeCloneAttributes),
    volumeExportAttributes=maybe(VolumeExportAttributes),
    volumeIdAttributes=maybe(VolumeIdAttributes),
    volumeQosAttributes=maybe(VolumeQosAttributes),
    volumeSecurityAttributes=maybe(VolumeSecurityAttributes),
    volumeSnapshotAttributes=maybe(VolumeSnapshotAttributes),
    volumeSpaceAttributes=maybe(VolumeSpaceAttributes),
    volumeStateAttributes=maybe(VolumeStateAttributes),
)
class VolumeAttributes(object):
    '''
    encrypt: Whether the volume is encrypted; only known to ONTAPI 1.110 and later.
    volumeIdAttributes: The identification of the volume: name, aggregate, junction path.
    volumeSpaceAttributes: The size and space usage of the volume.
    volumeSnapshotAttributes: The snapshot policy and the .snapshot directory settings.
    '''

    xmlTag = 'volume-attributes'


@XmlObject(errorCode=maybe(int), errorMessage=maybe(str), volumeKey=maybe(VolumeAttributes))
class VolumeModifyIterInfo(object):
    '''
    errorCode: The error code for a volume that could not be modified.
    errorMessage: The human-readable reason.
    volumeKey: The attributes identifying the volume.
    '''

    xmlTag = 'volume-modify-iter-info'


@XmlObject(generation=maybe(int), major=maybe(int), minor=maybe(int))
class SystemVersionTuple(object):
    xmlTag = 'system-version-tuple'


# Results
@XmlObject(status=maybe(str), reason=maybe(str), errno=maybe(str))
class ApiResult(object):
    '''
    status: "passed" or "failed".
    reason: The human-readable reason for a failure.
    errno: The ZAPI error code for a failure.
    '''

    xmlTags = {'status': '@status', 'reason': '@reason', 'errno': '@errno'}

    @property
    def passed(self):
        return self.status == 'passed'


@XmlObject(nextTag=maybe(str))
class PagedResult(ApiResult):
    '''
    nextTag: The cursor to send back for the next page; missing on the last one.
    '''

    lists = {}


@XmlObject(numRecords=maybe(int))
class IterResult(PagedResult):
    '''
    numRecords: The number of records in this page; in a merged listing, the number of all the records.
    '''


@XmlObject(attributesList=maybe([ExportRuleInfo]))
class ExportRuleGetIterResult(IterResult):
    lists = {'attributesList': 'numRecords'}


@XmlObject(attributesList=maybe([LunInfo]), volumeErrors=maybe([VolumeError]))
class LunGetIterResult(IterResult):
    lists = {'attributesList': 'numRecords', 'volumeErrors': None}


@XmlObject(attributesList=maybe([NetInterfaceInfo]))
class NetInterfaceGetIterResult(IterResult):
    lists = {'attributesList': 'numRecords'}


@XmlObject(attributesList=maybe([SnapshotInfo]), volumeErrors=maybe([VolumeError]))
class SnapshotGetIterResult(IterResult):
    lists = {'attributesList': 'numRecords', 'volumeErrors': None}


@XmlObject(attributesList=maybe([VserverInfo]))
class VserverGetIterResult(IterResult):
    lists = {'attributesList': 'numRecords'}


@XmlObject(attributesList=maybe([VolumeAttributes]))
class VolumeGetIterResult(IterResult):
    lists = {'attributesList': 'numRecords'}


@XmlObject(
    successList=maybe([VolumeModifyIterInfo]),
    failureList=maybe([VolumeModifyIterInfo]),
    numSucceeded=maybe(int),
    numFailed=maybe(int),
)
class VolumeModifyIterResult(PagedResult):
    '''
    successList: The volumes that were modified.
    failureList: The volumes that could not be modified, with the reasons.
    '''

    lists = {'successList': 'numSucceeded', 'failureList': 'numFailed'}


@XmlObject(actualSize=maybe(int))
class LunCreateBySizeResult(ApiResult):
    '''
    actualSize: The size of the LUN as created, rounded up by ONTAP.
    '''


@XmlObject(serialNumber=maybe(str))
class LunGetSerialNumberResult(ApiResult):
    pass


@XmlObject(lunIdAssigned=maybe(int))
class LunMapResult(ApiResult):
    '''
    lunIdAssigned: The LUN ID chosen by ONTAP when none was requested.
    '''


@XmlObject(initiatorGroups=maybe([InitiatorGroupInfo]))
class LunMapListInfoResult(ApiResult):
    pass


@XmlObject(majorVersion=maybe(int), minorVersion=maybe(int))
class SystemGetOntapiVersionResult(ApiResult):
    pass


@XmlObject(
    buildTimestamp=maybe(int),
    isClustered=maybe(bool),
    version=maybe(str),
    versionTuple=maybe(SystemVersionTuple),
)
class SystemGetVersionResult(ApiResult):
    '''
    version: The human-readable ONTAP version string.
    versionTuple: The generation, major and minor release numbers.
    '''


@XmlObject(attributes=maybe(VolumeCloneInfo))
class VolumeCloneGetResult(ApiResult):
    pass


@XmlObject(
    isFixedSizeFlexVolume=maybe(bool),
    isReadonlyFlexVolume=maybe(bool),
    isReplicaFlexVolume=maybe(bool),
    volumeSize=maybe(str),
)
class VolumeSizeResult(ApiResult):
    '''
    volumeSize: The volume size as a string, e.g. "1g".
    '''


# Commands
@XmlObject(maxRecords=maybe(MaxRecords), tag=maybe(str))
class IterRequest(object):
    '''
    maxRecords: The maximum number of records to return in a single page.
    tag: The cursor returned in the previous page; never set by hand.
    '''


@XmlObject(desiredAttributes=maybe(ExportRuleInfo), query=maybe(ExportRuleInfo))
class ExportRuleGetIter(IterRequest):
    xmlTag = 'export-rule-get-iter'


@XmlObject(desiredAttributes=maybe(LunInfo), query=maybe(LunInfo))
class LunGetIter(IterRequest):
    xmlTag = 'lun-get-iter'


@XmlObject(desiredAttributes=maybe(NetInterfaceInfo), query=maybe(NetInterfaceInfo))
class NetInterfaceGetIter(IterRequest):
    xmlTag = 'net-interface-get-iter'


@XmlObject(desiredAttributes=maybe(SnapshotInfo), query=maybe(SnapshotInfo))
class SnapshotGetIter(IterRequest):
    xmlTag = 'snapshot-get-iter'


@XmlObject(desiredAttributes=maybe(VserverInfo), query=maybe(VserverInfo))
class VserverGetIter(IterRequest):
    xmlTag = 'vserver-get-iter'


@XmlObject(desiredAttributes=maybe(VolumeAttributes), query=maybe(VolumeAttributes))
class VolumeGetIter(IterRequest):
    xmlTag = 'volume-get-iter'


@XmlObject(
    attributes=VolumeAttributes,
    query=VolumeAttributes,
    continueOnFailure=maybe(bool),
    maxFailureCount=maybe(int),
    returnFailureList=maybe(bool),
    returnSuccessList=maybe(bool),
)
class VolumeModifyIter(IterRequest):
    '''
    attributes: The new values to set on all the matching volumes.
    query: The volumes to modify.
    continueOnFailure: Keep going after a volume fails to be modified.
    '''

    xmlTag = 'volume-modify-iter'


@XmlObject(
    initiatorGroupName=str,
    initiatorGroupType=maybe(IgroupType),
    osType=maybe(IgroupOsType),
    bindPortset=maybe(str),
)
class IgroupCreate(object):
    xmlTag = 'igroup-create'


@XmlObject(initiatorGroupName=str, initiator=str, force=maybe(bool))
class IgroupAdd(object):
    xmlTag = 'igroup-add'


@XmlObject(initiatorGroupName=str, initiator=str, force=maybe(bool))
class IgroupRemove(object):
    xmlTag = 'igroup-remove'


@XmlObject(initiatorGroupName=str, force=maybe(bool))
class IgroupDestroy(object):
    xmlTag = 'igroup-destroy'


@XmlObject(
    path=LunPath,
    size=int,
    ostype=maybe(LunOsType),
    spaceReservationEnabled=maybe(bool),
    spaceAllocationEnabled=maybe(bool),
    lunClass=maybe(str),
    comment=maybe(str),
    cachingPolicy=maybe(str),
    foreignDisk=maybe(str),
    prefixSize=maybe(int),
    qosPolicyGroup=maybe(str),
    type=maybe(str),
)
class LunCreateBySize(object):
    xmlTag = 'lun-create-by-size'
    xmlTags = {'lunClass': 'class'}


@XmlObject(path=LunPath, force=maybe(bool), destroyFencedLun=maybe(bool))
class LunDestroy(object):
    xmlTag = 'lun-destroy'


@XmlObject(path=LunPath)
class LunGetSerialNumber(object):
    xmlTag = 'lun-get-serial-number'


@XmlObject(
    path=LunPath,
    initiatorGroup=str,
    lunId=maybe(LunId),
    force=maybe(bool),
    additionalReportingNode=maybe(wrapped(str, 'node-name')),
)
class LunMap(object):
    xmlTag = 'lun-map'


@XmlObject(path=LunPath)
class LunMapListInfo(object):
    xmlTag = 'lun-map-list-info'


@XmlObject(path=LunPath)
class LunOffline(object):
    xmlTag = 'lun-offline'


@XmlObject(path=LunPath, force=maybe(bool))
class LunOnline(object):
    xmlTag = 'lun-online'


@XmlObject(
    volume=str,
    snapshot=str,
    ignoreOwners=maybe(bool),
    snapshotInstanceUuid=maybe(str),
)
class SnapshotDelete(object):
    xmlTag = 'snapshot-delete'


@XmlObject()
class SystemGetOntapiVersion(object):
    xmlTag = 'system-get-ontapi-version'


@XmlObject()
class SystemGetVersion(object):
    xmlTag = 'system-get-version'


@XmlObject(
    volume=VolumeName,
    parentVolume=str,
    parentSnapshot=maybe(str),
    junctionPath=maybe(str),
    junctionActive=maybe(bool),
    spaceReserve=maybe(SpaceReserve),
    qosPolicyGroupName=maybe(str),
    cachingPolicy=maybe(str),
    useSnaprestoreLicense=maybe(bool),
    volumeType=maybe(str),
)
class VolumeCloneCreate(object):
    xmlTag = 'volume-clone-create'


@XmlObject(volume=str, desiredAttributes=maybe(VolumeCloneInfo))
class VolumeCloneGet(object):
    xmlTag = 'volume-clone-get'


@XmlObject(
    volume=VolumeName,
    containingAggrName=maybe(str),
    size=maybe(str),
    spaceReserve=maybe(SpaceReserve),
    snapshotPolicy=maybe(str),
    unixPermissions=maybe(UnixPermissions),
    exportPolicy=maybe(str),
    volumeSecurityStyle=maybe(SecurityStyle),
    encrypt=maybe(bool),
    junctionPath=maybe(str),
    volumeComment=maybe(str),
    volumeState=maybe(str),
    volumeType=maybe(str),
    percentageSnapshotReserve=maybe(int),
    qosPolicyGroupName=maybe(str),
    languageCode=maybe(str),
    groupId=maybe(int),
    userId=maybe(int),
    cachingPolicy=maybe(str),
)
class VolumeCreate(object):
    '''
    volume: The name of the new volume.
    containingAggrName: The aggregate to create the volume on.
    size: The volume size, e.g. "1g"; a plain number is a byte count.
    encrypt: Only known to ONTAPI 1.110 and later; leave unset otherwise.
    '''

    xmlTag = 'volume-create'


@XmlObject(name=str, unmountAndOffline=maybe(bool))
class VolumeDestroy(object):
    xmlTag = 'volume-destroy'


@XmlObject(
    volumeName=str,
    junctionPath=str,
    activateJunction=maybe(bool),
    exportPolicyOverride=maybe(bool),
)
class VolumeMount(object):
    xmlTag = 'volume-mount'


@XmlObject(name=str)
class VolumeOffline(object):
    xmlTag = 'volume-offline'


@XmlObject(volume=str, newSize=maybe(str))
class VolumeSize(object):
    '''
    volume: The name of the volume.
    newSize: The new size, e.g. "2g", "+500m" or "-1g"; leave unset to only query the size.
    '''

    xmlTag = 'volume-size'


@XmlObject(volumeName=str, force=maybe(bool))
class VolumeUnmount(object):
    xmlTag = 'volume-unmount'
