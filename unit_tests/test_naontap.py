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
""" Tests for the nazapi.naontap storage driver helpers. """

import collections
import unittest

import ddt
import mock
import pytest

from nazapi import nacatch, naapi, naconfig, naontap
from nazapi import natypes as na


FeatureCase = collections.namedtuple('FeatureCase', [
    'version',
    'feature',
    'supported',
])


def make_driver(major=1, minor=130, vserver='svm1'):
    """ Build a driver around a fake Api object. """
    api = mock.Mock(spec=naapi.Api)
    api.vserver = vserver
    api.systemGetOntapiVersion.return_value = \
        na.SystemGetOntapiVersionResult(
            status='passed', majorVersion=major, minorVersion=minor)
    return naontap.Driver(api), api


def volume(name):
    """ Build a volume-get-iter record. """
    return na.VolumeAttributes(
        volumeIdAttributes=na.VolumeIdAttributes(name=name))


@ddt.ddt
class TestFeatures(unittest.TestCase):
    # pylint: disable=no-self-use
    """ Test the ONTAPI version checks. """

    def test_version_cached(self):
        """ The version is only queried once. """
        drv, api = make_driver(1, 140)
        assert drv.systemGetOntapiVersion() == '1.140'
        assert drv.systemGetOntapiVersion() == '1.140'
        assert drv.supportsApiFeature(naontap.FLEX_GROUPS)
        assert api.systemGetOntapiVersion.call_count == 1

    @ddt.data(
        FeatureCase((1, 30), naontap.MINIMUM_ONTAPI_VERSION, True),
        FeatureCase((1, 21), naontap.MINIMUM_ONTAPI_VERSION, False),
        FeatureCase((1, 99), naontap.FLEX_GROUPS, False),
        FeatureCase((1, 100), naontap.FLEX_GROUPS, True),
        FeatureCase((1, 100), naontap.VSERVER_SHOW_AGGR, True),
        FeatureCase((1, 100), naontap.NETAPP_VOLUME_ENCRYPTION, False),
        FeatureCase((1, 110), naontap.NETAPP_VOLUME_ENCRYPTION, True),
        FeatureCase((2, 0), naontap.NETAPP_VOLUME_ENCRYPTION, True),
        FeatureCase((1, 160), 'NO_SUCH_FEATURE', False),
    )
    def test_supports_feature(self, case):
        """ Test the minimum version comparisons. """
        drv, _ = make_driver(*case.version)
        assert drv.supportsApiFeature(case.feature) == case.supported

    @ddt.data(
        nacatch.ApiError('failed', 'Insufficient privileges',
                         nacatch.EAPIPRIVILEGE),
        nacatch.TransportError(401, 'Unauthorized'),
        nacatch.ProtocolDecodeError('Malformed ZAPI response'),
    )
    def test_supports_feature_error(self, exc):
        """ A version that cannot be obtained means no features. """
        drv, api = make_driver()
        api.systemGetOntapiVersion.side_effect = exc
        assert not drv.supportsApiFeature(naontap.FLEX_GROUPS)

    @ddt.data('1', '1.x', '1.2.3', '')
    def test_parse_version_fail(self, version):
        """ Test that a weird version string is rejected. """
        with pytest.raises(naontap.DriverError):
            naontap.parseOntapiVersion(version)

    def test_parse_version(self):
        """ Test that the minor version is compared as a number. """
        assert naontap.parseOntapiVersion('1.110') == (1, 110)
        assert naontap.parseOntapiVersion('1.110') > \
            naontap.parseOntapiVersion('1.31')


class TestLuns(unittest.TestCase):
    # pylint: disable=no-self-use
    """ Test the LUN helpers. """

    def test_lun_create(self):
        """ Test that a human-readable size is converted to bytes. """
        drv, api = make_driver()
        drv.lunCreate('/vol/docker_vol0/lun0', '1g', 'linux', False)
        api.lunCreateBySize.assert_called_once_with(
            path='/vol/docker_vol0/lun0',
            size=1073741824,
            ostype='linux',
            spaceReservationEnabled=False)

    def test_lun_map_already_mapped(self):
        """ A LUN already mapped to the group is not mapped again. """
        drv, api = make_driver()
        api.lunMapListInfo.return_value = na.LunMapListInfoResult(
            status='passed',
            initiatorGroups=[
                na.InitiatorGroupInfo(initiatorGroupName='other', lunId=0),
                na.InitiatorGroupInfo(initiatorGroupName='docker', lunId=7),
            ])

        assert drv.lunMapIfNotMapped('docker', '/vol/v/lun0') == 7
        api.lunMapListInfo.assert_called_once_with(path='/vol/v/lun0')
        api.lunMap.assert_not_called()

    def test_lun_map_not_mapped(self):
        """ A LUN not mapped to the group gets mapped at a new ID. """
        drv, api = make_driver()
        api.lunMapListInfo.return_value = na.LunMapListInfoResult(
            status='passed', initiatorGroups=[])
        api.lunMap.return_value = na.LunMapResult(
            status='passed', lunIdAssigned=3)

        assert drv.lunMapIfNotMapped('docker', '/vol/v/lun0') == 3
        api.lunMap.assert_called_once_with(
            initiatorGroup='docker', path='/vol/v/lun0')

    def test_lun_get(self):
        """ Test looking up exactly one LUN. """
        drv, api = make_driver()
        lun = na.LunInfo(path='/vol/v/lun0', volume='v', size=1024)
        api.lunGetIter.return_value = na.LunGetIterResult(
            status='passed', attributesList=[lun], numRecords=1)

        assert drv.lunGet('/vol/v/lun0') == lun
        api.lunGetIter.assert_called_once_with(
            maxRecords=naontap.DEFAULT_ZAPI_RECORDS,
            query=na.LunInfo(path='/vol/v/lun0'),
            desiredAttributes=na.LunInfo(path='', volume='', size=0))

    def test_lun_get_fail(self):
        """ Test that zero or several LUNs are reported as errors. """
        drv, api = make_driver()
        api.lunGetIter.return_value = na.LunGetIterResult(
            status='passed', attributesList=[], numRecords=0)
        with pytest.raises(naontap.DriverError) as err:
            drv.lunGet('/vol/v/lun0')
        assert 'not found' in str(err.value)

        api.lunGetIter.return_value = na.LunGetIterResult(
            status='passed', numRecords=2, attributesList=[
                na.LunInfo(path='/vol/v/lun0'),
                na.LunInfo(path='/vol/v/lun0'),
            ])
        with pytest.raises(naontap.DriverError) as err:
            drv.lunGet('/vol/v/lun0')
        assert 'More than one' in str(err.value)

    def test_lun_serial_number(self):
        """ Test that only the serial number itself is returned. """
        drv, api = make_driver()
        api.lunGetSerialNumber.return_value = na.LunGetSerialNumberResult(
            status='passed', serialNumber='80CEp]Hq7ZGw')
        assert drv.lunGetSerialNumber('/vol/v/lun0') == '80CEp]Hq7ZGw'


@ddt.ddt
class TestVolumes(unittest.TestCase):
    # pylint: disable=no-self-use
    """ Test the volume helpers. """

    @ddt.data(nacatch.EOBJECTNOTFOUND, nacatch.EVOLUMEDOESNOTEXIST)
    def test_volume_exists_not_found(self, errno):
        """ Test that a "no such volume" error means False. """
        drv, api = make_driver()
        api.volumeSize.side_effect = nacatch.ApiError(
            'failed', 'Volume not found', errno)
        assert not drv.volumeExists('docker_v0')
        api.volumeSize.assert_called_once_with(volume='docker_v0')

    def test_volume_exists(self):
        """ Test that a volume with a size exists. """
        drv, api = make_driver()
        api.volumeSize.return_value = na.VolumeSizeResult(
            status='passed', volumeSize='1g')
        assert drv.volumeExists('docker_v0')
        assert drv.volumeSize('docker_v0') == '1g'

    def test_volume_exists_error(self):
        """ Test that any other error is propagated. """
        drv, api = make_driver()
        api.volumeSize.side_effect = nacatch.ApiError(
            'failed', 'Insufficient privileges', nacatch.EAPIPRIVILEGE)
        with pytest.raises(nacatch.ApiError) as err:
            drv.volumeExists('docker_v0')
        assert err.value.isPrivilegeError()

    @ddt.data(
        ((1, 100), 'flexvol'),
        ((1, 90), None),
    )
    @ddt.unpack
    def test_volume_list(self, version, style):
        """ Test that FlexGroups are excluded where ONTAP knows of them. """
        drv, api = make_driver(*version)
        api.volumeGetIter.return_value = na.VolumeGetIterResult(
            status='passed', numRecords=3, attributesList=[
                volume('docker_v0'),
                volume('docker_v1'),
                na.VolumeAttributes(),
            ])

        assert drv.volumeList('docker_') == ['docker_v0', 'docker_v1']

        query = api.volumeGetIter.call_args[1]['query']
        assert query.volumeIdAttributes.name == 'docker_*'
        assert query.volumeIdAttributes.styleExtended == style

    def test_volume_get(self):
        """ Test looking up exactly one volume. """
        drv, api = make_driver()
        api.volumeGetIter.return_value = na.VolumeGetIterResult(
            status='passed', numRecords=1, attributesList=[volume('v0')])
        assert drv.volumeGet('v0').volumeIdAttributes.name == 'v0'

        api.volumeGetIter.return_value = na.VolumeGetIterResult(
            status='passed', numRecords=0, attributesList=[])
        with pytest.raises(naontap.DriverError):
            drv.volumeGet('v0')

    def test_volume_get_all(self):
        """ Test the volume listing with the container-related details. """
        drv, api = make_driver(1, 140)
        vol = na.VolumeAttributes(
            volumeIdAttributes=na.VolumeIdAttributes(
                name='docker_v0', containingAggregateName='aggr1'),
            volumeSpaceAttributes=na.VolumeSpaceAttributes(size=1048576))
        api.volumeGetIter.return_value = na.VolumeGetIterResult(
            status='passed', numRecords=1, attributesList=[vol])

        assert drv.volumeGetAll('docker_') == [vol]
        assert api.volumeGetIter.call_count == 1

        kwargs = api.volumeGetIter.call_args[1]
        assert kwargs['maxRecords'] == naontap.DEFAULT_ZAPI_RECORDS
        assert kwargs['query'].to_xml() == {
            'volume-id-attributes': {
                'name': 'docker_*',
                'style-extended': 'flexvol',
            },
        }
        assert kwargs['desiredAttributes'].to_xml() == {
            'volume-export-attributes': {'policy': ''},
            'volume-id-attributes': {
                'containing-aggregate-name': '',
                'name': '',
            },
            'volume-security-attributes': {
                'volume-security-unix-attributes': {'permissions': ''},
            },
            'volume-snapshot-attributes': {
                'snapdir-access-enabled': 'true',
                'snapshot-policy': '',
            },
            'volume-space-attributes': {'size': '0'},
        }

    def test_disable_snapshot_directory(self):
        """ Test the bulk modification query for a single volume. """
        drv, api = make_driver()
        drv.volumeDisableSnapshotDirectoryAccess('docker_v0')
        api.volumeModifyIter.assert_called_once_with(
            query=volume('docker_v0'),
            attributes=na.VolumeAttributes(
                volumeSnapshotAttributes=na.VolumeSnapshotAttributes(
                    snapdirAccessEnabled=False)))

    def test_volume_destroy(self):
        """ Test that force means unmounting and taking offline first. """
        drv, api = make_driver()
        drv.volumeDestroy('docker_v0', force=True)
        api.volumeDestroy.assert_called_once_with(
            name='docker_v0', unmountAndOffline=True)


class TestVservers(unittest.TestCase):
    # pylint: disable=no-self-use
    """ Test the vserver and network interface helpers. """

    def test_aggregate_names(self):
        """ Test listing the aggregates assigned to our vserver. """
        drv, api = make_driver(vserver='svm1')
        api.vserverGetIter.return_value = na.VserverGetIterResult(
            status='passed', numRecords=1, attributesList=[
                na.VserverInfo(vserverName='svm1', vserverAggrInfoList=[
                    na.VserverAggrInfo(aggrName='aggr1'),
                    na.VserverAggrInfo(aggrName='aggr2'),
                ]),
            ])

        assert drv.getVserverAggregateNames() == ['aggr1', 'aggr2']
        assert api.vserverGetIter.call_args[1]['query'] == \
            na.VserverInfo(vserverName='svm1')

    def test_aggregate_names_no_vserver(self):
        """ Test that a missing vserver is reported. """
        drv, api = make_driver(vserver='svm1')
        api.vserverGetIter.return_value = na.VserverGetIterResult(
            status='passed', numRecords=0, attributesList=[])

        with pytest.raises(naontap.DriverError) as err:
            drv.getVserverAggregateNames()
        assert 'svm1' in str(err.value)

    def test_data_lifs(self):
        """ Test filtering the interfaces by data protocol. """
        drv, api = make_driver()
        api.netInterfaceGetIter.return_value = na.NetInterfaceGetIterResult(
            status='passed', numRecords=3, attributesList=[
                na.NetInterfaceInfo(address='10.0.0.1',
                                    dataProtocols=['iscsi']),
                na.NetInterfaceInfo(address='10.0.0.2',
                                    dataProtocols=['nfs', 'cifs']),
                na.NetInterfaceInfo(address='10.0.0.3'),
            ])

        assert drv.netInterfaceGetDataLIFs('iscsi') == ['10.0.0.1']
        assert drv.netInterfaceGetDataLIFs('nfs') == ['10.0.0.2']
        assert drv.netInterfaceGetDataLIFs('fcp') == []

    def test_vserver_default(self):
        """ Test that the driver works on the Api's vserver by default. """
        drv, _ = make_driver(vserver='svm3')
        assert drv.vserver == 'svm3'
        assert naontap.Driver(drv.api, vserver='svm4').vserver == 'svm4'


@mock.patch.object(naconfig.NAConfig, 'get_config_files', return_value=[])
def test_from_config(_files):
    """ Test building a driver out of the configuration. """
    cfg = naconfig.NAConfig()
    cfg._dict['NAZAPI_SVM'] = 'svm5'  # pylint: disable=protected-access
    cfg._dict['NAZAPI_MAX_RECORDS'] = '50'  # pylint: disable=protected-access

    drv = naontap.Driver.fromConfig(cfg=cfg, secure=False)
    assert drv.maxRecords == 50
    assert drv.vserver == 'svm5'
    assert drv.api.endpoint.secure is False
