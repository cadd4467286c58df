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
""" Tests for the nazapi.nahttp transport. """

import http.client
import socket
import ssl
import unittest

import ddt
import mock
import pytest

from nazapi import nacatch, nahttp


ENDPOINT = nahttp.Endpoint(
    host='10.1.2.3',
    vserver='svm1',
    username='user',
    password='pass',
    secure=False,
    timeout=30,
)

HEADERS = {
    'Content-Type': 'application/xml',
    'Authorization': 'Basic dXNlcjpwYXNz',
}


def make_conn(status, data, reason=''):
    """ Build a fake connection returning a single response. """
    resp = mock.Mock(spec=['status', 'reason', 'read'])
    resp.status = status
    resp.reason = reason
    resp.read.return_value = data

    conn = mock.Mock(spec=['request', 'getresponse', 'close'])
    conn.getresponse.return_value = resp
    return conn


@ddt.ddt
class TestTransport(unittest.TestCase):
    # pylint: disable=no-self-use
    """ Test the single HTTP round trip. """

    def test_auth_header(self):
        """ Test the basic authentication header. """
        assert nahttp.auth_header('user', 'pass') == 'Basic dXNlcjpwYXNz'
        assert nahttp.auth_header('', '') == 'Basic Og=='

    @ddt.data(
        (False, 'http://10.1.2.3/servlets/netapp.servlets.admin.XMLrequest_filer'),
        (True, 'https://10.1.2.3/servlets/netapp.servlets.admin.XMLrequest_filer'),
    )
    @ddt.unpack
    def test_url(self, secure, url):
        """ Test the scheme selection. """
        assert nahttp.url(ENDPOINT._replace(secure=secure)) == url

    @mock.patch('http.client.HTTPConnection', spec=['__call__'])
    def test_send(self, http_conn):
        """ Test a successful round trip. """
        conn = make_conn(http.client.OK, b'<netapp/>')
        http_conn.return_value = conn

        data = nahttp.send(ENDPOINT, '<netapp/>')
        assert data == b'<netapp/>'

        http_conn.assert_called_once_with('10.1.2.3', timeout=30)
        conn.request.assert_called_once_with(
            'POST', nahttp.ZAPI_PATH, b'<netapp/>', HEADERS)
        conn.getresponse.assert_called_once_with()
        conn.close.assert_called_once_with()

    @mock.patch('http.client.HTTPSConnection', spec=['__call__'])
    def test_send_secure(self, https):
        """ Test that the certificate of the server is not validated. """
        conn = make_conn(200, b'<netapp/>')
        https.return_value = conn

        nahttp.send(ENDPOINT._replace(secure=True), b'<netapp/>')

        assert https.call_count == 1
        assert https.call_args[0] == ('10.1.2.3',)
        ctx = https.call_args[1]['context']
        assert ctx.verify_mode == ssl.CERT_NONE
        assert not ctx.check_hostname
        conn.close.assert_called_once_with()

    @mock.patch('http.client.HTTPConnection', spec=['__call__'])
    @ddt.data(
        (401, '', 'Unauthorized'),
        (404, '', 'Not Found'),
        (500, '', 'Internal Server Error'),
        (302, '', 'Found'),
        (503, 'Cluster Busy', 'Cluster Busy'),
        (401, 'Authorization Required', 'Authorization Required'),
        (599, '', 'Unknown status'),
    )
    @ddt.unpack
    def test_send_http_error(self, status, sent, reason, http_conn):
        """ Test that anything but 200 is a transport error. """
        conn = make_conn(status, b'<html/>', reason=sent)
        http_conn.return_value = conn
        with pytest.raises(nacatch.TransportError) as err:
            nahttp.send(ENDPOINT, b'<netapp/>')

        assert err.value.status == status
        assert err.value.reason == reason
        conn.close.assert_called_once_with()

    @mock.patch('http.client.HTTPConnection', spec=['__call__'])
    @ddt.data(
        socket.error('Connection refused'),
        socket.timeout('timed out'),
        http.client.BadStatusLine('garbage'),
    )
    def test_send_network_error(self, exc, http_conn):
        """ Test that a network error is a transport error without status. """
        conn = make_conn(200, b'')
        conn.request.side_effect = exc
        http_conn.return_value = conn
        with pytest.raises(nacatch.TransportError) as err:
            nahttp.send(ENDPOINT, b'<netapp/>')

        assert err.value.status is None
        assert str(err.value).startswith('transport error: ')
        conn.getresponse.assert_not_called()
        conn.close.assert_called_once_with()
