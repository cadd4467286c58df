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
""" Send a single ZAPI envelope to a management interface over HTTP(S).

Each call to send() opens its own connection, reads the whole response
body and closes the connection before returning, so a caller that loops
over pages never holds more than one response at a time. """

import base64
import collections
import http.client
import logging
import socket
import ssl

from . import nacatch


log = logging.getLogger(__name__)


ZAPI_PATH = '/servlets/netapp.servlets.admin.XMLrequest_filer'


Endpoint = collections.namedtuple('Endpoint', [
    'host',
    'vserver',
    'username',
    'password',
    'secure',
    'timeout',
])


def auth_header(username, password):
    """ Build an HTTP basic authentication header value. """
    creds = '{0}:{1}'.format(username, password).encode('utf-8')
    return 'Basic ' + base64.b64encode(creds).decode('ascii')


def unverified_context():
    """ An SSL context that accepts the controller's self-signed cert. """
    ctx = ssl.create_default_context()
    ctx.check_hostname = False
    ctx.verify_mode = ssl.CERT_NONE
    return ctx


def url(endpoint):
    return '{scheme}://{host}{path}'.format(
        scheme='https' if endpoint.secure else 'http',
        host=endpoint.host,
        path=ZAPI_PATH)


def connect(endpoint):
    if endpoint.secure:
        return http.client.HTTPSConnection(
            endpoint.host, timeout=endpoint.timeout,
            context=unverified_context())
    return http.client.HTTPConnection(endpoint.host, timeout=endpoint.timeout)


def send(endpoint, body):
    """ POST an envelope and return the response body as bytes.

    Raise TransportError on a network failure or on any HTTP status
    other than 200; no retries are attempted here. """
    if isinstance(body, str):
        body = body.encode('utf-8')
    headers = {
        'Content-Type': 'application/xml',
        'Authorization': auth_header(endpoint.username, endpoint.password),
    }
    log.debug("URL:> %s", url(endpoint))

    conn = None
    try:
        conn = connect(endpoint)
        conn.request('POST', ZAPI_PATH, body, headers)
        response = conn.getresponse()
        status, reason = response.status, response.reason
        data = response.read()
    except (socket.error, http.client.HTTPException) as err:
        raise nacatch.TransportError(None, str(err))
    finally:
        if conn:
            conn.close()

    log.debug("response Status: %s", status)
    if status != http.client.OK:
        raise nacatch.TransportError(
            status,
            reason or http.client.responses.get(status, 'Unknown status'))
    return data
