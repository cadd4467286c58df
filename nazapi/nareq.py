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
""" A non-interactive command-line interface to the ONTAP management API. """

import argparse
import io
import json
import logging
import os
import sys

from nazapi import nacatch, naapi, naconfig


CONFIG_VARS = (
    'NAZAPI_MANAGEMENT_LIF',
    'NAZAPI_SVM',
    'NAZAPI_USERNAME',
    'NAZAPI_PASSWORD',
    'NAZAPI_SECURE',
    'NAZAPI_TIMEOUT',
    'NAZAPI_MAX_PAGES',
)

NOT_FOUND_ERRNOS = frozenset((
    nacatch.EAPINOTFOUND,
    nacatch.EOBJECTNOTFOUND,
    nacatch.EVOLUMEDOESNOTEXIST,
))


def deep_to_json(data):
    """ Convert an API reply to serializable data. """
    if getattr(data, 'to_json', None) is not None:
        return deep_to_json(data.to_json())
    if isinstance(data, list):
        return [deep_to_json(obj) for obj in data]
    if isinstance(data, dict):
        return dict((name, deep_to_json(value))
                    for name, value in data.items())
    return data


def from_config_with_overrides(**kwargs):
    """ Create an API object with access credentials taken from the
    configuration files and overridden by environment variables. """
    cfg = naconfig.NAConfig()
    data = {}
    for name in CONFIG_VARS:
        value = os.environ.get(name, None)
        if value is None:
            value = cfg[name]
        data[name] = value

    return naapi.Api(host=data['NAZAPI_MANAGEMENT_LIF'],
                     vserver=data['NAZAPI_SVM'],
                     username=data['NAZAPI_USERNAME'],
                     password=data['NAZAPI_PASSWORD'],
                     secure=naconfig.to_bool(data['NAZAPI_SECURE']),
                     timeout=int(data['NAZAPI_TIMEOUT']),
                     maxPages=int(data['NAZAPI_MAX_PAGES']),
                     **kwargs)


def err_exit(name, descr, **args):
    """ Output an error in JSON form to the standard error stream and exit. """
    err = {
        'error': {
            'name': name,
            'descr': descr,
        },
    }
    err['error'].update(args)
    sys.exit(json.dumps(err, indent=2))


def parse_args(argv=None):
    """ Parse the command-line arguments, keeping the ArgumentParser from
    writing anything to the standard error stream, since all errors are
    reported in JSON form. """
    parser = argparse.ArgumentParser(
        prog='nazapi_req',
        description='ONTAP ZAPI non-interactive CLI',
    )
    parser.add_argument('-N', '--noop', action='store_true',
                        help='No-operation mode')
    parser.add_argument('--debug', action='store_true',
                        help='Log the XML requests and responses')
    parser.add_argument('--json', type=str,
                        help='The command parameters as a JSON object')
    parser.add_argument('command', type=str,
                        help='The ZAPI command to send, e.g. lun-get-iter')

    errbuf = io.StringIO()
    orig_stderr = sys.stderr
    sys.stderr = errbuf
    try:
        args = parser.parse_args(argv)
    except SystemExit as ex_err:
        sys.stderr = orig_stderr
        if ex_err.code == 0:
            sys.exit(0)
        err_exit('cliParseArgs',
                 'Could not parse the command-line arguments',
                 parser_errors=errbuf.getvalue())

    sys.stderr = orig_stderr
    return args


def get_api_method(args):
    """ Find the API method that sends the specified ZAPI command. """
    try:
        api = from_config_with_overrides()
    except KeyError as k_err:
        err_exit('cliMissingConfigVariable',
                 'Missing CLI configuration variable',
                 missing=k_err.args[0])
    except (ValueError, naconfig.NAConfigException) as err:
        err_exit('cliInitAPI', str(err))

    for name in dir(api):
        method = getattr(api, name, None)
        doc = getattr(method, 'naDoc', None)
        if doc is not None and doc.command == args.command:
            return method

    err_exit('cliUnknownCommand', 'Unknown ZAPI command',
             command=args.command)


def main(argv=None):
    """ Main function: parse the arguments, make the call, report. """
    args = parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    method = get_api_method(args)
    params = {}
    if args.json is not None:
        try:
            params = json.loads(args.json)
        except ValueError as err:
            err_exit('cliInvalidJSON', str(err))
        if not isinstance(params, dict):
            err_exit('cliInvalidJSON', 'The parameters must be a JSON object')

    if args.noop:
        print('About to invoke {method} with {params}'
              .format(method=method.__name__, params=repr(params)))
        return

    try:
        res = method(params)
        print(json.dumps(deep_to_json(res), indent=2))
    except nacatch.InvalidArgumentError as err:
        err_exit('cliInvalidArguments', str(err))
    except nacatch.ApiError as err:
        print(json.dumps({
            'error': {
                'status': err.status,
                'reason': err.reason,
                'errno': err.errno,
            },
        }, indent=2), file=sys.stderr)
        sys.exit(3 if err.errno in NOT_FOUND_ERRNOS else 2)
    except (nacatch.TransportError, nacatch.ProtocolDecodeError,
            nacatch.PaginationLimitError) as err:
        err_exit(err.__class__.__name__, str(err))


if __name__ == '__main__':
    main()
