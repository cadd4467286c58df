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
""" Distribution definitions for the ONTAP ZAPI Python bindings. """


import re

import setuptools


RE_VERSION = r'''^
    \s* VERSION \s* = \s* '
    (?P<version>
           (?: 0 | [1-9][0-9]* )    # major
        \. (?: 0 | [1-9][0-9]* )    # minor
        \. (?: 0 | [1-9][0-9]* )    # patchlevel
    (?: \. [a-zA-Z0-9]+ )?          # optional addendum (dev1, beta3, etc.)
    )
    ' \s*
    $'''


def get_version():
    """ Get the version string from the API module. """
    found = None
    re_semver = re.compile(RE_VERSION, re.X)
    with open('nazapi/naapi.py') as init:
        for line in init.readlines():
            match = re_semver.match(line)
            if not match:
                continue
            assert found is None
            found = match.group('version')

    assert found is not None
    return found


setuptools.setup(
    name='nazapi',
    version=get_version(),
    packages=('nazapi',),

    author='Peter Pentchev',
    author_email='openstack-dev@storpool.com',
    description='Bindings for the NetApp ONTAP ZAPI management protocol',
    license='Apache License 2.0',
    keywords='netapp ontap zapi',
    url='http://www.storpool.com/',

    python_requires='>=3.6',

    install_requires=[
        'confget',
        'xmltodict',
    ],

    extras_require={
        'test': [
            'ddt',
            'mock',
            'pytest',
        ],
    },

    zip_safe=True,

    entry_points={
        'console_scripts': [
            'nazapi_req=nazapi.nareq:main',
        ],
    },
)
