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
""" ONTAP management connection configuration file parser. """


import os
import platform

import confget


DEFAULTS = {
    "NAZAPI_MANAGEMENT_LIF": "127.0.0.1",
    "NAZAPI_SVM": "",
    "NAZAPI_USERNAME": "",
    "NAZAPI_PASSWORD": "",
    "NAZAPI_SECURE": "1",
    "NAZAPI_TIMEOUT": "300",
    "NAZAPI_MAX_RECORDS": "100",
    "NAZAPI_MAX_PAGES": "10000",
}

TRUE_VALUES = frozenset(('1', 'yes', 'true', 'on'))
FALSE_VALUES = frozenset(('0', 'no', 'false', 'off', ''))


class NAConfigException(Exception):
    """ An error that occurred during the configuration parsing. """


def to_bool(value):
    """ Interpret a configuration value as a boolean flag. """
    lower = value.strip().lower()
    if lower in TRUE_VALUES:
        return True
    if lower in FALSE_VALUES:
        return False
    raise NAConfigException(
        'Invalid boolean configuration value "{value}"'.format(value=value))


class NAConfig(object):
    """ A representation of the ONTAP management connection settings.

    When constructed, an object of this class will look for the
    configuration files, parse them, and store the obtained variables
    and values into its internal dictionary. The "" section is read
    first, then the one named after the local host, so that a host may
    override e.g. the SVM it works with.
    The object may later be accessed as a dictionary. """

    PATH_CONFIG = '/etc/nazapi.conf'
    PATH_CONFIG_DIR = '/etc/nazapi.conf.d'

    def __init__(self, section=None, missing_ok=False):
        self._dict = dict()
        self._section = section
        self.run_confget(missing_ok=missing_ok)

    @classmethod
    def get_config_files(cls, missing_ok=False):
        """ Return the configuration files present on the system. """
        to_check = [cls.PATH_CONFIG]
        if os.path.isdir(cls.PATH_CONFIG_DIR):
            to_check.extend([
                os.path.join(cls.PATH_CONFIG_DIR, fname)
                for fname in sorted(os.listdir(cls.PATH_CONFIG_DIR))
                if fname.endswith(".conf") and not fname.startswith(".")
            ])

        if not missing_ok:
            return to_check
        return [path for path in to_check if os.path.isfile(path)]

    def run_confget(self, missing_ok=False):
        """ Parse the configuration files with the confget INI backend. """
        if self._section is not None:
            section = self._section
        else:
            section = platform.node()
        sections = ['', section]
        ini = confget.BACKENDS['ini']
        res = dict(DEFAULTS)

        for fname in self.get_config_files(missing_ok=missing_ok):
            try:
                cfg = confget.Config([], filename=fname)
                raw = ini(cfg).read_file()
            except Exception as exc:
                raise NAConfigException(
                    'Could not parse the {fname} configuration file: {exc}'
                    .format(fname=fname, exc=exc))

            for section in sections:
                res.update(raw.get(section, {}))

        self._dict = res

    def __getitem__(self, key):
        return self._dict[key]

    def get(self, key, defval=None):
        """ Return value of the specified configuration variable. """
        return self._dict.get(key, defval)

    def get_bool(self, key):
        """ Return the value of a flag variable, e.g. NAZAPI_SECURE. """
        return to_bool(self._dict[key])

    def get_int(self, key):
        """ Return the value of a numeric variable, e.g. NAZAPI_TIMEOUT. """
        try:
            return int(self._dict[key])
        except ValueError:
            raise NAConfigException(
                'Invalid numeric value "{value}" for {key}'
                .format(value=self._dict[key], key=key))

    def __iter__(self):
        return iter(self._dict)

    def items(self):
        """ Return a list of the configuration var/value pairs. """
        return self._dict.items()

    def keys(self):
        """ Return a list of the configuration variable names. """
        return self._dict.keys()
