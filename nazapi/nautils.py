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
""" Utility functions and constants for the ZAPI bindings. """

sec = 1.0

KB = 1024
MB = 1024 ** 2
GB = 1024 ** 3
TB = 1024 ** 4


SIZE_SUFFIXES = {
    'b': 0, 'bytes': 0,
    'k': 1, 'kb': 1,
    'm': 2, 'mb': 2,
    'g': 3, 'gb': 3,
    't': 4, 'tb': 4,
    'p': 5, 'pb': 5,
    'e': 6, 'eb': 6,
    'z': 7, 'zb': 7,
    'y': 8, 'yb': 8,
}


def sizeToBytes(size):
    """ Convert a "1g" / "100MB" / "4096" style size to a byte count.

    The suffixes are powers of 1024; a plain number is taken as bytes. """
    if isinstance(size, int):
        return size
    size = size.strip().lower()
    for suffix in sorted(SIZE_SUFFIXES, key=len, reverse=True):
        if size.endswith(suffix):
            return int(size[:-len(suffix)]) * 1024 ** SIZE_SUFFIXES[suffix]
    return int(size)
