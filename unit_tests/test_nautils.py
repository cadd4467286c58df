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
""" Tests for the nazapi.nautils helpers. """

import pytest

from nazapi import nautils


@pytest.mark.parametrize('size,expected', [
    (4096, 4096),
    ('4096', 4096),
    ('512b', 512),
    ('1k', 1024),
    ('1KB', 1024),
    ('100m', 100 * nautils.MB),
    ('1g', 1073741824),
    (' 2GB ', 2 * nautils.GB),
    ('3t', 3 * nautils.TB),
    ('1p', 1024 ** 5),
])
def test_size_to_bytes(size, expected):
    """ Test the human-readable size conversion. """
    assert nautils.sizeToBytes(size) == expected


@pytest.mark.parametrize('size', ['', 'g', '1.5g', 'big', '10q'])
def test_size_to_bytes_fail(size):
    """ Test that a size that is not a number is rejected. """
    with pytest.raises(ValueError):
        nautils.sizeToBytes(size)
