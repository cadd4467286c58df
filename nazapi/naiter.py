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
""" Merge the pages of a ZAPI *-iter listing into a single result.

A listing command is sent repeatedly; every response carries a page of
records, an optional next-tag cursor to echo back in the following
request, and an optional declared record count. The ZapiIterator class
drives that loop for any result record that names its list attributes
in a "lists" mapping (list attribute -> count attribute or None):

    LunGetIterResult.lists = {'attributesList': 'numRecords',
                              'volumeErrors': None}

The iteration stops when a page carries no cursor (or an empty one), or
when a page declares a count of zero. The pages are fetched strictly one after
another; a transport or decode error aborts the whole listing and no
partial result is returned.
"""

import logging
import time

from . import nacatch


log = logging.getLogger(__name__)


MAX_PAGES = 10000


def page_is_empty(page, lists):
    """ Check whether a page explicitly declares that it holds nothing. """
    counts = [
        getattr(page, count) for count in lists.values() if count is not None
    ]
    declared = [count for count in counts if count is not None]
    return bool(declared) and sum(declared) == 0


class ZapiIterator(object):
    """ Fetch all the pages of a listing and fold them into the last one.

    fetch is a callable taking the cursor (None on the first call) and
    returning the decoded page record. With failFast set, a page whose
    status is not "passed" aborts the listing at once; otherwise only
    the final page's status is checked, after all pages are fetched.
    maxPages and deadline (in seconds) bound a server that keeps
    returning cursors forever. """

    def __init__(self, command, fetch, lists, failFast=True,
                 maxPages=MAX_PAGES, deadline=None, clock=time.monotonic):
        self.command = command
        self.fetch = fetch
        self.lists = lists
        self.failFast = failFast
        self.maxPages = maxPages
        self.deadline = deadline
        self.clock = clock

    def check_status(self, page):
        if page.status != 'passed':
            raise nacatch.ApiError(page.status, page.reason, page.errno)

    def check_limits(self, pages, started):
        if self.maxPages is not None and pages >= self.maxPages:
            raise nacatch.PaginationLimitError(
                self.command, pages,
                'the page limit of {0} was reached'.format(self.maxPages))
        if self.deadline is not None and \
                self.clock() - started >= self.deadline:
            raise nacatch.PaginationLimitError(
                self.command, pages,
                'the {0} second deadline expired'.format(self.deadline))

    def run(self):
        accumulated = dict((attr, []) for attr in self.lists)
        cursor = None
        pages = 0
        started = self.clock()

        while True:
            page = self.fetch(cursor)
            pages += 1
            log.debug("%s: page %d: status %s, next-tag %s",
                      self.command, pages, page.status,
                      'present' if page.nextTag else 'absent')

            if self.failFast:
                self.check_status(page)

            for attr in self.lists:
                records = getattr(page, attr)
                if records:
                    accumulated[attr].extend(records)

            if not page.nextTag or page_is_empty(page, self.lists):
                break

            self.check_limits(pages, started)
            cursor = page.nextTag

        for attr, count in self.lists.items():
            setattr(page, attr, accumulated[attr])
            if count is not None:
                setattr(page, count, len(accumulated[attr]))
        page.nextTag = None

        self.check_status(page)
        return page
