#!/usr/bin/env python3
#
# Copyright (c) 2024-2025 Seoul National University
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
# THE SOFTWARE.
#

"""Absolute URL construction for links embedded in rendered activities."""

from urllib.parse import urljoin

from flask import has_request_context, request

from ..config import get_config
from ..log import log


def is_absolute(url):
    return url.startswith('http')


class UrlBuilder:
    """Turns site-relative URLs into absolute ones.

    Inside a Flask request the request's host URL is the origin. Outside of
    one (mail dispatch from a worker, CLI previews) the configured base URL
    is used.
    """

    def __init__(self, base_url=None):
        self.base_url = base_url

    @classmethod
    def from_config(cls, config=None):
        config = config or get_config()
        return cls(base_url=config.get('web.base_url'))

    def origin(self):
        if has_request_context():
            return request.host_url
        return self.base_url

    def to_absolute(self, url):
        """Return url unchanged if already absolute, else joined to the origin."""
        if is_absolute(url):
            return url

        origin = self.origin()
        if not origin:
            log.warning(f"No base URL available, leaving '{url}' relative")
            return url

        return urljoin(origin.rstrip('/') + '/', url.lstrip('/'))
