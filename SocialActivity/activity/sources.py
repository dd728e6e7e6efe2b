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

"""Capabilities of the records an activity can originate from.

Model classes opt in by subclassing one of the record bases below. The kind
of a source is determined once, when it is attached to an activity.
"""

from abc import ABC, abstractmethod
from enum import Enum


class SourceKind(str, Enum):
    CONTENT = 'content'
    CONTENT_ADDON = 'content_addon'
    CONTENT_CONTAINER = 'content_container'
    OTHER = 'other'


class ContentContainerRecord(ABC):
    """A space, profile or other grouping of content."""

    @abstractmethod
    def get_url(self):
        """Return the container's URL (may be site-relative)."""
        pass


class ContentRecord(ABC):
    """A record that owns a content entry, e.g. a post.

    The `content` attribute must expose `get_url()` and `container`.
    """

    content = None


class ContentAddonRecord(ABC):
    """A record attached to content, e.g. a comment or a like.

    The `content` attribute refers to the content entry the addon belongs to.
    """

    content = None


class ContentTitlePreview(ABC):
    """Anything that can describe itself in a one-line preview."""

    @abstractmethod
    def get_content_name(self):
        """Return the human-readable type name, e.g. 'Post'."""
        pass

    @abstractmethod
    def get_content_description(self):
        """Return the raw text to preview."""
        pass


def classify_source(source):
    """Return the SourceKind of source."""
    if isinstance(source, ContentRecord):
        return SourceKind.CONTENT
    if isinstance(source, ContentAddonRecord):
        return SourceKind.CONTENT_ADDON
    if isinstance(source, ContentContainerRecord):
        return SourceKind.CONTENT_CONTAINER
    return SourceKind.OTHER


def container_of(source, kind):
    """Return the content container a source belongs to, if it has one."""
    if kind in (SourceKind.CONTENT, SourceKind.CONTENT_ADDON):
        content = getattr(source, 'content', None)
        return getattr(content, 'container', None)
    if kind is SourceKind.CONTENT_CONTAINER:
        return source
    return None
