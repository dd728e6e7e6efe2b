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

"""Lightweight records used to preview the shipped activities.

Real deployments pass their ORM objects instead; these classes only show
which attributes the views rely on.
"""

from dataclasses import dataclass, field
from typing import Optional

from ..activity.sources import (
    ContentAddonRecord,
    ContentContainerRecord,
    ContentRecord,
    ContentTitlePreview,
)


@dataclass
class User:
    id: int
    username: str
    display_name: str
    email: Optional[str] = None

    def get_url(self):
        return f'/u/{self.username}'


@dataclass
class Space(ContentContainerRecord):
    guid: str
    name: str

    def get_url(self):
        return f'/s/{self.guid}'


@dataclass
class Content:
    """Content entry shared by every content record."""

    id: int
    container: Optional[Space] = None

    def get_url(self):
        if self.container is None:
            return f'/content/{self.id}'
        return f'{self.container.get_url()}/content/{self.id}'


@dataclass
class Post(ContentRecord, ContentTitlePreview):
    id: int
    message: str
    content: Content = None

    def get_content_name(self):
        return 'Post'

    def get_content_description(self):
        return self.message


@dataclass
class Comment(ContentAddonRecord, ContentTitlePreview):
    id: int
    message: str
    target: Post = None
    content: Content = field(init=False, default=None)

    def __post_init__(self):
        if self.target is not None:
            self.content = self.target.content

    def get_content_name(self):
        return 'Comment'

    def get_content_description(self):
        return self.message


@dataclass
class NotificationRecord:
    id: int
    seen: bool = False


def sample_records():
    """Return a small, consistent set of demo records."""
    space = Space(guid='c0ffee', name='Research Group')
    author = User(id=1, username='jdoe', display_name='Jane Doe', email='jane@example.org')
    commenter = User(id=2, username='rroe', display_name='Richard Roe', email='richard@example.org')
    post = Post(
        id=10,
        message='We moved the **weekly meeting** to Thursday. Please update '
                'your calendars and bring the draft agenda for next quarter.',
        content=Content(id=100, container=space),
    )
    comment = Comment(id=20, message='Thursday works for me, see you there!', target=post)
    return {
        'space': space,
        'author': author,
        'commenter': commenter,
        'post': post,
        'comment': comment,
        'record': NotificationRecord(id=1000),
    }
