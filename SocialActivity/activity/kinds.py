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

"""Notification and stream activity flavours of SocialActivity."""

import os

from ..utils.template_filters import limit_text_length, normalize_text, strip_html_filter
from .base import OUTPUT_TEXT, SocialActivity

TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), '..', 'templates')
LAYOUT_DIR = os.path.normpath(os.path.join(TEMPLATE_DIR, 'layouts'))

SUBJECT_LENGTH = 120


def layout_file(kind, mode):
    return os.path.join(LAYOUT_DIR, kind, f'{mode}.html')


class LayoutConfigMixin:
    """Fills the three layout fields from the package layouts or config."""

    layout_kind = None

    def _configure_layouts(self):
        for attr, mode in (
            ('layout_web', 'web'),
            ('layout_mail', 'mail'),
            ('layout_mail_plaintext', 'mail_plaintext'),
        ):
            configured = self.config.get(f'layouts.{self.layout_kind}.{mode}')
            if configured:
                setattr(self, attr, configured)
            elif getattr(self, attr) is None:
                setattr(self, attr, layout_file(self.layout_kind, mode))


class BaseNotification(LayoutConfigMixin, SocialActivity):
    """An activity delivered to a user's notification list or inbox."""

    layout_kind = 'notification'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._configure_layouts()

    def get_mail_subject(self):
        """Return the subject line used when the notification is mailed."""
        text = strip_html_filter(self.render(OUTPUT_TEXT))
        return limit_text_length(normalize_text(text), SUBJECT_LENGTH)


class BaseActivity(LayoutConfigMixin, SocialActivity):
    """An activity shown in a container's stream and in mail summaries."""

    layout_kind = 'activity'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._configure_layouts()
