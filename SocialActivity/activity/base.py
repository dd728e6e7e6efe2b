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

"""Base class for social activities rendered to web, mail and text.

An activity describes something a user did in the network, e.g. commenting
on a post. It is linked to the `originator` who performed it, the `source`
record it concerns and the content `container` the source lives in. The
activity knows how to render itself for each output channel:

- web: view wrapped in the web layout
- mail: mail view (falls back to the web view) wrapped in the mail layout
- mail_plaintext: plaintext view (falls back to the web view) wrapped in the
  plaintext mail layout
- text: view with all tags stripped, no layout
"""

import os
from abc import ABC
from enum import Enum

from markupsafe import Markup, escape

from ..config import get_config
from ..rendering.renderer import ViewNotFoundError, get_template_renderer
from ..rendering.urls import UrlBuilder
from ..utils.template_filters import rich_text_preview, strip_tags
from .context import ViewContext
from .sources import SourceKind, classify_source, container_of


class OutputMode(str, Enum):
    WEB = 'web'
    MAIL = 'mail'
    MAIL_PLAINTEXT = 'mail_plaintext'
    TEXT = 'text'


OUTPUT_WEB = OutputMode.WEB.value
OUTPUT_MAIL = OutputMode.MAIL.value
OUTPUT_MAIL_PLAINTEXT = OutputMode.MAIL_PLAINTEXT.value
OUTPUT_TEXT = OutputMode.TEXT.value

PLACEHOLDER_URL = '#'
PREVIEW_LENGTH = 60


def views_beside(module_file):
    """Return the `views` directory next to a module file.

    Concrete activities declare their view directory with
    `view_path = views_beside(__file__)`.
    """
    return os.path.join(os.path.dirname(os.path.abspath(module_file)), 'views')


class SocialActivity(ABC):
    """Base class of everything that is rendered as an activity."""

    #: Registry key, also used for per-activity configuration
    name = None

    #: Directory containing the view files of this activity
    view_path = None

    #: Name of the view, used for rendering the activity (required)
    view_name = None

    view_extension = '.html'

    #: Layout files per output mode, set by subclasses
    layout_web = None
    layout_mail = None
    layout_mail_plaintext = None

    def __init__(
        self,
        originator=None,
        source=None,
        container=None,
        module_id='',
        record=None,
        view_name=None,
        renderer=None,
        url_builder=None,
        config=None,
    ):
        """
        Args:
            originator: User which performed the activity
            source: Record which created this activity
            container: Content container the activity belongs to. Derived
                from the source when the source is content, a content addon
                or a container.
            module_id: Id of the module this activity belongs to
            record: Notification record this activity belongs to, if any
            view_name: Overrides the class-level view name
            renderer: Templating collaborator, defaults to the shared one
            url_builder: URL collaborator, defaults to one built from config
            config: Configuration, defaults to the process-wide one
        """
        self.originator = originator
        self._container = container
        self._explicit_container = container is not None
        self.module_id = module_id
        self.record = record
        if view_name is not None:
            self.view_name = view_name

        self.config = config if config is not None else get_config()
        self._renderer = renderer
        self._url_builder = url_builder

        self.source = source

    @property
    def source(self):
        return self._source

    @source.setter
    def source(self, value):
        self._source = value
        self.source_kind = classify_source(value)
        if not self._explicit_container:
            self._container = container_of(value, self.source_kind)

    @property
    def container(self):
        return self._container

    @container.setter
    def container(self, value):
        """Set the container explicitly. None reverts to the source's container."""
        self._explicit_container = value is not None
        self._container = value if value is not None else container_of(self._source, self.source_kind)

    @property
    def renderer(self):
        if self._renderer is None:
            self._renderer = get_template_renderer()
        return self._renderer

    @property
    def url_builder(self):
        if self._url_builder is None:
            self._url_builder = UrlBuilder.from_config(self.config)
        return self._url_builder

    def get_view_params(self, params=None):
        """Assemble all parameters required for rendering the view.

        The reserved keys always override caller-supplied values.
        """
        params = dict(params or {})
        params['originator'] = self.originator
        params['source'] = self.source
        params['contentContainer'] = self.container
        params['record'] = self.record
        params['url'] = self.get_url()
        return params

    def render(self, mode=OUTPUT_WEB, params=None):
        """Render the activity for the given output mode.

        Args:
            mode: One of 'web', 'mail', 'mail_plaintext' or 'text'
            params: Additional view parameters

        Returns:
            Rendered string

        Raises:
            ValueError: If mode is unknown
            ViewNotFoundError: If the view or layout file does not exist
        """
        mode = OutputMode(mode)
        view_file = self.get_view_file(mode)
        view_params = self.get_view_params(params)
        context = ViewContext(self, mode)

        result = self.renderer.render_file(view_file, view_params, context)

        if mode is OutputMode.TEXT:
            return strip_tags(result)

        view_params['content'] = Markup(result)
        return self.renderer.render_file(self.get_layout_file(mode), view_params, context)

    def get_view_file(self, mode):
        """Return the view file for an output mode.

        Mail modes prefer a view below `mail/` or `mail/plaintext/` when it
        exists. Only that alternative is checked for existence.
        """
        mode = OutputMode(mode)
        view_path = self.get_view_path()
        filename = f"{self.view_name or ''}{self.view_extension}"
        view_file = os.path.join(view_path, filename)

        alternative = None
        if mode is OutputMode.MAIL:
            alternative = os.path.join(view_path, 'mail', filename)
        elif mode is OutputMode.MAIL_PLAINTEXT:
            alternative = os.path.join(view_path, 'mail', 'plaintext', filename)

        if alternative and os.path.isfile(alternative):
            view_file = alternative

        return view_file

    def get_layout_file(self, mode):
        mode = OutputMode(mode)
        if mode is OutputMode.MAIL_PLAINTEXT:
            return self.layout_mail_plaintext
        elif mode is OutputMode.MAIL:
            return self.layout_mail
        return self.layout_web

    def get_view_path(self):
        """Return the directory containing the view files for this activity.

        Raises:
            ViewNotFoundError: If neither the class nor the configuration
                declares a view directory
        """
        if self.name:
            configured = self.config.get(f'activities.{self.name}.view_path')
            if configured:
                return configured
        if not self.view_path:
            raise ViewNotFoundError(
                type(self).__name__,
                f"{type(self).__name__} declares no view_path",
            )
        return self.view_path

    def get_url(self):
        """Absolute URL of the origin of this activity, or '#'."""
        url = None
        if self.source_kind in (SourceKind.CONTENT, SourceKind.CONTENT_ADDON):
            content = getattr(self.source, 'content', None)
            if content is not None:
                url = content.get_url()
        elif self.source_kind is SourceKind.CONTENT_CONTAINER:
            url = self.source.get_url()

        if not url or url == PLACEHOLDER_URL:
            return PLACEHOLDER_URL

        # Mail clients have no origin to resolve relative links against
        return self.url_builder.to_absolute(url)

    def get_content_info(self, content):
        """Build info text about a content: its type name and a short preview.

        Args:
            content: A ContentTitlePreview

        Returns:
            Markup such as 'Post "Hello world..."'
        """
        preview = rich_text_preview(
            content.get_content_description(),
            minimal=True,
            max_length=PREVIEW_LENGTH,
        )
        return Markup('{} "{}"').format(escape(content.get_content_name()), preview)
