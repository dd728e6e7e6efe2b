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

"""Jinja2-backed rendering of view and layout files addressed by path."""

import os

from jinja2 import BaseLoader, Environment, TemplateNotFound

from ..log import log
from ..utils.template_filters import register_filters


class ViewNotFoundError(TemplateNotFound):
    """Raised when a view or layout file does not exist."""


class ViewFileLoader(BaseLoader):
    """Loads templates by their file system path.

    Template names are paths; relative names are resolved against the
    current working directory.
    """

    def get_source(self, environment, template):
        path = os.path.abspath(template)
        if not os.path.isfile(path):
            raise ViewNotFoundError(template)

        mtime = os.path.getmtime(path)
        with open(path, encoding='utf-8') as f:
            source = f.read()

        return source, path, lambda: os.path.isfile(path) and os.path.getmtime(path) == mtime


class TemplateRenderer:
    """Renders view files with a parameter mapping and a view context."""

    #: Name under which the view context is exposed to templates
    context_name = 'view'

    def __init__(self, environment=None):
        if environment is None:
            environment = Environment(
                loader=ViewFileLoader(),
                autoescape=True,
            )
            register_filters(environment)
        self.environment = environment

    def render_file(self, path, params, context=None):
        """Render the file at path.

        Args:
            path: View or layout file path
            params: Mapping of template variables
            context: Helper object exposed to the template as `view`

        Returns:
            Rendered string

        Raises:
            ViewNotFoundError: If path is empty or does not exist
        """
        if not path:
            raise ViewNotFoundError(repr(path))

        variables = dict(params)
        variables[self.context_name] = context

        log.debug(f"Rendering view file {path}")
        template = self.environment.get_template(os.fspath(path))
        return template.render(variables)


_renderer = None


def get_template_renderer():
    """Return the process-wide renderer, creating it on first use."""
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer()
    return _renderer
