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

"""Markup helpers and shared Jinja2 template filters for SocialActivity."""

import html
import re

import markdown2
from markupsafe import Markup, escape

# Quoted attribute values may contain '>'; an unclosed tag runs to the end of input.
# '<' followed by a space or digit is text, as in '1 < 2'.
TAG_RE = re.compile(r"""<[A-Za-z/!?](?:"[^"]*"|'[^']*'|[^'">])*(?:>|$)""")
ELLIPSIS = '...'


def strip_tags(text):
    """Remove every markup tag from text, leaving entities untouched."""
    if not text:
        return ''
    return TAG_RE.sub('', str(text))


def strip_html_filter(text):
    """
    Strip all HTML tags from text for use in subjects and page titles.
    """
    if not text:
        return text
    return html.unescape(strip_tags(text))


def normalize_text(text):
    """Collapse runs of whitespace into single spaces."""
    if not text:
        return ''
    return re.sub(r'\s+', ' ', text).strip()


def limit_text_length(text, limit):
    """Truncate text so that the result, ellipsis included, fits in limit."""
    if not text:
        return ''
    if limit is not None and len(text) > limit:
        return text[: max(limit - len(ELLIPSIS), 0)].rstrip() + ELLIPSIS
    return text


def rich_text_preview(text, minimal=True, max_length=None):
    """Render user-supplied rich text for display.

    Args:
        text: Raw rich text (markdown, possibly containing HTML)
        minimal: When True, produce a single-line plain preview instead of
            block HTML
        max_length: Maximum number of characters of the minimal preview

    Returns:
        Markup safe to embed in HTML templates
    """
    if not text:
        return Markup('')

    # safe_mode escapes raw HTML, so comparisons like '1 < 2' survive as text
    rendered = markdown2.markdown(text, safe_mode='escape')
    if not minimal:
        return Markup(rendered)

    # Unescaping brings back the user's raw HTML as text, strip that too
    plain = normalize_text(strip_tags(html.unescape(strip_tags(rendered))))
    return escape(limit_text_length(plain, max_length))


def rich_text_filter(text, minimal=False, max_length=None):
    return rich_text_preview(text, minimal=minimal, max_length=max_length)


def register_filters(jinja_env):
    """
    Register all custom template filters with a Jinja2 environment.

    Args:
        jinja_env: Jinja2 Environment instance
    """
    jinja_env.filters['strip_tags'] = strip_tags
    jinja_env.filters['strip_html'] = strip_html_filter
    jinja_env.filters['rich_text'] = rich_text_filter
