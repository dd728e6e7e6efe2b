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

"""Activity rendering for web, mail and plain text output."""

from .base import (  # noqa: F401
    OUTPUT_MAIL,
    OUTPUT_MAIL_PLAINTEXT,
    OUTPUT_TEXT,
    OUTPUT_WEB,
    OutputMode,
    SocialActivity,
    views_beside,
)
from .context import ViewContext  # noqa: F401
from .kinds import BaseActivity, BaseNotification  # noqa: F401
from .registry import ActivityRegistry, registry  # noqa: F401
from .sources import (  # noqa: F401
    ContentAddonRecord,
    ContentContainerRecord,
    ContentRecord,
    ContentTitlePreview,
    SourceKind,
    classify_source,
)

__all__ = [
    "OUTPUT_MAIL",
    "OUTPUT_MAIL_PLAINTEXT",
    "OUTPUT_TEXT",
    "OUTPUT_WEB",
    "OutputMode",
    "SocialActivity",
    "views_beside",
    "ViewContext",
    "BaseActivity",
    "BaseNotification",
    "ActivityRegistry",
    "registry",
    "ContentAddonRecord",
    "ContentContainerRecord",
    "ContentRecord",
    "ContentTitlePreview",
    "SourceKind",
    "classify_source",
]
