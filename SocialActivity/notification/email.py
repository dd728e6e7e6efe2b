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

"""Email channel: renders mail and plaintext versions and sends them."""

from jinja2 import TemplateError

from ..activity.base import OUTPUT_MAIL, OUTPUT_MAIL_PLAINTEXT, OUTPUT_TEXT
from ..config import get_config
from ..log import log
from ..utils.email import SMTPClient
from ..utils.template_filters import limit_text_length, normalize_text, strip_html_filter
from .base import NotificationChannel, NotificationError


class EmailChannel(NotificationChannel):
    """Delivers activities as multipart emails."""

    def __init__(self, config=None, smtp_client=None):
        """Initialize email channel.

        Args:
            config: Config instance, defaults to the process-wide one
            smtp_client: SMTP client, defaults to one built from config
        """
        self.config = config if config is not None else get_config()
        self.smtp_client = smtp_client or SMTPClient(self.config.raw)
        self.subject_prefix = self.config.get('email.subject_prefix')

    def send(self, activity, recipient, params=None):
        """Send an activity by mail.

        Returns:
            True once the message was handed to the SMTP server

        Raises:
            NotificationError: If the recipient has no address, a template
                cannot be rendered or SMTP delivery fails
        """
        address = recipient if isinstance(recipient, str) else getattr(recipient, 'email', None)
        if not address:
            raise NotificationError(f"No email address for recipient {recipient!r}")

        params = dict(params or {})
        params.setdefault('recipient', recipient)

        try:
            html_content = activity.render(OUTPUT_MAIL, params)
            text_content = activity.render(OUTPUT_MAIL_PLAINTEXT, params)
            subject = self.get_subject(activity)
        except TemplateError as e:
            log.error(f"Failed to render {type(activity).__name__} for mail: {e}")
            raise NotificationError(f"Mail rendering failed: {e}") from e

        if not self.smtp_client.send_email(
            recipient=address,
            subject=subject,
            html_content=html_content,
            text_content=text_content,
        ):
            raise NotificationError(f"Failed to send {type(activity).__name__} to {address}")

        log.info(f"Sent {type(activity).__name__} to {address}")
        return True

    def get_subject(self, activity):
        if hasattr(activity, 'get_mail_subject'):
            subject = activity.get_mail_subject()
        else:
            text = strip_html_filter(activity.render(OUTPUT_TEXT))
            subject = limit_text_length(normalize_text(text), 120)

        if self.subject_prefix:
            subject = f"[{self.subject_prefix}] {subject}"
        return subject
