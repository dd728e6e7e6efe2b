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

"""SMTP client used to deliver rendered activity mails."""

import logging
import smtplib
import time
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid
from typing import Any, Dict

logger = logging.getLogger(__name__)

PROVIDERS = {
    'gmail': ('smtp.gmail.com', 587, 'tls'),
    'outlook': ('smtp-mail.outlook.com', 587, 'tls'),
}


class SMTPClient:
    """SMTP client sending multipart (plain text + HTML) messages."""

    def __init__(self, config: Dict[str, Any]):
        """Initialize SMTP client with configuration.

        Args:
            config: Dictionary containing `smtp` and `email` sections:

                - smtp.provider: gmail, outlook or omitted for direct settings
                - smtp.host / smtp.port / smtp.encryption (tls, ssl, none)
                - smtp.username / smtp.password: optional credentials
                - smtp.timeout: connection timeout in seconds (default: 30)
                - email.from_address / email.from_name: sender identity
        """
        smtp_config = config.get('smtp') or {}
        email_config = config.get('email') or {}

        provider = smtp_config.get('provider')
        if provider:
            if provider not in PROVIDERS:
                raise ValueError(f"Unknown SMTP provider: {provider}")
            self.host, self.port, self.encryption = PROVIDERS[provider]
        else:
            self.host = smtp_config.get('host', 'localhost')
            self.port = smtp_config.get('port', 25)
            self.encryption = str(smtp_config.get('encryption', 'none')).lower()

        self.username = smtp_config.get('username')
        self.password = smtp_config.get('password')
        if provider and not (self.username and self.password):
            raise ValueError(f"Provider '{provider}' requires username and password")

        self.timeout = smtp_config.get('timeout', 30)
        self.from_address = email_config.get('from_address', 'socialactivity@localhost')
        self.from_name = email_config.get('from_name', 'SocialActivity')

    def send_email(
        self,
        recipient: str,
        subject: str,
        html_content: str,
        text_content: str,
        retry_count: int = 3,
        retry_delay: float = 5
    ) -> bool:
        """Send an email with both HTML and plain text content.

        Failed attempts are retried with exponential backoff.

        Returns:
            True if the email was sent, False after all attempts failed
        """
        msg = self._create_message(recipient, subject, html_content, text_content)

        for attempt in range(retry_count):
            try:
                self._send_message(msg)
                logger.info(f"Email sent successfully to {recipient}")
                return True
            except (smtplib.SMTPException, OSError) as e:
                logger.error(f"Failed to send email (attempt {attempt + 1}/{retry_count}): {e}")
                if attempt < retry_count - 1:
                    time.sleep(retry_delay)
                    retry_delay *= 2

        logger.error(f"Failed to send email to {recipient} after {retry_count} attempts")
        return False

    def _create_message(self, recipient, subject, html_content, text_content) -> MIMEMultipart:
        msg = MIMEMultipart('alternative')
        msg['Subject'] = subject
        msg['From'] = f"{self.from_name} <{self.from_address}>" if self.from_name else self.from_address
        msg['To'] = recipient
        msg['Date'] = formatdate(localtime=True)
        msg['Message-ID'] = make_msgid()

        # The last part is the one mail clients prefer
        msg.attach(MIMEText(text_content, 'plain', 'utf-8'))
        msg.attach(MIMEText(html_content, 'html', 'utf-8'))
        return msg

    def _connect(self):
        if self.encryption == 'ssl':
            smtp = smtplib.SMTP_SSL(self.host, self.port, timeout=self.timeout)
        else:
            smtp = smtplib.SMTP(self.host, self.port, timeout=self.timeout)

        try:
            if self.encryption == 'tls':
                smtp.starttls()
            if self.username and self.password:
                smtp.login(self.username, self.password)
        except smtplib.SMTPException:
            smtp.close()
            raise
        return smtp

    def _send_message(self, msg: MIMEMultipart):
        smtp = self._connect()
        try:
            smtp.send_message(msg)
        finally:
            try:
                smtp.quit()
            except smtplib.SMTPException:
                smtp.close()
