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

"""Command context management for the SocialActivity CLI."""

from typing import Optional

from ..config import Config, get_config


class CommandContext:
    """Context object passed to all commands."""

    def __init__(self, config_path: Optional[str] = None, log_file: Optional[str] = None,
                 quiet: bool = False):
        """
        Initialize command context.

        Args:
            config_path: Optional configuration file path
            log_file: Optional log file path
            quiet: Whether to suppress output
        """
        self.config_path = config_path
        self.log_file = log_file
        self.quiet = quiet
        self._config = None

    @property
    def config(self) -> Config:
        """Load and cache configuration."""
        if self._config is None:
            self._config = get_config(self.config_path)
        return self._config

    def cleanup(self):
        self._config = None
