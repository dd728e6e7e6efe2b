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

from ..activity import OutputMode, registry as activity_registry
from ..cli.base import BaseCommand, registry
from ..log import log, initialize_logging
from ..rendering.urls import UrlBuilder
from .. import activities  # noqa: F401
import argparse
import os

EXTENSIONS = {
    OutputMode.WEB: 'html',
    OutputMode.MAIL: 'html',
    OutputMode.MAIL_PLAINTEXT: 'txt',
    OutputMode.TEXT: 'txt',
}


class PreviewCommand(BaseCommand):
    """Render a registered activity with demo records."""

    name = 'preview'
    help = 'Render an activity with sample data for one or all output modes'

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add preview-specific arguments."""
        parser.add_argument(
            'activity',
            nargs='?',
            help='Name of the activity to render'
        )
        parser.add_argument(
            '--mode', '-m',
            choices=[mode.value for mode in OutputMode],
            default=OutputMode.WEB.value,
            help='Output mode (default: web)'
        )
        parser.add_argument(
            '--all-modes',
            action='store_true',
            help='Render every output mode'
        )
        parser.add_argument(
            '--base-url',
            help='Base URL for absolute links (overrides web.base_url)'
        )
        parser.add_argument(
            '--output-dir', '-o',
            help='Write renders to this directory instead of stdout'
        )
        parser.add_argument(
            '--list',
            action='store_true',
            help='List registered activities and exit'
        )

    def handle(self, args: argparse.Namespace, context) -> int:
        """Execute the preview command."""
        initialize_logging(args.log_file, args.quiet)

        if args.list:
            for name in activity_registry.names():
                print(name)
            return 0

        if not args.activity:
            log.error("No activity given; use --list to see the registered ones")
            return 1

        try:
            activity_class = activity_registry.get(args.activity)
        except ValueError as e:
            log.error(str(e))
            return 1

        url_builder = UrlBuilder(args.base_url) if args.base_url else None
        activity = activity_class.sample(config=context.config, url_builder=url_builder)

        modes = list(OutputMode) if args.all_modes else [OutputMode(args.mode)]
        for mode in modes:
            output = activity.render(mode)
            if args.output_dir:
                write_preview(args.output_dir, activity_class.name, mode, output)
            else:
                print(output)
        return 0


def write_preview(output_dir, name, mode, output):
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{name}.{mode.value}.{EXTENSIONS[mode]}")
    with open(path, 'w', encoding='utf-8') as f:
        f.write(output)
    log.info(f"Wrote {path}")
    return path


# Register the command
registry.register(PreviewCommand)
