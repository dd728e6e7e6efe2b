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

"""Registry of concrete activity types."""

from typing import Dict, List, Type

from .base import SocialActivity


class ActivityRegistry:
    """Registry for activity classes, keyed on their `name`."""

    def __init__(self):
        self._activities: Dict[str, Type[SocialActivity]] = {}

    def register(self, activity_class: Type[SocialActivity]) -> Type[SocialActivity]:
        """Register an activity class. Usable as a class decorator."""
        if not activity_class.name:
            raise ValueError(f"Activity {activity_class.__name__} must have a name")
        self._activities[activity_class.name] = activity_class
        return activity_class

    def get(self, name: str) -> Type[SocialActivity]:
        """Get an activity class by name.

        Raises:
            ValueError: If no activity is registered under name
        """
        activity_class = self._activities.get(name)
        if activity_class is None:
            raise ValueError(f"No activity registered for {name}")
        return activity_class

    def is_registered(self, name: str) -> bool:
        return name in self._activities

    def names(self) -> List[str]:
        """Return a sorted list of registered activity names."""
        return sorted(self._activities.keys())


# Global registry instance
registry = ActivityRegistry()
