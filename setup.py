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

from setuptools import setup, find_packages
import os

# Read the README file for long description
def read_long_description():
    here = os.path.abspath(os.path.dirname(__file__))
    with open(os.path.join(here, 'README.md'), encoding='utf-8') as f:
        return f.read()

setup(
    name='socialactivity',
    version='0.1.0',
    description='Render social network activities and notifications for web, mail and plain text',
    long_description=read_long_description(),
    long_description_content_type='text/markdown',
    keywords=[
        'social network',
        'notifications',
        'activity stream',
        'email',
        'jinja2',
    ],
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Framework :: Flask',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Communications :: Email',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    ],
    packages=find_packages(exclude=['tests*']),
    package_data={
        'SocialActivity': [
            'templates/layouts/*/*.html',
            'activities/views/*.html',
            'activities/views/mail/*.html',
            'activities/views/mail/plaintext/*.html',
        ],
    },
    include_package_data=True,
    python_requires='>=3.8',
    entry_points={
        'console_scripts': [
            'socialactivity = SocialActivity.__main__:main',
        ],
    },
    install_requires=[
        'Flask >= 2.0',
        'Jinja2 >= 3.0',
        'MarkupSafe >= 2.0',
        'markdown2 >= 2.4.0',
        'PyYAML >= 6.0',
    ],
    extras_require={
        'test': [
            'pytest >= 7.0',
        ],
    },
)
