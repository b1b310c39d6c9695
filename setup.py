#!/usr/bin/env python
#encoding: utf8

import io
import os
import re

from setuptools import setup
from setuptools import find_packages


with io.open(os.path.join(os.path.dirname(__file__), 'soaplambda',
                                                 '__init__.py'), 'r') as v:
    VERSION = re.match(r".*__version__ = '(.*?)'", v.read(), re.S).group(1)

SHORT_DESC="Exposes soap services through a single stateless handler for" \
" function-as-a-service hosts like AWS Lambda."

LONG_DESC = """soaplambda routes api gateway events to soap services.

A GET request with a ``wsdl`` query key returns the wsdl document of the
service named by the last segment of the request path. A POST request carries
a soap envelope whose operation is called on the service implementation, and
whose result or fault is returned as a soap envelope.
"""

try:
    os.stat('CHANGELOG.rst')
    with io.open('CHANGELOG.rst', 'rb') as f:
        LONG_DESC += u"\n\n" + f.read().decode('utf8')
except OSError:
    pass


setup(
    name='soaplambda',
    packages=find_packages(include=['soaplambda', 'soaplambda.*']),
    package_data={
        'soaplambda.test': ['data/*.wsdl'],
    },

    version=VERSION,
    description=SHORT_DESC,
    long_description=LONG_DESC,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: OS Independent',
        'Natural Language :: English',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    ],
    keywords='soap wsdl lambda serverless api-gateway rpc xml',
    license='LGPL-2.1',
    zip_safe=False,
    python_requires='>=3.7',
    install_requires=[
        'lxml',
        'pytz',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
)
