#!/usr/bin/env python3
from __future__ import annotations

import re
import setuptools
import pathlib
import toml

__minver__ = '3.8'
__slogan__ = 'Byte-exact quoted-printable, Radix64 and charset transcoders for legacy mail transport.'
__topics__ = [
    'Development Status :: 4 - Beta',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Communications :: Email',
    'Topic :: Text Processing :: Filters',
]

here = pathlib.Path(__file__).parent.absolute()


def get_version() -> str:
    with (here / 'mailcodec' / '__init__.py').open('r', encoding='UTF8') as init:
        match = re.search(R"^__version__\s*=\s*'(.*?)'", init.read(), flags=re.M)
    if match is None:
        raise RuntimeError('unable to determine package version')
    return match[1]


def get_setup_readme(filename: str | pathlib.Path | None = None):
    if filename is None:
        filename = here / 'README.md'
    with open(filename, 'r', encoding='UTF8') as README:
        return README.read()


def get_config():
    ppcfg: dict = toml.load(str(here / 'pyproject.toml'))
    requirements = list(ppcfg['tool']['mailcodec']['requires'])
    return dict(
        name='mailcodec',
        version=get_version(),
        long_description=get_setup_readme(),
        long_description_content_type='text/markdown',
        description=__slogan__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('mailcodec*',)),
        install_requires=requirements,
    )


if __name__ == '__main__':
    setuptools.setup(**get_config())
