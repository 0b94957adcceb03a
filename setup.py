#!/usr/bin/env python3
from __future__ import annotations

import re
import os
import setuptools
import pathlib
import sys
import toml

__minver__ = '3.8'
__github__ = 'https://github.com/isaac-rng/isaac-rng/'
__author__ = 'isaac-rng contributors'
__slogan__ = 'The ISAAC cryptographically secure pseudorandom number generator.'
__topics__ = [
    'Development Status :: 5 - Production/Stable',
    'License :: Public Domain',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Security',
    'Topic :: Security :: Cryptography',
    'Topic :: Scientific/Engineering :: Mathematics',
]


def get_config():
    sys.path.insert(0, str(pathlib.Path(__file__).parent.absolute()))

    import isaacrng
    import isaacrng.lib.isaac
    import isaacrng.lib.dependencies

    def get_setup_readme(filename: str | pathlib.Path | None = None):
        if filename is None:
            filename = pathlib.Path(__file__).parent.joinpath('README.md')
        try:
            README = open(filename, 'r', encoding='UTF8')
        except FileNotFoundError:
            return isaacrng.__doc__
        with README:
            def complete_link(match):
                return F'({__github__}blob/master/{match[1]})'
            readme = README.read()
            return re.sub(R'(?<=\])\((?!\w+://)(.*?)\)', complete_link, readme)

    ppcfg: dict[str, dict[str, list[str]]] = toml.load(
        pathlib.Path(__file__).parent.joinpath('pyproject.toml'))
    requirements = [
        requirement for requirement in ppcfg['build-system']['requires']
        if not re.match(r'^(setuptools|toml|wheel)\b', requirement)
    ]

    extras = isaacrng.lib.dependencies.extras()
    extras['test'] = ['flake8']
    extras['all'] = sorted({*extras['all'], *extras['test']})

    return dict(
        name=isaacrng.__distribution__,
        version=isaacrng.__version__,
        long_description=get_setup_readme(),
        author=__author__,
        description=__slogan__,
        long_description_content_type='text/markdown',
        url=__github__,
        python_requires=F'>={__minver__}',
        classifiers=__topics__,
        packages=setuptools.find_packages(include=('isaacrng*',)),
        install_requires=requirements,
        extras_require=extras,
        include_package_data=True,
    )


if __name__ == '__main__':
    os.chdir(pathlib.Path(__file__).parent)
    setuptools.setup(**get_config())
