#!/usr/bin/env python

from setuptools import setup, Extension
from Cython.Build import cythonize

import numpy
import sys
import os


def get_git_sha1():
    try:
        from git import Repo, InvalidGitRepositoryError
    except ImportError:
        print("could not import gitpython", file=sys.stderr)
        return None
    try:
        repo = Repo(os.path.dirname(os.path.abspath(__file__)))
    except InvalidGitRepositoryError:
        return None
    sha1 = repo.head.commit.hexsha
    if repo.is_dirty():
        return sha1 + "dirty"
    else:
        return sha1

cc = os.environ.get('CC', None)
debug_build = 'DEBUG' in os.environ

version = "0.1.0"
if not 'OFFICIAL_BUILD' in os.environ:
    sha1 = get_git_sha1()
    if sha1 is None:
        sha1 = 'unknown'
    version = version + '+{}.{}'.format(sha1, 'debug' if debug_build else 'release')
    print('writing package version:', version)
    join = os.path.join
    dirname = os.path.dirname
    pkgfile = join(join(dirname(os.path.abspath(__file__)), 'clusteval'), '__init__.py')
    print(pkgfile)
    with open(pkgfile, 'w') as fp:
        print("__version__ = '{}'".format(version), file=fp)
elif debug_build:
    raise RuntimeError("OFFICIAL_BUILD and DEBUG both set")

if cc is not None:
    print('Using CC={}'.format(cc))
if debug_build:
    print('Debug build')

extra_compile_args = []
if sys.platform != 'win32':
    extra_compile_args.append('-Wno-unused-function')
    if debug_build:
        extra_compile_args.extend(['-O0', '-g', '-DDEBUG_MODE'])
    else:
        extra_compile_args.append('-O3')

include_dirs = [numpy.get_include()]
if 'EXTRA_INCLUDE_PATH' in os.environ:
    include_dirs.append(os.environ['EXTRA_INCLUDE_PATH'])

extra_link_args = []
if 'EXTRA_LINK_ARGS' in os.environ:
    extra_link_args.append(os.environ['EXTRA_LINK_ARGS'])


def make_extension(module_name):
    sources = [module_name.replace('.', '/') + '.pyx']
    return Extension(
        module_name,
        sources=sources,
        include_dirs=include_dirs,
        extra_compile_args=extra_compile_args,
        extra_link_args=extra_link_args)

extensions = cythonize([
    make_extension('clusteval.cxx._comembership'),
])

setup(
    version=version,
    name='clusteval',
    description='Comembership based comparison of clusterings',
    long_description='Pairwise comembership vectors, agreement tables, '
                     'Jaccard and Rand similarity, variation of information '
                     'and simulated clustered data.',
    packages=(
        'clusteval',
        'clusteval.cxx',
    ),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'scipy',
    ],
    extras_require={
        'test': ['pytest'],
        'git': ['GitPython'],
    },
    ext_modules=extensions)
