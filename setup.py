"""Installation script."""
import setuptools


PACKAGE_NAME = 'logiclab'
DESCRIPTION = (
    'Parse and evaluate propositional formulas, '
    'and build their binary decision diagrams.')
LONG_DESCRIPTION = (
    'logiclab is a package for working with propositional formulas '
    'written in a fully parenthesized syntax. '
    'It tokenizes and parses formulas into syntax trees, '
    'evaluates them under truth assignments, '
    'enumerates truth tables, '
    'builds naive binary decision trees and '
    'reduces them by merging equal subtrees. '
    'Syntax trees and decision diagrams are exported as '
    'graph descriptions and as `networkx` graphs, for rendering.')
VERSION_FILE = f'{PACKAGE_NAME}/_version.py'
VERSION = '0.1.0'
VERSION_FILE_TEXT = (
    '# This file was generated from setup.py\n'
    "version = '{version}'\n")
PYTHON_REQUIRES = '>=3.11'
INSTALL_REQUIRES = [
    'astutils >= 0.0.5',
    'networkx >= 2.4',
    'ply >= 3.4, <= 3.10',
    'setuptools >= 65.6.0']
TESTS_REQUIRE = [
    'pytest >= 4.6.11']
CLASSIFIERS = [
    'Development Status :: 2 - Pre-Alpha',
    'Intended Audience :: Developers',
    'Intended Audience :: Education',
    'License :: OSI Approved :: BSD License',
    'Operating System :: OS Independent',
    'Programming Language :: Python :: 3 :: Only',
    'Topic :: Scientific/Engineering',
    'Topic :: Software Development']
KEYWORDS = [
    'bdd',
    'binary decision diagram',
    'boolean',
    'propositional logic',
    'truth table',
    'parser',
    'networkx']


def run_setup(
        ) -> None:
    """Write version file, install."""
    s = VERSION_FILE_TEXT.format(version=VERSION)
    with open(VERSION_FILE, 'w') as f:
        f.write(s)
    setuptools.setup(
        name=PACKAGE_NAME,
        version=VERSION,
        description=DESCRIPTION,
        long_description=LONG_DESCRIPTION,
        license='BSD',
        python_requires=PYTHON_REQUIRES,
        install_requires=INSTALL_REQUIRES,
        extras_require=dict(
            test=TESTS_REQUIRE),
        packages=[PACKAGE_NAME],
        package_dir={PACKAGE_NAME: PACKAGE_NAME},
        include_package_data=True,
        zip_safe=False,
        classifiers=CLASSIFIERS,
        keywords=KEYWORDS)


if __name__ == '__main__':
    run_setup()
