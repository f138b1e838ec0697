#!/usr/bin/env python3
import os
import subprocess
import sys
from typing import Iterable, List, Optional

import click
from plumbum import FG, local
from plumbum.commands.processes import ProcessExecutionError

python3 = local[sys.executable]


@click.group()
def cli() -> None:
    pass

def do_lint() -> None:
    """
    Invoke linter with our preferred options
    """
    print('>>>> Running flake8')
    try:
        python3['-m', 'flake8', 'lazysupply', 'dev.py', 'dev_test.py', 'conftest.py', 'setup.py'] & FG
    except ProcessExecutionError as e:
        sys.exit(e.retcode)

@cli.command()
def lint() -> None:
    do_lint()

def do_mypy(argv: List[str], strict: bool = False) -> None:
    """
    Invoke mypy with our preferred options.
    Strict Mode enables additional checks that are currently failing (that we plan on integrating once they pass)
    """
    print('>>>> Typechecking')
    args = []
    if strict:
        args.extend([
            '--disallow-any-generics',  # Generic types like List or Dict need [T]
            '--warn-return-any',
        ])
    args.extend(['--warn-unused-ignores'])
    args.extend(argv or ['lazysupply'])

    print('mypy ' + ' '.join(args))
    from mypy import api
    result = api.run(args)
    if result[0]:
        print(result[0])  # stdout
    if result[1]:
        sys.stderr.write(result[1])  # stderr
    print('Exit status: {code} ({english})'.format(code=result[2], english='Failure' if result[2] else 'Success'))
    if result[2]:
        sys.exit(result[2])

@cli.command()
@click.option('--strict', is_flag=True, default=False)
@click.argument('argv', nargs=-1)
def mypy(argv: List[str], strict: bool = False) -> None:
    do_mypy(list(argv), strict)

def find_files(needle: str = '', file_extension: str = '', exclude: Optional[List[str]] = None) -> List[str]:
    paths = subprocess.check_output(['git', 'ls-files']).strip().decode().split('\n')
    if file_extension:
        paths = [p for p in paths if p.endswith(file_extension)]
    if needle:
        paths = [p for p in paths if needle in os.path.basename(p)]
    if exclude:
        paths = [p for p in paths if p not in exclude]
    return paths

def runtests(argv: Iterable[str], m: str) -> None:
    args = []
    for arg in list(argv):
        args.extend(find_files(arg, 'py'))
    args.extend(['-x'])
    if m:
        args.extend(['-m', m])

    argstr = ' '.join(args)
    print(f'>>>> Running tests with "{argstr}"')
    import pytest

    code = pytest.main(args)
    if code:
        sys.exit(code)

def do_unit(argv: List[str]) -> None:
    runtests(argv, 'not slow')

@cli.command()
@click.argument('argv', nargs=-1)
def unit(argv: List[str]) -> None:
    do_unit(argv)

@cli.command()
@click.argument('argv', nargs=-1)
def test(argv: List[str]) -> None:
    runtests(argv, '')

def do_sort(fix: bool) -> None:
    print('>>>> Checking imports')
    try:
        if fix:
            python3['-m', 'isort', '.'] & FG
        else:
            python3['-m', 'isort', '.', '--check'] & FG
    except ProcessExecutionError as e:
        sys.exit(e.retcode)

@cli.command()
@click.option('--fix', is_flag=True, default=False)
def sort(fix: bool = False) -> None:
    do_sort(fix)

@cli.command()
def coverage() -> None:
    print('>>>> Coverage')
    subprocess.check_call([sys.executable, '-m', 'coverage', 'run', '-m', 'pytest'])
    subprocess.check_call([sys.executable, '-m', 'coverage', 'report'])

def do_check(argv: List[str]) -> None:
    do_mypy(argv)
    do_lint()

@cli.command()
@click.argument('argv', nargs=-1)
def check(argv: List[str]) -> None:
    do_check(list(argv))

# `full-check` differs from `check` in that it additionally checks import sorting.
@cli.command()
@click.argument('argv', nargs=-1)
def full_check(argv: List[str]) -> None:
    do_sort(False)
    do_check(list(argv))


if __name__ == '__main__':
    cli()
