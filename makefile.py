#!/usr/bin/env python3
"""
makefile.py - Task runner for the tupledesc project.

Usage:
    python makefile.py <target>

Requires the dev extra: pip install -e .[dev,test]
"""

import os
import shutil
import subprocess
import sys

from colorama import Fore, Style
from colorama import init as _colorama_init

_colorama_init(autoreset=True)


def print_header(title):
    bar = Fore.CYAN + Style.BRIGHT + "=" * 52 + Style.RESET_ALL
    label = Fore.CYAN + Style.BRIGHT + f"  {title}" + Style.RESET_ALL
    print(f"\n{bar}\n{label}\n{bar}")


def print_step(msg):
    print(f"{Fore.YELLOW}-->{Style.RESET_ALL} {msg}")


def print_success(msg):
    print(f"{Fore.GREEN}[OK]{Style.RESET_ALL} {msg}")


def run_cmd(args, allow_failure=False):
    """
    Run a command as a subprocess, streaming output directly to the terminal.
    Exits with the subprocess exit code on failure unless allow_failure=True.
    """
    try:
        result = subprocess.run(args)
    except FileNotFoundError:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Command not found: '{args[0]}'")
        if not allow_failure:
            sys.exit(127)
        return 127
    if result.returncode != 0 and not allow_failure:
        sys.exit(result.returncode)
    return result.returncode


def target_test():
    print_header("Running All Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests", "-v"])


def target_test_tuple():
    print_header("Running TupleDesc Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_tuple", "-v"])


def target_test_types():
    print_header("Running FieldType Tests")
    run_cmd([sys.executable, "-m", "pytest", "tests/test_types", "-v"])


def target_coverage():
    print_header("Running Tests with Coverage")
    run_cmd([sys.executable, "-m", "pytest", "tests",
             "--cov=tupledesc", "--cov-report=term-missing"])


def target_example():
    print_header("Running Schema Example")
    run_cmd([sys.executable, os.path.join("examples", "schema_example.py")])


def target_clean():
    print_header("Cleaning Caches")
    for path in (".pytest_cache", ".coverage", "htmlcov"):
        if os.path.isdir(path):
            shutil.rmtree(path)
            print_step(f"Removed {path}")
        elif os.path.isfile(path):
            os.remove(path)
            print_step(f"Removed {path}")
    print_success("Clean")


def target_help():
    print(f"\n{Fore.CYAN}{Style.BRIGHT}tupledesc - Available Commands{Style.RESET_ALL}\n")
    groups = {}
    for name, (_, desc, group) in TARGETS.items():
        groups.setdefault(group, []).append((name, desc))
    for group, entries in groups.items():
        print(f"{Fore.YELLOW}{Style.BRIGHT}{group}:{Style.RESET_ALL}")
        for name, desc in entries:
            print(f"  {Fore.GREEN}{name.ljust(16)}{Style.RESET_ALL}  {desc}")
        print()


# name -> (function, description, help group); groups print in first-seen order
TARGETS = {
    "test": (target_test, "Run all tests", "Testing"),
    "test-tuple": (target_test_tuple, "Run TupleDesc tests only", "Testing"),
    "test-types": (target_test_types, "Run FieldType tests only", "Testing"),
    "coverage": (target_coverage, "Run tests with coverage", "Testing"),
    "example": (target_example, "Run examples/schema_example.py", "Run"),
    "clean": (target_clean, "Remove test and coverage caches", "Tools"),
    "help": (target_help, "Show this help message", "Meta"),
}


def main():
    if len(sys.argv) < 2:
        target_help()
        sys.exit(0)

    name = sys.argv[1]

    if name not in TARGETS:
        print(f"{Fore.RED}[ERROR]{Style.RESET_ALL} Unknown target: '{name}'")
        print("  Run:  python makefile.py help  to list all available targets.")
        sys.exit(1)

    func, _, _ = TARGETS[name]
    func()


if __name__ == "__main__":
    main()
