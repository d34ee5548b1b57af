#!/usr/bin/env python3
"""
Test runner script for PyFastPix.

This script provides convenient shortcuts for running different test suites.
"""
import sys
import subprocess
import argparse


SUITES = {
    "imports": ("tests/test_imports.py", "Import tests"),
    "unit": ("tests/unit/", "Unit tests"),
    "integration": ("tests/integration/", "Integration tests"),
}


def run_command(cmd, description=None):
    """Run a command and return the result."""
    if description:
        print(f"→ {description}")

    result = subprocess.run(cmd, shell=True)
    return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="PyFastPix test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py --imports          # Run only import tests
  python run_tests.py --unit             # Run only unit tests
  python run_tests.py --integration      # Run only integration tests
  python run_tests.py --parallel         # Run only the Taichi backend tests
  python run_tests.py --all              # Run all tests
  python run_tests.py --fast             # Skip slow and Taichi tests
  python run_tests.py --verbose          # Run with verbose output
        """
    )

    for name in SUITES:
        parser.add_argument(f'--{name}', action='store_true',
                            help=f'Run {name} tests only')
    parser.add_argument('--parallel', action='store_true',
                        help='Run Taichi parallel backend tests only')
    parser.add_argument('--all', action='store_true',
                        help='Run all tests')
    parser.add_argument('--fast', action='store_true',
                        help='Run fast tests only (exclude slow and Taichi tests)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')
    parser.add_argument('--coverage', action='store_true',
                        help='Run with coverage report')

    args = parser.parse_args()

    base_cmd = "PYTHONPATH=. python -m pytest"
    base_cmd += " -v" if args.verbose else " -q"
    if args.coverage:
        base_cmd += " --cov=pyfastpix --cov-report=html --cov-report=term"
    base_cmd += " --disable-warnings"

    selected = [name for name in SUITES if getattr(args, name)]

    if selected:
        success = all(
            run_command(f"{base_cmd} {SUITES[name][0]}", SUITES[name][1])
            for name in selected
        )
    elif args.parallel:
        success = run_command(f"{base_cmd} -m gpu tests/", "Running Taichi backend tests")
    elif args.fast:
        success = run_command(f"{base_cmd} -m 'not slow'", "Running fast tests")
    elif args.all:
        print("Running complete test suite...")
        success = True
        for path, description in SUITES.values():
            if not run_command(f"{base_cmd} {path}", description):
                success = False
    else:
        cmd = f"{base_cmd} tests/test_imports.py tests/unit/"
        success = run_command(cmd, "Running basic test suite (imports + unit tests)")

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
