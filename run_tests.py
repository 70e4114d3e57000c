#!/usr/bin/env python3
"""
Test runner script for the InstaPay payment method.
Runs all tests in the tests/ directory with proper configuration.
"""

import os
import sys
import subprocess
from pathlib import Path

TEST_GROUPS = {
    'settings': ['tests/test_settings.py', 'tests/test_config.py'],
    'transactions': ['tests/test_transaction.py'],
    'unit': [
        'tests/test_settings.py',
        'tests/test_transaction.py',
        'tests/test_exceptions.py',
        'tests/test_instapay.py',
        'tests/test_adapter_contract.py',
    ],
    'api': ['tests/test_api.py'],
}


def main():
    """Run all tests with pytest."""
    # Get the project root directory
    project_root = Path(__file__).parent

    # Add app directory to Python path
    app_dir = project_root / "app"
    sys.path.insert(0, str(app_dir))
    sys.path.insert(0, str(project_root))

    # Set environment variables for testing
    test_env = os.environ.copy()
    test_env.update({
        'ENVIRONMENT': 'test',
        'LOG_LEVEL': 'WARNING',  # Reduce log noise during testing
    })

    # Pytest command with options
    pytest_args = [
        sys.executable, '-m', 'pytest',
        '-v',                    # Verbose output
        '--tb=short',            # Short traceback format
        '--asyncio-mode=auto',   # Auto async mode
        '--durations=10',        # Show 10 slowest tests
    ]

    # Add coverage if available
    try:
        import pytest_cov  # noqa: F401
        pytest_args.extend([
            '--cov=app',
            '--cov-report=term-missing',
            '--cov-report=html:htmlcov',
        ])
        print("📊 Running tests with coverage analysis...")
    except ImportError:
        print("📋 Running tests without coverage (install pytest-cov for coverage)")

    # Run specific test groups based on command line args
    if len(sys.argv) > 1:
        test_type = sys.argv[1].lower()
        if test_type not in TEST_GROUPS:
            print(f"❌ Unknown test type: {test_type}")
            print(f"Available types: {', '.join(TEST_GROUPS)}")
            return 1
        pytest_args.extend(TEST_GROUPS[test_type])
        print(f"🔧 Running {test_type} tests only...")
    else:
        pytest_args.append('tests/')
        print("🚀 Running all tests...")

    # Check if required dependencies are available
    try:
        import pytest  # noqa: F401
        import pytest_asyncio  # noqa: F401
    except ImportError as e:
        print(f"❌ Missing required test dependency: {e}")
        print("Install with: pip install -e '.[test]'")
        return 1

    # Run the tests
    try:
        result = subprocess.run(
            pytest_args,
            env=test_env,
            cwd=project_root,
            timeout=300  # 5 minute timeout
        )

        if result.returncode == 0:
            print("\n✅ All tests passed!")
        else:
            print(f"\n❌ Tests failed with exit code: {result.returncode}")

        return result.returncode

    except subprocess.TimeoutExpired:
        print("\n⏰ Tests timed out after 5 minutes")
        return 1
    except KeyboardInterrupt:
        print("\n🛑 Tests interrupted by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
