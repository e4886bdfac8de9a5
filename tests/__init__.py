"""
Alfred Ops Test Suite

Structure:
    unit/                   - Unit tests for individual components
        test_client/        - Alfred HTTP client tests
        test_commands/      - Debug trigger, database reset and check commands
        test_config/        - Settings tests
        test_persistence/   - Database setup and schema reset tests
        test_utils/         - Logging, exceptions and helpers
    scripts/                - Test runner

Running Tests:
    # All tests
    python tests/scripts/run_tests.py --all

    # Unit tests only
    python tests/scripts/run_tests.py --unit

    # With coverage
    python tests/scripts/run_tests.py --cov-html

Coverage Target: 90%
"""
