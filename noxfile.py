"""Nox sessions for the api-conductor test suite."""

import nox

PYTHON_VERSIONS = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["tests", "redis_optional"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHON_VERSIONS)
def tests(session):
    """Run the test suite with every extra installed."""
    session.install(".[full,dev]")
    session.run("pytest", "tests", "-q", "--no-cov", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def redis_optional(session):
    """Check the package imports and works without the redis extra."""
    session.install(".")
    session.install("pytest", "pytest-asyncio")
    session.run(
        "pytest",
        "tests/unit",
        "-q",
        "--ignore=tests/unit/storage/test_redis.py",
        "--ignore=tests/unit/test_lazy_imports.py",
        *session.posargs,
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def coverage(session):
    """Run the test suite with a coverage report."""
    session.install(".[full,dev]")
    session.run(
        "pytest", "tests", "--cov=api_conductor", "--cov-report=term-missing"
    )


@nox.session(python=PYTHON_VERSIONS)
def type_check(session):
    """Run mypy type checking."""
    session.install(".[full,dev]")
    session.install("mypy")
    session.run("mypy", "src/api_conductor", *session.posargs)
