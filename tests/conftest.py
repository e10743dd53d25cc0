"""Global pytest fixtures for helpful_libraries."""

pytest_plugins = [
    "tests.fixtures.content",
]
