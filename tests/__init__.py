"""helpful_libraries test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- fixtures/     : Fixture plugins registered from the root conftest.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit tests fast and deterministic; prefer small fakes over mocks.
- Coroutine tests use @pytest.mark.asyncio.
- Property-based tests live with the module they exercise and use @pytest.mark.property.
"""
