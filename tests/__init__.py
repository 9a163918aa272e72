"""
TokPulse Test Suite.

- unit/: extraction core, URL classification, settings, exceptions, CLI
- integration/: collector flows against a stubbed HTTP transport
- conftest.py: Shared fixtures (item nodes, page builders)

Run tests with: pytest
"""
