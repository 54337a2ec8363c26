"""
Test suite for the TodoMVC page-object toolkit.

This package contains:
- unit/: Page-object, storage, generator and config tests against mocked Playwright objects
- e2e/: Browser flows against a live TodoMVC app using Playwright
- smoke/: Fast HTTP availability checks against the live app
"""
