"""
Browser test package for TodoMVC.

This package contains Playwright-based browser tests and demonstrates:
- Page Object Model (POM) pattern with composed components
- Waiting on persisted localStorage state before asserting
- Locator strategies using roles, labels and data-testid attributes
- User flow testing
"""
