"""
Test suites package.

This repository intentionally keeps `testsuites` importable to support:
  - IDE navigation
  - importing the UI page objects (`testsuites.ui_testing.pages`) from other suites
  - CI/CD module imports

All content is demo-safe and does not include production secrets.
"""
