"""
================================================================================
UI Testing Pytest Configuration
================================================================================

Fixtures for browser tests of the page objects. Pages are rendered from
inline HTML with `page.set_content`, so no application server is needed.

Key Features:
- Function-scoped browser/context/page (one event loop per test)
- Tests are skipped when no Chromium build is installed
- Screenshot capture on failure
- Page Object fixtures

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from loguru import logger
from playwright.async_api import Browser, BrowserContext, Error as PlaywrightError, Page, async_playwright

from ui_toolkit.common import reset_config, set_config

from testsuites.ui_testing.pages.common_user_actions_page import CommonUserActionsPage
from testsuites.ui_testing.pages.web_table_page import WebTablePage


# ================================================================================
# HTML Fixtures
# ================================================================================

WEB_TABLE_HTML = """
<html><body>
<table>
  <thead>
    <tr><th>First Name</th><th>Last Name</th><th>Age</th><th>Email</th>
        <th>Salary</th><th>Department</th><th>Action</th></tr>
  </thead>
  <tbody id="rows">
    <tr><td>Cierra</td><td>Vega</td><td>39</td><td>cierra@example.com</td>
        <td>10000</td><td>Insurance</td>
        <td><span title="Edit" onclick="edit(this)">&#9998;</span>
            <span title="Delete" onclick="this.closest('tr').remove()">&#10006;</span></td></tr>
    <tr><td>Alden</td><td>Cantrell</td><td>45</td><td>alden@example.com</td>
        <td>12000</td><td>Compliance</td>
        <td><span title="Edit" onclick="edit(this)">&#9998;</span>
            <span title="Delete" onclick="this.closest('tr').remove()">&#10006;</span></td></tr>
    <tr><td>Kierra</td><td>Gentry</td><td>29</td><td>kierra@example.com</td>
        <td>2000</td><td>Legal</td>
        <td><span title="Edit" onclick="edit(this)">&#9998;</span>
            <span title="Delete" onclick="this.closest('tr').remove()">&#10006;</span></td></tr>
  </tbody>
</table>
<div id="last-action"></div>
<script>
  function edit(icon) {
    const name = icon.closest('tr').cells[0].innerText;
    document.getElementById('last-action').innerText = 'Edit ' + name;
  }
  setTimeout(() => {
    document.getElementById('rows').insertAdjacentHTML('beforeend',
      '<tr><td>Late</td><td>Comer</td><td>51</td><td>late@example.com</td>' +
      '<td>7000</td><td>Sales</td><td></td></tr>');
  }, 400);
</script>
</body></html>
"""

FORM_HTML = """
<html><body>
<form onsubmit="return false">
  <label for="first">First Name</label><input id="first" type="text">
  <label for="email">Email</label><input id="email" type="email">
  <input id="search" type="text" placeholder="Search">
  <label for="dob">Date of Birth</label><input id="dob" type="text">
  <label for="subjects">Subjects</label><input id="subjects" type="text">
  <ul id="chosen"></ul>

  <input type="checkbox" id="terms"><label for="terms">I agree to the Terms</label>
  <input type="radio" name="gender" id="male"><label for="male">Male</label>
  <input type="radio" name="gender" id="female"><label for="female">Female</label>

  <button type="button" onclick="document.getElementById('out').innerText = 'saved'">Save</button>
</form>
<div id="out"></div>
<script>
  document.getElementById('subjects').addEventListener('keydown', (e) => {
    if (e.key === 'Enter' && e.target.value) {
      const li = document.createElement('li');
      li.innerText = e.target.value;
      document.getElementById('chosen').appendChild(li);
      e.target.value = '';
    }
  });
</script>
</body></html>
"""


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser() -> AsyncGenerator[Browser, None]:
    """
    Function-scoped Chromium browser.

    Skips the test when Playwright's browsers are not installed
    (run `playwright install chromium` to enable these tests).
    """
    async with async_playwright() as playwright:
        try:
            browser = await playwright.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium is not available: {str(e).splitlines()[0]}")
        yield browser
        await browser.close()


@pytest.fixture
async def context(browser: Browser) -> AsyncGenerator[BrowserContext, None]:
    context = await browser.new_context(viewport={"width": 1280, "height": 800})
    yield context
    await context.close()


@pytest.fixture
async def page(context: BrowserContext) -> AsyncGenerator[Page, None]:
    page = await context.new_page()
    yield page
    await page.close()


@pytest.fixture(autouse=True)
def short_ui_timeouts():
    """Keep failure paths fast; the pages are static and render instantly."""
    reset_config()
    set_config("ui.timeouts.button_visible", 2000)
    set_config("ui.timeouts.field_visible", 2000)
    set_config("ui.timeouts.suggestion_delay", 50)
    yield
    reset_config()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
async def web_table_page(page: Page) -> WebTablePage:
    """WebTablePage over the sample employees table."""
    await page.set_content(WEB_TABLE_HTML)
    return WebTablePage(page)


@pytest.fixture
async def user_actions(page: Page) -> CommonUserActionsPage:
    """CommonUserActionsPage over the sample form."""
    await page.set_content(FORM_HTML)
    return CommonUserActionsPage(page)


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Record each phase's report on the item.

    The async page cannot be driven from this synchronous hook, so the
    screenshot is taken by the `_screenshot_on_failure` fixture instead.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


@pytest.fixture(autouse=True)
async def _screenshot_on_failure(request, page: Page):
    """Attach a full-page screenshot to the Allure report when a UI test fails."""
    yield
    report = getattr(request.node, "rep_call", None)
    if report is None or not report.failed:
        return
    try:
        allure.attach(
            await page.screenshot(full_page=True),
            name="failure_screenshot",
            attachment_type=allure.attachment_type.PNG,
        )
    except PlaywrightError as e:
        logger.warning(f"Failed to capture screenshot on failure: {e}")
