"""
Pytest fixtures for Table Scanner tests.

Provides:
- HTML documents with and without measurement tables
- Normalized tables for the detector, selector and reducer
- Fresh settings for every test
"""
import pytest

from table_scanner.config import reset_settings


# ==================== SETTINGS ====================

@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Re-read settings and YAML config for each test, ignoring the caller's env."""
    for name in ("TIMEOUT", "RETRY_COUNT", "TABLE_SELECTOR", "HTML_PARSER", "LOG_LEVEL", "CONFIG_FILE"):
        monkeypatch.delenv(f"TABLE_SCANNER_{name}", raising=False)
    reset_settings()
    yield
    reset_settings()


# ==================== HTML FIXTURES ====================

@pytest.fixture
def athletes_html():
    """A navigation table followed by a table of athlete heights."""
    return """
    <html><body>
      <table id="nav">
        <tr><th>Section</th><th>Link</th></tr>
        <tr><td>Home</td><td>/</td></tr>
        <tr><td>About</td><td>/about</td></tr>
      </table>
      <table id="athletes">
        <thead><tr><th>Name</th><th>Height</th></tr></thead>
        <tbody>
          <tr><td> Alice </td><td>1.72 m</td></tr>
          <tr><td>Bob</td><td>1.85m</td></tr>
        </tbody>
      </table>
    </body></html>
    """


@pytest.fixture
def two_numeric_tables_html():
    """Two qualifying tables; only the first one may be selected."""
    return """
    <table>
      <tr><th>Tower</th><th>Height</th></tr>
      <tr><td>Eiffel</td><td>330 m</td></tr>
    </table>
    <table>
      <tr><th>River</th><th>Width</th></tr>
      <tr><td>Amazon</td><td>11000 m</td></tr>
    </table>
    """


@pytest.fixture
def no_tables_html():
    return "<html><body><p>Nothing tabular here, only 12 m of text.</p></body></html>"


@pytest.fixture
def unitless_html():
    """Numbers without the metre suffix never qualify."""
    return """
    <table>
      <tr><th>Name</th><th>Height</th></tr>
      <tr><td>Alice</td><td>12</td></tr>
    </table>
    """


# ==================== TABLE FIXTURES ====================

@pytest.fixture
def height_table():
    return [
        {"height": "12m", "name": "Alice"},
        {"height": "15m", "name": "Bob"},
    ]


@pytest.fixture
def plain_table():
    return [{"section": "Home", "link": "/"}]
