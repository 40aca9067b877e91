"""Common literal values used across lit_pages.

These constants keep filenames and markup wrappers centralized so templates,
generators, and tests can import the same values without drifting. Intended
for internal use within the lit_pages package.

Examples
--------
>>> from lit_pages import _constants
>>> _constants.STYLESHEET_NAME
'lit_pages.css'
>>> _constants.HIGHLIGHT_START.startswith('<div class="highlight">')
True
"""

DEFAULT_OUTPUT_DIR = "docs"
DEFAULT_CONFIG_FILE = "lit-pages.yaml"
DEFAULT_PYGMENTS_STYLE = "friendly"
STYLESHEET_NAME = "lit_pages.css"
PAGE_TEMPLATE = "page.jinja"

# Every rendered code block is wrapped in these, whichever fallback produced it.
HIGHLIGHT_START = '<div class="highlight"><pre>'
HIGHLIGHT_END = "</pre></div>"
