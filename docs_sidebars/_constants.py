"""Common literal values used across docs_sidebars.

These constants keep payload keys and defaults centralized so the loader, the
bundle extractor, the CLI, and tests can import the same values without
drifting. Intended for internal use within the docs_sidebars package.

Examples
--------
>>> from docs_sidebars import _constants
>>> _constants.DEFAULT_SIDEBAR
'docs'
>>> _constants.SIDEBARS_KEY
'docsSidebars'
"""

DEFAULT_SIDEBAR = "docs"
SIDEBARS_KEY = "docsSidebars"
PERMALINKS_KEY = "permalinkToSidebar"
