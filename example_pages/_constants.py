"""Common literal values used across example_pages.

These constants keep path segments, ordering offsets, and placeholder assets
centralized so the engine, the CLI, and tests import the same values without
drifting. Intended for internal use within the example_pages package.

Examples
--------
>>> from example_pages import _constants
>>> _constants.CURATED_ORDER_OFFSET
100
>>> _constants.CATEGORY_ANCHOR_TEMPLATE.format(label="Line")
'category-Line'
"""

EXAMPLES_SEGMENT = "examples"
API_SEGMENT = "API"
DESIGN_SEGMENT = "design"
INDEX_SEGMENT = "index"

CURATED_ORDER_OFFSET = 100
FLAT_GROUP_MAX_DEPTH = 3

OTHER_CATEGORY = "OTHER"
CATEGORY_ANCHOR_TEMPLATE = "category-{label}"
GALLERY_SUFFIX = "/examples/gallery"

DEFAULT_ICON_SCRIPT_URL = "//at.alicdn.com/t/font_470089_9m0keqj54r.js"
DEFAULT_ICON_PREFIX = "icon-"
SCREENSHOT_PLACEHOLDER = (
    "https://gw.alipayobjects.com/os/s/prod/antv/assets/image/"
    "screenshot-placeholder-b8e70.png"
)
