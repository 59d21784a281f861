# parsers/constants.py

# Recognized markup. Fixed by design, not configurable.
TITLE_TAG = "h1"
SECTION_TAG = "h2"
PEREX_TAG = "p"

# Injected anchor marker
ANCHOR_TAG = "div"
ANCHOR_CLASS = "content-anchor"
