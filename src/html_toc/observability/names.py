# src/html_toc/observability/names.py

"""Standard metric names for html-toc observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
TOC_PARSE_DURATION = "toc_parse_duration"

# Counters
TOC_PARSE_TOTAL = "toc_parse_total"
TOC_TITLE_MISSING_TOTAL = "toc_title_missing_total"
TOC_PEREX_MISSING_TOTAL = "toc_perex_missing_total"

# Gauges
TOC_HEADINGS_FOUND = "toc_headings_found"
TOC_INPUT_LENGTH = "toc_input_length"


# ============================================================================
# Rendering Metrics
# ============================================================================

# Counters
TOC_RENDER_TOTAL = "toc_render_total"
