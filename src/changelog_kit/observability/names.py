# src/changelog_kit/observability/names.py

"""Standard metric names for changelog-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Document Parser Metrics
# ============================================================================

# Duration
PARSER_DURATION = "parser_duration"

# Counters
PARSER_BLOCKS_TOTAL = "parser_blocks_total"


# ============================================================================
# Segmentation Metrics
# ============================================================================

# Duration (time spent building one entry)
SEGMENTATION_DURATION = "segmentation_duration"

# Counters
SEGMENTATION_ENTRIES_TOTAL = "segmentation_entries_total"
SEGMENTATION_BLOCKS_SKIPPED = "segmentation_blocks_skipped"
SEGMENTATION_HEADINGS_REJECTED = "segmentation_headings_rejected"

# Gauges
SEGMENTATION_ENTRY_SIZE = "segmentation_entry_size"


# ============================================================================
# Extraction Metrics
# ============================================================================

# Duration
EXTRACTION_DURATION = "extraction_duration"
