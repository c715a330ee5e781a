# src/blm_kit/observability/names.py

"""Standard metric names for blm-kit observability.

Use these constants instead of hardcoded strings for consistency
across the codebase.

Note: All duration metrics are in milliseconds by convention.
Units are handled by the metrics backend (e.g., converted to seconds in Prometheus).
"""

# ============================================================================
# Parse Metrics
# ============================================================================

# Duration
BLM_PARSE_DURATION = "blm_parse_duration"
BLM_READ_DURATION = "blm_read_duration"

# Counters
BLM_PARSES_TOTAL = "blm_parses_total"
BLM_ERRORS_TOTAL = "blm_errors_total"

# Counters (records accumulate over time)
BLM_RECORDS_PARSED = "blm_records_parsed"

# Gauges
BLM_FIELD_COUNT = "blm_field_count"
