# finance_tracker/utilities/config_export.py
EXPORT_DEFAULTS = {
    "currency": "AUD",
    "filename_prefix": "transactions",
    "include_timestamp": True,
    "schema_version": "2.0.0",
    # Filename timestamp, minute resolution
    "filename_timestamp_format": "%Y-%m-%d-%H%M",
    # Joins tags inside a single CSV field; distinct from the field separator
    "tag_delimiter": "; ",
    "default_status": "posted",
}
