"""Protocol definitions for third-party spreadsheet libraries."""
