"""
Utils module for topicsummary core functionality.

- config: configuration sections and the global config instance
- logger: logging setup and message helpers
- artifact_writer: atomic file writes
"""
