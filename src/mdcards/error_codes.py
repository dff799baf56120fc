"""Structured error codes for machine-readable error handling.

Error codes follow the format: {DOMAIN}-{CATEGORY}-{NUMBER}

Error Domains:
    DOC - Source document errors
    CRD - Card construction errors
    EXP - Export errors
    CFG - Configuration errors

Usage:
    from mdcards.error_codes import ErrorCode

    logger.error("document_read_failed", error_code=ErrorCode.DOC_NOT_FOUND.value)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Structured error codes for machine-readable handling."""

    # =========================================================================
    # Document Errors (DOC-xxx-xxx)
    # =========================================================================
    DOC_NOT_FOUND = "DOC-READ-001"
    """Source document does not exist."""

    DOC_NOT_A_FILE = "DOC-READ-002"
    """Source path exists but is not a regular file."""

    DOC_DECODE_FAILED = "DOC-READ-003"
    """Source document could not be decoded or read."""

    # =========================================================================
    # Card Errors (CRD-xxx-xxx)
    # =========================================================================
    CRD_FRONT_NOT_HEADING = "CRD-FRONT-001"
    """SimpleCard front content may only be replaced by a Heading block."""

    # =========================================================================
    # Export Errors (EXP-xxx-xxx)
    # =========================================================================
    EXP_FILE_EXISTS = "EXP-FILE-001"
    """Output file already exists and overwriting is disabled."""

    EXP_WRITE_FAILED = "EXP-FILE-002"
    """Output file could not be written."""

    EXP_UNKNOWN_FORMAT = "EXP-FORMAT-001"
    """Requested export format is not supported."""

    # =========================================================================
    # Configuration Errors (CFG-xxx-xxx)
    # =========================================================================
    CFG_LOAD_FAILED = "CFG-LOAD-001"
    """Configuration file could not be parsed."""

    CFG_INVALID_VALUE = "CFG-VALUE-001"
    """Configuration value failed validation."""

