"""
Lambda Handler — Triangle Minimum Path Sum

Triggered by an S3 event when a triangle text file is uploaded. Reads the
triangle, computes its minimum apex-to-base path sum and returns it in the
execution summary.

Environment Variables:
  TRIANGLE_SETTINGS_PATH — Path to the solver settings YAML
                           (default: solver_settings.yaml bundled with triangle_solver)
"""

import json
import logging
import os
from typing import Any

from triangle_solver import (
    MinimumPathSum,
    SolverSettings,
    SourceUnavailable,
    TriangleError,
    TriangleLoader,
)

# Configure structured logging
logger = logging.getLogger()
logger.setLevel(logging.INFO)

for handler in logger.handlers:
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))

TRIANGLE_SUFFIX = ".txt"


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """
    Lambda entry point — triggered by S3 event notification.

    Args:
        event: S3 event notification payload.
        context: Lambda context object.

    Returns:
        Dict with status code and the minimum path sum, or the error kind.
    """
    logger.info("Starting triangle minimum path sum")
    logger.info("Event: %s", json.dumps(event, default=str))

    # ── Guard: Parse S3 event and apply filters ──────────────────
    reader = TriangleLoader()

    try:
        s3_info = reader.parse_s3_event(event)
    except ValueError as e:
        logger.error("Invalid S3 event: %s", e)
        return {"statusCode": 400, "body": str(e)}

    bucket = s3_info["bucket"]
    key = s3_info["key"]

    if not key.endswith(TRIANGLE_SUFFIX):
        logger.info("Skipping non-triangle file: %s", key)
        return {"statusCode": 200, "body": f"Skipped non-triangle file: {key}"}

    # ── Configuration ────────────────────────────────────────────
    settings = SolverSettings.load(os.environ.get("TRIANGLE_SETTINGS_PATH"))
    source = f"s3://{bucket}/{key}"

    # ── Load and solve ───────────────────────────────────────────
    query = MinimumPathSum(source, settings=settings)
    try:
        result = query.minimum_path_sum()
    except SourceUnavailable as e:
        logger.error("Triangle source unavailable: %s", e)
        return _error_response(404, e)
    except TriangleError as e:
        logger.error("Triangle rejected: %s", e)
        return _error_response(422, e)

    summary = {
        "statusCode": 200,
        "body": "Minimum path sum computed successfully",
        "minimum_path_sum": result,
        "rows": len(query.triangle),
        "source": source,
    }

    logger.info("Execution summary: %s", json.dumps(summary))
    return summary


def _error_response(status_code: int, error: TriangleError) -> dict[str, Any]:
    """Build an error summary naming the failure kind."""
    return {
        "statusCode": status_code,
        "error": type(error).__name__,
        "body": str(error),
    }
