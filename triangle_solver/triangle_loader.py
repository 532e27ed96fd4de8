"""
Triangle Loader

Reads a line-oriented triangle (one row per line, whitespace-separated
integers) from a local file, an open text stream or an S3 object, and
validates it into a Triangle.
"""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, TextIO
from urllib.parse import unquote_plus, urlparse

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import EmptySource, MalformedRow, SourceUnavailable
from .settings import SolverSettings
from .triangle import Triangle

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

BOTO_CONFIG = Config(
    retries={"max_attempts": 5, "mode": "adaptive"},
)

S3_SCHEME = "s3"

TriangleSource = str | Path | TextIO


class TriangleLoader:
    """Parses triangle sources into validated Triangle objects."""

    def __init__(
        self,
        settings: SolverSettings | None = None,
        session: boto3.Session | None = None,
    ):
        """
        Args:
            settings: Blank-line, empty-source and encoding policy.
            session: boto3 session used for s3:// sources. Created on first use.
        """
        self._settings = settings or SolverSettings()
        self._session = session
        self._s3_client = None

    def load(self, source: TriangleSource) -> Triangle:
        """
        Load a triangle from a path, an s3://bucket/key URI or an open stream.

        Raises:
            SourceUnavailable: If the source cannot be opened or read.
            MalformedRow: If a line has the wrong token count or a non-integer token.
            EmptySource: If no rows were read and empty sources are not allowed.
        """
        if isinstance(source, str) and source.startswith(f"{S3_SCHEME}://"):
            bucket, key = self.split_s3_uri(source)
            return self.load_s3(bucket, key)
        if isinstance(source, (str, Path)):
            return self.load_file(source)
        return self.load_stream(source)

    def load_file(self, path: str | Path) -> Triangle:
        """Read a triangle from a local text file."""
        path = Path(path)
        logger.info("Reading triangle from %s", path)
        try:
            with open(path, "r", encoding=self._settings.encoding) as f:
                return self.parse_lines(f, str(path))
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(str(path), str(e)) from e

    def load_stream(self, stream: TextIO, name: str | None = None) -> Triangle:
        """Read a triangle from an already-open text (or bytes) stream."""
        name = name or getattr(stream, "name", None) or "<stream>"
        logger.info("Reading triangle from %s", name)
        try:
            lines = [self._to_text(line) for line in stream]
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(str(name), str(e)) from e
        return self.parse_lines(lines, str(name))

    def load_s3(self, bucket: str, key: str) -> Triangle:
        """Download and parse a triangle stored as an S3 object."""
        uri = f"{S3_SCHEME}://{bucket}/{key}"
        logger.info("Reading triangle from %s", uri)
        try:
            response = self._get_s3_client().get_object(Bucket=bucket, Key=key)
            body = response["Body"].read().decode(self._settings.encoding)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            raise SourceUnavailable(uri, f"S3 error {error_code}") from e
        except (BotoCoreError, UnicodeDecodeError) as e:
            raise SourceUnavailable(uri, str(e)) from e
        return self.parse_lines(body.splitlines(), uri)

    def parse_lines(self, lines: Iterable[str], source_name: str = "<lines>") -> Triangle:
        """
        Turn text lines into a Triangle.

        Each non-blank line becomes one row. Row i must hold exactly i+1
        integer tokens. Nothing is returned unless every line is valid.
        """
        rows: list[list[int]] = []
        blank_after_row: int | None = None

        for line_number, line in enumerate(lines, start=1):
            tokens = line.split()
            if not tokens:
                if rows and blank_after_row is None:
                    blank_after_row = line_number
                continue

            row_index = len(rows)
            if blank_after_row is not None and not self._settings.skip_blank_lines:
                raise MalformedRow(
                    f"blank line {blank_after_row} inside triangle",
                    line_number,
                    row_index,
                    line.rstrip("\r\n"),
                )
            blank_after_row = None

            if len(tokens) != row_index + 1:
                raise MalformedRow(
                    f"expected {row_index + 1} values, found {len(tokens)}",
                    line_number,
                    row_index,
                    line.rstrip("\r\n"),
                )
            rows.append(self._parse_tokens(tokens, line, line_number, row_index))

        if not rows:
            if self._settings.allow_empty:
                logger.warning("Triangle source %s is empty; returning empty triangle", source_name)
                return Triangle.empty()
            raise EmptySource(source_name)

        logger.info("Loaded %d rows from %s", len(rows), source_name)
        return Triangle(rows)

    def parse_s3_event(self, event: dict[str, Any]) -> dict[str, str]:
        """
        Parse an S3 event notification to extract bucket and key.

        Args:
            event: S3 event notification payload.

        Returns:
            Dict with 'bucket' and 'key'.

        Raises:
            ValueError: If the event does not contain valid S3 records.
        """
        records = event.get("Records", [])
        if not records:
            raise ValueError("No Records found in S3 event")

        s3_info = records[0].get("s3", {})
        bucket = s3_info.get("bucket", {}).get("name", "")
        key = unquote_plus(s3_info.get("object", {}).get("key", ""))

        if not bucket or not key:
            raise ValueError(f"Missing bucket or key in S3 event: bucket={bucket}, key={key}")

        logger.info("Parsed S3 event: bucket=%s, key=%s", bucket, key)
        return {"bucket": bucket, "key": key}

    @staticmethod
    def split_s3_uri(uri: str) -> tuple[str, str]:
        """Split s3://bucket/key into (bucket, key)."""
        parsed = urlparse(uri)
        bucket = parsed.netloc
        key = parsed.path.lstrip("/")
        if parsed.scheme != S3_SCHEME or not bucket or not key:
            raise SourceUnavailable(uri, "not a valid s3://bucket/key URI")
        return bucket, key

    @staticmethod
    def _parse_tokens(tokens: list[str], line: str, line_number: int, row_index: int) -> list[int]:
        values = []
        for token in tokens:
            try:
                values.append(int(token))
            except ValueError as e:
                raise MalformedRow(
                    f"{token!r} is not an integer",
                    line_number,
                    row_index,
                    line.rstrip("\r\n"),
                ) from e
        return values

    def _to_text(self, line: str | bytes) -> str:
        if isinstance(line, bytes):
            return line.decode(self._settings.encoding)
        return line

    def _get_s3_client(self):
        if self._s3_client is None:
            session = self._session or boto3.Session()
            self._s3_client = session.client("s3", config=BOTO_CONFIG)
        return self._s3_client
