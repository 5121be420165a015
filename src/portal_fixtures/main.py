"""
Portal Fixtures - Fixture file generation

This module ties the pieces together: it checks the target fixture file, runs
the five beacon queries, renders the Hive beacon test data document and
replaces the file in one step. Nothing is written unless every entry was
derived.
"""

import logging
import os
import re
import shutil
import tempfile
from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from .api.beacon_client import BeaconAPIClient
from .api.fixture_service import FixtureService
from .config import FixtureSettings
from .exceptions import DecodeError, PreconditionError
from .models.fixture import FixtureEntry

logger = logging.getLogger(__name__)

DOCUMENT_TITLE = "Deneb test data for Portal Hive Beacon tests"

_LAST_UPDATED = re.compile(r"^# Last updated: (\d{4}-\d{2}-\d{2})$")
_CONTENT_KEY = re.compile(r'^- content_key: "(0x[0-9a-fA-F]*)"$')
_CONTENT_VALUE = re.compile(r'^  content_value: "(0x[0-9a-fA-F]*)"$')


def render_fixture_document(entries: Sequence[FixtureEntry], updated_at: date) -> str:
    """
    Render the fixture document.

    The document starts with a commented title and date, followed by the
    entries separated by blank lines.
    """
    header = f"# {DOCUMENT_TITLE}\n# Last updated: {updated_at.isoformat()}\n\n"
    return header + "\n".join(entry.to_yaml_string() for entry in entries) + "\n"


def parse_fixture_document(text: str) -> List[FixtureEntry]:
    """
    Parse a document produced by render_fixture_document back into entries.

    Raises:
        DecodeError: If a content value is missing after its key
    """
    entries = []
    label: Optional[str] = None
    updated_at: Optional[date] = None
    pending_key: Optional[str] = None

    for line_no, line in enumerate(text.splitlines(), 1):
        if pending_key is not None:
            match = _CONTENT_VALUE.match(line)
            if not match:
                raise DecodeError(f"Line {line_no}: expected content_value after content_key")
            entries.append(FixtureEntry(
                label=label or "",
                content_key=pending_key,
                content_value=match.group(1),
                updated_at=updated_at or date.today(),
            ))
            pending_key = None
            continue

        match = _LAST_UPDATED.match(line)
        if match:
            updated_at = date.fromisoformat(match.group(1))
        elif line.startswith("# "):
            label = line[2:]
        else:
            match = _CONTENT_KEY.match(line)
            if match:
                pending_key = match.group(1)

    if pending_key is not None:
        raise DecodeError("Document ends after a content_key without its content_value")
    return entries


def check_fixture_path(path: Path) -> Path:
    """
    Make sure the fixture file exists before anything is fetched.

    Raises:
        PreconditionError: If the path is not an existing file
    """
    if not path.is_file():
        raise PreconditionError(f"Fixture file {path} does not exist")
    return path


def write_fixture(path: Path, content: str) -> None:
    """
    Replace the fixture file with new content.

    The content goes to a temporary file in the same directory first, so the
    target is either fully replaced or left untouched. The target keeps its
    permission bits.
    """
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w") as f:
            f.write(content)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def update_fixtures(
    settings: FixtureSettings,
    now: Optional[int] = None,
    client: Optional[BeaconAPIClient] = None,
    updated_at: Optional[date] = None,
) -> List[FixtureEntry]:
    """
    Regenerate the fixture file.

    Args:
        settings: Runtime settings
        now: Unix time used to estimate the current sync committee period
        client: Beacon API client. If None, one is built from the settings.
        updated_at: Date stamped on the document. Defaults to today.

    Returns:
        The entries that were written

    Raises:
        PreconditionError: If the fixture file does not exist
        FixtureError: If any query or derivation fails; the file is untouched
    """
    logger.info("Starting fixture update process")
    path = check_fixture_path(settings.fixture_path)
    updated_at = updated_at or date.today()

    if client is None:
        client = BeaconAPIClient(
            client_id=settings.client_id,
            client_secret=settings.client_secret,
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    entries = FixtureService(client, updated_at=updated_at).collect_entries(now)
    write_fixture(path, render_fixture_document(entries, updated_at))
    logger.info(f"Wrote {len(entries)} fixture entries to {path}")
    return entries
