"""
Sources of resource inspection data.

Each source returns the inspector's mapping of resource name to raw record,
preserving the order the inspector emitted.
"""

import json
import logging
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Any, Dict, List, Protocol, Union

from resource_docgen.exceptions import RecordSourceError

logger = logging.getLogger(__name__)

RawRecords = Dict[str, Any]


class RecordSource(Protocol):
    """Anything that can produce the inspector mapping."""

    def load(self) -> RawRecords: ...


def parse_records(text: str, source: str) -> RawRecords:
    """Parse inspector JSON and check the top level is an object."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RecordSourceError(
            f"Inspector output is not valid JSON: {e.msg} at line {e.lineno}",
            source=source,
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise RecordSourceError(
            f"Inspector output must be a JSON object, got {type(data).__name__}",
            source=source,
        )
    return data


class JsonFileRecordSource:
    """Reads inspector output from a JSON file, or stdin for ``-``."""

    def __init__(self, path: Union[str, Path]):
        self.path = str(path)

    def load(self) -> RawRecords:
        if self.path == "-":
            text = sys.stdin.read()
        else:
            try:
                text = Path(self.path).read_text(encoding="utf-8")
            except OSError as e:
                raise RecordSourceError(
                    f"Cannot read inspector output: {e.strerror}",
                    source=self.path,
                    cause=e,
                ) from e
        records = parse_records(text, self.path)
        logger.debug(f"Loaded {len(records)} resource records from {self.path}")
        return records


class CommandRecordSource:
    """Runs an inspector command and parses its stdout."""

    def __init__(self, command: Union[str, List[str]], timeout: float = 300.0):
        self.command = shlex.split(command) if isinstance(command, str) else command
        self.timeout = timeout

    def load(self) -> RawRecords:
        display = " ".join(self.command)
        logger.debug(f"Running inspector: {display}")
        try:
            result = subprocess.run(
                self.command,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except FileNotFoundError as e:
            raise RecordSourceError(
                f"Inspector command not found: {self.command[0]}",
                source=display,
                cause=e,
            ) from e
        except subprocess.CalledProcessError as e:
            raise RecordSourceError(
                f"Inspector command exited with status {e.returncode}: "
                f"{(e.stderr or '').strip()}",
                source=display,
                cause=e,
            ) from e
        except subprocess.TimeoutExpired as e:
            raise RecordSourceError(
                f"Inspector command timed out after {self.timeout}s",
                source=display,
                cause=e,
            ) from e
        return parse_records(result.stdout, display)
