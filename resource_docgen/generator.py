import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List

from resource_docgen.config_manager import DocumentationConfig
from resource_docgen.models import parse_resource_record
from resource_docgen.record_source import RecordSource
from resource_docgen.renderer import build_context, render_resource_doc
from resource_docgen.writer import ResourceDocWriter

logger = logging.getLogger(__name__)

# Internal base classes and platform-specific user providers never get a page
SKIPPED_RESOURCES: FrozenSet[str] = frozenset(
    {
        "l_w_r_p_base",
        "user_resource_abstract_base_class",
        "linux_user",
        "pw_user",
        "aix_user",
        "dscl_user",
        "solaris_user",
        "windows_user",
        "",
    }
)


@dataclass
class GenerationResult:
    """Outcome of one generation pass."""

    written: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)

    @property
    def written_count(self) -> int:
        return len(self.written)


class ResourceDocGenerator:
    """Generates one reference page per inspected resource."""

    def __init__(
        self,
        source: RecordSource,
        writer: ResourceDocWriter,
        config: DocumentationConfig,
    ):
        self.source = source
        self.writer = writer
        self.config = config

    def render(self, identifier: str, data: dict) -> str:
        """Render the page text for a single raw record."""
        record = parse_resource_record(identifier, data)
        return render_resource_doc(build_context(record), self.config)

    def generate(self) -> GenerationResult:
        """
        Render and write a page for every eligible resource.

        Resources are processed in the order the source returns them. The
        first malformed record aborts the run; pages already written stay
        intact.

        Returns:
            GenerationResult: Written paths and skipped resource names
        """
        result = GenerationResult()
        for identifier, data in self.source.load().items():
            if identifier in SKIPPED_RESOURCES:
                logger.debug(f"Skipping internal resource {identifier!r}")
                result.skipped.append(identifier)
                continue
            logger.info(f"Writing out {identifier}.")
            text = self.render(identifier, data)
            result.written.append(self.writer.write(identifier, text))
        logger.info(
            f"Generated {result.written_count} resource pages in {self.writer.output_directory}"
        )
        return result
