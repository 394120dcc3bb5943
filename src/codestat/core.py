"""Statistics collection for one source tree.

Discovery runs once up front; files are then read, visited and aggregated
one at a time, in discovery order.
"""

from pathlib import Path
from typing import Optional, Union

from .config import StatisticConfig, default_config
from .logging_config import get_logger
from .scanning import SyntaxExtractor, discover_files, relative_name
from .statistics import ProjectReport, StatisticAggregator

logger = get_logger(__name__)


class StatisticCollector:
    """Collects a ProjectReport for a root directory."""

    def __init__(
        self,
        root_dir: Union[str, Path],
        config: Optional[StatisticConfig] = None,
        extractor: Optional[SyntaxExtractor] = None,
    ):
        self.root_dir = Path(root_dir)
        self.config = config or default_config
        self.extractor = extractor or SyntaxExtractor(encoding=self.config.encoding)

    def collect(self) -> ProjectReport:
        """Run discovery, extraction and aggregation.

        Raises:
            InvalidPathError: If the root directory is missing or unreadable
        """
        files = discover_files(self.root_dir, self.config)
        count_per_file = self.config.class_count_mode == "file"
        aggregator = StatisticAggregator(root=self.root_dir, count_class_events=not count_per_file)

        logger.info(f"Analyzing {len(files)} files under {self.root_dir}")
        for filepath in files:
            syntax = self.extractor.extract(filepath, self.root_dir)
            if syntax is None:
                aggregator.skip_file(relative_name(filepath, self.root_dir))
                continue

            aggregator.consume(syntax.path, syntax.events)
            if count_per_file:
                aggregator.record_class(syntax.path)

        report = aggregator.report
        if report.skipped_files:
            logger.warning(
                f"{len(report.skipped_files)} of {len(files)} files could not be "
                "read or parsed and were left out"
            )
        return report


def collect_statistics(
    root_dir: Union[str, Path], config: Optional[StatisticConfig] = None
) -> ProjectReport:
    """Collect statistics for every source file under root_dir.

    Example:
        >>> report = collect_statistics("src/main/java")
        >>> report.metrics.classes
        12
    """
    return StatisticCollector(root_dir, config=config).collect()
