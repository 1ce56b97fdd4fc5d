"""Ordered record source fallback chain."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .interfaces import ExamRecordLoadResult, ExamRecordSourcePort
from .source_errors import ExamRecordSourceError

logger = logging.getLogger(__name__)

CHAINED_SOURCE_NONE_LABEL = "none"


class ChainedExamRecordSource:
    """Load records from the first source in a chain that can supply them.

    A failing source is logged and the next one is tried. When every source
    fails, an empty collection is returned so analytics degrade to zeros
    instead of failing.
    """

    def __init__(self, sources: Sequence[ExamRecordSourcePort]):
        """Initialize fallback chain.

        Args:
            sources: Record sources in fallback order.

        Raises:
            ValueError: Raised when sources is None or holds None entries.
        """

        if sources is None:
            raise ValueError("sources must not be None")
        if any(source is None for source in sources):
            raise ValueError("sources must not contain None")
        self._sources = tuple(sources)

    def source_names(self) -> tuple[str, ...]:
        """Return chained source names in fallback order.

        Returns:
            tuple[str, ...]: Source identifiers.

        Raises:
            RuntimeError: Raised when a source cannot report its name.
        """

        return tuple(source.source_name() for source in self._sources)

    def source_load(self) -> ExamRecordLoadResult:
        """Load records from the first available source.

        Returns:
            ExamRecordLoadResult: Records and the name of the supplying source.

        Raises:
            TypeError: Raised when a source violates its record contract.
        """

        for source in self._sources:
            source_name = source.source_name()
            try:
                records = source.source_fetch_all()
            except ExamRecordSourceError as error:
                logger.warning(
                    "exam record source %s unavailable: %s",
                    source_name,
                    error,
                    extra={"source_name": source_name},
                )
                continue

            logger.info(
                "loaded %d exam records from %s",
                len(records),
                source_name,
                extra={"loaded_from": source_name, "record_count": len(records)},
            )
            return ExamRecordLoadResult(records=tuple(records), loaded_from=source_name)

        logger.warning(
            "no exam record source available, serving empty collection",
            extra={"loaded_from": CHAINED_SOURCE_NONE_LABEL, "record_count": 0},
        )
        return ExamRecordLoadResult(records=(), loaded_from=CHAINED_SOURCE_NONE_LABEL)


__all__ = ["CHAINED_SOURCE_NONE_LABEL", "ChainedExamRecordSource"]
