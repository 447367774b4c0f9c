#!/usr/bin/env python3

"""Progress tracking for batch decoding runs."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time


class ProgressTracker:
    """
    Track and report progress of decoding many properties.

    Counts decoded and failed properties and logs a summary at the end.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.decoded_count = 0
        self.failed: list[tuple[str, str]] = []
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise
        finally:
            self.operation_stack.pop()

    def count_decoded(self) -> None:
        """Record a successfully decoded property."""
        self.decoded_count += 1

    def count_failed(self, property_name: str, error: str) -> None:
        """Record a property whose attributes could not be decoded."""
        self.failed.append((property_name, error))

    @property
    def total(self) -> int:
        return self.decoded_count + len(self.failed)

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time

        self.logger.info(
            f"Processing complete: {self.total} properties, {self.decoded_count} decoded, "
            f"{len(self.failed)} failed in {total_time:.3f}s"
        )

        if self.failed:
            self.logger.info("Failed properties:")
            for property_name, error in self.failed:
                self.logger.info(f"  - {property_name}: {error}")

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.decoded_count = 0
        self.failed.clear()
        self.operation_stack.clear()
