"""
Progress Tracker

Interprets the server's reported byte range and decides what the transfer
loop does next.

The confirmed offset is only ever taken from a probe response, never from
the number of bytes the client wrote: a transmitted chunk is not necessarily
a received one.
"""

import logging
from typing import Optional, Tuple

from config.settings import (
    MAX_NO_PROGRESS_RETRIES,
    RETRY_BACKOFF_BASE_SECONDS,
    RETRY_BACKOFF_MAX_SECONDS,
)
from upload.constants import ProgressDecision


def next_offset(
    range_header: Optional[str],
    total_length: int,
    previous_offset: int = 0,
) -> Tuple[int, bool]:
    """
    Parse a Range header value into a confirmed offset.

    Only the number after the first hyphen is consumed ("bytes 0-499" -> 499).

    Args:
        range_header: Range header from the progress probe (may be None)
        total_length: File length in bytes
        previous_offset: Offset to keep when the header is unusable

    Returns:
        (offset, made_progress); made_progress is False when the header is
        missing, has no hyphen, or its end is not an integer in
        [0, total_length]

    Example:
        next_offset("0-499", 1000)          # (499, True)
        next_offset("bytes-garbage", 1000)  # (0, False)
    """
    if not range_header:
        return previous_offset, False

    separator = range_header.find("-")
    if separator < 0:
        return previous_offset, False

    tail = range_header[separator + 1:].strip()
    if not tail.isdigit():
        return previous_offset, False

    try:
        end = int(tail)
    except ValueError:
        return previous_offset, False

    if end > total_length:
        return previous_offset, False

    return end, True


class ProgressTracker:
    """
    Confirmed-offset state for one upload.

    One tracker per upload call; never shared between tickets.

    Usage:
        tracker = ProgressTracker(total_length=len(data))

        decision = tracker.update(probe.header("Range"))
        if decision == ProgressDecision.NO_PROGRESS_RETRY:
            time.sleep(tracker.backoff_delay())
    """

    def __init__(
        self,
        total_length: int,
        max_no_progress_retries: int = MAX_NO_PROGRESS_RETRIES,
        backoff_base_seconds: float = RETRY_BACKOFF_BASE_SECONDS,
        backoff_max_seconds: float = RETRY_BACKOFF_MAX_SECONDS,
    ):
        """
        Initialize tracker.

        Args:
            total_length: File length in bytes
            max_no_progress_retries: Consecutive rounds without progress
                tolerated before ABORT
            backoff_base_seconds: Delay after the first round without progress
            backoff_max_seconds: Delay cap
        """
        self.logger = logging.getLogger(__name__)

        self.total_length = total_length
        self.max_no_progress_retries = max_no_progress_retries
        self.backoff_base_seconds = backoff_base_seconds
        self.backoff_max_seconds = backoff_max_seconds

        self.offset = 0
        self.stalled_rounds = 0

    @property
    def is_complete(self) -> bool:
        """True when the server confirmed the whole file"""
        return self.offset == self.total_length

    @property
    def percent(self) -> float:
        """Confirmed share of the file, 0-100"""
        if self.total_length == 0:
            return 100.0
        return self.offset * 100.0 / self.total_length

    def update(self, range_header: Optional[str]) -> ProgressDecision:
        """
        Apply one probe result.

        A parsed value is trusted as given, even when it is below the current
        offset. Any round that does not strictly advance the offset counts
        toward the retry bound; a real advance resets the count.

        Args:
            range_header: Range header from the progress probe

        Returns:
            ProgressDecision for the transfer loop
        """
        new_offset, parsed = next_offset(range_header, self.total_length, self.offset)

        if parsed:
            if new_offset < self.offset:
                self.logger.warning(
                    f"Server range regressed: {self.offset} -> {new_offset} bytes",
                )

            advanced = new_offset > self.offset
            self.offset = new_offset

            if self.is_complete:
                self.stalled_rounds = 0
                return ProgressDecision.COMPLETE

            if advanced:
                self.stalled_rounds = 0
                return ProgressDecision.PROGRESS
        else:
            self.logger.debug(f"Unusable Range header: {range_header!r}")

        self.stalled_rounds += 1

        if self.stalled_rounds > self.max_no_progress_retries:
            return ProgressDecision.ABORT

        return ProgressDecision.NO_PROGRESS_RETRY

    def backoff_delay(self) -> float:
        """
        Delay before the next round (capped exponential).

        Returns:
            Seconds to wait; 0 when the last round made progress
        """
        if self.stalled_rounds == 0:
            return 0.0
        delay = self.backoff_base_seconds * (2 ** (self.stalled_rounds - 1))
        return min(delay, self.backoff_max_seconds)
