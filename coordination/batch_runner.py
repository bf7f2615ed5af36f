# coordination/batch_runner.py
"""
Sliced, cooperative processing of large record sets.

`iter_progress` is a generator: it processes one slice, yields a progress
snapshot, and only continues when the caller asks for the next one. Calling it
again restarts from the first item. The last snapshot is marked finished and
carries every non-None result in input order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from configurations import BatchConfig
from exceptions import BatchProcessingError

logger = logging.getLogger(__name__)

ItemProcessor = Callable[[Any, int], Optional[Any]]
ProgressCallback = Callable[[int, int], None]
CompletionCallback = Callable[[List[Any]], None]


@dataclass(frozen=True)
class BatchProgress:
    """
    Snapshot after one slice
    """

    done: int
    total: int
    results: Tuple[Any, ...] = ()
    finished: bool = False
    error: Optional[BatchProcessingError] = None

    @property
    def percent(self) -> int:
        if self.total == 0:
            return 100
        return round(self.done * 100 / self.total)

    @property
    def completed(self) -> bool:
        """
        True when every item was processed without a fault
        """
        return self.finished and self.error is None


class BatchRunner:
    """
    Processes items in fixed-size slices on the calling thread.

    A failing item stops the run; results gathered before it are kept and
    returned with the error instead of being raised.
    """

    def __init__(self, config: Optional[BatchConfig] = None):
        self.config = config or BatchConfig()

    def iter_progress(
        self,
        items: Sequence[Any],
        process: ItemProcessor,
        batch_size: Optional[int] = None,
    ) -> Iterator[BatchProgress]:
        """
        Args:
            items: Items to process
            process: Called as process(item, index); None results are dropped
            batch_size: Slice size; chosen by BatchConfig policy when omitted

        Yields:
            BatchProgress after each slice; the final one has finished=True
        """
        total = len(items)
        size = batch_size or self.config.select_batch_size(total)
        if size <= 0:
            raise ValueError("batch_size must be greater than 0")

        results = []
        index = 0

        if total == 0:
            yield BatchProgress(done=0, total=0, results=(), finished=True)
            return

        while index < total:
            end = min(index + size, total)
            for position in range(index, end):
                try:
                    result = process(items[position], position)
                except Exception as error:
                    logger.exception(
                        f"Batch item {position} failed; stopping with "
                        f"{len(results)} partial result(s)"
                    )
                    yield BatchProgress(
                        done=position,
                        total=total,
                        results=tuple(results),
                        finished=True,
                        error=BatchProcessingError(position, error),
                    )
                    return
                if result is not None:
                    results.append(result)

            index = end
            finished = index >= total
            logger.debug(f"Batch progress {index}/{total}")
            yield BatchProgress(
                done=index,
                total=total,
                results=tuple(results) if finished else (),
                finished=finished,
            )

    def run(
        self,
        items: Sequence[Any],
        process: ItemProcessor,
        batch_size: Optional[int] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[CompletionCallback] = None,
    ) -> BatchProgress:
        """
        Drive iter_progress to the end.

        Args:
            on_progress: Called as on_progress(done, total) after each slice
            on_complete: Called once with the accumulated results, partial
                ones included when an item failed

        Returns:
            The final snapshot
        """
        final = BatchProgress(done=0, total=len(items), finished=True)
        for snapshot in self.iter_progress(items, process, batch_size):
            if on_progress and snapshot.error is None:
                on_progress(snapshot.done, snapshot.total)
            final = snapshot
        if on_complete:
            on_complete(list(final.results))
        return final
