# taskgroup.py
from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")


def run_all(tasks: Sequence[Callable[[], T]], max_workers: int | None = None) -> List[T]:
    """
    Start every task at once and join them.

    - Results come back in the order the tasks were given, not the order
      they finished.
    - On the first failure, tasks not yet started are cancelled, running
      ones are waited for, and that failure is raised.
    """
    if not tasks:
        return []

    workers = max_workers or len(tasks)
    with ThreadPoolExecutor(max_workers=min(workers, len(tasks))) as pool:
        futures = [pool.submit(task) for task in tasks]
        done, pending = wait(futures, return_when=FIRST_EXCEPTION)

        failed = [f for f in futures if f in done and f.exception() is not None]
        if failed:
            for f in pending:
                f.cancel()
            # earliest declared failure among those that finished
            raise failed[0].exception()

        return [f.result() for f in futures]
