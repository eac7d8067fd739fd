"""Input queue system.

The input capture collaborator appends raw key names with
:func:`enqueue_key`; the turn controller consumes at most one per tick with
:func:`pop_key`. The end consumed first follows ``State.queue_policy``.
"""

from dataclasses import replace
from typing import Iterable, Optional, Tuple

from grid_sokoban.state import State
from grid_sokoban.types import QueuePolicy


def enqueue_key(state: State, key: str) -> State:
    """Append one raw key name to the queue."""
    return replace(state, input_queue=state.input_queue.append(key))


def enqueue_keys(state: State, keys: Iterable[str]) -> State:
    return replace(state, input_queue=state.input_queue.extend(keys))


def pop_key(state: State) -> Tuple[State, Optional[str]]:
    """Remove the next key according to the queue policy.

    Returns:
        Tuple[State, Optional[str]]: State without the consumed key, and the
        key itself (``None`` and the unchanged state if the queue is empty).
    """
    queue = state.input_queue
    if len(queue) == 0:
        return state, None
    if state.queue_policy == QueuePolicy.LIFO:
        return replace(state, input_queue=queue.delete(len(queue) - 1)), queue[-1]
    return replace(state, input_queue=queue.delete(0)), queue[0]
