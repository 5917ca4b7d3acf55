"""Segment joining: reassemble edge fragments into continuous subpaths.

Edges of one style arrive in record order, possibly disconnected and in
any direction. Joining repeatedly seeds a chain with the first unplaced
segment and makes a single forward pass over the rest: a segment starting
at the chain end is appended, a segment ending at the chain start is
prepended, anything else waits for the next chain. Connection is exact
coordinate equality.

The pass is not repeated to a fixed point. A segment that only connects
after a later segment of the same pass extends the chain is deferred, so
some orderings split one geometric loop into two subpaths. That behavior
is kept as is and pinned by tests.
"""

import logging
from collections import deque
from collections.abc import Iterable

from swfshape.domain import Path, PathCommand, Segment, line_to, move_to, quad_to

logger = logging.getLogger(__name__)


def extract_continuous(
    open_set: Iterable[Segment],
) -> tuple[list[Segment], list[Segment]]:
    """Extract one chain of connected segments.

    Args:
        open_set: Unplaced segments in order (must not be empty)

    Returns:
        Tuple of (remaining segments in order, chain in drawing order)

    Raises:
        ValueError: If open_set is empty
    """
    pending = iter(open_set)
    first = next(pending, None)
    if first is None:
        raise ValueError("Cannot extract a chain from an empty segment set")

    chain: deque[Segment] = deque([first])
    start = first.start
    end = first.end
    remaining: list[Segment] = []

    for segment in pending:
        if segment.start == end:
            end = segment.end
            chain.append(segment)
        elif segment.end == start:
            start = segment.start
            chain.appendleft(segment)
        else:
            remaining.append(segment)

    return remaining, list(chain)


def chain_to_commands(chain: list[Segment], scale: float = 1.0) -> list[PathCommand]:
    """Convert a connected chain to a MOVE_TO followed by one command per segment.

    Args:
        chain: Segments connected end to start
        scale: Coordinate multiplier applied on float conversion

    Returns:
        Path commands for one subpath
    """
    commands = [move_to(chain[0].start.to_point(scale))]
    for segment in chain:
        if segment.control is None:
            commands.append(line_to(segment.end.to_point(scale)))
        else:
            commands.append(
                quad_to(segment.control.to_point(scale), segment.end.to_point(scale))
            )
    return commands


def join_segments(segments: Iterable[Segment], scale: float = 1.0) -> Path:
    """Join the segments of one style into a path of maximal chains.

    Args:
        segments: Segments in contribution order
        scale: Coordinate multiplier applied on float conversion

    Returns:
        Path with one subpath per extracted chain (empty for no segments)
    """
    open_set = list(segments)
    commands: list[PathCommand] = []
    chains = 0

    while open_set:
        open_set, chain = extract_continuous(open_set)
        commands.extend(chain_to_commands(chain, scale))
        chains += 1

    if chains:
        logger.debug("Joined segments into %d subpaths", chains)

    return Path(commands=tuple(commands))
