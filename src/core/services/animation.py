"""Frame loop that feeds trajectory samples to a renderer.

Why a service:
- The loop (timing, cancellation, final frame) is the same for every
  renderer; only drawing differs.
- `sleep` is injectable so tests run without wall-clock delays.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from core.domain.models import TrajectorySample
from core.interfaces.renderer import TrajectoryRenderer

logger = logging.getLogger(__name__)


def drive_animation(
    samples: Iterable[TrajectorySample],
    renderer: TrajectoryRenderer,
    *,
    frame_rate: float,
    sleep: Callable[[float], None] = time.sleep,
) -> TrajectorySample | None:
    """Draw every sample, one per frame; return the last sample drawn.

    The renderer is cleared before the first frame and again once the loop
    ends. A KeyboardInterrupt cancels the loop and propagates to the caller.
    """

    if frame_rate <= 0:
        raise ValueError("frame_rate must be positive.")

    interval = 1.0 / frame_rate
    last: TrajectorySample | None = None
    frames = 0
    renderer.clear()
    try:
        for sample in samples:
            renderer.draw(sample)
            last = sample
            frames += 1
            if sample.final:
                break
            sleep(interval)
    except KeyboardInterrupt:
        logger.info("animation cancelled after %d frame(s)", frames)
        raise
    finally:
        renderer.clear()

    logger.debug("animation finished after %d frame(s)", frames)
    return last
