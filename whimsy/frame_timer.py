# whimsy/frame_timer.py
import math
from collections import deque
from typing import Deque


class FrameTimer:
    """
    Trailing average of instantaneous FPS for the on-screen overlay.

    The accumulated time only ever grows; it is a trigger for the overlay,
    not the length of the current window. Once it passes the window the
    caller reads the average and drops one sample per frame, so the sample
    set grows for the first second and then stays roughly constant.
    """

    def __init__(self):
        self._samples: Deque[float] = deque()
        self._time_spent: float = 0.0

    def __len__(self) -> int:
        return len(self._samples)

    def sample(self, dt: float):
        # first frame has dt == 0; its infinite sample is evicted later
        fps = 1.0 / dt if dt else math.inf
        self._samples.append(fps)
        self._time_spent += dt

    def average(self) -> float:
        if not self._samples:
            raise ValueError("no frame samples yet")
        return sum(self._samples) / len(self._samples)

    def accumulated_time(self) -> float:
        return self._time_spent

    def drop_oldest(self):
        self._samples.popleft()
