"""Timeline math for the frame animation."""

from ..models import Frame, FrameWindow


def total_duration(frames: list[Frame]) -> float:
    """Length of one animation loop in seconds."""
    return sum(frame.duration for frame in frames)


def compute_windows(frames: list[Frame]) -> list[FrameWindow]:
    """Compute each frame's visible window as percentages of the loop.

    Windows are contiguous: frame i starts where frame i-1 ends, the first
    starts at 0 and the last ends at 100.

    Raises:
        ValueError: If ``frames`` is empty
    """
    if not frames:
        raise ValueError("Cannot compute timing for an empty frame sequence")

    total = total_duration(frames)
    windows = []
    current = 0.0

    for index, frame in enumerate(frames):
        start = current / total * 100
        end = (current + frame.duration) / total * 100
        windows.append(FrameWindow(index=index, start_percent=start, end_percent=end))
        current += frame.duration

    return windows
