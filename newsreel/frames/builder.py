"""Cut text into sentence-sized timed frames."""

from ..config import FramesConfig
from ..models import Frame
from .text import split_sentences


def build_frames(text: str, config: FramesConfig | None = None) -> list[Frame]:
    """Build the ordered frame sequence for a piece of text.

    Each of the first ``max_frames`` sentences becomes one frame shown for
    ``sentence_duration`` seconds. Blank sentences are skipped. If nothing is
    left, a single fallback frame with the first ``fallback_chars``
    characters is shown for ``fallback_duration`` seconds, so the result is
    never empty.

    Args:
        text: Extracted article text or user supplied text
        config: Frame settings, defaults when omitted

    Returns:
        Between 1 and ``max_frames`` frames
    """
    config = config or FramesConfig()

    frames = []
    for sentence in split_sentences(text)[: config.max_frames]:
        sentence = sentence.strip()
        if not sentence:
            continue
        frames.append(Frame(text=sentence, duration=config.sentence_duration))

    if not frames:
        frames.append(
            Frame(text=text[: config.fallback_chars], duration=config.fallback_duration)
        )

    return frames
