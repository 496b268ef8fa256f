"""Row height models for the simulated host and the terminal viewer."""

import math
import random
import textwrap

_WORDS = (
    "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "
    "tempor incididunt ut labore et dolore magna aliqua enim ad minim veniam "
    "quis nostrud exercitation ullamco laboris nisi aliquip ex ea commodo"
).split()


def uniform_heights(count: int, height: float) -> list[float]:
    """Every row has the same height."""
    return [float(height)] * count


def random_heights(
    count: int, min_height: float, max_height: float, seed: int = 0
) -> list[float]:
    """Whole-pixel heights drawn uniformly from [min_height, max_height].

    Raises:
        ValueError: If the range holds no whole pixel value
    """
    low = math.ceil(min_height)
    high = math.floor(max_height)
    if high < low:
        raise ValueError(
            f"No whole-pixel height between {min_height} and {max_height}"
        )
    rng = random.Random(seed)
    return [float(rng.randint(low, high)) for _ in range(count)]


def generate_row_texts(count: int, max_words: int = 60, seed: int = 0) -> list[str]:
    """Deterministic filler text of varying length, one string per row."""
    rng = random.Random(seed)
    texts = []
    for index in range(count):
        words = rng.choices(_WORDS, k=rng.randint(1, max(1, max_words)))
        texts.append(f"#{index}: " + " ".join(words))
    return texts


def wrapped_line_heights(texts: list[str], width: int) -> list[float]:
    """Height of each text in terminal lines when wrapped to `width` columns."""
    return [float(max(1, len(textwrap.wrap(text, width)))) for text in texts]
