"""Workaround for accented letters the simple renderer draws incorrectly."""

PROBLEM_LETTERS = "ěščřžýáíéúů"

_UPPER_PROBLEM_LETTERS = PROBLEM_LETTERS.upper()


def repair_diacritics(text: str) -> str:
    """
    Rewrite ``text`` so the renderer can display it.

    Uppercase problem letters are replaced by their lowercase form, and a
    trailing problem letter gets a ``.`` appended since the renderer clips
    it at the end of a string.

    Args:
        text: Widget text

    Returns:
        str: Repaired text, or ``text`` unchanged when empty
    """
    if not text:
        return text

    # The first letter is lowercased too, even when it starts a sentence.
    text = "".join(
        letter.lower() if letter in _UPPER_PROBLEM_LETTERS else letter
        for letter in text
    )

    if text[-1] in PROBLEM_LETTERS:
        text += "."
    return text
