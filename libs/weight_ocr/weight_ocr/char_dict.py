# weight_ocr/libs/weight_ocr/weight_ocr/char_dict.py
from __future__ import annotations
from pathlib import Path

# digits, decimal point and the letters of the units a scale display shows
DIGIT_UNIT_DICT: tuple[str, ...] = tuple("0123456789.") + tuple("bgijklnoz")


def load_char_dict(path: str | Path, use_space_char: bool = False) -> list[str]:
    """
    Read a recognizer character dictionary, one entry per line.

    Only "\\n" / "\\r\\n" terminators are stripped; blank lines stay in place,
    since entry i is recognizer class i + 1 (class 0 is the CTC blank).
    """
    text = Path(path).read_bytes().decode("utf-8")
    chars = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    # closing newline
    if chars and chars[-1] == "":
        chars.pop()
    if use_space_char:
        chars.append(" ")
    return chars
