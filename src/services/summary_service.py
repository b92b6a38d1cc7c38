import re
from typing import Optional

EMPTY_SUMMARY = "No description provided"
FILLER_WORDS = ("very", "really", "quite", "just", "please", "kindly")

MAX_WORDS = 25
TRUNCATED_WORDS = 20
MIN_WORDS = 5
ELLIPSIS = "..."

_WHITESPACE = re.compile(r"\s+")
_FIRST_SENTENCE = re.compile(r"^[^.!?]+[.!?]")
_FILLERS = [
    re.compile(rf"\b{word}\b", re.IGNORECASE | re.ASCII) for word in FILLER_WORDS
]


class SummaryService:
    @staticmethod
    def summarize(description: Optional[str]) -> str:
        """
        Build a short, readable summary of a complaint description.

        Filler words are dropped and only the first sentence is kept. Long
        results are cut to 20 words; results under 5 words are rebuilt from
        the untouched description (up to 25 words), which throws away the
        filler removal and sentence isolation for very short inputs.
        """
        if not description or not description.strip():
            return EMPTY_SUMMARY

        text = _WHITESPACE.sub(" ", description.strip())

        for pattern in _FILLERS:
            text = pattern.sub("", text)
        text = _WHITESPACE.sub(" ", text).strip()

        sentence = _FIRST_SENTENCE.match(text)
        if sentence:
            text = sentence.group(0).strip()

        words = text.split()
        if len(words) > MAX_WORDS:
            text = " ".join(words[:TRUNCATED_WORDS]) + ELLIPSIS
        elif len(words) < MIN_WORDS:
            original_words = description.split()
            text = " ".join(original_words[:MAX_WORDS])
            if len(original_words) > MAX_WORDS:
                text += ELLIPSIS

        return text[:1].upper() + text[1:]
