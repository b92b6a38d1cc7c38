from typing import Optional
from src.db.models import Priority


class ClassifyService:
    # Ordered: the first hit wins, there is no ranking inside a level.
    HIGH_PRIORITY_KEYWORDS = (
        "urgent",
        "emergency",
        "not working",
        "broken",
        "fire",
        "electrical",
        "safety",
        "dangerous",
        "immediately",
        "asap",
        "critical",
        "severe",
        "hazard",
    )
    MEDIUM_PRIORITY_KEYWORDS = (
        "delay",
        "slow",
        "leakage",
        "cleanliness",
        "repair",
        "water",
        "network",
        "issue",
        "problem",
        "malfunction",
        "damage",
        "faulty",
    )

    @staticmethod
    def classify(text: Optional[str]) -> Priority:
        """
        Rule-based priority detection over the complaint description.

        Keywords are matched as plain substrings of the lower-cased text, so
        "fireplace" counts as "fire". Missing text matches nothing and is Low.
        """
        lowered = (text or "").lower()

        if any(keyword in lowered for keyword in ClassifyService.HIGH_PRIORITY_KEYWORDS):
            return Priority.HIGH
        if any(keyword in lowered for keyword in ClassifyService.MEDIUM_PRIORITY_KEYWORDS):
            return Priority.MEDIUM
        return Priority.LOW
