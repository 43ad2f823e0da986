from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from support_assistant.core.config import Settings, settings


STOP_WORDS: frozenset[str] = frozenset(
    {
        "what", "is", "the", "are", "your", "my", "do", "does", "can", "have", "how",
        "where", "when", "why", "i", "you", "a", "an", "and", "or", "but", "of", "to",
        "for", "with", "on", "at", "by", "from", "up", "about", "into", "through",
        "during", "before", "after", "above", "below", "between", "among", "within",
        "without", "along", "following", "across", "behind", "beyond", "plus", "except",
        "than", "that", "this", "these", "those",
    }
)

SYNONYMS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "speed": ("velocity", "pace", "fast", "quick", "mph", "rate"),
        "range": ("distance", "miles", "travel", "reach", "mileage"),
        "battery": ("charge", "power", "energy", "charging"),
        "waterproof": ("water", "rain", "wet", "weather", "resistant"),
        "warranty": ("guarantee", "coverage", "protection", "policy"),
        "legal": ("law", "regulations", "rules", "permitted", "street", "road"),
        "service": ("repair", "maintenance", "fix", "support"),
        "track": ("follow", "monitor", "status", "order"),
        "payment": ("pay", "cost", "price", "billing", "methods"),
        "return": ("refund", "exchange", "send back", "policy"),
        "models": ("types", "versions", "variants", "options", "scooters", "products"),
        "differences": ("compare", "comparison", "different", "features", "specs"),
        "features": ("specs", "specifications", "capabilities", "options"),
        "delivery": ("shipping", "transport", "sent"),
        "accessories": ("parts", "add-ons", "extras", "components"),
    }
)


def are_similar(word1: str, word2: str, synonyms: Optional[Mapping[str, Tuple[str, ...]]] = None) -> bool:
    """True when the words are linked through the synonym table.

    Either one word is a canonical key and the other is listed under it, or both
    words are listed under the same key. The relation is symmetric.
    """
    table = SYNONYMS if synonyms is None else synonyms
    for key, values in table.items():
        if word1 == key and word2 in values:
            return True
        if word2 == key and word1 in values:
            return True
        if word1 in values and word2 in values:
            return True
    return False


@dataclass(frozen=True)
class ScoringWeights:
    lexical: float = 0.6
    keyword: float = 0.8
    semantic: float = 1.0
    model_boost: float = 0.5
    difference_boost: float = 0.5
    types_boost: float = 0.3

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "ScoringWeights":
        config = config or settings
        return cls(
            lexical=float(config.MATCH_LEXICAL_WEIGHT),
            keyword=float(config.MATCH_KEYWORD_WEIGHT),
            semantic=float(config.MATCH_SEMANTIC_WEIGHT),
            model_boost=float(config.MATCH_MODEL_BOOST),
            difference_boost=float(config.MATCH_DIFFERENCE_BOOST),
            types_boost=float(config.MATCH_TYPES_BOOST),
        )
