from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from support_assistant.schemas.knowledge import FaqEntry
from support_assistant.services.matching.lexicon import SYNONYMS, ScoringWeights, are_similar
from support_assistant.services.matching.text import content_tokens, normalize, semantic_tokens, words


@dataclass(frozen=True)
class MatchResult:
    entry: FaqEntry
    confidence: float


@dataclass(frozen=True)
class MatchSignals:
    lexical: float
    keyword: float
    semantic: float
    score: float


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


class FaqMatcher:
    """Scores FAQ entries against a free-text query and picks the best one."""

    EXACT_CREDIT = 1.0
    SYNONYM_CREDIT = 0.8
    CONTAINS_CREDIT = 0.6
    PARTIAL_CREDIT = 0.5

    def __init__(
        self,
        weights: Optional[ScoringWeights] = None,
        synonyms: Optional[Mapping[str, Tuple[str, ...]]] = None,
    ):
        self.weights = weights or ScoringWeights()
        self._synonyms = SYNONYMS if synonyms is None else synonyms

    def are_similar(self, word1: str, word2: str) -> bool:
        return are_similar(word1, word2, self._synonyms)

    def lexical_similarity(self, query: str, question: str) -> float:
        query_words = content_tokens(query)
        question_words = content_tokens(question)
        if not query_words or not question_words:
            return 0.0

        exact = sum(1 for w in query_words if w in question_words)
        partial = 0.0
        for w1 in query_words:
            for w2 in question_words:
                if w1 != w2 and (w1 in w2 or w2 in w1):
                    partial += self.PARTIAL_CREDIT
                    break

        return _clamp((exact + partial) / max(len(query_words), len(question_words)))

    def keyword_match(self, query: str, keywords: Sequence[str]) -> float:
        """Share of keywords hit by any query word. Stop words and short words count, so "km" can match."""
        if not keywords:
            return 0.0
        query_words = words(query)
        if not query_words:
            return 0.0

        matched = 0
        for raw in keywords:
            keyword = normalize(raw)
            if not keyword:
                continue
            if any(
                keyword in word or word in keyword or self.are_similar(word, keyword)
                for word in query_words
            ):
                matched += 1
        return matched / len(keywords)

    def semantic_similarity(self, query: str, question: str) -> float:
        query_words = semantic_tokens(query)
        if not query_words:
            return 0.0
        question_words = semantic_tokens(question)

        total = 0.0
        for qw in query_words:
            total += self._best_token_credit(qw, question_words)

        q_text = normalize(query)
        question_text = normalize(question)
        if "model" in q_text and "model" in question_text:
            total += self.weights.model_boost
        if "difference" in q_text and "difference" in question_text:
            total += self.weights.difference_boost
        if "types" in q_text and ("model" in question_text or "difference" in question_text):
            total += self.weights.types_boost

        return min(total / len(query_words), 1.0)

    def _best_token_credit(self, query_word: str, question_words: Iterable[str]) -> float:
        best = 0.0
        for word in question_words:
            if query_word == word:
                return self.EXACT_CREDIT
            if self.are_similar(query_word, word):
                best = max(best, self.SYNONYM_CREDIT)
            elif len(query_word) > 3 and len(word) > 3 and (query_word in word or word in query_word):
                best = max(best, self.CONTAINS_CREDIT)
        return best

    def score(self, query: str, entry: FaqEntry) -> MatchSignals:
        lexical = self.lexical_similarity(query, entry.question)
        keyword = self.keyword_match(query, entry.keywords)
        semantic = self.semantic_similarity(query, entry.question)
        final = max(
            lexical * self.weights.lexical,
            keyword * self.weights.keyword,
            semantic * self.weights.semantic,
        )
        return MatchSignals(lexical=lexical, keyword=keyword, semantic=semantic, score=_clamp(final))

    def best_match(self, query: str, entries: Iterable[FaqEntry]) -> Optional[MatchResult]:
        """Highest-scoring active entry, or None. Ties keep the first entry seen."""
        best: Optional[MatchResult] = None
        highest = 0.0
        for entry in entries:
            if not entry.is_active:
                continue
            signals = self.score(query, entry)
            if signals.score > highest:
                highest = signals.score
                best = MatchResult(entry=entry, confidence=signals.score)
        return best

    def rank(self, query: str, entries: Iterable[FaqEntry], limit: int = 5) -> List[MatchResult]:
        """Top entries by score, stable on ties; used for match debugging."""
        scored = [
            MatchResult(entry=entry, confidence=self.score(query, entry).score)
            for entry in entries
            if entry.is_active
        ]
        scored = [m for m in scored if m.confidence > 0]
        scored.sort(key=lambda m: m.confidence, reverse=True)
        return scored[: max(0, limit)]
