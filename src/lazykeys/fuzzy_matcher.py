"""
Subsequence fuzzy matcher.

Scores how well a pattern aligns, character by character and in order,
against a piece of text. The alignment is found with a small dynamic
programme over (pattern position, text position): matches earn points,
runs of consecutive matches and matches on word boundaries earn bonuses,
and gaps between matched characters cost points. Text that does not
contain the pattern as a subsequence does not match at all.

Both strings are compared as given; callers case-fold them first.
"""

from typing import List, Optional

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

# Unmatched text before the first match
LEADING_GAP_PENALTY = 1
MAX_LEADING_GAP_PENALTY = 6

_NEG = -(1 << 31)

_NON_WORD, _WORD = 0, 1


def _char_class(char: str) -> int:
    return _WORD if char.isalnum() else _NON_WORD


def is_subsequence(text: str, pattern: str) -> bool:
    """True if every pattern character appears in text, in order."""
    it = iter(text)
    return all(char in it for char in pattern)


class FuzzyMatcher:
    """Scores pattern/text pairs; None means no alignment exists."""

    def fuzzy_match(self, text: str, pattern: str) -> Optional[int]:
        """
        Score the best alignment of pattern inside text.

        Args:
            text: Text to search in
            pattern: Characters that must appear in order

        Returns:
            Non-negative score, or None if pattern is not a subsequence of text
        """
        if not pattern:
            return 0
        if not is_subsequence(text, pattern):
            return None

        bonuses = self._bonuses(text)
        size = len(text)
        prev_match: List[int] = [_NEG] * size
        prev_best: List[int] = [_NEG] * size

        for j, pattern_char in enumerate(pattern):
            match = [_NEG] * size
            best = [_NEG] * size
            for i, text_char in enumerate(text):
                if text_char == pattern_char:
                    match[i] = self._match_score(i, j, bonuses, prev_match, prev_best)

                carried = _NEG
                if i > 0 and best[i - 1] > _NEG:
                    gap = SCORE_GAP_START if best[i - 1] == match[i - 1] else SCORE_GAP_EXTENSION
                    carried = best[i - 1] + gap
                best[i] = max(match[i], carried)
            prev_match, prev_best = match, best

        return max(max(prev_match), 0)

    @staticmethod
    def _match_score(i: int, j: int, bonuses: List[int],
                     prev_match: List[int], prev_best: List[int]) -> int:
        """Best score with pattern[j] matched exactly at text[i]."""
        bonus = bonuses[i]
        if j == 0:
            leading = min(i * LEADING_GAP_PENALTY, MAX_LEADING_GAP_PENALTY)
            return SCORE_MATCH + bonus * BONUS_FIRST_CHAR_MULTIPLIER - leading
        if i == 0:
            return _NEG

        score = _NEG
        if prev_best[i - 1] > _NEG:
            score = prev_best[i - 1] + SCORE_MATCH + bonus
        if prev_match[i - 1] > _NEG:
            score = max(score, prev_match[i - 1] + SCORE_MATCH + max(bonus, BONUS_CONSECUTIVE))
        return score

    @staticmethod
    def _bonuses(text: str) -> List[int]:
        """Positional bonus for matching each character of text."""
        bonuses = []
        prev_class = _NON_WORD
        for char in text:
            char_class = _char_class(char)
            if char_class == _NON_WORD:
                bonuses.append(BONUS_NON_WORD)
            elif prev_class == _NON_WORD:
                bonuses.append(BONUS_BOUNDARY)
            else:
                bonuses.append(0)
            prev_class = char_class
        return bonuses
