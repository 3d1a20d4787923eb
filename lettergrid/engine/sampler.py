"""Frequency-weighted letter sampling.

Letters are drawn by roulette-wheel selection: the weights of a language's
table are accumulated in table order until the running total reaches a
uniform draw. Alphabets are small, so the linear walk is cheap enough and
keeps the result a pure function of the random source.
"""

from __future__ import annotations

import random
from typing import Dict, List, Mapping, Optional, Sequence

from ..core.constants import (
    DEFAULT_LANGUAGE,
    FALLBACK_LETTER,
    LETTER_FREQUENCIES,
    VOWELS,
    resolve_language,
)
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class LetterSampler:
    """Draws letters from a set of frequency tables using an explicit RNG."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        frequencies: Mapping[str, Mapping[str, float]] = LETTER_FREQUENCIES,
        vowels: Mapping[str, Sequence[str]] = VOWELS,
    ) -> None:
        self.rng = rng or random.Random()
        self.frequencies = frequencies
        self.vowels = vowels

    def resolve(self, language: Optional[str]) -> str:
        return resolve_language(language, self.frequencies)

    def table(self, language: Optional[str]) -> Mapping[str, float]:
        return self.frequencies[self.resolve(language)]

    def vowel_set(self, language: Optional[str]) -> Sequence[str]:
        code = self.resolve(language)
        if code in self.vowels:
            return self.vowels[code]
        return self.vowels.get(DEFAULT_LANGUAGE, VOWELS[DEFAULT_LANGUAGE])

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def sample(self, language: Optional[str] = DEFAULT_LANGUAGE, ensure_vowel: bool = False) -> str:
        """Return one letter of ``language``, restricted to vowels if requested."""

        if ensure_vowel:
            return self._sample_vowel(language)

        freq = self.table(language)
        total = sum(freq.values())
        draw = self.rng.random() * total
        cumulative = 0.0
        for letter, weight in freq.items():
            cumulative += weight
            if draw <= cumulative:
                return letter
        return FALLBACK_LETTER

    def _sample_vowel(self, language: Optional[str]) -> str:
        freq = self.table(language)
        lang_vowels = self.vowel_set(language)

        vowel_freq: Dict[str, float] = {}
        total = 0.0
        for vowel in lang_vowels:
            weight = freq.get(vowel)
            if weight:
                vowel_freq[vowel] = weight
                total += weight
        for vowel in vowel_freq:
            vowel_freq[vowel] /= total

        draw = self.rng.random()
        cumulative = 0.0
        for letter, probability in vowel_freq.items():
            cumulative += probability
            if draw <= cumulative:
                return letter
        return lang_vowels[0]

    # ------------------------------------------------------------------
    # Special letters
    # ------------------------------------------------------------------
    def special_letters(self, source: str, target: Optional[str]) -> List[str]:
        """Characters of ``source`` that set it apart from ``target``.

        A character qualifies when it is a multi-character glyph or missing
        (or weightless) in the target language's table.
        """

        target_table = self.table(target)
        return [
            char
            for char in self.frequencies.get(source, {})
            if len(char) > 1 or not target_table.get(char)
        ]

    def other_languages(self, language: Optional[str]) -> List[str]:
        code = self.resolve(language)
        return [lang for lang in self.frequencies if lang != code]

    def special_letter(self, language: Optional[str]) -> Optional[str]:
        """Pick a special letter borrowed from another language, if any exists.

        The donor language is chosen uniformly, then a letter uniformly from
        its special set. ``None`` means no substitution is possible.
        """

        others = self.other_languages(language)
        if not others:
            return None
        donor = others[self.rng.randrange(len(others))]
        specials = self.special_letters(donor, language)
        if not specials:
            LOGGER.debug("No special letters in %s relative to %s", donor, language)
            return None
        return specials[self.rng.randrange(len(specials))]


def get_random_letter(
    language: Optional[str] = DEFAULT_LANGUAGE,
    ensure_vowel: bool = False,
    rng: Optional[random.Random] = None,
) -> str:
    """Return a single frequency-weighted letter of ``language``."""

    return LetterSampler(rng).sample(language, ensure_vowel)


def special_letters(language: Optional[str] = DEFAULT_LANGUAGE) -> Dict[str, List[str]]:
    """Map every other bundled language to its special letters for ``language``."""

    sampler = LetterSampler()
    return {
        other: sampler.special_letters(other, language)
        for other in sampler.other_languages(language)
    }


__all__ = ["LetterSampler", "get_random_letter", "special_letters"]
