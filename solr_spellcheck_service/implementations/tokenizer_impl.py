"""Default implementations of TokenizerProtocol and CollatorProtocol."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from solr_spellcheck_service.protocols import CollatorProtocol, TokenizerProtocol

# Words, keeping inner hyphens and apostrophes ("state-of-the-art", "don't")
_TOKEN_PATTERN = re.compile(r"\w+(?:[-']\w+)*")


class DefaultTokenizer(TokenizerProtocol):
    """Locale-agnostic word tokenizer; the field name and locale are ignored."""

    def tokenize(self, field_name: str, text: str, locale: str) -> list[str]:
        return _TOKEN_PATTERN.findall(text or "")


class DefaultCollator(CollatorProtocol):
    def collate(self, suggestions: Mapping[str, Sequence[str]], tokens: Sequence[str]) -> str:
        """Replace each token by its best suggestion, keeping tokens without one."""
        words = []
        for token in tokens:
            similar = suggestions.get(token)
            words.append(similar[0] if similar else token)
        return " ".join(words)
