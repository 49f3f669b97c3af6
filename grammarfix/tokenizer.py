"""
GrammarFix Tokenizer
====================
Splits raw input into sentences and sentences into word / punctuation tokens.

Matching is always done on lowercased text; ``preserve_case=True`` yields the
same token boundaries with the user's spelling so the pipeline can pair the
two views position by position.
"""

import re
from typing import List, Tuple

from .base import PUNCTUATION_MARKS, TERMINAL_MARKS

__version__ = "1.0.0"

SENTENCE_PATTERN = re.compile(r'([^.!?]*)([.!?]+|$)')
PUNCTUATION_PATTERN = re.compile(r'([.!?;:,])')


def split_into_sentences(text: str) -> List[str]:
    """Split on runs of '.', '!' and '?', trimming and dropping empty pieces."""
    return [sentence for sentence, _ in split_sentences_with_terminators(text)]


def split_sentences_with_terminators(text: str) -> List[Tuple[str, str]]:
    """
    Split text into (sentence, terminator) pairs.

    The terminator is the run of terminal marks that closed the sentence
    ('' for a trailing fragment). Empty sentences are dropped together with
    their terminator.
    """
    pairs = []
    for match in SENTENCE_PATTERN.finditer(text or ''):
        sentence = match.group(1).strip()
        if sentence:
            pairs.append((sentence, match.group(2)))
    return pairs


def tokenize(sentence: str, preserve_case: bool = False) -> List[str]:
    """Split a sentence into words with punctuation marks as standalone tokens."""
    if not preserve_case:
        sentence = sentence.lower()
    spaced = PUNCTUATION_PATTERN.sub(r' \1 ', sentence)
    return [token for token in spaced.split() if token]


def clean_word(word: str) -> str:
    """Lowercase a word and strip sentence punctuation from it."""
    return ''.join(ch for ch in word if ch not in PUNCTUATION_MARKS).lower()


def is_punctuation(token: str) -> bool:
    return bool(token) and all(ch in PUNCTUATION_MARKS for ch in token)


def ends_with_terminal(token: str) -> bool:
    return bool(token) and token[-1] in TERMINAL_MARKS


def join_tokens(tokens: List[str]) -> str:
    """
    Join surviving tokens with single spaces. Standalone punctuation marks
    attach to the word before them, so tokenizing the result again gives the
    same tokens.
    """
    words: List[str] = []
    for token in tokens:
        if not token:
            continue
        if words and is_punctuation(token):
            words[-1] += token
        else:
            words.append(token)
    return ' '.join(words)
