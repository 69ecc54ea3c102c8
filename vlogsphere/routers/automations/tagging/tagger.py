import logging
import re
from collections import Counter
from typing import Iterable, List, Optional

from nltk.tokenize import RegexpTokenizer

from .categories import CATEGORY_TAGS, COMMON_TAGS
from .stopwords import STOPWORDS

LOG = logging.getLogger(__name__)

TOP_WORDS = 15
MIN_TAG_LENGTH = 3
MAX_SUGGESTED_CATEGORIES = 3

word_tokenizer = RegexpTokenizer(r"\w+")


def clean_text(text: str) -> str:
    text = text.lower()
    text = re.sub(r"[^\w\s]", " ", text)
    return re.sub(r"\s+", " ", text).strip()


def content_words(tokens: Iterable[str]) -> List[str]:
    return [
        t for t in tokens
        if len(t) > 2 and t not in STOPWORDS and not t.isdigit()
    ]


def _overlaps(a: str, b: str) -> bool:
    return a in b or b in a


def generate_tags(description: str, category: str = "other", max_tags: int = 8) -> List[str]:
    """
    Derive up to `max_tags` lowercase tags from a vlog description.

    Candidates come, in priority order, from the category's keyword list, from
    frequent description words that resemble a common tag, and from common tags
    found verbatim in the text. Never raises: bad input or any internal error
    yields an empty list.
    """
    if not description or not isinstance(description, str):
        return []

    try:
        text = clean_text(description)
        words = content_words(word_tokenizer.tokenize(text))
        top_words = [w for w, _ in Counter(words).most_common(TOP_WORDS)]

        keywords = CATEGORY_TAGS.get(category) or CATEGORY_TAGS["other"]
        category_tags = [
            kw for kw in keywords
            if kw in text or any(_overlaps(kw, w) for w in top_words)
        ]

        candidates = [
            *category_tags,
            *[
                w for w in top_words
                if w not in category_tags and any(_overlaps(w, t) for t in COMMON_TAGS)
            ],
            *[t for t in COMMON_TAGS if t in text],
        ]

        unique = list(dict.fromkeys(candidates))[:max(max_tags, 0)]
        return [t for t in unique if len(t) >= MIN_TAG_LENGTH]
    except Exception:
        LOG.exception("Error generating tags")
        return []


def suggest_categories(description: str, tags: Optional[List[str]] = None) -> List[str]:
    """Rank categories by how many of their keywords appear in the description and tags."""
    try:
        text = " ".join([description, *(tags or [])]).lower()
        scores = {}
        for category, keywords in CATEGORY_TAGS.items():
            score = sum(1 for kw in keywords if kw in text)
            if score > 0:
                scores[category] = score

        ranked = sorted(scores, key=scores.get, reverse=True)
        return ranked[:MAX_SUGGESTED_CATEGORIES]
    except Exception:
        LOG.exception("Error suggesting categories")
        return []


def extract_key_phrases(description: str, max_phrases: int = 5) -> List[str]:
    """
    Most frequent bigrams and trigrams of content words, counted per sentence.
    Overlapping windows all count, so a trigram and its bigrams rank together.
    """
    try:
        phrases = []
        for sentence in re.split(r"[.!?]+", description):
            if not sentence.strip():
                continue

            words = [
                w for w in re.sub(r"[^\w\s]", "", sentence.lower()).split()
                if len(w) > 2 and w not in STOPWORDS
            ]
            for i in range(len(words) - 1):
                if i < len(words) - 2:
                    trigram = " ".join(words[i:i + 3])
                    if len(trigram) > 8:
                        phrases.append(trigram)
                bigram = " ".join(words[i:i + 2])
                if len(bigram) > 5:
                    phrases.append(bigram)

        return [phrase for phrase, _ in Counter(phrases).most_common(max(max_phrases, 0))]
    except Exception:
        LOG.exception("Error extracting key phrases")
        return []
