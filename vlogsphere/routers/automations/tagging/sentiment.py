import logging

from afinn import Afinn
from nltk.stem import PorterStemmer

from .tagger import word_tokenizer

LOG = logging.getLogger(__name__)

POSITIVE = "positive"
NEGATIVE = "negative"
NEUTRAL = "neutral"

POSITIVE_THRESHOLD = 0.1
NEGATIVE_THRESHOLD = -0.1

NEGATIONS = frozenset({"not", "no", "never", "neither", "nor", "cannot"})

stemmer = PorterStemmer(mode=PorterStemmer.ORIGINAL_ALGORITHM)


def _stemmed_lexicon() -> dict:
    # Later entries win when two AFINN words share a stem
    # afinn has no public accessor for its word table
    lexicon = {}
    for word, value in Afinn(language="en")._dict.items():
        lexicon[stemmer.stem(word)] = value
    return lexicon

LEXICON = _stemmed_lexicon()


def sentiment_score(tokens) -> float:
    """
    Average AFINN polarity per token; a negation flips every later hit.
    The raw token is tried against the stemmed lexicon before its stem.
    """
    score = 0
    negator = 1
    for token in tokens:
        if token in NEGATIONS:
            negator = -1
            continue
        value = LEXICON.get(token)
        if value is None:
            value = LEXICON.get(stemmer.stem(token))
        if value is not None:
            score += negator * value
    return score / len(tokens)


def analyze_sentiment(description: str) -> str:
    """
    Classify a description as positive, negative or neutral.
    Total: empty, non-string or unparseable input is neutral.
    """
    if not description or not isinstance(description, str):
        return NEUTRAL

    try:
        tokens = word_tokenizer.tokenize(description.lower())
        if not tokens:
            return NEUTRAL

        score = sentiment_score(tokens)
        if score > POSITIVE_THRESHOLD:
            return POSITIVE
        if score < NEGATIVE_THRESHOLD:
            return NEGATIVE
        return NEUTRAL
    except Exception:
        LOG.exception("Error analyzing sentiment")
        return NEUTRAL
