"""
Core Constants Module.

This module defines constants and configuration values used across the application.
"""

# Processing Configuration
DEFAULT_BATCH_SIZE = 300  # tokens resolved concurrently per batch
MIN_WORD_LENGTH = 3
DEFAULT_MIN_FREQUENCY = 1

# Known words
DEFAULT_KNOWN_WORDS_FILE = "known-words.json"

# Reporting
DEFAULT_TOP_WORDS = 10
REPORT_SUFFIX = "_words.json"

# English stop words. Duplicates across groups are harmless.
STOP_WORDS = frozenset(
    [
        # Articles
        "the", "a", "an",
        # Conjunctions
        "and", "or", "but", "nor", "so", "yet",
        # Prepositions
        "in", "on", "at", "to", "for", "of", "with", "by", "from", "as",
        "into", "onto", "upon", "about", "above", "across", "after", "against",
        "along", "among", "around", "before", "behind", "below", "beneath",
        "beside", "between", "beyond", "during", "except", "inside", "near",
        "off", "out", "over", "through", "toward", "towards", "under", "until", "til", "till",
        "without", "within", "outside", "throughout", "via", "per", "plus", "minus",
        "despite", "concerning", "considering", "regarding", "including", "excluding",
        "following", "past", "since", "unlike", "like", "worth",
        # Compound prepositions
        "according", "because", "instead", "ahead", "apart", "aside", "away",
        # Auxiliary verbs
        "is", "was", "are", "were", "been", "be", "being",
        "have", "has", "had", "having",
        "do", "does", "did", "doing", "done",
        "will", "would", "could", "should", "may", "might", "can", "must", "shall",
        # Personal pronouns (subject)
        "i", "you", "he", "she", "it", "we", "they",
        # Personal pronouns (object)
        "me", "him", "her", "us", "them",
        # Possessive pronouns
        "my", "mine", "your", "yours", "his", "her", "hers", "its", "our", "ours", "their", "theirs",
        # Reflexive pronouns
        "myself", "yourself", "himself", "herself", "itself", "ourselves", "yourselves", "themselves",
        # Demonstrative pronouns
        "this", "that", "these", "those",
        # Interrogative pronouns
        "who", "whom", "whose", "what", "which",
        # Relative pronouns
        "whoever", "whomever", "whichever", "whatever",
        # Indefinite pronouns
        "all", "another", "any", "anybody", "anyone", "anything", "both",
        "each", "either", "everybody", "everyone", "everything",
        "few", "many", "most", "much", "neither", "nobody", "none", "nothing",
        "one", "other", "others", "several", "some", "somebody", "someone", "something",
        # Adverbs (common)
        "when", "where", "why", "how", "then", "there", "here",
        "now", "just", "only", "very", "too", "also", "well",
        "than", "such", "even", "still", "yet",
        # Determiners
        "every", "own", "same",
        # Negation
        "no", "not", "never",
        # Contraction stems
        "s", "t", "don", "ve", "ll", "d", "re", "m",
    ]
)

# Error messages
ERROR_INVALID_MIN_FREQUENCY = "Invalid value for --min-freq: {value}. Must be a positive integer >= 1."
ERROR_WORDNET_UNAVAILABLE = "WordNet corpus not available. Install it with 'python -m nltk.downloader wordnet'."
