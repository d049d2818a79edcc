"""
Closed word lists used by the local heuristics.

All entries are lower-case. The lists are deliberately small and English
only: the local counter is a fallback, not a part-of-speech tagger.
"""

PRONOUNS = frozenset({
    "i", "me", "my", "mine", "myself", "you", "your", "yours", "yourself",
    "yourselves", "he", "him", "his", "himself", "she", "her", "hers",
    "herself", "it", "its", "itself", "we", "us", "our", "ours", "ourselves",
    "they", "them", "their", "theirs", "themselves", "who", "whom", "whose",
    "which", "what", "whatever", "whoever", "someone", "somebody", "something",
    "anyone", "anybody", "anything", "everyone", "everybody", "everything",
    "nobody", "nothing", "none", "one", "ones", "i'm", "i've", "i'd", "i'll",
    "you're", "you've", "he's", "she's", "it's", "we're", "we've", "they're",
    "they've", "that's", "there's",
})

DETERMINERS = frozenset({
    "a", "an", "the", "this", "that", "these", "those", "some", "any", "each",
    "every", "either", "neither", "all", "both", "few", "several", "many",
    "much", "more", "most", "less", "least", "other", "another", "such",
    "no", "own", "same", "two", "three", "four", "five", "six", "seven",
    "eight", "nine", "ten", "first", "second", "third", "last", "next",
})

AUXILIARIES = frozenset({
    "be", "am", "is", "are", "was", "were", "been", "being", "have", "has",
    "had", "having", "do", "does", "did", "doing", "done", "will", "would",
    "shall", "should", "can", "could", "may", "might", "must", "ought",
    "isn't", "aren't", "wasn't", "weren't", "hasn't", "haven't", "hadn't",
    "don't", "doesn't", "didn't", "won't", "wouldn't", "can't", "cannot",
    "couldn't", "shouldn't", "mustn't",
})

COMMON_VERBS = frozenset({
    "get", "got", "gets", "getting", "make", "made", "makes", "making",
    "go", "goes", "went", "gone", "going", "come", "came", "comes", "coming",
    "take", "took", "taken", "takes", "give", "gave", "given", "gives",
    "use", "used", "uses", "using", "buy", "bought", "buying",
    "ordered", "arrive", "arrived", "arrives", "work", "works", "worked",
    "working", "love", "loved", "loves", "like", "liked", "likes", "hate",
    "hated", "want", "wanted", "need", "needed", "needs", "look", "looks",
    "looked", "looking", "feel", "feels", "felt", "seem", "seems", "seemed",
    "know", "knew", "known", "think", "thought", "say", "said", "says",
    "see", "saw", "seen", "try", "tried", "trying", "keep", "kept", "put",
    "recommend", "recommended", "return", "returned", "expect", "expected",
    "received", "receive", "broke", "broken", "stopped", "started", "found",
    "find", "bring", "brought", "became", "become", "let", "tell", "told",
})

ADVERBS = frozenset({
    "very", "really", "too", "so", "quite", "just", "also", "only", "even",
    "still", "already", "always", "never", "ever", "often", "sometimes",
    "usually", "again", "almost", "pretty", "rather", "well", "not", "n't",
    "here", "there", "now", "then", "soon", "later", "today", "yesterday",
    "tomorrow", "once", "twice", "however", "therefore", "though", "instead",
    "maybe", "perhaps", "definitely", "absolutely", "totally", "completely",
    "highly", "extremely", "fairly", "barely", "hardly", "nearly", "exactly",
    "actually", "probably", "certainly", "simply", "easily", "quickly",
    "slowly", "finally", "overall", "anyway", "away", "back", "far", "yet",
    "how", "when", "where", "why", "out", "up", "down", "off", "over",
})

ADJECTIVES = frozenset({
    "good", "great", "bad", "best", "worst", "better", "worse", "nice",
    "excellent", "amazing", "awesome", "terrible", "awful", "horrible",
    "perfect", "poor", "cheap", "expensive", "fast", "slow", "quick", "easy",
    "hard", "difficult", "big", "small", "large", "little", "long", "short",
    "new", "old", "high", "low", "happy", "sad", "fine", "okay", "ok",
    "beautiful", "ugly", "pretty", "useful", "useless", "comfortable",
    "sturdy", "flimsy", "cute", "lovely", "wonderful", "fantastic",
    "decent", "solid", "strong", "weak", "clean", "dirty", "soft", "light",
    "heavy", "real", "true", "false", "free", "full", "empty", "whole",
    "right", "wrong", "sure", "able", "disappointed", "satisfied", "pleased",
    "unhappy", "worth", "different", "similar", "exact",
    "original", "defective", "broken", "faulty", "favorite", "favourite",
})

CONJUNCTIONS = frozenset({
    "and", "or", "but", "nor", "so", "yet", "because", "although", "though",
    "while", "whereas", "if", "unless", "since", "until", "than", "that",
    "whether", "as", "both", "either", "neither", "also", "plus",
})

PREPOSITIONS = frozenset({
    "in", "on", "at", "by", "for", "with", "without", "about", "against",
    "between", "into", "through", "during", "before", "after", "above",
    "below", "to", "from", "of", "off", "over", "under", "again", "further",
    "within", "along", "across", "behind", "beyond", "near", "around",
    "among", "upon", "onto", "toward", "towards", "like", "per", "via",
    "despite", "except", "inside", "outside", "throughout",
})

EXCLUDED_WORDS = (
    PRONOUNS
    | DETERMINERS
    | AUXILIARIES
    | COMMON_VERBS
    | ADVERBS
    | ADJECTIVES
    | CONJUNCTIONS
    | PREPOSITIONS
)

COMMON_NOUNS = frozenset({
    "product", "products", "item", "items", "thing", "things", "quality",
    "price", "prices", "value", "money", "shipping", "delivery", "package",
    "packaging", "box", "order", "orders", "seller", "service", "customer",
    "support", "size", "color", "colour", "material", "fabric", "battery",
    "screen", "phone", "case", "cable", "charger", "device", "app", "game",
    "book", "books", "story", "author", "movie", "film", "music", "song",
    "album", "sound", "picture", "pictures", "photo", "camera", "time",
    "times", "day", "days", "week", "weeks", "month", "months", "year",
    "years", "hour", "hours", "minute", "minutes", "review", "reviews",
    "star", "stars", "star's", "problem", "problems", "issue", "issues",
    "part", "parts", "piece", "pieces", "button", "buttons", "light",
    "water", "food", "taste", "smell", "kid", "kids", "child", "children",
    "son", "daughter", "wife", "husband", "family", "friend", "friends",
    "gift", "home", "house", "kitchen", "car", "door", "room", "bag",
    "shoe", "shoes", "shirt", "dress", "fit", "brand", "company", "store",
    "amazon", "refund", "replacement", "warranty", "instructions", "manual",
    "design", "feature", "features", "version", "model", "set", "pair",
    "job", "way", "lot", "bit", "end", "side", "top", "bottom", "edge",
    "weight", "power", "speed", "volume", "noise",
    "plastic", "metal", "glass", "wood", "paper", "cover", "lid", "handle",
    "purchase", "buyer", "person", "people", "man", "woman", "world",
})

NOMINAL_SUFFIXES = (
    "tion", "sion", "ment", "ness", "ity", "ance", "ence", "ship", "hood",
    "ism", "ist", "dom", "age", "ery", "ure", "er", "or",
)

# Sentiment keywords for the local keyword fallback
POSITIVE_WORDS = frozenset({
    "good", "great", "excellent", "amazing", "awesome", "wonderful",
    "fantastic", "perfect", "love", "loved", "loves", "best", "happy",
    "recommend", "recommended", "nice", "beautiful", "satisfied", "pleased",
    "fast", "quick", "easy", "comfortable", "sturdy", "works", "worth",
    "favorite", "favourite", "enjoy", "enjoyed", "lovely", "superb",
})

NEGATIVE_WORDS = frozenset({
    "bad", "terrible", "awful", "horrible", "worst", "poor", "hate", "hated",
    "disappointed", "disappointing", "broken", "broke", "defective", "faulty",
    "useless", "waste", "refund", "return", "returned", "cheap", "flimsy",
    "slow", "late", "problem", "problems", "issue", "issues",
    "junk", "scam", "fake", "unhappy", "avoid", "failed", "stopped",
})

NEGATORS = frozenset({
    "not", "no", "never", "n't", "don't", "doesn't", "didn't", "isn't",
    "wasn't", "aren't", "weren't", "won't", "can't", "cannot", "hardly",
})
