"""Project-wide named constants.

Constants defined here replace inline magic numbers across the pipeline.
The decision threshold is a fixed rule, not a configuration setting.
"""

# Chunker word bounds (overridable through AnalysisConfig)
DEFAULT_MIN_WORDS: int = 500
DEFAULT_MAX_WORDS: int = 1000

# Once min_words is met, a chunk flushes early when rng.random() exceeds
# this value (roughly a 30% chance per sentence).
EARLY_FLUSH_THRESHOLD: float = 0.7

# A chapter closes after this many chunks
CHUNKS_PER_CHAPTER: int = 5

# Per-chunk cap on extracted action records
MAX_ACTIONS_PER_CHUNK: int = 3

# Evidence strings kept per trait
MAX_EVIDENCE: int = 3

# Unsupported comparisons needed for a "contradictory" (0) verdict
CONTRADICTION_THRESHOLD: int = 2

# Contradictions listed in the explanation; later ones are omitted
MAX_EXPLAINED_CONTRADICTIONS: int = 3
