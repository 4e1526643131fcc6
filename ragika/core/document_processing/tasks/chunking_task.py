"""
Text chunking task using whitespace token windows.

Splits document text into consecutive, non-overlapping chunks of at most
max_tokens whitespace-delimited tokens. Sentence and paragraph boundaries
are not considered.

Dependencies: None
System role: First stage of document ingestion pipeline
"""


class ChunkingTask:
    """Split text into bounded whitespace-token chunks."""

    def __init__(self, max_tokens: int = 500) -> None:
        """
        Initialize chunking task.

        Args:
            max_tokens: Maximum tokens per chunk

        Raises:
            ValueError: When max_tokens is not positive
        """
        if max_tokens <= 0:
            raise ValueError("max_tokens must be positive")
        self.max_tokens = max_tokens

    def chunk(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Raw document text

        Returns:
            list[str]: Chunks in original order; empty for empty or blank text
        """
        words = text.split()
        return [
            " ".join(words[start : start + self.max_tokens])
            for start in range(0, len(words), self.max_tokens)
        ]
