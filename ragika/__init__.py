"""
Ragika - retrieval-augmented question answering over an indexed text corpus.
"""

__version__ = "0.1.0"
