"""
Citation extraction and formatting.

Builds citations from the selected retrieval hits for answer grounding.

Dependencies: ragika.models, ragika.boundary.vdb
System role: Citation formatting business logic
"""

from ragika.boundary.vdb import RetrievalHit
from ragika.models.citation import Citation


class CitationBuilder:
    """Citation building business logic."""

    def build_citations(self, hits: list[RetrievalHit]) -> list[Citation]:
        """
        Build citations from search results.

        Args:
            hits: Selected hits in prompt order

        Returns:
            list[Citation]: One citation per hit; citation N matches prompt marker [N]
        """
        return [self.format_citation(hit) for hit in hits]

    @staticmethod
    def format_citation(hit: RetrievalHit) -> Citation:
        """Format a citation from a single hit."""
        return Citation(document_id=hit.payload.document_id, chunk_id=hit.id)
