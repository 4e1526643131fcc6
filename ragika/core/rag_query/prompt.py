"""
RAG prompt template.

Defines the grounded-answer prompt: assistant role, citation convention,
numbered contexts and the user question. Context N is marked [N] and
corresponds to citation N in the response.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded answering
"""

from langchain_core.prompts import PromptTemplate

SYSTEM_INSTRUCTION = (
    "You are an institutional knowledge assistant. Use the context provided to answer "
    "the question. Respond in a concise and clear manner. Cite the source of your "
    "information using the bracketed numbers corresponding to the context. If you do not "
    "know the answer based on the context, say you don't know."
)

RAG_PROMPT = PromptTemplate.from_template(
    "{instruction}\n\nContext:\n{context}\n\nQuestion: {question}\nAnswer:"
)


class PromptComposer:
    """Render the grounded prompt from selected contexts."""

    def __init__(self, template: PromptTemplate = RAG_PROMPT) -> None:
        self.template = template

    @staticmethod
    def format_contexts(contexts: list[str]) -> str:
        """Prefix each context with its 1-indexed marker, separated by blank lines."""
        return "\n\n".join(f"[{i}] {context}" for i, context in enumerate(contexts, start=1))

    def compose(self, contexts: list[str], question: str) -> str:
        """
        Build the prompt.

        Args:
            contexts: Selected context texts, already limited to the prompt budget
            question: User question

        Returns:
            str: Prompt text
        """
        return self.template.format(
            instruction=SYSTEM_INSTRUCTION,
            context=self.format_contexts(contexts),
            question=question,
        )
