"""
Test suite for RAG prompt template.

Verifies prompt template structure and context numbering.

System role: Verification of RAG prompt template
"""

from ragika.core.rag_query import PromptComposer
from ragika.core.rag_query.prompt import RAG_PROMPT, SYSTEM_INSTRUCTION


class TestRAGPromptTemplate:
    """Test suite for the grounded prompt."""

    def test_template_should_declare_expected_variables(self) -> None:
        """Test the template takes instruction, context and question."""
        assert set(RAG_PROMPT.input_variables) == {"instruction", "context", "question"}

    def test_compose_should_number_contexts_from_one(self) -> None:
        """Test contexts are marked [1]..[N] in order and separated by blank lines."""
        # Act
        prompt = PromptComposer().compose(["first", "second"], "Why?")

        # Assert
        assert prompt == (
            f"{SYSTEM_INSTRUCTION}\n\n"
            "Context:\n[1] first\n\n[2] second\n\n"
            "Question: Why?\nAnswer:"
        )

    def test_compose_should_keep_braces_in_user_text(self) -> None:
        """Test literal braces in contexts and questions are not treated as variables."""
        prompt = PromptComposer().compose(["json {\"a\": 1}"], "what is {x}?")

        assert '[1] json {"a": 1}' in prompt
        assert "Question: what is {x}?" in prompt

    def test_instruction_should_ask_for_bracketed_citations(self) -> None:
        """Test the instruction tells the model to cite with bracketed numbers."""
        assert "bracketed numbers" in SYSTEM_INSTRUCTION
        assert "don't know" in SYSTEM_INSTRUCTION

    def test_format_contexts_should_return_empty_for_no_contexts(self) -> None:
        """Test no contexts render as an empty block."""
        assert PromptComposer.format_contexts([]) == ""
