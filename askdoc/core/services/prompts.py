"""Prompt template for grounded answering."""

FALLBACK_ANSWER = "I don't know based on the provided text."

ANSWER_PROMPT = """
Answer the user's question **only** using the context below.
If the answer is not in the context, say:
"{fallback}"

Context:
{context}

Question:
{question}

Answer:
"""


def build_answer_prompt(context: str, question: str) -> str:
    """Instruction, then context, then question, in that order."""
    return ANSWER_PROMPT.format(fallback=FALLBACK_ANSWER, context=context, question=question)
