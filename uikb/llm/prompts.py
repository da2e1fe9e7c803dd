"""
Prompt Templates

Instruction sent to the hosted model by the code generation relay.
"""

import json
from typing import Any

CODE_GENERATION_PROMPT = """Context: You are an expert assistant for an Angular design system.
Use ONLY the components and properties described in the following JSON context:
{context}

Request: Using the context above, generate the HTML and TypeScript code for an Angular component that fulfills the following request: "{prompt}"

Answer:"""


def build_code_generation_prompt(knowledge_base: Any, user_prompt: str) -> str:
    """Embed the full knowledge base and the user's request in the instruction."""
    context = json.dumps(knowledge_base, ensure_ascii=False)
    return CODE_GENERATION_PROMPT.format(context=context, prompt=user_prompt)
