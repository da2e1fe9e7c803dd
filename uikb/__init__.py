"""
UIKB - Component knowledge base builder.

Statically analyzes a component library (component sources, Storybook
stories and MDX docs) into a JSON knowledge base, and relays that knowledge
base to a hosted LLM for grounded code generation.
"""

__version__ = "1.0.0"
