"""Static tool registry.

Two demo tools are registered at import time:
  - translateText (placeholder translation, no external service)
  - addNumbers

Each tool validates its own inputs and raises ``InvalidInput`` on a type
mismatch. The registry is read-only after import.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from .errors import InvalidInput, ToolNotFound

logger = logging.getLogger(__name__)

ToolInput = Mapping[str, Any]
ToolOutput = Dict[str, Any]

TOOLSET_NAME = "mcp-demo-toolset"
TOOLSET_DESCRIPTION = "An MCP toolset providing text translation and simple addition."


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    input_schema: Mapping[str, str]
    output_schema: Mapping[str, str]
    execute: Callable[[ToolInput], ToolOutput]

    def summary(self) -> Dict[str, Any]:
        """Public description of the tool; the execute function is not exposed."""
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": dict(self.input_schema),
            "outputSchema": dict(self.output_schema),
        }


def _require_mapping(inputs: Any) -> ToolInput:
    if not isinstance(inputs, Mapping):
        raise InvalidInput("Invalid input: 'inputs' must be an object.")
    return inputs


def _is_number(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def translate_text(inputs: ToolInput) -> ToolOutput:
    inputs = _require_mapping(inputs)
    logger.debug("[translateText] Received input: %s", json.dumps(dict(inputs)))
    text = inputs.get("text")
    target_language = inputs.get("targetLanguage")
    if not isinstance(text, str) or not isinstance(target_language, str):
        raise InvalidInput("Invalid input: 'text' and 'targetLanguage' must be strings.")
    # Mock translation
    output = {"translatedText": f"{text} (translated to {target_language})"}
    logger.debug("[translateText] Sending output: %s", json.dumps(output))
    return output


def add_numbers(inputs: ToolInput) -> ToolOutput:
    inputs = _require_mapping(inputs)
    logger.debug("[addNumbers] Received input: %s", json.dumps(dict(inputs)))
    number1 = inputs.get("number1")
    number2 = inputs.get("number2")
    if not _is_number(number1) or not _is_number(number2):
        raise InvalidInput("Invalid input: 'number1' and 'number2' must be numbers.")
    total = number1 + number2
    # JSON has no inf or nan; an overflowed sum is reported as null
    if isinstance(total, float) and not math.isfinite(total):
        total = None
    output = {"sum": total}
    logger.debug("[addNumbers] Sending output: %s", json.dumps(output))
    return output


TRANSLATE_TEXT = ToolDefinition(
    name="translateText",
    description="Translate text into the given target language.",
    input_schema=MappingProxyType({
        "text": "string (text to translate)",
        "targetLanguage": "string (target language code, e.g. 'en', 'zh', 'fr')",
    }),
    output_schema=MappingProxyType({"translatedText": "string (the translated text)"}),
    execute=translate_text,
)

ADD_NUMBERS = ToolDefinition(
    name="addNumbers",
    description="Compute the sum of two numbers.",
    input_schema=MappingProxyType({
        "number1": "number (first addend)",
        "number2": "number (second addend)",
    }),
    output_schema=MappingProxyType({"sum": "number (sum of the two numbers)"}),
    execute=add_numbers,
)

TOOLS: Mapping[str, ToolDefinition] = MappingProxyType({t.name: t for t in (TRANSLATE_TEXT, ADD_NUMBERS)})


def get_tool(name: Any) -> ToolDefinition:
    # exact, case-sensitive match
    tool = TOOLS.get(name) if isinstance(name, str) else None
    if tool is None:
        raise ToolNotFound(name)
    return tool


def toolset() -> Dict[str, Any]:
    return {
        "name": TOOLSET_NAME,
        "description": TOOLSET_DESCRIPTION,
        "tools": [t.summary() for t in TOOLS.values()],
    }
