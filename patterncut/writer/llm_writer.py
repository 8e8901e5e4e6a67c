"""
LLMWriter — two-pass LLM-enhanced cutting-sheet writer.

Pass 1 (deterministic): TemplateWriter renders the sheet with the exact
dimensions, quantities and fabric length.

Pass 2 (LLM): Claude receives the template sheet and rewrites it into more
natural sewing language via the write_cutting_sheet tool.  The plan's numbers
are already stated in the input; the prompt forbids changing them.

On any failure (network error, no tool_use block, malformed JSON, missing
section), write() returns the TemplateWriter output for the affected part, so
the caller always gets a usable sheet.

Requires the ``anthropic`` package (``pip install patterncut[llm]``).  The
import is deferred to ``__init__`` so the rest of the package is importable
without it.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any

from patterncut.writer.prompts import LLM_WRITER_TOOL_SCHEMA, SYSTEM_PROMPT
from patterncut.writer.writer import TemplateWriter, WriterInput, WriterOutput, join_sections

logger = logging.getLogger(__name__)


def _build_user_message(section_order: list[str], full_sheet: str, fabric: str | None) -> str:
    """Prefix the template sheet with the section keys and optional fabric context."""
    parts = [f"Sections : {', '.join(section_order)}"]
    if fabric:
        parts.append(f"Tissu : {fabric}")
    return "\n".join(parts) + "\n\n" + full_sheet


class LLMWriter:
    """
    Two-pass LLM-enhanced cutting-sheet writer.

    Satisfies the PatternWriter Protocol: accepts WriterInput, returns WriterOutput.

    The Anthropic client reads ``ANTHROPIC_API_KEY`` from the environment.
    Pass ``client`` to reuse an existing client (or a test double).
    """

    def __init__(
        self,
        model: str = "claude-haiku-4-5-20251001",
        max_tokens: int = 4096,
        fabric: str | None = None,
        client: Any = None,
    ) -> None:
        if client is None:
            try:
                import anthropic

                client = anthropic.Anthropic()
            except ImportError as exc:
                raise ImportError(
                    "Install the LLM extras for writer support: pip install patterncut[llm]"
                ) from exc
        self._client = client
        self._model = model
        self._max_tokens = max_tokens
        self._fabric = fabric
        self._template_writer = TemplateWriter()

    def write(self, wi: WriterInput) -> WriterOutput:
        """
        Enhance template text with LLM rewriting.

        Falls back to TemplateWriter output with a UserWarning on any LLM failure.
        """
        template_out = self._template_writer.write(wi)
        order = wi.section_order

        try:
            response = self._client.messages.create(
                model=self._model,
                max_tokens=self._max_tokens,
                system=SYSTEM_PROMPT,
                tools=[LLM_WRITER_TOOL_SCHEMA],
                tool_choice={"type": "any"},
                messages=[
                    {
                        "role": "user",
                        "content": _build_user_message(
                            order, template_out.full_sheet, self._fabric
                        ),
                    }
                ],
            )
            tool_block = next((b for b in response.content if b.type == "tool_use"), None)
            if tool_block is None:
                logger.debug("No tool_use block in response; keeping template sheet")
                return template_out

            raw_sections: dict[str, str] = tool_block.input["sections"]
            # Fall back to template text for any section the LLM omitted.
            sections = {key: raw_sections.get(key, template_out.sections[key]) for key in order}
            return WriterOutput(sections=sections, full_sheet=join_sections(sections, order))
        except Exception as exc:  # noqa: BLE001
            warnings.warn(
                f"LLMWriter failed, returning template sheet: {exc}",
                stacklevel=2,
            )
            return template_out
