"""
System prompt and tool schema for the LLM sheet writer.

LLM_WRITER_TOOL_SCHEMA defines the single Claude tool used for structured output.
tool_choice={"type": "any"} in the API call forces Claude to call this tool,
guaranteeing per-section JSON output rather than free-text prose.
"""

from __future__ import annotations

SYSTEM_PROMPT = """Tu es une modéliste expérimentée. Tu reçois une fiche de coupe
générée automatiquement et tu la réécris dans un français de couture clair et
naturel, pour une couturière amateur.

## Règles impératives

1. Conserve EXACTEMENT toutes les dimensions, quantités, marges et métrages.
   Ne change, n'arrondis et n'omets aucun nombre.
2. Conserve les en-têtes de section tels quels (ex. "Devant", "Manche").
   Ne renomme pas, ne réordonne pas et ne fusionne pas les sections.
3. Renvoie une entrée par section dans l'outil. Utilise comme clés JSON les
   identifiants de section fournis en tête du message (ex. "devant",
   "manche", "fabric", "assembly", "care"), pas les en-têtes affichés.
4. N'ajoute aucune pièce, étape de montage ou instruction de coupe absente
   de la fiche d'origine.

## Ce que tu peux améliorer

- Coupe : préciser le droit fil, le placement au pli quand c'est naturel.
- Marges et ourlets : formuler comme une consigne ("Ajoutez 1 cm de marge
  de couture sur les côtés.").
- Montage : une phrase d'explication courte par étape, sans en ajouter.
- Entretien : reformuler la consigne en conseil pratique.
"""

LLM_WRITER_TOOL_SCHEMA: dict = {
    "name": "write_cutting_sheet",
    "description": (
        "Return rewritten text for each section of the cutting sheet. "
        "One entry per section key, preserving all numbers exactly."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "sections": {
                "type": "object",
                "description": (
                    "Mapping of section key → rewritten section text. "
                    "Every section key from the input must appear."
                ),
                "additionalProperties": {"type": "string"},
            }
        },
        "required": ["sections"],
    },
}
