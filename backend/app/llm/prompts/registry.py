# app/llm/prompts/registry.py

from dataclasses import dataclass

from app.llm.prompts import templates

@dataclass(frozen=True)
class PromptTemplate:
    name: str
    version: str
    template: str

PROMPTS: dict[tuple[str, str], PromptTemplate] = {
    ("analyze_pdf", "v1"): PromptTemplate("analyze_pdf", "v1", templates.ANALYZE_PDF_V1),
    ("analyze_text", "v1"): PromptTemplate("analyze_text", "v1", templates.ANALYZE_TEXT_V1),
}

def get_prompt(name: str, version: str) -> PromptTemplate:
    key = (name, version)
    if key not in PROMPTS:
        raise KeyError(f"Unknown prompt: {name}@{version}")
    return PROMPTS[key]
