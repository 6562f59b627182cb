"""Prompt templates and builders for each writing style."""

from __future__ import annotations

from app.config import GenerationSettings, ModelConfig
from app.types import Style

WRITING_STYLES: dict[Style, str] = {
    "casual": "Casual, friendly, human like, everyday language with contractions and simple words",
    "proofread": (
        "Proofread the text for any errors and make sure it is grammatically correct. "
        "Do not change the meaning of the text."
    ),
    "professional": "Business-appropriate language that's clear and direct",
    "persuasive": "Compelling language that drives action",
    "freestyle": "",  # supplied by the caller per request
}

FREESTYLE_TEMPLATE = (
    "You are a helpful writing assistant. The user has provided some text and instructions "
    "for how to help with it.\n\n"
    "Instructions: {instructions}\n\n"
    'Text: "{text}"\n\n'
    "Provide a response that follows the user's instructions. Return ONLY your response."
)

PROOFREAD_TEMPLATE = (
    "You are a professional proofreader. Review the text for grammar, spelling, and punctuation errors only.\n"
    "Make minimal changes to fix these errors while preserving the exact meaning, tone, and style "
    "of the original text.\n"
    "If the text is already correct, return it unchanged.\n\n"
    "Return ONLY your corrected version of the text:\n\n"
    'Text to proofread: "{text}"'
)

IMPROVE_TEMPLATE = (
    "You are a professional writing assistant. Your task is to improve the given text by making it "
    "more {description}.\n\n"
    "Return ONLY your improved version of the text:\n\n"
    'Text to improve: "{text}"'
)

# Proofreading stays close to the input, the other styles get room to rephrase.
PROOFREAD_SAMPLING = {"temperature": 0.1, "top_p": 0.5}
CREATIVE_SAMPLING = {"temperature": 0.7, "top_p": 0.8}


def build_prompt(text: str, style: Style, freestyle: str | None = None) -> str:
    """Build the single-turn prompt sent to the model."""

    if style == "freestyle":
        if not freestyle or not freestyle.strip():
            raise ValueError("Freestyle style requires instructions to be provided.")
        return FREESTYLE_TEMPLATE.format(instructions=freestyle.strip(), text=text)

    if style == "proofread":
        return PROOFREAD_TEMPLATE.format(text=text)

    return IMPROVE_TEMPLATE.format(description=WRITING_STYLES[style], text=text)


def generation_settings(style: Style, model_config: ModelConfig) -> GenerationSettings:
    """Return sampling parameters for a style."""
    sampling = PROOFREAD_SAMPLING if style == "proofread" else CREATIVE_SAMPLING
    return GenerationSettings(
        temperature=sampling["temperature"],
        top_p=sampling["top_p"],
        top_k=model_config.top_k,
        max_output_tokens=model_config.max_output_tokens,
    )
