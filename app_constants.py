"""Static copy and step layout for the press release wizard."""
from __future__ import annotations

from dataclasses import dataclass

APP_TITLE = "MusicPR Pro"
APP_ICON = "🎵"

STEP_INTRO = 0
STEP_WHAT = 1
STEP_WHO = 2
STEP_WHEN = 3
STEP_WHERE = 4
STEP_WHY_HOW = 5
STEP_REVIEW = 6
STEP_RESULT = 7

QUESTION_COUNT = 5

PRESS_RELEASE_SENTINEL = "EINDE PERSBERICHT"

UPLOAD_EXTENSIONS = ("txt", "md", "csv", "json", "png", "jpg", "jpeg", "webp")

POSTER_FILENAME = "poster.png"
WEBSITE_FILENAME = "event-promo.html"


@dataclass(frozen=True, slots=True)
class QuestionConfig:
    step: int
    title: str
    description: str
    field: str
    placeholder: str
    ai_prompt_context: str


QUESTIONS: tuple[QuestionConfig, ...] = (
    QuestionConfig(
        step=STEP_WHAT,
        title="Wat is het nieuws?",
        description="Beschrijf de kern van het nieuws. Is het een nieuwe single, een album release, een festival of een concert?",
        field="what",
        placeholder="Bijv: Release van de nieuwe single 'Night Sky'...",
        ai_prompt_context="Focus op de nieuwswaarde. Wat wordt er gelanceerd of aangekondigd?",
    ),
    QuestionConfig(
        step=STEP_WHO,
        title="Wie zijn de betrokkenen?",
        description="Om welke artiest, band of organisatie gaat het? Voeg eventueel een korte bio toe.",
        field="who",
        placeholder="Bijv: DJ X, een opkomende techno producer uit Amsterdam...",
        ai_prompt_context="Wie is de afzender? Wat is hun achtergrond?",
    ),
    QuestionConfig(
        step=STEP_WHEN,
        title="Wanneer vindt het plaats?",
        description="Datum en tijd van de release of het event.",
        field="when",
        placeholder="Bijv: Vrijdag 24 november 2023, deuren open om 20:00...",
        ai_prompt_context="Tijdsgebonden details.",
    ),
    QuestionConfig(
        step=STEP_WHERE,
        title="Waar vindt het plaats?",
        description="Locatie, platform (Spotify/Apple Music) of fysiek adres.",
        field="where",
        placeholder="Bijv: Paradiso, Amsterdam of wereldwijd op alle streamingdiensten...",
        ai_prompt_context="Locatiegegevens.",
    ),
    QuestionConfig(
        step=STEP_WHY_HOW,
        title="Hoe & Waarom?",
        description="Wat is de achtergrond? Waarom nu? Hoe is het tot stand gekomen? Wat maakt dit uniek?",
        field="why_how",
        placeholder="Bijv: Geïnspireerd door de underground scene van Berlijn...",
        ai_prompt_context="Achtergrondverhaal, inspiratie en 'human interest' hoek.",
    ),
)

ANSWER_FIELDS: tuple[str, ...] = tuple(question.field for question in QUESTIONS)

DISTRIBUTION_TIPS: tuple[str, ...] = (
    "Deel de poster direct op Instagram Stories.",
    "Gebruik de tekst in de body van je e-mail.",
    "Upload de HTML file naar een gratis host (zoals Netlify Drop) voor een directe landingspagina.",
)


def question_for_step(step: int) -> QuestionConfig:
    for question in QUESTIONS:
        if question.step == step:
            return question
    raise KeyError(f"no question configured for step {step}")


__all__ = [
    "ANSWER_FIELDS",
    "APP_ICON",
    "APP_TITLE",
    "DISTRIBUTION_TIPS",
    "POSTER_FILENAME",
    "PRESS_RELEASE_SENTINEL",
    "QUESTIONS",
    "QUESTION_COUNT",
    "QuestionConfig",
    "STEP_INTRO",
    "STEP_RESULT",
    "STEP_REVIEW",
    "STEP_WHAT",
    "STEP_WHO",
    "STEP_WHEN",
    "STEP_WHERE",
    "STEP_WHY_HOW",
    "UPLOAD_EXTENSIONS",
    "WEBSITE_FILENAME",
    "question_for_step",
]
