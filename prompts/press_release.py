"""Press release prompt assembly helpers for Gemini calls."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from app_constants import PRESS_RELEASE_SENTINEL
from press_release import PressReleaseData, UploadedImage

PRESS_RELEASE_SECTIONS: tuple[str, ...] = (
    "KOP (Creatieve titel)",
    "LEAD (De 5 W's in het kort, vetgedrukt of cursief)",
    "HET VERHAAL (Achtergrond, waarom nu, sfeer, quotes)",
    "PRAKTISCHE DETAILS (Gebruik een tabel of lijst voor Datum, Tijd, Locatie, Tickets)",
    "OVER DE ARTIEST/ORGANISATIE (Boilerplate)",
    "CONTACT (Placeholder)",
)

TAILWIND_CDN_TAG = '<script src="https://cdn.tailwindcss.com"></script>'

_SUGGESTION_CONTEXT_LABELS: tuple[tuple[str, str], ...] = (
    ("what", "Wat"),
    ("who", "Wie"),
    ("when", "Wanneer"),
    ("where", "Waar"),
)


def build_content_parts(prompt: str, images: Iterable[UploadedImage] = ()) -> list[dict[str, Any]]:
    """Return Gemini content parts: every usable image first, the instruction last."""

    parts: list[dict[str, Any]] = []
    for image in images:
        if not image.data or not image.mime_type:
            continue
        parts.append({"inline_data": {"mime_type": image.mime_type, "data": image.data}})
    parts.append({"text": prompt})
    return parts


def _numbered(items: Iterable[str]) -> str:
    return "\n".join(f"{idx}. {item}" for idx, item in enumerate(items, start=1))


def build_suggestions_prompt(
    *,
    question_title: str,
    current_value: str,
    data: PressReleaseData,
    focus_hint: str | None = None,
) -> str:
    context_lines: list[str] = []
    if data.file_content:
        context_lines.append(f"CONTEXT DOCUMENT (Bio/Info): \n{data.file_content}\n")

    context_lines.append("HUIDIGE ANTWOORDEN:")
    for field_name, label in _SUGGESTION_CONTEXT_LABELS:
        value = data.answer(field_name)
        if value:
            context_lines.append(f"- {label}: {value}")
    context_block = "\n".join(context_lines)

    focus_line = f"\nFocus van deze vraag: {focus_hint.strip()}" if focus_hint and focus_hint.strip() else ""

    return f"""{context_block}

TAAK:
De gebruiker is een persbericht aan het schrijven voor een muziekevent of release.
De gebruiker zit vast bij de vraag over: "{question_title}".
Het huidige (incomplete) antwoord is: "{current_value}".{focus_line}

(Indien er afbeeldingen zijn geüpload, gebruik de visuele informatie hieruit ook als context, bijvoorbeeld voor een playlist of sfeer impressie).

Geef 3 korte, puntsgewijze suggesties of inspiratiepunten die de gebruiker kan gebruiken om deze vraag te beantwoorden.
Baseer je op de context (indien aanwezig) of verzin plausibele suggesties voor een muziek-persbericht.
Schrijf direct tegen de gebruiker. Houd het kort.
"""


def build_press_release_prompt(data: PressReleaseData) -> str:
    return f"""Je bent een senior copywriter gespecialiseerd in de muziekindustrie en events.

OPDRACHT:
Maak een strak opgemaakt Markdown-document (Persbericht) voor: {data.what}.

ONDERDELEN:
{_numbered(PRESS_RELEASE_SECTIONS)}

INFORMATIE VAN GEBRUIKER:
- WAT: {data.what}
- WIE: {data.who}
- WANNEER: {data.when}
- WAAR: {data.where}
- HOE & WAAROM: {data.why_how}

EXTRA CONTEXT (tekst): {data.file_content or "Geen"}
EXTRA CONTEXT (beeld): Zie bijlagen (gebruik sfeer/inhoud indien aanwezig).

STIJLRICHTLIJNEN VOOR MARKDOWN:
- Gebruik duidelijke headings (# voor Titel, ## voor secties, ### voor subsecties).
- Voeg overzichtelijke bullet points toe waar logisch (bijv. voor features, setlist, of redenen).
- Gebruik geneste lijstjes voor details.
- Gebruik **vette tekst** voor belangrijke namen, data, locaties en kernwoorden.
- Voeg blokquotes (>) toe voor quotes of de belangrijkste 'hook'.
- Houd de layout luchtig en goed scanbaar (gebruik witregels).
- Voeg waar passend een Markdown-tabel toe (bijvoorbeeld voor tourdata of ticketprijzen).
- Gebruik geen overbodige tekst: kort, UX-gericht en helder.
- Taal: Nederlands.

Output als pure Markdown zonder extra uitleg. Sluit af met "{PRESS_RELEASE_SENTINEL}".
"""


def build_refinement_prompt(*, current_text: str, instruction: str) -> str:
    return f"""Je bent een senior copywriter / editor.

HUIDIGE TEKST (Markdown):
{current_text}

INSTRUCTIE VAN DE GEBRUIKER:
{instruction}

OPDRACHT:
Herschrijf de tekst (of delen ervan) om te voldoen aan de instructie.

STIJLRICHTLIJNEN:
- Behoud de strakke Markdown opmaak (Headings, Bullets, **Vet**, > Quotes).
- Zorg dat tabellen behouden blijven of toegevoegd worden waar relevant.
- Houd de layout luchtig.
- Sluit af met "{PRESS_RELEASE_SENTINEL}".

Output alleen de volledige, aangepaste Markdown tekst.
"""


def build_poster_brief_prompt(data: PressReleaseData) -> str:
    """Ask the text model to write an English prompt for the poster image."""

    reference_note = "Yes, see attached." if data.uploaded_images else "No."
    return f"""Create a detailed image generation prompt for a music concert/release POSTER based on the provided info and attached images (if any).

CONTEXT INFO:
Artist: {data.who}
Event/Release: {data.what}
Date/Time: {data.when}
Location: {data.where}
Vibe/Backstory: {data.why_how}
Files/Playlist content: {data.file_content or "No specific text info"}
Reference Images provided: {reference_note}

REQUIREMENTS:
- Type: Professional Music Poster / Flyer.
- VISUAL STYLE: Festival atmosphere, live music stage, pop venue, energetic lighting, concert photography style or high-end graphic design.
- MUST INCLUDE VISIBLE TEXT ELEMENTS:
    1. Artist Name: "{data.who}"
    2. Date & Time: "{data.when}"
    3. Location: "{data.where}"
- Include a visual element that clearly looks like a QR code (scannable look).
- Include a text list or graphic element representing a 'playlist' or 'setlist'. If the attached images contain a playlist, extract 2-3 song titles to feature on the poster.
- Artistic style: Matches the vibe described but emphasized towards a LIVE EVENT / FESTIVAL / POP STAGE setting.
- Composition: Vertical poster format, bold typography, high contrast for text readability.
- Output: JUST the English prompt for the image generator.
"""


def build_poster_fallback_prompt(data: PressReleaseData) -> str:
    return (
        f"A music poster for {data.who}, {data.what}, at {data.where} on {data.when}. "
        "distinctive typography, festival style, live stage, qr code element, setlist, text info"
    )


def build_website_prompt(data: PressReleaseData) -> str:
    return f"""Je bent een expert frontend developer.

CONTEXT:
Maak een moderne, responsieve 'single-page' promotie website voor een muziekevent of release.
Het design moet 'dark mode', strak en professioneel zijn (denk aan Resident Advisor of Spotify landingspagina's).

DATA:
- Titel: {data.what}
- Artiest/Organisatie: {data.who}
- Datum: {data.when}
- Locatie: {data.where}
- Info: {data.why_how}

TECHNISCHE EISEN:
1. Gebruik HTML5.
2. Gebruik Tailwind CSS via CDN: {TAILWIND_CDN_TAG}
3. Gebruik Google Fonts (Inter of Roboto).
4. Zorg voor een 'Hero' sectie met een placeholder voor een achtergrondafbeelding (gebruik een donkere placeholder color).
5. Zorg voor een duidelijke sectie met de datum, tijd en locatie.
6. Voeg een placeholder toe voor een 'Ticket' of 'Pre-save' knop.
7. Voeg een footer toe.
8. Geef ALLEEN de rauwe HTML code terug. Geen markdown blocks (```), geen uitleg. Begin direct met <!DOCTYPE html>.
"""


__all__ = [
    "PRESS_RELEASE_SECTIONS",
    "TAILWIND_CDN_TAG",
    "build_content_parts",
    "build_poster_brief_prompt",
    "build_poster_fallback_prompt",
    "build_press_release_prompt",
    "build_refinement_prompt",
    "build_suggestions_prompt",
    "build_website_prompt",
]
