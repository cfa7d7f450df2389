"""Styling helpers for Streamlit layouts."""
from __future__ import annotations

import streamlit as st


def render_app_styles(*, show_intro_hero: bool = False) -> None:
    """Apply the dark stage theme and optionally the intro hero glow."""
    base_css = """
    <style>
    .stApp {
        background: radial-gradient(circle at 10% 0%, rgba(139, 92, 246, 0.18) 0%, rgba(15, 23, 42, 0) 40%),
                    radial-gradient(circle at 90% 100%, rgba(236, 72, 153, 0.16) 0%, rgba(15, 23, 42, 0) 45%),
                    #0f172a;
        color: #e2e8f0;
    }
    [data-testid="stHeader"] {
        background: rgba(0, 0, 0, 0);
    }
    .brand-accent {
        color: #8b5cf6;
    }
    .intro-hero {
        text-align: center;
        padding: 3rem 1rem 1.5rem;
    }
    .intro-hero h1 {
        font-size: 3.2rem;
        font-weight: 800;
        margin-bottom: 1rem;
    }
    .intro-hero p {
        font-size: 1.2rem;
        color: #94a3b8;
        line-height: 1.6;
    }
    .upload-badge {
        display: inline-block;
        font-size: 0.75rem;
        background: #1e293b;
        border-radius: 6px;
        padding: 0.15rem 0.5rem;
        margin-right: 0.35rem;
    }
    .upload-badge.text { color: #4ade80; }
    .upload-badge.image { color: #60a5fa; }
    </style>
    """
    st.markdown(base_css, unsafe_allow_html=True)

    if show_intro_hero:
        st.markdown(
            "<div class='intro-hero'>"
            "<h1>Music<span class='brand-accent'>PR</span> Pro</h1>"
            "<p>De slimme persbericht generator voor de muziekindustrie. "
            "Beantwoord 5 vragen en onze AI schrijft een professioneel persbericht "
            "voor je release of event.</p>"
            "</div>",
            unsafe_allow_html=True,
        )


def upload_badges_html(*, has_text: bool, image_count: int) -> str:
    badges: list[str] = []
    if has_text:
        badges.append("<span class='upload-badge text'>📄 Tekst info</span>")
    badges.extend(
        f"<span class='upload-badge image'>🖼️ Img {idx}</span>" for idx in range(1, image_count + 1)
    )
    return "".join(badges)


__all__ = ["render_app_styles", "upload_badges_html"]
