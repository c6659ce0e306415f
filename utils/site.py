import re
import streamlit as st
from pathlib import Path
from typing import Sequence

from site_config import SiteConfig

DEFAULT_ICON = ":material/train:"

_ICON_LINK = re.compile(r"<link\b[^>]*\brel=[\"'](?:shortcut )?icon[\"'][^>]*>", re.IGNORECASE)
_HREF = re.compile(r"\bhref=[\"']([^\"']+)[\"']", re.IGNORECASE)


def favicon_from_head(head: str) -> str | None:
    """href of the first <link rel="icon"> in the head markup."""
    link = _ICON_LINK.search(head or "")
    if not link:
        return None
    href = _HREF.search(link.group(0))
    return href.group(1) if href else None


def page_icon(site: SiteConfig) -> str:
    href = favicon_from_head(site.head)
    if href and Path(href).exists():
        return href
    return DEFAULT_ICON


def page_path(site: SiteConfig, filename: str) -> str:
    return f"{site.root.rstrip('/')}/{filename}"


def pager_links(pages: Sequence, current) -> tuple:
    """(previous, next) neighbours of the current page, None at the ends."""
    titles = [p.title for p in pages]
    if current is None or current.title not in titles:
        return None, None
    i = titles.index(current.title)
    prev_page = pages[i - 1] if i > 0 else None
    next_page = pages[i + 1] if i < len(pages) - 1 else None
    return prev_page, next_page


def render_header(site: SiteConfig):
    if site.header:
        st.markdown(site.header, unsafe_allow_html=True)


def render_footer(site: SiteConfig, pages: Sequence, current):
    st.divider()
    if site.pager:
        prev_page, next_page = pager_links(pages, current)
        left, right = st.columns(2)
        if prev_page is not None:
            left.page_link(prev_page, label=f"Previous: {prev_page.title}", icon=":material/arrow_back:")
        if next_page is not None:
            right.page_link(next_page, label=f"Next: {next_page.title}", icon=":material/arrow_forward:")
    if site.footer:
        st.caption(site.footer, unsafe_allow_html=True)
