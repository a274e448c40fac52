from __future__ import annotations

import copy
from typing import Callable, Dict, List, Optional

from bs4 import BeautifulSoup, Tag

from anichin.errors import DetailNotFound, EpisodeListNotFound, NoPlayableLinks
from anichin.mirror import mirror_embed_url
from anichin.models import EpisodeRef, ListingItem, Navigation, SeriesDetail, StreamResult
from anichin.slugs import episode_slug, series_slug, stable_hash
from anichin.text import (
    classify_status,
    clean,
    extract_episode_number,
    extract_score,
    first_non_blank,
    normalize_duration,
    resolve_url,
)

SYNOPSIS_PLACEHOLDER = "Sinopsis belum tersedia dari Anichin."

CARD_SELECTORS = ("div.listupd article.bs", "article.bs")
COVER_SELECTORS = ("div.bigcontent .thumb img", "div.single-info .thumb img")
SYNOPSIS_SELECTORS = ("div.bixbox.synp .entry-content", "div.info-content .desc")
RATING_SELECTORS = ("div.rating strong", "div.single-info .rating strong")
SPEC_ROW_SELECTOR = "div.info-content .spe span"
EMBED_SELECTORS = ("#pembed iframe", "div.player-embed iframe")
NAV_CONTAINERS = ("div.naveps", "div.naveps.bignav")
SERIES_LINK_SELECTORS = ('div.naveps a[href*="/seri/"]', 'div.ts-breadcrumb a[href*="/seri/"]')

SCORE_CEILING = 9.8
SCORE_STEP = 0.05
SCORE_FLOOR = 7.0


def make_soup(page: str) -> BeautifulSoup:
    return BeautifulSoup(page, "lxml")


def _text(node: Optional[Tag]) -> str:
    return node.get_text() if node is not None else ""


def _attr(node: Optional[Tag], name: str) -> str:
    if node is None:
        return ""
    value = node.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def _first_text(scope, *selectors: str) -> str:
    return first_non_blank(*(_text(scope.select_one(sel)) for sel in selectors))


def synthesized_score(rank: int) -> float:
    return max(SCORE_FLOOR, SCORE_CEILING - rank * SCORE_STEP)


# Listing pages ------------------------------------------------------------

def _select_cards(soup: BeautifulSoup) -> List[Tag]:
    for selector in CARD_SELECTORS:
        cards = soup.select(selector)
        if cards:
            return cards
    return []


def parse_listing(page: str, fallback_status: str, synthesize_scores: bool, base: str) -> List[ListingItem]:
    """Parse every series card on a listing page.

    Cards without a ``/seri/<slug>/`` link or a title are skipped. The first
    card seen for a slug wins. When ``synthesize_scores`` is set, cards that
    show no score get a descending placeholder based on their position.
    """
    soup = make_soup(page)
    unique: Dict[str, ListingItem] = {}
    for card in _select_cards(soup):
        link = card.select_one("a[href]")
        url = resolve_url(_attr(link, "href"), base)
        slug = series_slug(url)
        if not slug or slug in unique:
            continue

        title = first_non_blank(_attr(link, "title"), _first_text(card, "h2"), _first_text(card, "div.tt"))
        if not title:
            continue

        image = card.find("img")
        cover = first_non_blank(resolve_url(_attr(image, "src"), base), resolve_url(_attr(image, "data-src"), base))
        status_text = _first_text(card, "div.status")
        episode_label = first_non_blank(_first_text(card, "span.epx"), status_text, fallback_status)
        status = classify_status(first_non_blank(status_text, episode_label, fallback_status))
        episodes = extract_episode_number(episode_label)

        score = extract_score(first_non_blank(_first_text(card, ".upscore"), _first_text(card, ".rating strong")))
        if score <= 0 and synthesize_scores:
            score = synthesized_score(len(unique))

        unique[slug] = ListingItem(
            id=stable_hash(slug),
            slug=slug,
            title=title,
            thumbnail=cover,
            episode_label=episode_label,
            total_episodes=str(episodes) if episodes > 0 else "",
            status=status,
            score=score,
            url=url,
        )
    return list(unique.values())


def parse_genres(page: str) -> List[str]:
    soup = make_soup(page)
    genres: Dict[str, None] = {}
    for link in soup.select("ul.genre li a"):
        name = clean(link.get_text())
        if name:
            genres.setdefault(name)
    return list(genres)


# Detail pages -------------------------------------------------------------

def parse_specs(soup: BeautifulSoup) -> Dict[str, str]:
    specs: Dict[str, str] = {}
    for row in soup.select(SPEC_ROW_SELECTOR):
        label = clean(_text(row.find("b"))).replace(":", "").strip().lower()
        if not label:
            continue
        stripped = copy.copy(row)
        for bold in stripped.find_all("b"):
            bold.decompose()
        value = clean(stripped.get_text())
        if value:
            specs[label] = value
    return specs


EpisodeStrategy = Callable[[BeautifulSoup, str, str, str], List[EpisodeRef]]


def _episodes_from_list(soup: BeautifulSoup, thumbnail: str, duration: str, base: str) -> List[EpisodeRef]:
    episodes = []
    for anchor in soup.select("div.eplister ul li a[href]"):
        slug = episode_slug(resolve_url(anchor.get("href"), base))
        if not slug:
            continue
        title_text = _first_text(anchor, ".epl-title")
        number = extract_episode_number(
            first_non_blank(_first_text(anchor, ".epl-num"), title_text, anchor.get_text())
        )
        title = first_non_blank(title_text, anchor.get_text(), f"Episode {max(number, 1)}")
        release_date = first_non_blank(_first_text(anchor, ".epl-date"), "-")
        episodes.append(
            EpisodeRef(
                episode_number=number,
                title=title,
                slug=slug,
                release_date=release_date,
                thumbnail=thumbnail,
                duration=duration,
                released="coming" not in release_date.lower(),
            )
        )
    return episodes


def _episodes_from_latest_block(soup: BeautifulSoup, thumbnail: str, duration: str, base: str) -> List[EpisodeRef]:
    episodes = []
    for anchor in soup.select("div.lastend .inepcx a[href]"):
        slug = episode_slug(resolve_url(anchor.get("href"), base))
        if not slug:
            continue
        text = clean(anchor.get_text())
        number = extract_episode_number(text)
        episodes.append(
            EpisodeRef(
                episode_number=number,
                title=text or f"Episode {max(number, 1)}",
                slug=slug,
                release_date="-",
                thumbnail=thumbnail,
                duration=duration,
                released=True,
            )
        )
    return episodes


EPISODE_STRATEGIES: tuple[EpisodeStrategy, ...] = (_episodes_from_list, _episodes_from_latest_block)


def parse_episodes(soup: BeautifulSoup, thumbnail: str, duration: str, base: str) -> List[EpisodeRef]:
    for strategy in EPISODE_STRATEGIES:
        episodes = strategy(soup, thumbnail, duration, base)
        if episodes:
            return episodes
    return []


def parse_detail(page: str, page_url: str, base: str) -> SeriesDetail:
    soup = make_soup(page)

    title = _first_text(soup, "h1.entry-title")
    if not title:
        raise DetailNotFound()

    slug = series_slug(page_url)
    og_image = soup.select_one('meta[property="og:image"]')
    cover = first_non_blank(
        *(resolve_url(_attr(soup.select_one(sel), "src"), base) for sel in COVER_SELECTORS),
        resolve_url(_attr(og_image, "content"), base),
    )
    synopsis = first_non_blank(_first_text(soup, *SYNOPSIS_SELECTORS), SYNOPSIS_PLACEHOLDER)
    score = extract_score(_first_text(soup, *RATING_SELECTORS))

    specs = parse_specs(soup)
    duration = normalize_duration(first_non_blank(specs.get("duration"), "-"))
    episode_label = first_non_blank(specs.get("episodes"))
    episodes_count = extract_episode_number(episode_label)

    genres = [name for name in (clean(a.get_text()) for a in soup.select("div.genxed a")) if name]

    episode_list = parse_episodes(soup, cover, duration, base)
    if not episode_list:
        raise EpisodeListNotFound()

    return SeriesDetail(
        id=stable_hash(slug or page_url),
        slug=slug,
        title=title,
        thumbnail=cover,
        episode_label=episode_label,
        total_episodes=str(episodes_count) if episodes_count > 0 else "",
        status=classify_status(first_non_blank(specs.get("status"), "Unknown")),
        score=score,
        url=page_url,
        synopsis=synopsis,
        genres=genres,
        studio=first_non_blank(specs.get("studio"), "-"),
        producer=first_non_blank(specs.get("producer"), specs.get("network"), "-"),
        duration=duration,
        release_date=first_non_blank(specs.get("released on"), specs.get("released"), "-"),
        episode_list=episode_list,
    )


# Episode pages ------------------------------------------------------------

def _primary_embed(soup: BeautifulSoup, base: str) -> str:
    src = first_non_blank(*(_attr(soup.select_one(sel), "src") for sel in EMBED_SELECTORS))
    return resolve_url(src, base)


def _mirror_embeds(soup: BeautifulSoup, base: str) -> List[str]:
    urls = []
    for option in soup.select("select.mirror option[value]"):
        value = clean(option.get("value"))
        if not value:
            continue
        src = mirror_embed_url(value, base)
        if src:
            urls.append(src)
    return urls


def parse_downloads(soup: BeautifulSoup, base: str) -> Dict[str, List[str]]:
    downloads: Dict[str, Dict[str, None]] = {}
    for row in soup.select("div.soraurlx"):
        quality = first_non_blank(_first_text(row, "strong"), "Default")
        urls = downloads.get(quality, {})
        for anchor in row.select("a[href]"):
            href = resolve_url(anchor.get("href"), base)
            if href:
                urls.setdefault(href)
        if urls:
            downloads[quality] = urls
    return {quality: list(urls) for quality, urls in downloads.items()}


def _nav_slug(soup: BeautifulSoup, rel: str, base: str) -> str:
    href = first_non_blank(
        *(resolve_url(_attr(soup.select_one(f'{box} a[rel~="{rel}"]'), "href"), base) for box in NAV_CONTAINERS)
    )
    return episode_slug(href)


def parse_navigation(soup: BeautifulSoup, base: str) -> Navigation:
    series_href = first_non_blank(
        *(resolve_url(_attr(soup.select_one(sel), "href"), base) for sel in SERIES_LINK_SELECTORS)
    )
    return Navigation(
        prev_slug=_nav_slug(soup, "prev", base) or None,
        next_slug=_nav_slug(soup, "next", base) or None,
        series_slug=series_slug(series_href) or None,
    )


def parse_stream(page: str, page_url: str, requested_slug: str, base: str) -> StreamResult:
    soup = make_soup(page)

    streams: Dict[str, None] = {}
    primary = _primary_embed(soup, base)
    if primary:
        streams.setdefault(primary)
    for url in _mirror_embeds(soup, base):
        streams.setdefault(url)

    downloads = parse_downloads(soup, base)
    if not streams and not downloads:
        raise NoPlayableLinks()

    return StreamResult(
        title=first_non_blank(_first_text(soup, "h1.entry-title"), "Episode"),
        episode_slug=episode_slug(page_url) or clean(requested_slug),
        streaming_urls=list(streams),
        download_urls=downloads,
        navigation=parse_navigation(soup, base),
    )
