from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from anichin.text import format_score


@dataclass(slots=True)
class ListingItem:
    id: int
    slug: str
    title: str
    thumbnail: str = ""
    episode_label: str = ""
    total_episodes: str = ""
    status: str = "Unknown"
    score: float = 0.0
    url: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "thumbnail": self.thumbnail,
            "episodeLabel": self.episode_label,
            "totalEpisodes": self.total_episodes,
            "status": self.status,
            "score": format_score(self.score),
            "url": self.url,
        }


@dataclass(slots=True)
class EpisodeRef:
    episode_number: int
    title: str
    slug: str
    release_date: str = "-"
    thumbnail: str = ""
    duration: str = "-"
    released: bool = True

    def to_dict(self) -> dict:
        return {
            "episodeNumber": self.episode_number,
            "title": self.title,
            "slug": self.slug,
            "releaseDate": self.release_date,
            "thumbnail": self.thumbnail,
            "duration": self.duration,
            "released": self.released,
        }


@dataclass(slots=True)
class SeriesDetail:
    id: int
    slug: str
    title: str
    thumbnail: str = ""
    episode_label: str = ""
    total_episodes: str = ""
    status: str = "Unknown"
    score: float = 0.0
    url: str = ""
    synopsis: str = ""
    genres: List[str] = field(default_factory=list)
    studio: str = "-"
    producer: str = "-"
    duration: str = "-"
    release_date: str = "-"
    episode_list: List[EpisodeRef] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "thumbnail": self.thumbnail,
            "episodeLabel": self.episode_label,
            "totalEpisodes": self.total_episodes,
            "status": self.status,
            "score": format_score(self.score),
            "url": self.url,
            "synopsis": self.synopsis,
            "genres": list(self.genres),
            "studio": self.studio,
            "producer": self.producer,
            "duration": self.duration,
            "releaseDate": self.release_date,
            "episodeList": [ep.to_dict() for ep in self.episode_list],
        }


@dataclass(slots=True)
class Navigation:
    prev_slug: Optional[str] = None
    next_slug: Optional[str] = None
    series_slug: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            key: ({"slug": slug} if slug else None)
            for key, slug in (("prev", self.prev_slug), ("next", self.next_slug), ("list", self.series_slug))
        }


@dataclass(slots=True)
class StreamResult:
    title: str
    episode_slug: str
    streaming_urls: List[str] = field(default_factory=list)
    download_urls: Dict[str, List[str]] = field(default_factory=dict)
    navigation: Navigation = field(default_factory=Navigation)

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "episodeSlug": self.episode_slug,
            "streamingUrls": list(self.streaming_urls),
            "downloadUrls": {quality: list(urls) for quality, urls in self.download_urls.items()},
            "navigation": self.navigation.to_dict(),
        }


@dataclass(slots=True)
class HomePage:
    ongoing: List[ListingItem] = field(default_factory=list)
    trending: List[ListingItem] = field(default_factory=list)
    complete: List[ListingItem] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "ongoing": [item.to_dict() for item in self.ongoing],
            "trending": [item.to_dict() for item in self.trending],
            "complete": [item.to_dict() for item in self.complete],
        }
