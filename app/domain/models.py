from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Hit:
    text: str


@dataclass(frozen=True)
class Miss:
    pass


@dataclass(frozen=True)
class BackendError:
    reason: str


# Miss covers absent keys and undecodable values; callers treat everything but Hit as not found.
FetchResult = Union[Hit, Miss, BackendError]


@dataclass
class GeneratedItinerary:
    tag: str
    itinerary: str
    stored: bool
