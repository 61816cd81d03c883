"""Music-related domain entities.

Tracks are immutable value records. A track refers to its performer only
through a display label, so a ``Performer`` owning its tracks never forms a
reference cycle with them.
"""

from collections.abc import Mapping
from typing import Any

from attrs import define, field, validators

from catalogo.config import get_logger

from .shared import InvalidSongError, to_performer_label, to_seconds

logger = get_logger(__name__)

UNKNOWN_PERFORMER = "Artista desconhecido"


@define(frozen=True, slots=True)
class Track:
    """Immutable track entity representing a single song.

    ``performer`` accepts a Performer, a plain text label or ``None`` and is
    stored as the label only.
    """

    title: str = field(validator=validators.instance_of(str))
    duration: int = field(default=0, converter=to_seconds, validator=validators.ge(0))
    performer: str | None = field(default=None, converter=to_performer_label)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], performer: Any = None) -> "Track":
        """Build a track from a plain record with ``title`` and ``duration``."""
        return cls(
            title=fields.get("title") or "",
            duration=fields.get("duration", 0),
            performer=performer,
        )

    def info(self) -> str:
        """Return ``"<title> — <performer> (m:ss)"``."""
        performer_name = self.performer or UNKNOWN_PERFORMER
        minutes, seconds = divmod(self.duration, 60)
        return f"{self.title} — {performer_name} ({minutes}:{seconds:02d})"

    def play(self) -> None:
        """Simulate playback by logging the track info."""
        logger.info(f"Tocando: {self.info()}")


@define(slots=True)
class Performer:
    """A musician or group owning an ordered list of tracks."""

    name: str = field(validator=validators.instance_of(str))
    genre: str = field(default="", validator=validators.instance_of(str))
    _tracks: list[Track] = field(factory=list, init=False)

    @property
    def tracks(self) -> tuple[Track, ...]:
        return tuple(self._tracks)

    def add_track(self, track: Track | Mapping[str, Any]) -> None:
        """Append a track, building it first when given a plain record.

        Tracks built from a record are labelled with this performer's name.
        A plain record is a mapping such as a dict; objects that only carry
        attributes (e.g. ``SimpleNamespace``) are not accepted. Missing keys
        take the Track defaults, with an empty title.

        Raises:
            InvalidSongError: if ``track`` is neither a Track nor a mapping.
        """
        if isinstance(track, Track):
            song = track
        elif isinstance(track, Mapping):
            song = Track.from_fields(track, performer=self)
        else:
            raise InvalidSongError(
                "Música inválida. Deve ser uma instância de Track ou um mapeamento."
            )

        self._tracks.append(song)
        logger.debug(f"Added '{song.title}' to tracks of {self.name}")

    def list_track_titles(self) -> list[str]:
        """Titles of all tracks, in insertion order."""
        return [song.title for song in self._tracks]
