"""Static catalog of utilities that can be added to a project."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class UtilityDescriptor:
    """One utility bundle and where its code lives.

    An empty source_url means the utility is listed but not published yet;
    selecting it fails before any I/O.
    """

    id: str
    name: str
    branch_ref: str
    source_url: str
    dest_folder: str
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()

    @property
    def has_source(self) -> bool:
        return self.source_url != ""

    @property
    def has_dependencies(self) -> bool:
        return bool(self.dependencies) or bool(self.dev_dependencies)


class Catalog:
    """Immutable, ordered collection of utilities keyed by id."""

    def __init__(self, utilities: Iterable[UtilityDescriptor]) -> None:
        entries = tuple(utilities)
        by_id: dict[str, UtilityDescriptor] = {}
        for utility in entries:
            if utility.id in by_id:
                raise ValueError(f"Duplicate utility id in catalog: {utility.id!r}")
            by_id[utility.id] = utility
        self._entries = entries
        self._by_id = by_id

    def __iter__(self) -> Iterator[UtilityDescriptor]:
        return iter(self._entries)

    def ids(self) -> list[str]:
        """Utility ids in declaration order."""
        return [utility.id for utility in self._entries]

    def get(self, utility_id: str) -> UtilityDescriptor:
        """Look up a utility by id.

        Raises:
            KeyError: If no utility has this id
        """
        if utility_id not in self._by_id:
            raise KeyError(utility_id)
        return self._by_id[utility_id]


UTILITY_LIBRARY_URL = "git@git.seaflux.dev:boilerplates/utility-library-nodets.git"

DEFAULT_CATALOG = Catalog(
    [
        UtilityDescriptor(
            id="socket",
            name="Socket Utility (sf-socket-2024)",
            branch_ref="feature/sf-socketio",
            source_url=UTILITY_LIBRARY_URL,
            dest_folder="sf-socketio",
            dependencies=(
                "jm-ez-l10n@1.0.0",
                "moment@2.30.1",
                "morgan@1.9.1",
                "socket.io@4.7.5",
                "uuid@8.3.2",
                "winston@3.14.2",
                "redis@4.7.0",
            ),
            dev_dependencies=(
                "@types/moment@2.13.0",
                "@types/node-uuid@0.0.28",
            ),
        ),
        # Not published yet: listed so users know it is coming.
        UtilityDescriptor(
            id="strip",
            name="Strip Utility (sf-strip-2024)",
            branch_ref="sf-strip-2024",
            source_url="",
            dest_folder="sf-stripe",
        ),
    ]
)
