"""Region catalog: exact-match lookup between region keys and CWA names."""

from collections.abc import Iterator, Mapping

from cwaproxy.config.defaults import DEFAULT_REGIONS


class RegionCatalog:
    """Read-only bidirectional region table, safe to share across requests."""

    def __init__(self, regions: Mapping[str, str] = DEFAULT_REGIONS):
        self._by_key: dict[str, str] = {str(k): v for k, v in regions.items()}
        self._by_name: dict[str, str] = {v: k for k, v in self._by_key.items()}

    def resolve(self, key: str) -> str | None:
        """Return the canonical region name for a key, or None if unknown.

        Case-sensitive: "Taipei" is not "taipei".
        """
        return self._by_key.get(key)

    def key_for(self, name: str) -> str | None:
        return self._by_name.get(name)

    def keys(self) -> list[str]:
        return list(self._by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_key)

    def __len__(self) -> int:
        return len(self._by_key)


DEFAULT_CATALOG = RegionCatalog()
