"""Type definitions for search hits, filter settings, and displayed rows."""

import logging

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from gosearch.config import Config

logger = logging.getLogger(__name__)


class SearchHit(BaseModel):
    """A single package returned by the search endpoint.

    Immutable once decoded. The wire format uses ``fork`` for the fork flag
    and ``import_count`` for the usage count; the alternative spellings seen
    across endpoint variants are accepted too.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    """Declared package name; ``main`` marks an application package."""

    path: str = Field(min_length=1)
    """Import path, unique within one result set."""

    import_count: int = Field(
        default=0,
        ge=0,
        validation_alias=AliasChoices("import_count", "importCount", "ImportCount"),
    )
    """Number of packages observed importing this one."""

    synopsis: str = ""
    """One-line description, may be empty."""

    is_fork: bool = Field(
        default=False, validation_alias=AliasChoices("fork", "is_fork", "Fork")
    )
    """Whether the repository is a fork of another package."""

    stars: int = Field(default=0, ge=0, validation_alias=AliasChoices("stars", "Stars"))
    """Star count of the hosting repository."""

    score: float = 0.0
    """Relevance score assigned by the endpoint. Not used for ranking."""

    @field_validator("name", "synopsis", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @property
    def is_application(self) -> bool:
        """True when the package builds an executable."""
        return self.name == Config.APPLICATION_PACKAGE_NAME


class SearchResponse(BaseModel):
    """Decoded search response for one query."""

    query: str
    """The original search query string submitted by the user."""

    results: list[SearchHit] = Field(
        default_factory=list, validation_alias=AliasChoices("results", "Results")
    )
    """Search hits in the order the endpoint returned them."""

    @field_validator("results", mode="before")
    @classmethod
    def _null_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("results")
    @classmethod
    def _unique_paths(cls, hits: list[SearchHit]) -> list[SearchHit]:
        seen: set[str] = set()
        unique = []
        for hit in hits:
            if hit.path in seen:
                logger.debug("Dropping duplicate search hit %s", hit.path)
                continue
            seen.add(hit.path)
            unique.append(hit)
        return unique

    @property
    def count(self) -> int:
        """Number of hits in the response."""
        return len(self.results)


class FilterCriteria(BaseModel):
    """Filter and display settings for one run, built once at startup."""

    model_config = ConfigDict(frozen=True)

    include_forks: bool = False
    """Keep hits flagged as forks."""

    want_applications: bool = False
    """Show application (``main``) packages instead of libraries."""

    min_stars: int = Config.DEFAULT_MIN_STARS
    """Minimum star count."""

    min_imports: int = Config.DEFAULT_MIN_IMPORTS
    """Minimum import count."""

    path_must_contain_query: bool = True
    """Require the query to appear literally in the import path."""

    display_limit: int = Config.DEFAULT_LIMIT
    """Maximum number of displayed rows; zero or negative means no limit."""


class DisplayedEntry(BaseModel):
    """A search hit as shown in the results table."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=1)
    """1-based row number the user types to select this entry."""

    hit: SearchHit
    """The underlying search hit."""

    installed: bool = False
    """Whether the package is already present locally."""

    @property
    def path(self) -> str:
        """Import path of the underlying hit."""
        return self.hit.path
