"""Full-text search within a brain, across public brains, or across every
brain the user can access."""

from __future__ import annotations

from typing import Any, Optional

from .base import ResourceClient, build_params
from .models import SearchOptions, SearchResult
from .validation import ensure_uuid, validate_input


def _options(options: Optional[SearchOptions | dict[str, Any]], overrides: dict[str, Any]) -> SearchOptions:
    if options is None:
        options = SearchOptions()
    opts = validate_input(SearchOptions, options)
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        opts = validate_input(SearchOptions, {**opts.model_dump(), **overrides})
    return opts


class SearchClient(ResourceClient):
    async def search_in_brain(
        self,
        brain_id: str,
        query_text: str,
        options: Optional[SearchOptions | dict[str, Any]] = None,
        *,
        max_results: Optional[int] = None,
        only_search_thought_names: Optional[bool] = None,
    ) -> list[SearchResult]:
        ensure_uuid(brain_id, "brain_id")
        opts = _options(options, {"max_results": max_results, "only_search_thought_names": only_search_thought_names})
        params = build_params(
            queryText=query_text,
            maxResults=opts.max_results,
            onlySearchThoughtNames=opts.only_search_thought_names,
        )
        return await self._get_json(f"/search/{brain_id}", list[SearchResult], params)

    async def search_public(
        self,
        query_text: str,
        options: Optional[SearchOptions | dict[str, Any]] = None,
        *,
        max_results: Optional[int] = None,
        only_search_thought_names: Optional[bool] = None,
        exclude_brain_ids: Optional[list[str]] = None,
    ) -> list[SearchResult]:
        """Search public brains.

        ``exclude_brain_ids`` is sent as one ``excludeBrainIds`` parameter per
        id, and not at all when empty.
        """
        opts = _options(
            options,
            {
                "max_results": max_results,
                "only_search_thought_names": only_search_thought_names,
                "exclude_brain_ids": exclude_brain_ids,
            },
        )
        params = build_params(
            queryText=query_text,
            maxResults=opts.max_results,
            onlySearchThoughtNames=opts.only_search_thought_names,
            excludeBrainIds=opts.exclude_brain_ids,
        )
        return await self._get_json("/search/public", list[SearchResult], params)

    async def search_accessible(
        self,
        query_text: str,
        options: Optional[SearchOptions | dict[str, Any]] = None,
        *,
        max_results: Optional[int] = None,
        only_search_thought_names: Optional[bool] = None,
    ) -> list[SearchResult]:
        opts = _options(options, {"max_results": max_results, "only_search_thought_names": only_search_thought_names})
        params = build_params(
            queryText=query_text,
            maxResults=opts.max_results,
            onlySearchThoughtNames=opts.only_search_thought_names,
        )
        return await self._get_json("/search/accessible", list[SearchResult], params)


__all__ = ["SearchClient"]
