"""Catalog controller.

Owns the selections of one catalog session (filters, sort, page) and
re-derives the visible slice after every change:

    store.all() ──► filters.apply ──► sorting.sort ──► pagination ──► CatalogView

Each controller instance is independent; callers change state only
through its mutators and observe results through ``on_state_change``.
"""

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

import structlog

from techstore.catalog import filters, sorting
from techstore.catalog.filters import FilterState, RatingTier, normalize_brand
from techstore.catalog.i18n import DEFAULT_FALLBACKS, LanguageProvider
from techstore.catalog.models import ALL_CATEGORIES, Product
from techstore.catalog.navigation import Navigator
from techstore.catalog.pagination import (
    MAX_VISIBLE_PAGES,
    PAGE_SIZE,
    PageWindowItem,
    clamp_page,
    slice_page,
    total_pages,
    visible_page_window,
)
from techstore.catalog.query_state import (
    QueryState,
    deserialize,
    resolve_category,
    serialize,
)
from techstore.catalog.sorting import SortKey
from techstore.catalog.store import CatalogStore

logger = structlog.get_logger()


class CatalogEvent(str, Enum):
    """State-affecting events handled by the controller.

    The controller has a single resting state; every event recomputes
    the view and returns to it.
    """

    STARTED = "started"
    FILTER_CHANGED = "filter_changed"
    SORT_CHANGED = "sort_changed"
    PAGE_CHANGED = "page_changed"
    LANGUAGE_CHANGED = "language_changed"
    QUERY_RESTORED = "query_restored"

    def resets_page(self) -> bool:
        """Check if this event sends the session back to page 1."""
        return self in _PAGE_RESETTING_EVENTS


_PAGE_RESETTING_EVENTS = {
    CatalogEvent.STARTED,
    CatalogEvent.FILTER_CHANGED,
    CatalogEvent.QUERY_RESTORED,
}


@dataclass(frozen=True)
class CatalogView:
    """Render data published after every recompute.

    Attributes:
        visible_products: Products on the current page.
        total_count: Number of products matching the filters.
        current_page: Current page (1-based).
        total_pages: Number of pages, 0 when nothing matches.
        page_window: Page numbers and ELLIPSIS markers for navigation.
        query_string: Canonical query string of the selections.
    """

    visible_products: list[Product]
    total_count: int
    current_page: int
    total_pages: int
    page_window: list[PageWindowItem]
    query_string: str

    @property
    def is_empty(self) -> bool:
        """Check if no product matches the filters."""
        return self.total_count == 0


StateListener = Callable[[CatalogView], None]


class CatalogController:
    """Catalog session: selections plus the derived visible slice.

    Example usage:
        controller = CatalogController(store, ActiveLanguage("en"), navigator=history)
        controller.on_state_change(render)
        controller.start(history.current)
        controller.set_category("phones")
        controller.set_sort(SortKey.PRICE_ASCENDING)
        controller.go_to_page(2)
    """

    def __init__(
        self,
        store: CatalogStore,
        language: LanguageProvider,
        navigator: Navigator | None = None,
        page_size: int = PAGE_SIZE,
        max_visible_pages: int = MAX_VISIBLE_PAGES,
        fallbacks: Sequence[str] = DEFAULT_FALLBACKS,
    ) -> None:
        """Initialize controller with default selections.

        Args:
            store: Loaded product store.
            language: Active-language provider; the controller subscribes
                to its change notifications.
            navigator: Receives the canonical query string after every
                recompute.
            page_size: Products per page.
            max_visible_pages: Size of the central page-number window.
            fallbacks: Name fallback chain for search and name sorting.
        """
        self._store = store
        self._language = language
        self._navigator = navigator
        self._page_size = page_size
        self._max_visible_pages = max_visible_pages
        self._fallbacks = tuple(fallbacks)

        self._filters = FilterState()
        self._sort_key = SortKey.DEFAULT
        self._current_page = 1
        self._results: list[Product] = []
        self._view: CatalogView | None = None
        self._listeners: list[StateListener] = []

        self._unsubscribe_language: Callable[[], None] | None = language.subscribe(
            self._on_language_changed
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def filters(self) -> FilterState:
        """Copy of the active filter criteria."""
        return self._filters.copy()

    @property
    def sort_key(self) -> SortKey:
        """Active ordering."""
        return self._sort_key

    @property
    def current_page(self) -> int:
        """Current page (1-based)."""
        return self._current_page

    @property
    def view(self) -> CatalogView:
        """Latest render data, computing it on first access."""
        if self._view is None:
            return self._transition(CatalogEvent.STARTED)
        return self._view

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def start(self, query: str | QueryState | None = None) -> CatalogView:
        """Seed selections from the session's query string and render.

        Args:
            query: Query string or parsed query state; None for defaults.

        Returns:
            The first view.
        """
        self._seed(query)
        return self._transition(CatalogEvent.STARTED)

    def restore_query(self, query: str | QueryState) -> CatalogView:
        """Replace all selections with those of a query (back/forward).

        Args:
            query: Query string or parsed query state.

        Returns:
            The recomputed view.
        """
        self._seed(query)
        return self._transition(CatalogEvent.QUERY_RESTORED)

    def navigate(self, query: str | QueryState) -> CatalogView:
        """Open a query as an explicit navigation (new history entry).

        Args:
            query: Query string or parsed query state.

        Returns:
            The recomputed view.
        """
        self._seed(query)
        return self._transition(CatalogEvent.QUERY_RESTORED, push=True)

    def close(self) -> None:
        """Detach from the language provider and drop listeners."""
        if self._unsubscribe_language is not None:
            self._unsubscribe_language()
            self._unsubscribe_language = None
        self._listeners.clear()

    def on_state_change(self, listener: StateListener) -> Callable[[], None]:
        """Register a listener called with every new view.

        Args:
            listener: Callable receiving the CatalogView.

        Returns:
            Callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Filter mutators
    # ------------------------------------------------------------------

    def set_category(self, category: str) -> CatalogView:
        """Restrict results to one category; "all" or "" clears it."""
        category = category.strip()
        self._filters.category = resolve_category(category) if category else ALL_CATEGORIES
        return self._transition(CatalogEvent.FILTER_CHANGED)

    def toggle_brand(self, brand: str) -> CatalogView:
        """Select a brand, or deselect it if already selected."""
        brand = normalize_brand(brand)
        if brand:
            if brand in self._filters.brands:
                self._filters.brands.remove(brand)
            else:
                self._filters.brands.append(brand)
        return self._transition(CatalogEvent.FILTER_CHANGED)

    def set_price_bounds(
        self,
        min_price: float | None = None,
        max_price: float | None = None,
    ) -> CatalogView:
        """Set inclusive price bounds; None removes a bound.

        Raises:
            ValueError: If a bound is negative or not finite.
        """
        for bound in (min_price, max_price):
            if bound is not None and (not math.isfinite(bound) or bound < 0):
                raise ValueError(f"Invalid price bound: {bound}")

        self._filters.min_price = min_price
        self._filters.max_price = max_price
        return self._transition(CatalogEvent.FILTER_CHANGED)

    def toggle_rating_tier(self, tier: int | RatingTier) -> CatalogView:
        """Select a rating tier (3, 4 or 5), or deselect it.

        Raises:
            ValueError: If the tier is not 3, 4 or 5.
        """
        tier = RatingTier(tier)
        if tier in self._filters.ratings:
            self._filters.ratings.discard(tier)
        else:
            self._filters.ratings.add(tier)
        return self._transition(CatalogEvent.FILTER_CHANGED)

    def set_in_stock_only(self, in_stock_only: bool) -> CatalogView:
        """Show only available products when enabled."""
        self._filters.in_stock_only = in_stock_only
        return self._transition(CatalogEvent.FILTER_CHANGED)

    def set_search_text(self, text: str) -> CatalogView:
        """Filter by a case-insensitive substring of the display name."""
        self._filters.search_text = text.strip()
        return self._transition(CatalogEvent.FILTER_CHANGED)

    def reset_filters(self) -> CatalogView:
        """Clear every filter and restore the default ordering."""
        self._filters = FilterState()
        self._sort_key = SortKey.DEFAULT
        return self._transition(CatalogEvent.FILTER_CHANGED)

    # ------------------------------------------------------------------
    # Sort and page mutators
    # ------------------------------------------------------------------

    def set_sort(self, sort_key: SortKey | str) -> CatalogView:
        """Change the ordering; the current page is kept.

        Raises:
            ValueError: If a string sort key is unknown.
        """
        if not isinstance(sort_key, SortKey):
            parsed = SortKey.parse(sort_key)
            if parsed is None:
                raise ValueError(f"Unknown sort key: {sort_key}")
            sort_key = parsed

        self._sort_key = sort_key
        return self._transition(CatalogEvent.SORT_CHANGED)

    def go_to_page(self, page: int) -> bool:
        """Move to another page of the current results.

        Out-of-range requests change nothing and publish nothing.

        Args:
            page: Page number (1-based).

        Returns:
            True if the page was changed.
        """
        pages = total_pages(len(self._results), self._page_size)
        if page < 1 or page > pages:
            logger.info("Page navigation rejected", page=page, total_pages=pages)
            return False

        self._current_page = page
        self._transition(CatalogEvent.PAGE_CHANGED)
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _seed(self, query: str | QueryState | None) -> None:
        if query is None:
            query = QueryState()
        elif isinstance(query, str):
            query = QueryState.from_query_string(query)

        update = deserialize(query)
        self._filters = update.to_filter_state()
        self._sort_key = update.sort or SortKey.DEFAULT

    def _on_language_changed(self, language: str) -> None:
        self._transition(CatalogEvent.LANGUAGE_CHANGED)

    def _transition(self, event: CatalogEvent, push: bool = False) -> CatalogView:
        if event.resets_page():
            self._current_page = 1

        language = self._language.current_language()
        filtered = filters.apply(self._store.all(), self._filters, language, self._fallbacks)
        self._results = sorting.sort(filtered, self._sort_key, language, self._fallbacks)

        pages = total_pages(len(self._results), self._page_size)
        self._current_page = clamp_page(self._current_page, pages)

        query_string = serialize(self._filters, self._sort_key).to_query_string()
        view = CatalogView(
            visible_products=slice_page(self._results, self._current_page, self._page_size),
            total_count=len(self._results),
            current_page=self._current_page,
            total_pages=pages,
            page_window=visible_page_window(
                self._current_page, pages, self._max_visible_pages
            ),
            query_string=query_string,
        )
        self._view = view

        logger.debug(
            "Catalog recomputed",
            catalog_event=event.value,
            language=language,
            total_count=view.total_count,
            current_page=view.current_page,
            total_pages=view.total_pages,
            query=query_string,
        )

        if self._navigator is not None:
            if push:
                self._navigator.push(query_string)
            else:
                self._navigator.replace(query_string)

        for listener in list(self._listeners):
            listener(view)

        return view
