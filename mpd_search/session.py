"""Search box state: crumbs, pending input and debounced search dispatch."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from mpd_search.exceptions import ValidationError
from mpd_search.expression.clause import Clause, Features
from mpd_search.expression.parser import parse_segments
from mpd_search.expression.serializer import serialize

if TYPE_CHECKING:
    from mpd_search.config import Config

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE = 0.5


class Debouncer:
    """Trailing-edge debounce around a callback.

    Every :meth:`trigger` cancels the pending call and schedules a new one
    ``delay`` seconds later, so only the last trigger of a burst runs. A
    ``delay`` of zero or less calls the callback synchronously.
    """

    def __init__(self, delay: float, callback: Callable[..., Any]) -> None:
        self.delay = delay
        self.callback = callback
        self._timer: threading.Timer | None = None
        self._args: tuple[Any, ...] = ()
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        """Whether a call is scheduled."""
        with self._lock:
            return self._timer is not None

    def trigger(self, *args: Any) -> None:
        """Schedule the callback, replacing any pending call."""
        if self.delay <= 0:
            self.cancel()
            self.callback(*args)
            return

        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._args = args
            self._timer = threading.Timer(self.delay, self._fire)
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def flush(self) -> None:
        """Run the pending call now instead of waiting for the timer."""
        with self._lock:
            if self._timer is None:
                return
            self._timer.cancel()
            self._timer = None
            args = self._args
        self.callback(*args)

    def _fire(self) -> None:
        with self._lock:
            if self._timer is None or threading.current_thread() is not self._timer:
                # Cancelled or superseded after the timer went off
                return
            self._timer = None
            args = self._args
        self.callback(*args)


class SearchSession:
    """Crumb list and input box of a search view.

    Every change that affects the expression is reported through
    ``on_search`` with the serialized expression. Keystrokes are debounced;
    explicit actions (tag or operator change, removing or editing a crumb)
    search immediately.

    Args:
        on_search: Called with the expression string to apply.
        tag: Tag of the pending clause.
        operator: Operator of the pending clause.
        features: Backend capabilities.
        view: Current browsing context.
        debounce: Keystroke debounce delay in seconds.
    """

    def __init__(
        self,
        on_search: Callable[[str], Any],
        *,
        tag: str = "any",
        operator: str = "contains",
        features: Features | None = None,
        view: str | None = None,
        debounce: float = DEFAULT_DEBOUNCE,
    ) -> None:
        self.on_search = on_search
        self.tag = tag
        self.operator = operator
        self.features = features or Features()
        self.view = view
        self.text = ""
        self.crumbs: list[Clause] = []
        self._debouncer = Debouncer(debounce, self._search)

    @classmethod
    def from_config(cls, config: Config, on_search: Callable[[str], Any]) -> SearchSession:
        """Create a session with the defaults and features from *config*."""
        return cls(
            on_search,
            tag=config.default_tag,
            operator=config.default_operator,
            features=config.features,
            view=config.view or None,
            debounce=config.debounce_ms / 1000,
        )

    def expression(self, text: str | None = None) -> str:
        """Serialize the crumbs plus the pending input.

        Args:
            text: Pending value to use instead of the current input text.
        """
        return serialize(
            self.crumbs,
            self.tag,
            self.operator,
            self.text if text is None else text,
            features=self.features,
            view=self.view,
        )

    def _search(self, text: str) -> None:
        expression = self.expression(text)
        logger.debug("Searching with expression %r", expression)
        self.on_search(expression)

    def type_text(self, text: str) -> None:
        """Update the input text and schedule a search."""
        self.text = text
        self._debouncer.trigger(text)

    def press_enter(self) -> None:
        """Commit the input as a crumb, or search if the input is empty."""
        self._debouncer.cancel()
        if self.text != "":
            self.crumbs.append(Clause(self.tag, self.operator, self.text))
            self.text = ""
        else:
            self._debouncer.trigger(self.text)

    def select_tag(self, tag: str) -> None:
        """Change the tag of the pending clause and search."""
        self.tag = tag
        self._search_now()

    def select_operator(self, operator: str) -> None:
        """Change the operator of the pending clause and search."""
        self.operator = operator
        self._search_now()

    def remove_crumb(self, index: int) -> Clause:
        """Remove a crumb and search without it.

        The pending input is not part of this search.

        Raises:
            ValidationError: If there is no crumb at *index*.
        """
        clause = self._pop_crumb(index)
        self._debouncer.cancel()
        self._search("")
        return clause

    def edit_crumb(self, index: int) -> Clause:
        """Move a crumb back into the input box for editing.

        Raises:
            ValidationError: If there is no crumb at *index*.
        """
        clause = self._pop_crumb(index)
        self.tag = clause.tag
        self.operator = clause.operator
        self.text = clause.value
        self._search_now()
        return clause

    def restore(self, expression: str) -> None:
        """Rebuild the crumbs from a previously applied expression.

        All clauses but the last become crumbs. The last one only becomes a
        crumb while the input box is empty; otherwise it is the clause
        still being typed.
        """
        segments = parse_segments(expression)
        if segments and self.text != "":
            segments = segments[:-1]
        self.crumbs = [clause for clause in segments if clause is not None]
        if expression == "":
            self.text = ""

    def close(self) -> None:
        """Cancel any pending debounced search."""
        self._debouncer.cancel()

    def _search_now(self) -> None:
        self._debouncer.cancel()
        self._search(self.text)

    def _pop_crumb(self, index: int) -> Clause:
        if not -len(self.crumbs) <= index < len(self.crumbs):
            raise ValidationError("crumb index", index, f"no crumb at position {index}")
        return self.crumbs.pop(index)

    def __enter__(self) -> SearchSession:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False
