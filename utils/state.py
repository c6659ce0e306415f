import streamlit as st
import pandas as pd
from typing import Any, Callable, Iterable

from utils.compute import filter_sorted
from utils.viz import line_operated_trains

CHART_KEY = "punctuality_chart"


class Observable:
    """Holds a value and pushes it to subscribers, synchronously and in order."""

    def __init__(self):
        self._subscribers: list[Callable[[Any], None]] = []
        self._value = None

    @property
    def value(self):
        return self._value

    def subscribe(self, callback: Callable[[Any], None], immediate: bool = False) -> Callable[[], None]:
        self._subscribers.append(callback)
        if immediate:
            callback(self.value)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self):
        value = self.value
        for callback in list(self._subscribers):
            callback(value)


class SelectionState(Observable):
    """Checked train types. Starts with every option checked."""

    def __init__(self, options: Iterable[str], selected: Iterable[str] | None = None):
        super().__init__()
        self._options = tuple(options)
        self._selected = set(self._checked(self._options if selected is None else selected))

    def _checked(self, labels: Iterable[str]) -> list[str]:
        labels = list(labels)
        unknown = [label for label in labels if label not in self._options]
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(map(str, unknown))}")
        return labels

    @property
    def options(self) -> tuple[str, ...]:
        return self._options

    @property
    def value(self) -> list[str]:
        # Option order, never click order
        return [o for o in self._options if o in self._selected]

    def __contains__(self, label) -> bool:
        return label in self._selected

    def set(self, labels: Iterable[str]) -> bool:
        new = set(self._checked(labels))
        if new == self._selected:
            return False
        self._selected = new
        self._notify()
        return True

    def toggle(self, label: str, checked: bool | None = None) -> bool:
        self._checked([label])
        if checked is None:
            checked = label not in self._selected
        new = self._selected | {label} if checked else self._selected - {label}
        return self.set(new)

    def select_all(self) -> bool:
        return self.set(self._options)

    def clear(self) -> bool:
        return self.set([])


class Derived(Observable):
    """Recomputes fn(upstream value) on every upstream change and forwards it."""

    def __init__(self, source: Observable, fn: Callable[[Any], Any]):
        super().__init__()
        self._fn = fn
        self._unsubscribe = source.subscribe(self._update, immediate=True)

    def _update(self, upstream):
        self._value = self._fn(upstream)
        self._notify()

    def detach(self):
        self._unsubscribe()


class PunctualityChart:
    """selection -> filtered series -> figure."""

    def __init__(self, df: pd.DataFrame, categories: Iterable[str]):
        self.categories = list(categories)
        self.selection = SelectionState(self.categories)
        self.series = Derived(self.selection, lambda selected: filter_sorted(df, selected))
        self.figure = Derived(self.series, lambda series: line_operated_trains(series, self.categories))


def init_state():
    defaults = {
        "show_table": False,
    }
    for k, v in defaults.items():
        st.session_state.setdefault(k, v)


def chart_state(df: pd.DataFrame, categories: list[str]) -> PunctualityChart:
    """The session's chart, built on first use and kept for the session."""
    chart = st.session_state.get(CHART_KEY)
    if chart is None or chart.categories != list(categories):
        chart = PunctualityChart(df, categories)
        st.session_state[CHART_KEY] = chart
    return chart
