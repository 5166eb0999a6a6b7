"""
Navigation state for the presentation layer.

Pages, the research tab and the mobile menu are explicit immutable values;
transitions return new states instead of mutating shared ones.
"""
from dataclasses import dataclass, replace
from enum import Enum


class Page(str, Enum):
    HOME = "home"
    PROFESSOR = "professor"
    RESEARCH = "research"


class ResearchTab(str, Enum):
    """Tabs on the research page, each backed by one snapshot key."""
    PROJECTS = "projects"
    PATENTS = "patents"
    CONF_INTL = "conf_intl"
    CONF_DOM = "conf_dom"

    @property
    def source_key(self) -> str:
        return RESEARCH_TAB_SOURCES[self]


RESEARCH_TAB_SOURCES = {
    ResearchTab.PROJECTS: "projects",
    ResearchTab.PATENTS: "patents",
    ResearchTab.CONF_INTL: "conference_intl",
    ResearchTab.CONF_DOM: "conference_dom",
}


@dataclass(frozen=True)
class NavigationState:
    page: Page = Page.HOME
    menu_open: bool = False
    research_tab: ResearchTab = ResearchTab.PROJECTS


def navigate(state: NavigationState, page: Page) -> NavigationState:
    """Show a page. Choosing a page always closes the menu."""
    return replace(state, page=Page(page), menu_open=False)


def toggle_menu(state: NavigationState) -> NavigationState:
    return replace(state, menu_open=not state.menu_open)


def select_tab(state: NavigationState, tab: ResearchTab) -> NavigationState:
    """Switch the research tab; the current page is unchanged."""
    return replace(state, research_tab=ResearchTab(tab))
