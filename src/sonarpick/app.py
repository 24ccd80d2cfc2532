"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from sonarpick.adapters.config_file import JsonConfigStore
from sonarpick.adapters.sonarqube import SonarQubeFetcher
from sonarpick.config import configure_logging, get_config_path, get_sonarqube_config
from sonarpick.domain.catalog import filter_entries, sort_entries
from sonarpick.domain.choices import build_choices
from sonarpick.domain.selection import reconcile_outcome
from sonarpick.ui.prompt import CheckboxPrompt

if TYPE_CHECKING:
    import os

    from sonarpick.config.dashboard import DashboardSettings
    from sonarpick.domain.model import SelectionOutcome, SortPolicy
    from sonarpick.domain.ports import CatalogFetcher, ConfigSink, SelectionPrompt

log = getLogger(__name__)

SELECTION_MESSAGE = (
    "Select the projects you want to monitor (space to check/uncheck, enter to confirm):"
)


def select_projects(
    settings: DashboardSettings,
    *,
    fetcher: CatalogFetcher,
    prompt: SelectionPrompt,
    sink: ConfigSink,
    search: str | None = None,
    sort_policy: SortPolicy | None = None,
) -> SelectionOutcome | None:
    """Run fetch → filter → sort → prompt → reconcile and hand the result to ``sink``.

    Returns ``None`` without touching the sink when there is nothing to choose from.
    """

    catalog = fetcher()
    if not catalog:
        log.info("No projects were returned by SonarQube; configuration left unchanged.")
        return None

    term = search if search is not None else settings.project_filter
    visible = filter_entries(catalog, term)
    if not visible:
        log.info("No projects match %r; configuration left unchanged.", term)
        return None

    policy = sort_policy or settings.sort_by
    ordered = sort_entries(visible, policy)
    log.info(
        "Showing %s of %s projects (filter=%r, sort=%s)",
        len(ordered),
        len(catalog),
        term,
        policy,
    )

    prior = settings.prior_selection
    choices = build_choices(ordered, prior=prior, colors=settings.colors)
    chosen = prompt(choices, message=SELECTION_MESSAGE)

    outcome = reconcile_outcome(prior, (entry.key for entry in ordered), chosen)
    sink.save(settings.with_projects(outcome.selection))
    log.info(
        "Saved %s projects (%s kept from outside the current view)",
        len(outcome.selection),
        len(outcome.kept_hidden),
    )
    return outcome


def configure_projects(
    *,
    config_path: str | os.PathLike[str] | None = None,
    search: str | None = None,
    sort_policy: SortPolicy | None = None,
    debug: bool | None = None,
    fetcher: CatalogFetcher | None = None,
    prompt: SelectionPrompt | None = None,
) -> SelectionOutcome | None:
    """Load ``config.json``, let the operator pick projects and save the result."""

    store = JsonConfigStore(get_config_path(config_path))
    settings = store.load()
    if debug or (debug is None and settings.debug):
        configure_logging(debug=True, force=True)

    effective_fetcher = fetcher or SonarQubeFetcher(
        config=get_sonarqube_config(settings, debug=debug)
    )
    return select_projects(
        settings,
        fetcher=effective_fetcher,
        prompt=prompt or CheckboxPrompt(),
        sink=store,
        search=search,
        sort_policy=sort_policy,
    )
