"""Wizard assembly and execution."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from rich.console import Console

from todosaurus.contracts.exceptions import ConfigError
from todosaurus.contracts.project import Project
from todosaurus.memoization.store import UserChoiceStore
from todosaurus.wizard.context import TodosaurusWizardContext, WizardResult
from todosaurus.wizard.steps import WizardStep

_LOG = logging.getLogger(__name__)

FinalAction = Callable[[TodosaurusWizardContext], Awaitable[WizardResult]]


class TodosaurusWizard:
    def __init__(
        self,
        *,
        title: str,
        final_button_name: str,
        steps: list[WizardStep],
        final_action: FinalAction,
        model: TodosaurusWizardContext,
        store: UserChoiceStore | None,
        console: Console,
    ) -> None:
        self.title = title
        self.final_button_name = final_button_name
        self.steps = steps
        self._final_action = final_action
        self._model = model
        self._store = store
        self._console = console

    async def show(self) -> WizardResult:
        import questionary

        self._console.rule(self.title)
        for step in self.steps:
            if not await step.run(self._model):
                _LOG.debug("Wizard %r cancelled at step %r", self.title, step.title)
                return WizardResult.FAILED

        confirmed = await questionary.confirm(f"{self.final_button_name}?", default=True).ask_async()
        if not confirmed:
            _LOG.debug("Wizard %r cancelled before the final action", self.title)
            return WizardResult.FAILED

        result = await self._final_action(self._model)
        if result is WizardResult.SUCCESS and self._model.remember_choice and self._store is not None:
            try:
                self._store.save_choice(self._model.to_user_choice())
            except ConfigError as exc:
                _LOG.warning("Could not remember the choice: %s", exc)
        return result


class TodosaurusWizardBuilder:
    def __init__(
        self,
        project: Project,
        model: TodosaurusWizardContext,
        *,
        store: UserChoiceStore | None = None,
        console: Console | None = None,
    ) -> None:
        self._project = project
        self._model = model
        self._store = store
        self._console = console or Console(stderr=True)
        self._title = project.name
        self._final_button_name = "Create"
        self._steps: list[WizardStep] = []
        self._final_action: FinalAction | None = None

    def set_title(self, title: str) -> TodosaurusWizardBuilder:
        self._title = title
        return self

    def set_final_button_name(self, name: str) -> TodosaurusWizardBuilder:
        self._final_button_name = name
        return self

    def add_step(self, step: WizardStep) -> TodosaurusWizardBuilder:
        self._steps.append(step)
        return self

    def set_final_action(self, action: FinalAction) -> TodosaurusWizardBuilder:
        self._final_action = action
        return self

    def build(self) -> TodosaurusWizard:
        if not self._steps:
            raise ValueError("a wizard needs at least one step")
        if self._final_action is None:
            raise ValueError("a wizard needs a final action")
        return TodosaurusWizard(
            title=self._title,
            final_button_name=self._final_button_name,
            steps=list(self._steps),
            final_action=self._final_action,
            model=self._model,
            store=self._store,
            console=self._console,
        )
