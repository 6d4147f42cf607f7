"""Wizard flow: context, builder and interactive steps."""

from todosaurus.wizard.builder import TodosaurusWizard, TodosaurusWizardBuilder
from todosaurus.wizard.context import IssueTrackerConnectionDetails, TodosaurusWizardContext, WizardResult
from todosaurus.wizard.steps import ChooseIssueTrackerStep, CreateNewIssueStep, WizardStep

__all__ = [
    "ChooseIssueTrackerStep",
    "CreateNewIssueStep",
    "IssueTrackerConnectionDetails",
    "TodosaurusWizard",
    "TodosaurusWizardBuilder",
    "TodosaurusWizardContext",
    "WizardResult",
    "WizardStep",
]
